"""Expand ~ and environment variables in a configured path."""

import os
from pathlib import Path


def expand_path(path: str | Path) -> Path:
    """Return ``path`` with ``~`` and ``$VARS`` expanded (not resolved)."""
    return Path(os.path.expandvars(os.path.expanduser(str(path))))
