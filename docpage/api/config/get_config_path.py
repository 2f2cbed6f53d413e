"""Get path to the docpage config file."""

import os
from pathlib import Path

from ...utils.expand_path import expand_path


def get_config_path() -> Path:
    """Return $DOCPAGE_CONFIG if set, else ./docpage.json."""
    env_path = os.environ.get("DOCPAGE_CONFIG")
    if env_path:
        return expand_path(env_path)
    return Path.cwd() / "docpage.json"
