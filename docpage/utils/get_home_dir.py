"""Get docpage home directory path or path under it."""

import os
from pathlib import Path


def get_home_dir(*parts: str) -> Path:
    """Get docpage home directory path or path under it.

    Checks DOCPAGE_HOME environment variable first, defaults to ~/.docpage if not set.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.docpage")
        >>> get_home_dir("docpage.log")
        Path("/Users/user/.docpage/docpage.log")
    """
    home_env = os.environ.get("DOCPAGE_HOME")
    if home_env:
        docpage_home = Path(home_env).expanduser().resolve()
    else:
        docpage_home = Path.home() / ".docpage"

    return docpage_home / Path(*parts) if parts else docpage_home
