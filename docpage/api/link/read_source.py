"""Read a referenced source file."""

from pathlib import Path

from .SourceFileNotFoundError import SourceFileNotFoundError


def read_source(base_dir: Path, path: str) -> bytes:
    """Read ``base_dir/path`` as raw bytes.

    Raises:
        SourceFileNotFoundError: If the file does not exist (or is not a file)
    """
    source = base_dir / path
    if not source.is_file():
        raise SourceFileNotFoundError(path, str(base_dir))
    return source.read_bytes()
