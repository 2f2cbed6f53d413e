"""Source reader that remembers files already read."""

from collections.abc import Callable
from pathlib import Path

from .read_source import read_source


def cached_reader(reader: Callable[[Path, str], bytes] = read_source) -> Callable[[Path, str], bytes]:
    """Wrap ``reader`` so each (base_dir, path) is read at most once.

    The cache lives as long as the returned callable; rewrite() builds a new one per call.
    """
    cache: dict[tuple[Path, str], bytes] = {}

    def read(base_dir: Path, path: str) -> bytes:
        key = (base_dir, path)
        if key not in cache:
            cache[key] = reader(base_dir, path)
        return cache[key]

    return read
