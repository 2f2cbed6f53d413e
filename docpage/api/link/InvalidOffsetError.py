"""Byte offset outside the referenced file."""

from .LinkRewriteError import LinkRewriteError


class InvalidOffsetError(LinkRewriteError, ValueError):
    """A source link offset is past the end of the file, or end < start."""

    def __init__(self, path: str, offset: int, size: int, reason: str = "exceeds file length"):
        self.path = path
        self.offset = offset
        self.size = size
        super().__init__(f"Invalid offset {offset} for {path} ({size} bytes): {reason}")
