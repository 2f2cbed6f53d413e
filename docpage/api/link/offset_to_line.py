"""Convert a byte offset into a 1-based line number."""

from .InvalidOffsetError import InvalidOffsetError


def offset_to_line(data: bytes, offset: int, path: str = "") -> int:
    """Return one plus the newlines in ``data`` up to and including byte ``offset``.

    An offset sitting on a newline belongs to the line that newline starts.
    ``offset == len(data)`` is allowed and counts the whole file.

    Raises:
        InvalidOffsetError: If offset is negative or past the end of data
    """
    if offset < 0 or offset > len(data):
        raise InvalidOffsetError(path, offset, len(data))
    return data.count(b"\n", 0, offset + 1) + 1
