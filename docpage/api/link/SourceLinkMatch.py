"""A single source link found in generated HTML."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLinkMatch:
    """Captured groups of one source-link occurrence.

    span is the (begin, end) character range of the whole match in the scanned text.
    """

    path: str
    start: int
    end: int
    span: tuple[int, int]
