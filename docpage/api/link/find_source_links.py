"""Scan text for source links."""

from collections.abc import Iterator

from .SOURCE_LINK_PATTERN import SOURCE_LINK_PATTERN
from .SourceLinkMatch import SourceLinkMatch


def find_source_links(text: str) -> Iterator[SourceLinkMatch]:
    """Yield non-overlapping source links, left to right."""
    for match in SOURCE_LINK_PATTERN.finditer(text):
        yield SourceLinkMatch(
            path=match.group("path"),
            start=int(match.group("start")),
            end=int(match.group("end")),
            span=match.span(),
        )
