"""Link API domain: rewrite local source-offset links into hosted links."""

from .cached_reader import cached_reader
from .find_source_links import find_source_links
from .InvalidOffsetError import InvalidOffsetError
from .LinkRewriteError import LinkRewriteError
from .resolve_source_link import resolve_source_link
from .rewrite import rewrite
from .rewrite_with_count import rewrite_with_count
from .SourceFileNotFoundError import SourceFileNotFoundError
from .SourceLinkMatch import SourceLinkMatch

__all__ = [
    "InvalidOffsetError",
    "LinkRewriteError",
    "SourceFileNotFoundError",
    "SourceLinkMatch",
    "cached_reader",
    "find_source_links",
    "resolve_source_link",
    "rewrite",
    "rewrite_with_count",
]
