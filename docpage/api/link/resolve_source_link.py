"""Map one source link to its hosted URL."""

from collections.abc import Callable
from pathlib import Path

from .build_source_url import build_source_url
from .InvalidOffsetError import InvalidOffsetError
from .offset_to_line import offset_to_line
from .read_source import read_source
from .SourceLinkMatch import SourceLinkMatch


def resolve_source_link(
    match: SourceLinkMatch,
    base_dir: Path,
    revision_id: str,
    repo_url_template: str,
    reader: Callable[[Path, str], bytes] = read_source,
) -> str:
    """Return the hosted URL replacing ``match``.

    Args:
        match: Source link found in the HTML
        base_dir: Directory the link's path is relative to
        revision_id: Opaque revision token inserted verbatim
        repo_url_template: Template with path, revision_id, start_line, end_line fields
        reader: Callable returning the raw bytes of base_dir/path

    Raises:
        SourceFileNotFoundError: If the referenced file is missing
        InvalidOffsetError: If an offset is out of range or end < start
    """
    data = reader(base_dir, match.path)
    if match.end < match.start:
        raise InvalidOffsetError(match.path, match.end, len(data), reason=f"end precedes start {match.start}")
    start_line = offset_to_line(data, match.start, match.path)
    end_line = offset_to_line(data, match.end, match.path)
    return build_source_url(repo_url_template, match.path, revision_id, start_line, end_line)
