"""Rewrite source links in generated HTML into hosted links."""

from collections.abc import Callable
from pathlib import Path

from .read_source import read_source
from .rewrite_with_count import rewrite_with_count


def rewrite(
    html: str,
    base_dir: str | Path,
    revision_id: str,
    repo_url_template: str,
    reader: Callable[[Path, str], bytes] = read_source,
) -> str:
    """Replace every ``/target/<path>?s=<start>:<end>#L..`` link in ``html``.

    All replacements are computed before the result is assembled, so an error on
    any link propagates without producing output. Text that does not match the
    pattern is returned unchanged.

    Args:
        html: Generated HTML text
        base_dir: Directory source paths are relative to
        revision_id: Revision token for the hosted links
        repo_url_template: Template with path, revision_id, start_line, end_line fields
        reader: Callable returning the raw bytes of base_dir/path (cached for this call)

    Raises:
        SourceFileNotFoundError: If a referenced file is missing
        InvalidOffsetError: If an offset is out of range
    """
    rewritten, _ = rewrite_with_count(html, base_dir, revision_id, repo_url_template, reader=reader)
    return rewritten
