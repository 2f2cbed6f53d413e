"""Rewrite source links and report how many were replaced."""

from collections.abc import Callable
from pathlib import Path

from ...utils.logger import get_logger
from .cached_reader import cached_reader
from .find_source_links import find_source_links
from .read_source import read_source
from .resolve_source_link import resolve_source_link

logger = get_logger("link")


def rewrite_with_count(
    html: str,
    base_dir: str | Path,
    revision_id: str,
    repo_url_template: str,
    reader: Callable[[Path, str], bytes] = read_source,
) -> tuple[str, int]:
    """Like ``rewrite``, returning ``(rewritten_html, links_rewritten)`` from a single scan."""
    base = Path(base_dir)
    read = cached_reader(reader)

    pieces: list[str] = []
    position = 0
    count = 0
    for match in find_source_links(html):
        url = resolve_source_link(match, base, revision_id, repo_url_template, reader=read)
        logger.debug("Rewrote %s?s=%d:%d -> %s", match.path, match.start, match.end, url)
        begin, finish = match.span
        pieces.append(html[position:begin])
        pieces.append(url)
        position = finish
        count += 1

    if not count:
        return html, 0
    pieces.append(html[position:])
    return "".join(pieces), count
