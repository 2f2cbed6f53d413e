"""Link show API command.

CLI: docpage link show <path> [--base-dir DIR]
"""

from collections.abc import Iterator
from typing import Any

from ...utils.expand_path import expand_path
from .._output_schemas.link import LinkShowOutput
from ..config.DocpageConfig import DocpageConfig
from ..StageResult import StageResult
from .cached_reader import cached_reader
from .find_source_links import find_source_links
from .LinkRewriteError import LinkRewriteError
from .offset_to_line import offset_to_line


def cmd_show(path: str, base_dir: str = "") -> StageResult:
    """List source links in an HTML file with their computed line numbers.

    Links whose source cannot be resolved are listed with null line numbers and
    reported as warnings; nothing is written.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        html_path = expand_path(path)
        source_dir = expand_path(base_dir) if base_dir else None

        yield (0.2, f"Reading {html_path}...")
        try:
            if source_dir is None:
                source_dir = DocpageConfig.load().source.base_path
            html = html_path.read_text(encoding="utf-8")
        except (ValueError, OSError) as e:
            result_obj.result = f"Cannot scan {html_path}: {e}"
            result_obj.output = LinkShowOutput(
                errors=[str(e)],
                warnings=[],
                path=str(html_path),
                base_dir=str(source_dir or ""),
                links=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.5, "Resolving line numbers...")
        read = cached_reader()
        links: list[dict[str, Any]] = []
        warnings: list[str] = []
        for match in find_source_links(html):
            entry: dict[str, Any] = {
                "path": match.path,
                "start": match.start,
                "end": match.end,
                "start_line": None,
                "end_line": None,
            }
            try:
                data = read(source_dir, match.path)
                start_line = offset_to_line(data, match.start, match.path)
                end_line = offset_to_line(data, match.end, match.path)
                entry.update(start_line=start_line, end_line=end_line)
            except LinkRewriteError as e:
                warnings.append(str(e))
            links.append(entry)

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(links)} source links"
        result_obj.output = LinkShowOutput(
            errors=[],
            warnings=warnings,
            path=str(html_path),
            base_dir=str(source_dir),
            links=links,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Showing source links in {path}...",
        progress_callback=do_work,
    )
