"""Link rewrite API command.

CLI: docpage link rewrite <path> [--base-dir DIR] [--revision REV] [--template T] [--output PATH]
"""

from collections.abc import Iterator

from ...utils.expand_path import expand_path
from .._output_schemas.link import LinkRewriteOutput
from ..command.CommandError import CommandError
from ..command.CommandRunner import CommandRunner
from ..command.SubprocessRunner import SubprocessRunner
from ..config.DocpageConfig import DocpageConfig
from ..page.get_revision_id import get_revision_id
from ..StageResult import StageResult
from .LinkRewriteError import LinkRewriteError
from .rewrite_with_count import rewrite_with_count


def cmd_rewrite(
    path: str,
    base_dir: str = "",
    revision: str = "",
    template: str = "",
    output: str = "",
    runner: CommandRunner | None = None,
) -> StageResult:
    """Rewrite the source links of an existing HTML file.

    Args:
        path: HTML file to read
        base_dir: Source directory (defaults to source.base_dir)
        revision: Revision id (defaults to the output of commands.revision in base_dir)
        template: Hosted link template (defaults to source.repo_url_template)
        output: Destination file (defaults to rewriting path in place)
        runner: CommandRunner used to look up the revision
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        html_path = expand_path(path)
        output_path = expand_path(output) if output else html_path
        revision_id = revision

        def fail(message: str) -> None:
            result_obj.result = f"Link rewrite failed: {message}"
            result_obj.output = LinkRewriteOutput(
                errors=[message],
                warnings=[],
                path=str(html_path),
                output_path="",
                revision_id=revision_id,
                links_rewritten=0,
            ).model_dump(mode="python")
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = DocpageConfig.load()
            source_dir = expand_path(base_dir) if base_dir else config.source.base_path
            url_template = template or config.source.repo_url_template

            yield (0.2, f"Reading {html_path}...")
            html = html_path.read_text(encoding="utf-8")

            if not revision_id:
                yield (0.3, "Resolving revision...")
                commands = config.commands
                revision_id = get_revision_id(
                    runner or SubprocessRunner(),
                    commands.expand(commands.revision, config.package),
                    cwd=source_dir,
                )

            yield (0.5, "Rewriting source links...")
            rewritten, count = rewrite_with_count(html, source_dir, revision_id, url_template)

            yield (0.9, f"Writing {output_path}...")
            output_path.write_text(rewritten, encoding="utf-8")
        except (CommandError, LinkRewriteError, ValueError, OSError) as e:
            fail(str(e))
            return

        yield (1.0, "Complete")
        result_obj.result = f"Rewrote {count} source links"
        result_obj.output = LinkRewriteOutput(
            errors=[],
            warnings=[],
            path=str(html_path),
            output_path=str(output_path),
            revision_id=revision_id,
            links_rewritten=count,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Rewriting source links in {path}...",
        progress_callback=do_work,
    )
