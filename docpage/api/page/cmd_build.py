"""Page build API command.

CLI: docpage page build [--output PATH] [--skip-fetch] [--revision REV] [--no-rewrite]
"""

from collections.abc import Iterator

from jinja2 import TemplateError

from ...utils.expand_path import expand_path
from ...utils.logger import get_logger
from .._output_schemas.page import PageBuildOutput
from ..command.CommandError import CommandError
from ..command.CommandRunner import CommandRunner
from ..command.SubprocessRunner import SubprocessRunner
from ..config.DocpageConfig import DocpageConfig
from ..link.LinkRewriteError import LinkRewriteError
from ..link.rewrite_with_count import rewrite_with_count
from ..StageResult import StageResult
from .assemble_page import assemble_page
from .DEFAULT_FOOTER import DEFAULT_FOOTER
from .DEFAULT_HEADER import DEFAULT_HEADER
from .fetch_package import fetch_package
from .generate_docs import generate_docs
from .get_revision_id import get_revision_id
from .load_template import load_template

logger = get_logger("page")


def cmd_build(
    output: str = "",
    skip_fetch: bool = False,
    revision: str = "",
    rewrite_links: bool = True,
    runner: CommandRunner | None = None,
) -> StageResult:
    """Fetch the package, generate its docs, rewrite source links and write the page.

    Args:
        output: Page path, overriding page.output from the config
        skip_fetch: Do not run the fetch command
        revision: Revision id to use instead of asking version control
        rewrite_links: Replace local source links with hosted links
        runner: CommandRunner for external tools (subprocess by default)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        cmd_runner = runner or SubprocessRunner()
        warnings: list[str] = []
        state = {
            "output_path": "",
            "package": "",
            "revision_id": "",
            "fetched": False,
            "links_rewritten": 0,
            "bytes_written": 0,
        }

        def fail(message: str) -> None:
            logger.error("Page build failed: %s", message)
            result_obj.result = f"Page build failed: {message}"
            result_obj.output = PageBuildOutput(errors=[message], warnings=warnings, **state).model_dump(
                mode="python"
            )
            result_obj.success = False

        yield (0.05, "Loading configuration...")
        try:
            config = DocpageConfig.load()
        except ValueError as e:
            fail(str(e))
            return
        commands = config.commands
        base_dir = config.source.base_path
        state["package"] = config.package

        if skip_fetch or commands.fetch is None:
            yield (0.15, "Skipping package fetch")
        else:
            yield (0.15, f"Fetching {config.package}...")
            state["fetched"] = fetch_package(cmd_runner, commands.expand(commands.fetch, config.package))
            if not state["fetched"]:
                warnings.append(f"Package fetch failed for {config.package}; continuing with existing sources")

        try:
            if rewrite_links:
                yield (0.3, "Resolving revision...")
                state["revision_id"] = revision or get_revision_id(
                    cmd_runner, commands.expand(commands.revision, config.package), cwd=base_dir
                )

            yield (0.45, "Generating documentation...")
            body = generate_docs(cmd_runner, commands.expand(commands.docs, config.package))

            if rewrite_links:
                yield (0.65, "Rewriting source links...")
                body, state["links_rewritten"] = rewrite_with_count(
                    body, base_dir, str(state["revision_id"]), config.source.repo_url_template
                )

            yield (0.8, "Assembling page...")
            header = load_template(config.page.header, DEFAULT_HEADER)
            footer = load_template(config.page.footer, DEFAULT_FOOTER)
            page = assemble_page(
                body,
                header=header,
                footer=footer,
                context={"package": config.package, "revision_id": state["revision_id"]},
            )

            output_path = expand_path(output or config.page.output).absolute()
            yield (0.9, f"Writing {output_path}...")
            data = page.encode("utf-8")
            output_path.write_bytes(data)
        except (CommandError, LinkRewriteError, TemplateError, ValueError, OSError) as e:
            fail(str(e))
            return

        state["output_path"] = str(output_path)
        state["bytes_written"] = len(data)
        logger.info("Wrote %s (%d bytes, %d links)", output_path, len(data), state["links_rewritten"])

        yield (1.0, "Complete")
        result_obj.result = f"Wrote {output_path} ({state['links_rewritten']} source links rewritten)"
        result_obj.output = PageBuildOutput(errors=[], warnings=warnings, **state).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Building API page...",
        progress_callback=do_work,
    )
