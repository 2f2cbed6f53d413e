"""Version command - returns docpage version information."""

from collections.abc import Iterator
from pathlib import Path

from ...utils.get_package_version import get_package_version
from .._output_schemas.config import ConfigVersionOutput
from ..command.CommandError import CommandError
from ..command.CommandRunner import CommandRunner
from ..command.SubprocessRunner import SubprocessRunner
from ..page.get_revision_id import get_revision_id
from ..StageResult import StageResult


def cmd_version(runner: CommandRunner | None = None) -> StageResult:
    """Get docpage version information, with the git sha of a source checkout.

    Args:
        runner: CommandRunner used to ask git (subprocess by default)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Getting package version...")
        version = get_package_version()

        yield (0.6, "Checking git commit...")
        try:
            git_sha = get_revision_id(
                runner or SubprocessRunner(),
                ["git", "rev-parse", "--short", "HEAD"],
                cwd=Path(__file__).resolve().parents[3],
            )
        except CommandError:
            # Installed package, or git is not available
            git_sha = ""

        yield (1.0, "Complete")

        full_version = f"{version} ({git_sha})" if git_sha else version

        result_obj.result = f"docpage version: {full_version}"
        result_obj.output = ConfigVersionOutput(
            errors=[],
            warnings=[],
            version=version,
            git_sha=git_sha,
            full_version=full_version,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Getting version information...",
        progress_callback=do_work,
    )
