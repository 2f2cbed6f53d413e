"""Fetch the documented package before generating docs."""

from pathlib import Path

from ...utils.logger import get_logger
from ..command.CommandError import CommandError
from ..command.CommandRunner import CommandRunner

logger = get_logger("page")


def fetch_package(runner: CommandRunner, args: list[str], cwd: Path | None = None) -> bool:
    """Run the fetch command. Failure is logged, never raised.

    Returns:
        True if the command ran and exited with status 0
    """
    try:
        result = runner.run(args, cwd=cwd)
    except CommandError as e:
        logger.warning("Package fetch could not run: %s", e)
        return False

    if not result.ok:
        logger.warning(
            "Package fetch failed (exit %d): %s; continuing with the existing checkout",
            result.returncode,
            result.stderr.strip() or "no output",
        )
        return False
    return True
