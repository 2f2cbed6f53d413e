"""Run the documentation generator and capture its HTML."""

from pathlib import Path

from ...utils.logger import get_logger
from ..command.CommandError import CommandError
from ..command.CommandRunner import CommandRunner

logger = get_logger("page")


def generate_docs(runner: CommandRunner, args: list[str], cwd: Path | None = None) -> str:
    """Return the generator's stdout.

    A non-zero exit is tolerated as long as something was printed.

    Raises:
        CommandError: If the command fails without producing output
    """
    result = runner.run(args, cwd=cwd)
    if result.ok:
        return result.stdout
    if not result.stdout.strip():
        raise CommandError(args, f"exited with {result.returncode}: {result.stderr.strip() or 'no output'}")
    logger.warning("Doc generator exited with %d; using its partial output", result.returncode)
    return result.stdout
