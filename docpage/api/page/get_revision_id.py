"""Ask version control for the short revision id."""

from pathlib import Path

from ..command.CommandError import CommandError
from ..command.CommandRunner import CommandRunner


def get_revision_id(runner: CommandRunner, args: list[str], cwd: Path | None = None) -> str:
    """Return the stripped output of the revision command.

    Raises:
        CommandError: If the command fails or prints nothing
    """
    result = runner.run(args, cwd=cwd)
    if not result.ok:
        raise CommandError(args, f"exited with {result.returncode}: {result.stderr.strip() or 'no output'}")
    revision_id = result.stdout.strip()
    if not revision_id:
        raise CommandError(args, "printed no revision id")
    return revision_id
