"""CommandRunner backed by subprocess."""

import subprocess
from pathlib import Path

from ...utils.logger import get_logger
from .CommandError import CommandError
from .CommandResult import CommandResult
from .CommandRunner import CommandRunner

logger = get_logger("command")


class SubprocessRunner(CommandRunner):
    """Run commands as child processes, capturing text output."""

    def run(self, args: list[str], cwd: Path | None = None) -> CommandResult:
        if not args:
            raise CommandError(args, "empty command")
        logger.info("Running %s (cwd=%s)", " ".join(args), cwd or ".")
        try:
            completed = subprocess.run(
                args,
                cwd=str(cwd) if cwd is not None else None,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            raise CommandError(args, f"not found: {e.filename or args[0]}") from e
        except NotADirectoryError as e:
            raise CommandError(args, f"working directory is not a directory: {cwd}") from e
        except PermissionError as e:
            raise CommandError(args, f"permission denied: {e}") from e

        if completed.returncode != 0:
            logger.debug("%s exited with %d: %s", args[0], completed.returncode, completed.stderr.strip())
        return CommandResult(
            args=list(args),
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
