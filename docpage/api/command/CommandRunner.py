"""Abstract base class for running external commands."""

from abc import ABC, abstractmethod
from pathlib import Path

from .CommandResult import CommandResult


class CommandRunner(ABC):
    """Runs external tools (doc generator, VCS, package fetch) for the page pipeline.

    Implementations never raise on a non-zero exit status; callers decide what
    a failure means. A command that cannot be started at all raises CommandError.
    """

    @abstractmethod
    def run(self, args: list[str], cwd: Path | None = None) -> CommandResult:
        """Run ``args`` and wait for it to finish.

        Args:
            args: Executable followed by its arguments
            cwd: Working directory, or None for the current one

        Returns:
            CommandResult with exit status and captured output
        """
        pass
