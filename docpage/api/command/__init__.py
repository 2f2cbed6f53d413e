"""External command execution behind an explicit runner interface."""

from .CommandError import CommandError
from .CommandResult import CommandResult
from .CommandRunner import CommandRunner
from .SubprocessRunner import SubprocessRunner

__all__ = ["CommandError", "CommandResult", "CommandRunner", "SubprocessRunner"]
