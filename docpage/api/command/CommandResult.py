"""Outcome of one external command."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CommandResult:
    """Captured exit status and output of a finished command."""

    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = field(default="", repr=False)

    @property
    def ok(self) -> bool:
        return self.returncode == 0
