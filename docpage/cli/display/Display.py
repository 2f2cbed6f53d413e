"""Base class for command displays."""

from abc import ABC, abstractmethod
from typing import Any, Literal

Level = Literal["status", "success", "error", "warning", "info"]


class Display(ABC):
    """Where a command's announce/progress/result messages and its output go.

    Subclasses implement ``notify`` for the human-readable messages and ``emit``
    for the structured output; the level helpers are shorthands for ``notify``.
    """

    @abstractmethod
    def notify(self, level: Level, message: str) -> None:
        """Show one message at the given level."""

    @abstractmethod
    def emit(self, data: dict[str, Any], output_format: str = "yaml") -> None:
        """Write a command's output dict as ``output_format`` ("json" or "yaml")."""

    def status(self, message: str) -> None:
        self.notify("status", message)

    def success(self, message: str) -> None:
        self.notify("success", message)

    def error(self, message: str) -> None:
        self.notify("error", message)

    def warning(self, message: str) -> None:
        self.notify("warning", message)

    def info(self, message: str) -> None:
        self.notify("info", message)
