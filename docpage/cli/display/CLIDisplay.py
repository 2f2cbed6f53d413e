"""Rich console display."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from rich.console import Console
from rich.syntax import Syntax

from .Display import Display, Level

_MARKERS: dict[str, str] = {
    "status": "[blue]i[/blue] ",
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]⚠[/yellow] ",
    "info": "",
}


class CLIDisplay(Display):
    """Messages on stderr, command output on stdout."""

    def __init__(self):
        self.console = Console(file=sys.stdout)
        self.stderr_console = Console(file=sys.stderr)

    def notify(self, level: Level, message: str) -> None:
        if level in ("status", "success", "error"):
            timestamp = datetime.now().strftime("%H:%M:%S")
            self.stderr_console.print(f"[dim]{timestamp}[/dim] {_MARKERS[level]}{message}")
        else:
            self.stderr_console.print(f"{_MARKERS[level]}{message}")

    def emit(self, data: dict[str, Any], output_format: str = "yaml") -> None:
        if output_format == "json":
            text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
        else:
            text = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)

        # Highlight only for terminals; pipes and CliRunner get the plain text
        if sys.stdout.isatty():
            self.console.print(Syntax(text, output_format, theme="monokai", background_color="default"))
        else:
            sys.stdout.write(text)
