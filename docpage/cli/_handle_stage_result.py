"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _extract_display_format(ctx: typer.Context | None) -> str:
    """Get the --display value stored by the main callback in the context chain.

    Raises:
        RuntimeError: If there is no context or no ancestor carries the format
        ValueError: If the stored value is not json or yaml
    """
    if ctx is None:
        raise RuntimeError("Display format unavailable: Typer context is missing")

    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value in ("json", "yaml"):
                return value
            raise ValueError(f"Invalid display_format value: {value!r}")
        current = current.parent

    raise RuntimeError("Display format not set in the Typer context chain")


def _handle_stage_result(func: F) -> Callable[..., None]:
    """Wrap a command function to handle StageResult for CLI display.

    The wrapper takes the invoking Typer context first, then the command's own
    arguments, and runs the 4-stage pattern:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as YAML or JSON)
    """

    @functools.wraps(func)
    def wrapper(ctx: typer.Context, *args, **kwargs) -> None:
        from docpage.cli.display import get_display

        display_format = _extract_display_format(ctx)
        _run_single_execution(func, args, kwargs, get_display(), display_format)

    return wrapper
