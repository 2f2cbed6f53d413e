"""Check a command's output dict against the schema registered for it."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ._output_schemas._registry import get_output_schema


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Return ``output`` parsed through the schema of ``func``.

    ``docpage.api.<domain>.cmd_<name>`` looks up the ``(domain, name)`` schema.
    Functions outside that layout, or without a registered schema, pass through
    unchanged.

    Raises:
        ValueError: If the output does not match the schema
    """
    parts = func.__module__.split(".")
    name = func.__name__
    if parts[:2] != ["docpage", "api"] or len(parts) < 3 or not name.startswith("cmd_"):
        return output

    domain, command = parts[2], name.removeprefix("cmd_")
    schema = get_output_schema(domain, command)
    if schema is None:
        return output

    try:
        return schema(**output).model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(f"{domain} {command} output does not match {schema.__name__}: {e}") from e
