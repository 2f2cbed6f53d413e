"""Wrap the documentation body in the page header and footer."""

from typing import Any

from ...utils.render_template import render_template
from .DEFAULT_FOOTER import DEFAULT_FOOTER
from .DEFAULT_HEADER import DEFAULT_HEADER


def assemble_page(
    body: str,
    header: str = DEFAULT_HEADER,
    footer: str = DEFAULT_FOOTER,
    context: dict[str, Any] | None = None,
) -> str:
    """Render header and footer with ``context`` and concatenate header + body + footer.

    The body is inserted verbatim; only the chrome goes through Jinja2.
    """
    context = context or {}
    return render_template(header, context) + body + render_template(footer, context)
