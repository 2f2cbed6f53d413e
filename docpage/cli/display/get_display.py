"""Display factory."""

from .CLIDisplay import CLIDisplay
from .Display import Display


def get_display() -> Display:
    """Return a fresh CLI display bound to the current stdout/stderr."""
    return CLIDisplay()
