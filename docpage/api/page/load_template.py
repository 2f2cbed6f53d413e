"""Read a header/footer template file, or fall back to the built-in one."""

from ...utils.expand_path import expand_path


def load_template(path: str | None, default: str) -> str:
    """Return the contents of ``path``, or ``default`` when path is None.

    Raises:
        ValueError: If the configured file does not exist
    """
    if path is None:
        return default
    template_path = expand_path(path)
    if not template_path.is_file():
        raise ValueError(f"Template file not found: {template_path}")
    return template_path.read_text(encoding="utf-8")
