"""Fill the hosted-link template."""


def build_source_url(repo_url_template: str, path: str, revision_id: str, start_line: int, end_line: int) -> str:
    """Format ``repo_url_template`` with path, revision_id, start_line and end_line.

    Raises:
        ValueError: If the template references an unknown field
    """
    try:
        return repo_url_template.format(
            path=path,
            revision_id=revision_id,
            start_line=start_line,
            end_line=end_line,
        )
    except (KeyError, IndexError) as e:
        raise ValueError(f"Invalid repo URL template {repo_url_template!r}: unknown field {e}") from e
