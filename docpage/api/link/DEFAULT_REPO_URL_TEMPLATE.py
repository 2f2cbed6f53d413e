"""Default hosted-link template (GitHub blob view with a line range)."""

DEFAULT_REPO_URL_TEMPLATE = "https://github.com/hoisie/web/blob/{revision_id}/{path}#L{start_line}-{end_line}"
