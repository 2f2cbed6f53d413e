"""Base error for link rewriting."""


class LinkRewriteError(Exception):
    """Raised when a source link cannot be turned into a hosted link."""
