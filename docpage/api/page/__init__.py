"""Page API domain: fetch, generate, rewrite and assemble the API page."""

from .assemble_page import assemble_page
from .fetch_package import fetch_package
from .generate_docs import generate_docs
from .get_revision_id import get_revision_id

__all__ = ["assemble_page", "fetch_package", "generate_docs", "get_revision_id"]
