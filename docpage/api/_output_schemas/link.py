"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkRewriteOutput(BaseOutputSchema):
    """Output schema for link rewrite command."""
    path: str = Field(..., description="HTML file that was read")
    output_path: str = Field(..., description="File the rewritten HTML was written to, empty string if not written")
    revision_id: str = Field(..., description="Revision identifier inserted into hosted links")
    links_rewritten: int = Field(..., description="Number of source links replaced")


class LinkShowOutput(BaseOutputSchema):
    """Output schema for link show command.

    Each entry in links has: path, start, end, start_line, end_line.
    Line numbers are null when the source file could not be resolved.
    """
    path: str = Field(..., description="HTML file that was scanned")
    base_dir: str = Field(..., description="Directory source paths are resolved against")
    links: list[dict[str, Any]] = Field(..., description="Source links found, in order of appearance")


register_output_schema("link", "rewrite", LinkRewriteOutput)
register_output_schema("link", "show", LinkShowOutput)
