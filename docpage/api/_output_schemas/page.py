"""Output schemas for page commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class PageBuildOutput(BaseOutputSchema):
    """Output schema for page build command."""
    output_path: str = Field(..., description="Path of the assembled HTML page, empty string if not written")
    package: str = Field(..., description="Package the documentation was generated for")
    revision_id: str = Field(..., description="Revision identifier used in hosted links, empty string if unused")
    fetched: bool = Field(..., description="Whether the package fetch step succeeded")
    links_rewritten: int = Field(..., description="Number of source links replaced")
    bytes_written: int = Field(..., description="Size of the written page in bytes")


register_output_schema("page", "build", PageBuildOutput)
