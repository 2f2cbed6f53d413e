"""Output page configuration."""

from pydantic import BaseModel, ConfigDict, Field


class PageConfig(BaseModel):
    """Output file and optional header/footer template files."""

    model_config = ConfigDict(extra="forbid")

    output: str = Field("api.html", description="Path of the assembled page")
    header: str | None = Field(None, description="Jinja2 header template file, null for the built-in header")
    footer: str | None = Field(None, description="Jinja2 footer template file, null for the built-in footer")
