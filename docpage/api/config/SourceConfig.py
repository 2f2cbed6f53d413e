"""Source checkout and hosted-link configuration."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...utils.expand_path import expand_path
from ..link.build_source_url import build_source_url
from ..link.DEFAULT_REPO_URL_TEMPLATE import DEFAULT_REPO_URL_TEMPLATE


class SourceConfig(BaseModel):
    """Where source files live and how hosted links are built."""

    model_config = ConfigDict(extra="forbid")

    base_dir: str = Field(".", description="Directory that source-link paths are relative to")
    repo_url_template: str = Field(
        DEFAULT_REPO_URL_TEMPLATE,
        description="Hosted link template with {path}, {revision_id}, {start_line}, {end_line}",
    )

    @field_validator("repo_url_template")
    @classmethod
    def validate_repo_url_template(cls, v: str) -> str:
        if not v:
            raise ValueError("source.repo_url_template is required")
        # Fails on unknown fields or unbalanced braces
        build_source_url(v, path="x", revision_id="x", start_line=1, end_line=1)
        return v

    @property
    def base_path(self) -> Path:
        """base_dir with ~ and environment variables expanded."""
        return expand_path(self.base_dir)
