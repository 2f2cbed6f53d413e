"""Top-level docpage configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .CommandsConfig import CommandsConfig
from .get_config_path import get_config_path
from .LogConfig import LogConfig
from .PageConfig import PageConfig
from .SourceConfig import SourceConfig


class DocpageConfig(BaseModel):
    """Top-level configuration for the page pipeline."""

    model_config = ConfigDict(extra="forbid")

    package: str = Field("github.com/hoisie/web", description="Package to fetch and document")
    source: SourceConfig = Field(default_factory=SourceConfig)
    commands: CommandsConfig = Field(default_factory=CommandsConfig)
    page: PageConfig = Field(default_factory=PageConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> "DocpageConfig":
        """Load and validate config from file.

        A missing file is not an error: the built-in defaults are used.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = path or get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return self.model_dump(mode="python")
