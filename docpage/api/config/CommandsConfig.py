"""External command configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CommandsConfig(BaseModel):
    """Argument vectors for the external tools. ``{package}`` is substituted."""

    model_config = ConfigDict(extra="forbid")

    fetch: list[str] | None = Field(
        default_factory=lambda: ["go", "get", "-u", "{package}"],
        description="Package fetch command, null to skip fetching",
    )
    docs: list[str] = Field(
        default_factory=lambda: ["godoc", "-html", "{package}"],
        description="Documentation generator command (HTML on stdout)",
    )
    revision: list[str] = Field(
        default_factory=lambda: ["git", "rev-parse", "--short", "HEAD"],
        description="Command printing the short revision id of the source checkout",
    )

    @field_validator("docs", "revision")
    @classmethod
    def validate_not_empty(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("command must contain at least the executable")
        return v

    @field_validator("fetch")
    @classmethod
    def validate_fetch(cls, v: list[str] | None) -> list[str] | None:
        if v is not None and not v:
            raise ValueError("commands.fetch must be null or contain at least the executable")
        return v

    def expand(self, args: list[str], package: str) -> list[str]:
        """Return ``args`` with ``{package}`` replaced."""
        return [arg.replace("{package}", package) for arg in args]
