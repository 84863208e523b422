"""Pydantic schemas for nsloader settings files."""

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator


class LoaderSettings(BaseModel):
    """Complete settings file specification."""

    separator: str = Field(default="\\", description="Namespace separator in symbolic names")
    extension: str = Field(default=".py", description="Source file extension appended to resolved names")
    prefixes: dict[str, str | list[str]] = Field(
        default_factory=dict, description="Simple loader: prefix -> base directory or list of directories"
    )
    packages: dict[str, str] = Field(
        default_factory=dict, description="Package loader: prefix -> package root, walked recursively"
    )
    prepend: bool = Field(default=False, description="Activate ahead of already-registered resolvers")

    @field_validator("separator")
    @classmethod
    def _separator_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("separator must not be empty")
        return value

    @field_validator("extension")
    @classmethod
    def _extension_has_dot(cls, value: str) -> str:
        if value and not value.startswith("."):
            return f".{value}"
        return value

    def prefix_directories(self) -> dict[str, list[str]]:
        """Simple-loader prefixes with every value as a list."""
        return {prefix: [dirs] if isinstance(dirs, str) else list(dirs) for prefix, dirs in self.prefixes.items()}
