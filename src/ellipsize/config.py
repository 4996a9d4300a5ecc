"""Configuration loader for Ellipsize."""

from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING, Literal

import tomlkit
from pydantic import BaseModel, Field, field_validator

from ellipsize.limits import DEFAULT_ELLIPSIS, DEFAULT_LINES
from ellipsize.paths import get_config_path

if TYPE_CHECKING:
    from pathlib import Path


class TruncateConfig(BaseModel):
    """Defaults applied to every truncation run."""

    lines: int | Literal[False] = Field(
        default=DEFAULT_LINES,
        description="Maximum number of lines (false disables truncation)",
    )
    ellipsis: str = Field(default=DEFAULT_ELLIPSIS, description="Marker inserted where text is cut")
    always_truncate: bool = Field(
        default=False, description="Always end the last line with the ellipsis"
    )
    hard_newlines: bool = Field(
        default=False, description="Treat literal newlines as hard line breaks"
    )

    @field_validator("lines", mode="before")
    @classmethod
    def validate_lines(cls, value: object) -> object:
        if value is False:
            return False
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError("lines must be a positive integer or false")
        if value < 1:
            raise ValueError("lines must be >= 1")
        return value

    @property
    def max_lines(self) -> int | None:
        """Line limit in the form the engine expects (None when disabled)."""
        return None if self.lines is False else self.lines


class EllipsizeConfig(BaseModel):
    """Root configuration model."""

    truncate: TruncateConfig = Field(default_factory=TruncateConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> EllipsizeConfig:
        """Load configuration from TOML file or use defaults."""
        if config_path is None:
            config_path = get_config_path()

        if config_path.exists():
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            return cls.model_validate(data)

        return cls()

    def save(self, path: Path) -> None:
        """Serialize current config to TOML file.

        Args:
            path: Path to write config file (created if missing)
        """
        doc = tomlkit.document()

        truncate_table = tomlkit.table()
        for key, value in self.truncate.model_dump().items():
            if value is not None:
                truncate_table[key] = value
        doc["truncate"] = truncate_table

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(tomlkit.dumps(doc), encoding="utf-8")
