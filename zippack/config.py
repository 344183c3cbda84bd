"""Configuration management with Pydantic models and environment settings."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

EntryFilter = Callable[[str, Path, bool], bool]
DoneCallback = Callable[[Exception | None], Any]

DEFAULT_IN_DIR = "dist"
DEFAULT_OUT_DIR = "dist-zip"
DEFAULT_OUT_FILE_NAME = "dist.zip"

# Applied by resolve_options() to every option left empty.
OPTION_DEFAULTS: dict[str, str] = {
    "in_dir": DEFAULT_IN_DIR,
    "out_dir": DEFAULT_OUT_DIR,
    "out_file_name": DEFAULT_OUT_FILE_NAME,
}


class PackOptions(BaseModel):
    """Options for a single pack invocation.

    Path-bearing fields are resolved against the working directory unless
    absolute. ``path_prefix`` must be relative; this is checked when the
    pack runs so the failure reaches the ``done`` callback.
    """

    model_config = ConfigDict(frozen=True)

    in_dir: str | None = Field(default=None, description="Input directory (default: dist)")
    out_dir: str | None = Field(default=None, description="Output directory (default: dist-zip)")
    out_file_name: str | None = Field(
        default=None,
        description="Archive file name (default: dist.zip)",
    )
    path_prefix: str | None = Field(
        default=None,
        description="Relative directory inside the archive to nest all entries under",
    )
    done: DoneCallback | None = Field(
        default=None,
        description="Called once with None on success or the error on failure",
    )
    filter: EntryFilter | None = Field(
        default=None,
        description="Called with (name, path, is_dir); entries returning False are skipped",
    )

    @field_validator("in_dir", "out_dir", "out_file_name", "path_prefix", mode="before")
    @classmethod
    def _coerce_path(cls, value: Any) -> Any:
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value


def resolve_options(options: PackOptions | None = None) -> PackOptions:
    """Return ``options`` with every empty field replaced by its default."""
    if options is None:
        return PackOptions(**OPTION_DEFAULTS)

    updates = {
        field: default
        for field, default in OPTION_DEFAULTS.items()
        if not getattr(options, field)
    }
    if options.path_prefix == "":
        updates["path_prefix"] = None
    return options.model_copy(update=updates) if updates else options


class Settings(BaseSettings):
    """zippack configuration settings.

    Precedence: CLI flag > environment variable > .env file > defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="ZIPPACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    in_dir: str = Field(
        default=DEFAULT_IN_DIR,
        description="Build output directory to archive",
    )

    out_dir: str = Field(
        default=DEFAULT_OUT_DIR,
        description="Directory the archive is written to",
    )

    out_file_name: str = Field(
        default=DEFAULT_OUT_FILE_NAME,
        description="File name of the archive",
    )

    path_prefix: str | None = Field(
        default=None,
        description="Relative directory inside the archive to nest entries under",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level used by the CLI",
    )

    def to_pack_options(
        self,
        *,
        done: DoneCallback | None = None,
        filter: EntryFilter | None = None,
    ) -> PackOptions:
        """Build pack options from these settings."""
        return PackOptions(
            in_dir=self.in_dir,
            out_dir=self.out_dir,
            out_file_name=self.out_file_name,
            path_prefix=self.path_prefix,
            done=done,
            filter=filter,
        )


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
