"""Core configuration.

Why here:
- Centralises environment variables (pydantic-settings) without leaking
  them into the CLI.
- Lets the git adapter and the CLI read the same settings contract.

GitFx reads no files of its own, so settings come from the environment
only (no `.env` lookup).
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VERSION = "0.1.0"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing and validation at the edge (env vars) without polluting the core.
    - A single configuration contract for CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="GITFX_",
        extra="ignore",
        case_sensitive=False,
    )

    git_executable: str = Field(
        default="git",
        min_length=1,
        description="Executable invoked for every git command.",
    )
    show_banner: bool = Field(
        default=True,
        description="Print the ASCII-art banner when `gix` runs without a command.",
    )
    log_level: str | None = Field(
        default=None,
        description="Explicit log level (DEBUG, INFO, ...); overrides --verbose.",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        name = value.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level: {value}")
        return name
