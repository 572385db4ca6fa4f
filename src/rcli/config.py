"""Configuration management for rcli."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from rcli.errors import ConfigurationError
from rcli.logging_utils import configure_logging

DEFAULT_UNSUPPORTED_COMMANDS = [
    "monitor",
    "subscribe",
    "psubscribe",
    "ssubscribe",
    "sync",
    "psync",
    "script debug",
]

DEFAULT_BLOCKING_COMMANDS = [
    "blpop",
    "brpop",
    "blmove",
    "blmpop",
    "brpoplpush",
    "bzpopmin",
    "bzpopmax",
    "bzmpop",
    "xread",
    "xreadgroup",
    "wait",
]


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="RCLI_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    home: Path = Field(default_factory=lambda: Path.home() / ".rcli", description="State directory")
    history_file: Path = Field(default=Path("history.json"), description="History file, relative to home")

    unsupported_commands: list[str] = Field(default_factory=lambda: list(DEFAULT_UNSUPPORTED_COMMANDS))
    blocking_commands: list[str] = Field(default_factory=lambda: list(DEFAULT_BLOCKING_COMMANDS))
    loaded_modules: list[str] = Field(default_factory=list, description="Module names active on the server")
    commands_spec_file: Path | None = Field(default=None, description="JSON file of command metadata")

    command_lookup_window: int = Field(default=50, gt=0, description="Characters scanned for a command name")
    log_level: str = Field(default="INFO", description="Log level")

    @property
    def history_path(self) -> Path:
        if self.history_file.is_absolute():
            return self.history_file
        return self.home.expanduser() / self.history_file


def load_commands_spec(path: Path) -> dict[str, Any]:
    """Read a command metadata table keyed by upper-case command name."""

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Cannot read command spec file {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigurationError(f"Command spec file {path} must contain a JSON object")
    return {str(name).upper(): meta for name, meta in payload.items()}


def get_settings(**overrides: Any) -> Settings:
    """Build settings from the environment and configure logging."""

    settings = Settings(**overrides)
    configure_logging(level=settings.log_level)
    return settings
