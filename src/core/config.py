"""Installer configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets the services and adapters read settings consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import dotenv_values
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.commands import DEFAULT_CONTROL_BINARY

APP_DIR_NAME = "fusionaly-installer"
ENV_PREFIX = "FUSIONALY_"
LOG_LEVELS = ("debug", "info", "warning", "error")
PROJECT_ENV_FILE = ".env"


def get_user_config_dir() -> Path:
    """Per-user config directory, resolved from the environment on every call."""

    home = Path.home()
    if sys.platform.startswith("win"):
        root = Path(os.environ.get("APPDATA") or home)
    elif sys.platform == "darwin":
        root = home / "Library" / "Application Support"
    else:
        root = Path(os.environ.get("XDG_CONFIG_HOME") or home / ".config")
    return root / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def env_files() -> tuple[str, str]:
    """Dotenv files read by `AppSettings.load`; the per-user file overrides the project one."""

    return (PROJECT_ENV_FILE, str(get_user_env_file()))


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Merge `values` into the per-user .env file and rewrite it sorted.

    Keys already present are kept unless overridden; `None` values are skipped.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    merged = {k: v for k, v in dotenv_values(env_path).items() if v is not None} if env_path.exists() else {}
    merged.update({k: v for k, v in values.items() if v is not None})

    body = "".join(f"{key}={merged[key]}\n" for key in sorted(merged))
    env_path.write_text(f"# {APP_DIR_NAME} user config (.env)\n{body}", encoding="utf-8")
    return env_path


def normalize_log_level(value: str) -> str:
    level = value.strip().lower()
    if level not in LOG_LEVELS:
        raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)} (got {value!r})")
    return level


class AppSettings(BaseSettings):
    """Central installer settings.

    `AppSettings()` reads the process environment only; `AppSettings.load()`
    adds the project `.env` and the per-user `.env`, with real environment
    variables winning over both.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        env_file_encoding="utf-8",
    )

    control_binary: str = Field(
        default=DEFAULT_CONTROL_BINARY,
        min_length=1,
        description="Path to the `fnctl` control binary inside the platform container.",
    )
    log_level: str = Field(
        default="info",
        description="Installer log level (debug/info/warning/error).",
    )
    command_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Optional timeout for a single control binary call (seconds).",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        return normalize_log_level(value)

    @classmethod
    def load(cls) -> "AppSettings":
        """Settings from the environment plus the dotenv files, located at call time."""

        return cls(_env_file=env_files())
