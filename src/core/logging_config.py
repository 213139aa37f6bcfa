"""Logger factory.

Why a factory:
- Services receive a ready `logging.Logger` instead of configuring logging
  themselves, so tests can hand in a logger at any level.
- Console output goes through rich, the same library the CLI renders with.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator
from rich.console import Console
from rich.logging import RichHandler

from core.config import normalize_log_level

DEFAULT_LOGGER_NAME = "fusionaly_installer"

_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class LoggingConfig(BaseModel):
    """Logging options (case-insensitive level name)."""

    level: str = Field(default="info", description="debug/info/warning/error")

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        return normalize_log_level(value)

    def numeric_level(self) -> int:
        return _LEVELS[self.level]


def new_logger(config: LoggingConfig | None = None, name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """Return the named logger configured from `config`.

    Repeated calls reuse the existing rich handler and only update levels.
    """

    config = config or LoggingConfig()
    logger = logging.getLogger(name)
    logger.setLevel(config.numeric_level())
    logger.propagate = False

    handler = next((h for h in logger.handlers if isinstance(h, RichHandler)), None)
    if handler is None:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    handler.setLevel(config.numeric_level())
    return logger
