"""Shared state handed from the root callback to subcommands via `ctx.obj`."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import typer
from pydantic import ValidationError

from core.config import ENV_PREFIX, AppSettings
from core.logging_config import LoggingConfig, new_logger


def _bad_parameter(exc: ValidationError, param_hint: str) -> typer.BadParameter:
    error = exc.errors()[0]
    return typer.BadParameter(error["msg"], param_hint=param_hint)


@dataclass
class CliState:
    settings: AppSettings
    logger: logging.Logger

    @classmethod
    def load(cls, log_level: str | None = None) -> "CliState":
        """Read settings and build the logger; invalid values become usage errors.

        Environment/.env problems name the offending variable, a bad
        `--log-level` names the option.
        """

        try:
            settings = AppSettings.load()
        except ValidationError as exc:
            loc = exc.errors()[0]["loc"]
            hint = f"{ENV_PREFIX}{str(loc[0]).upper()}" if loc else "environment"
            raise _bad_parameter(exc, hint) from exc

        try:
            config = LoggingConfig(level=log_level or settings.log_level)
        except ValidationError as exc:
            raise _bad_parameter(exc, "--log-level") from exc
        return cls(settings=settings, logger=new_logger(config))


def get_state(ctx: typer.Context) -> CliState:
    """State stored by the root callback, or a fresh one when a sub-app runs alone."""

    if not isinstance(ctx.obj, CliState):
        ctx.obj = CliState.load()
    return ctx.obj
