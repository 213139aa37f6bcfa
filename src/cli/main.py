"""Root typer application."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from cli import admin, doctor
from cli.context import CliState
from cli.ui_components import print_banner

app = typer.Typer(
    no_args_is_help=True,
    help="Fusionaly installer: admin account management and diagnostics.",
)
app.add_typer(admin.app, name="admin")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="debug/info/warning/error (default: FUSIONALY_LOG_LEVEL or info).",
    ),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the welcome banner."),
) -> None:
    ctx.obj = CliState.load(log_level=log_level)

    if not no_banner:
        print_banner(_console)


def run() -> None:
    app()
