"""Admin account commands (`admin create-user`, `admin change-password`)."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from adapters.recording_executor import RecordingExecutor
from adapters.subprocess_executor import SubprocessExecutor
from cli.context import get_state
from cli.ui_components import build_commands_table
from core.domain.commands import ControlCommand
from core.domain.errors import ExecutionError
from core.interfaces.command_executor import CommandExecutor
from core.services.admin_manager import AdminManager

app = typer.Typer(no_args_is_help=True, help="Manage the platform admin account through fnctl.")

_console = Console()


def _execute(
    ctx: typer.Context,
    command: ControlCommand,
    email: str,
    password: str,
    binary: str | None,
    dry_run: bool,
) -> None:
    state = get_state(ctx)
    recorder: RecordingExecutor | None = RecordingExecutor() if dry_run else None
    executor: CommandExecutor = recorder or SubprocessExecutor(
        timeout_seconds=state.settings.command_timeout_seconds,
        logger=state.logger.getChild("executor"),
    )
    manager = AdminManager(
        state.logger,
        executor,
        control_binary=binary or state.settings.control_binary,
    )

    operation = {
        ControlCommand.CREATE_ADMIN_USER: manager.create_admin_user,
        ControlCommand.CHANGE_ADMIN_PASSWORD: manager.change_admin_password,
    }[command]

    try:
        operation(email, password)
    except ExecutionError as exc:
        _console.print(
            f"[red]✗ {command.label().capitalize()} failed:[/red] {escape(str(exc))}",
            soft_wrap=True,
        )
        raise typer.Exit(code=1) from exc

    if recorder is not None:
        _console.print(build_commands_table(recorder.commands))
        return
    _console.print(
        f"[green]✓ {command.label().capitalize()} done for[/green] {escape(email)}",
        soft_wrap=True,
    )


@app.command(name="create-user")
def create_user(
    ctx: typer.Context,
    email: str = typer.Option(..., "--email", "-e", help="Admin email address."),
    password: str = typer.Option(
        ...,
        "--password",
        "-p",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Admin password (prompted when omitted).",
    ),
    binary: Optional[str] = typer.Option(None, "--binary", help="Override the fnctl path."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the command instead of running it."),
) -> None:
    """Create the admin user."""

    _execute(ctx, ControlCommand.CREATE_ADMIN_USER, email, password, binary, dry_run)


@app.command(name="change-password")
def change_password(
    ctx: typer.Context,
    email: str = typer.Option(..., "--email", "-e", help="Admin email address."),
    password: str = typer.Option(
        ...,
        "--password",
        "-p",
        prompt="New password",
        hide_input=True,
        confirmation_prompt=True,
        help="New admin password (prompted when omitted).",
    ),
    binary: Optional[str] = typer.Option(None, "--binary", help="Override the fnctl path."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the command instead of running it."),
) -> None:
    """Change the admin password."""

    _execute(ctx, ControlCommand.CHANGE_ADMIN_PASSWORD, email, password, binary, dry_run)
