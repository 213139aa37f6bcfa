"""Doctor command for environment diagnostics."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

import typer
from rich.console import Console

from cli.context import get_state
from cli.ui_components import build_checks_table
from core.config import get_user_env_file, normalize_log_level, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _resolve_binary(binary: str) -> Path | None:
    """Return the binary path if it exists, searching PATH for bare names."""

    candidate = Path(binary)
    if candidate.is_file():
        return candidate
    found = shutil.which(binary)
    return Path(found) if found else None


def _check_binary(binary: str) -> tuple[bool, str]:
    path = _resolve_binary(binary)
    if path is None:
        return False, f"{binary} not found"
    return True, str(path)


def _check_executable(binary: str) -> tuple[bool, str]:
    path = _resolve_binary(binary)
    if path is None:
        return False, "skipped (binary missing)"
    if not os.access(path, os.X_OK):
        return False, f"{path} is not executable"
    return True, "OK"


@app.command()
def run(ctx: typer.Context) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = get_state(ctx).settings
    rows: list[tuple[str, str, str]] = []

    ok_bin, detail_bin = _check_binary(settings.control_binary)
    rows.append(("Control binary", "OK" if ok_bin else "FAIL", detail_bin))

    ok_exec, detail_exec = _check_executable(settings.control_binary)
    rows.append(("Executable", "OK" if ok_exec else "FAIL", detail_exec))

    rows.append(("Log level", "OK", settings.log_level))
    timeout = settings.command_timeout_seconds
    rows.append(("Command timeout", "OK", f"{timeout:g}s" if timeout else "none"))

    env_file = get_user_env_file()
    rows.append(("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file)))

    _console.print(build_checks_table(rows))

    if not (ok_bin and ok_exec):
        _console.print(
            "\n[yellow]Note:[/yellow] set FUSIONALY_CONTROL_BINARY or run `doctor configure` "
            "to point at the fnctl binary."
        )
        raise typer.Exit(code=1)


@app.command(name="configure")
def configure(ctx: typer.Context) -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = get_state(ctx).settings

    binary = typer.prompt("Control binary path", default=settings.control_binary, show_default=True).strip()
    level = typer.prompt("Log level", default=settings.log_level, show_default=True).strip()

    if not binary:
        raise typer.BadParameter("control binary path is required")
    try:
        level = normalize_log_level(level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    env_path = write_user_env_vars(
        {
            "FUSIONALY_CONTROL_BINARY": binary,
            "FUSIONALY_LOG_LEVEL": level,
        }
    )

    _console.print(f"[green]Saved installer config to:[/green] {env_path}")
