"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from presentation details.
- Tables and panels are reused by `admin` and `doctor`.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.commands import mask_invocation


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Disabled with `--no-banner` for non-interactive runs.
    """

    title = Text("Fusionaly Installer", style="bold cyan")
    subtitle = Text("Self-hosted analytics • zero configuration", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_checks_table(rows: Iterable[tuple[str, str, str]]) -> Table:
    """Table for `doctor run` results: (check, status, details)."""

    table = Table(title="Fusionaly Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    for check, status, details in rows:
        table.add_row(check, status, details)
    return table


def build_commands_table(commands: Iterable[Sequence[str]]) -> Table:
    """Commands captured in dry-run mode, password column masked."""

    table = Table(title="Dry run (not executed)")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Command", style="magenta")
    for index, command in enumerate(commands, start=1):
        table.add_row(str(index), " ".join(mask_invocation(tuple(command))))
    return table
