"""Help overlay renderer."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table

from a2a_tui.transitions import HELP_ENTRIES


def render() -> Panel:
    table = Table(box=None, show_header=False, expand=True)
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Action")
    for keys, description in HELP_ENTRIES:
        table.add_row(keys, description)
    return Panel(table, title="[bold]Help[/bold]", border_style="magenta")
