"""Header renderer."""

from __future__ import annotations

from rich.panel import Panel

from a2a_tui.formatting import clock_time
from a2a_tui.state import AppState


def render(title: str, state: AppState) -> Panel:
    text = (
        f"Refreshed: [bold]{clock_time(state.last_refresh)}[/bold]   "
        f"Agents: [bold]{len(state.agents)}[/bold]   "
        f"Queue: [bold]{len(state.commands)}[/bold]   "
        f"Panel: [bold]{state.right_panel.value}[/bold]   "
        "[dim]? for help, q to quit[/dim]"
    )
    return Panel(text, title=f"[bold]{title}[/bold]", border_style="cyan")
