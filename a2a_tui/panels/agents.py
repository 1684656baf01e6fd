"""Agent list renderer."""

from __future__ import annotations

from typing import Iterable

from rich.text import Text

from a2a_tui.models import AgentCard
from a2a_tui.panels import empty_panel, line_table, panel_from_table

SELECTED_MARK = "▶"


def agent_row(card: AgentCard, selected: bool) -> Text:
    if selected:
        return Text(f"{SELECTED_MARK} {card.name}", style="bold green")
    return Text(f"  {card.name}")


def render(agents: Iterable[AgentCard], selected_index: int):
    cards = list(agents)
    if not cards:
        return empty_panel("Agents (0)", "No agents discovered")
    rows = [agent_row(card, idx == selected_index) for idx, card in enumerate(cards)]
    return panel_from_table(f"Agents ({len(cards)})", "ok", line_table(rows))
