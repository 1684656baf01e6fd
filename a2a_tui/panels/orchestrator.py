"""Orchestrator queue renderer."""

from __future__ import annotations

from a2a_tui.panels import empty_panel, line_table, panel_from_table


def render(commands: list[str], rows: int):
    if not commands:
        return empty_panel("Orchestrator Queue", "Queue is empty")
    shown = commands[: max(0, rows)]
    return panel_from_table(f"Orchestrator Queue ({len(commands)})", "active", line_table(shown))
