"""Logs panel renderer."""

from __future__ import annotations

from a2a_tui.panels import empty_panel, line_table, panel_from_table
from a2a_tui.state import SlidingWindow


def render(lines: SlidingWindow[str], rows: int):
    if not len(lines):
        return empty_panel("Logs", "No log lines available")
    # newest lines stay pinned to the bottom edge
    shown = lines.tail(rows)
    return panel_from_table(f"Logs ({len(lines)})", "active", line_table(shown))
