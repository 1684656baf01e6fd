"""Compose the full dashboard screen from application state."""

from __future__ import annotations

from rich.console import Console, ConsoleOptions, RenderableType, RenderResult
from rich.layout import Layout
from rich.segment import Segment

from a2a_tui.config import DEFAULT_SETTINGS
from a2a_tui.layout import HEADER_HEIGHT, body_height, centered_rect, split_widths, visible_rows
from a2a_tui.panels.agents import render as render_agents
from a2a_tui.panels.header import render as render_header
from a2a_tui.panels.help import render as render_help
from a2a_tui.panels.logs import render as render_logs
from a2a_tui.panels.metrics import render as render_metrics
from a2a_tui.panels.orchestrator import render as render_orchestrator
from a2a_tui.state import AppState, RightPanel


class Overlay:
    """Draw ``popup`` over a centered region of ``base``, hiding what is beneath."""

    def __init__(self, base: RenderableType, popup: RenderableType, width: int, height: int):
        self.base = base
        self.popup = popup
        self.width = width
        self.height = height

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        x, y, box_w, box_h = centered_rect(self.width, self.height)
        base_lines = console.render_lines(self.base, options.update(width=self.width, height=self.height), pad=True)
        popup_lines = console.render_lines(self.popup, options.update(width=box_w, height=box_h), pad=True)
        new_line = Segment.line()
        for row, line in enumerate(base_lines):
            if y <= row < y + box_h:
                parts = list(Segment.divide(line, [x, x + box_w, self.width]))
                yield from parts[0] if parts else []
                yield from popup_lines[row - y]
                yield from parts[2] if len(parts) > 2 else []
            else:
                yield from line
            yield new_line


def render_right(state: AppState, rows: int) -> RenderableType:
    if state.right_panel is RightPanel.LOGS:
        return render_logs(state.logs, rows)
    if state.right_panel is RightPanel.METRICS:
        return render_metrics(state.memory_series, state.alerts)
    return render_orchestrator(state.commands, rows)


def render_dashboard(state: AppState, width: int, height: int, settings: dict | None = None) -> RenderableType:
    """Build the screen for ``state``. Reads state only, never mutates it."""
    settings = settings or DEFAULT_SETTINGS
    left_width, _ = split_widths(width)
    rows = visible_rows(body_height(height))

    layout = Layout(name="root")
    layout.split_column(
        Layout(render_header(settings.get("title", DEFAULT_SETTINGS["title"]), state), name="header", size=HEADER_HEIGHT),
        Layout(name="body"),
    )
    layout["body"].split_row(
        Layout(render_agents(state.agents.values(), state.selected_index), name="agents", size=left_width),
        Layout(render_right(state, rows), name="right"),
    )

    if state.show_help:
        return Overlay(layout, render_help(), width, height)
    return layout
