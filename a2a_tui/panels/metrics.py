"""Metrics panel renderer: memory trend plus static-analysis alerts."""

from __future__ import annotations

from rich.console import Console, ConsoleOptions, RenderResult
from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from a2a_tui.formatting import finite_values, format_quantity, severity_style, sparkline_rows
from a2a_tui.layout import SPARKLINE_HEIGHT
from a2a_tui.models import Alert
from a2a_tui.panels import line_table, panel_from_table
from a2a_tui.state import SlidingWindow


class Sparkline:
    """Trend that fills whatever width and height it is given."""

    def __init__(self, values: list[float], style: str = "cyan"):
        self.values = values
        self.style = style

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        rows = sparkline_rows(self.values, options.max_width, options.height or 1)
        yield Text("\n".join(rows), style=self.style, no_wrap=True)


def alert_row(alert: Alert) -> Text:
    text = Text(f"[{alert.level}] ", style=severity_style(alert.level))
    text.append(f"{alert.path}: {alert.message}", style=severity_style(alert.level))
    return text


def _memory_panel(series: SlidingWindow[float]) -> Panel:
    values = finite_values(series)
    if not values:
        return Panel(Text("No memory samples", style="dim"), title="[bold]Memory used[/bold]", border_style="cyan")
    title = f"Memory used (latest {format_quantity(values[-1])}, peak {format_quantity(max(values))})"
    return Panel(Sparkline(values), title=f"[bold]{title}[/bold]", border_style="cyan")


def _alerts_panel(alerts: list[Alert]) -> Panel:
    errors = sum(1 for a in alerts if a.level == "ERROR")
    warnings = sum(1 for a in alerts if a.level == "WARNING")
    status = "error" if errors else "warn" if warnings else "ok"
    if not alerts:
        return panel_from_table("Semgrep alerts (0)", status, line_table([Text("No alerts", style="dim")]))
    title = f"Semgrep alerts ({len(alerts)}: {errors} error, {warnings} warning)"
    return panel_from_table(title, status, line_table([alert_row(a) for a in alerts]))


def render(series: SlidingWindow[float], alerts: list[Alert]) -> Layout:
    layout = Layout(name="metrics")
    layout.split_column(
        Layout(_memory_panel(series), name="memory", size=SPARKLINE_HEIGHT),
        Layout(_alerts_panel(alerts), name="alerts"),
    )
    return layout
