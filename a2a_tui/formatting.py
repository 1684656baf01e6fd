"""Shared text and time formatting helpers for human-facing panels."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Iterable, Sequence

SPARK_CHARS = " ▁▂▃▄▅▆▇█"

SEVERITY_STYLES = {
    "ERROR": "bold red",
    "WARNING": "yellow",
    "INFO": "default",
}


def clock_time(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone().strftime("%H:%M:%S")


def format_quantity(value: float | int | None) -> str:
    if value is None:
        return "n/a"
    if isinstance(value, float) and not value.is_integer():
        return f"{value:,.1f}"
    return f"{int(value):,}"


def is_finite(value: float | int) -> bool:
    try:
        return math.isfinite(float(value))
    except (OverflowError, TypeError, ValueError):
        return False


def finite_values(values: Iterable[float]) -> list[float]:
    return [v for v in values if is_finite(v)]


def sparkline_rows(values: Sequence[float], width: int, height: int = 1) -> list[str]:
    """Render the newest ``width`` values as ``height`` rows of block characters.

    Heights are scaled between the minimum and maximum of the shown values;
    a flat series renders at half height so it stays visible. Non-finite
    values are dropped.
    """
    shown = finite_values(values)[-width:] if width > 0 else []
    if not shown or height <= 0:
        return []
    cells = len(SPARK_CHARS) - 1
    total = cells * height
    low, high = min(shown), max(shown)
    if high == low:
        levels = [total // 2] * len(shown)
    else:
        span = high - low
        levels = [1 + round((v - low) / span * (total - 1)) for v in shown]

    rows = []
    for row in range(height):
        base = (height - 1 - row) * cells
        rows.append("".join(SPARK_CHARS[max(0, min(cells, level - base))] for level in levels))
    return rows


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only, dropping a trailing ``\\r`` per line and the empty tail."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
