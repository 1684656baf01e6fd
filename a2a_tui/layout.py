"""Screen geometry for the dashboard."""

from __future__ import annotations

HEADER_HEIGHT = 3
LEFT_PERCENT = 30
SPARKLINE_HEIGHT = 5
HELP_WIDTH_PERCENT = 60
HELP_HEIGHT_PERCENT = 40


def split_widths(width: int, left_percent: int = LEFT_PERCENT) -> tuple[int, int]:
    width = max(0, width)
    left = width * left_percent // 100
    return left, width - left


def body_height(height: int) -> int:
    return max(0, height - HEADER_HEIGHT)


def visible_rows(height: int) -> int:
    """Content rows inside a bordered panel of ``height`` rows."""
    return max(0, height - 2)


def centered_rect(
    width: int,
    height: int,
    percent_x: int = HELP_WIDTH_PERCENT,
    percent_y: int = HELP_HEIGHT_PERCENT,
) -> tuple[int, int, int, int]:
    """Return ``(x, y, w, h)`` of a box centered in a ``width`` x ``height`` area."""
    box_w = min(width, max(1, width * percent_x // 100))
    box_h = min(height, max(1, height * percent_y // 100))
    return (width - box_w) // 2, (height - box_h) // 2, box_w, box_h
