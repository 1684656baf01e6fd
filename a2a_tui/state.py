"""In-memory application state for the dashboard."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Generic, Iterable, Iterator, TypeVar

from a2a_tui.models import Alert, AgentCard

T = TypeVar("T")

LOG_CAPACITY = 500
MEMORY_CAPACITY = 100
QUEUE_LIMIT = 50


class RightPanel(Enum):
    ORCHESTRATOR = "orchestrator"
    LOGS = "logs"
    METRICS = "metrics"


class SlidingWindow(Generic[T]):
    """Fixed-capacity FIFO buffer that drops its oldest item when full."""

    def __init__(self, capacity: int, items: Iterable[T] = ()):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._items: deque[T] = deque(items, maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._items.maxlen  # type: ignore[return-value]

    def push(self, item: T) -> T | None:
        """Append ``item`` and return the evicted oldest item, if any."""
        evicted = self._items[0] if len(self._items) == self.capacity else None
        self._items.append(item)
        return evicted

    def replace(self, items: Iterable[T]) -> None:
        """Swap the contents for the newest ``capacity`` items of ``items``."""
        self._items = deque(items, maxlen=self.capacity)

    def latest(self) -> T | None:
        return self._items[-1] if self._items else None

    def tail(self, count: int) -> list[T]:
        if count <= 0:
            return []
        return list(self._items)[-count:]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"SlidingWindow(capacity={self.capacity}, items={list(self._items)!r})"


@dataclass
class AppState:
    agents: dict[str, AgentCard] = field(default_factory=dict)
    selected_index: int = 0
    last_refresh: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    commands: list[str] = field(default_factory=list)
    right_panel: RightPanel = RightPanel.ORCHESTRATOR
    logs: SlidingWindow[str] = field(default_factory=lambda: SlidingWindow(LOG_CAPACITY))
    memory_series: SlidingWindow[float] = field(default_factory=lambda: SlidingWindow(MEMORY_CAPACITY))
    alerts: list[Alert] = field(default_factory=list)
    show_help: bool = False

    @classmethod
    def with_limits(cls, log_limit: int = LOG_CAPACITY, memory_window: int = MEMORY_CAPACITY) -> "AppState":
        return cls(logs=SlidingWindow(log_limit), memory_series=SlidingWindow(memory_window))

    def clamp_selection(self) -> None:
        if not self.agents:
            self.selected_index = 0
        else:
            self.selected_index = max(0, min(self.selected_index, len(self.agents) - 1))

    def selected_agent(self) -> AgentCard | None:
        if not self.agents or not 0 <= self.selected_index < len(self.agents):
            return None
        return list(self.agents.values())[self.selected_index]
