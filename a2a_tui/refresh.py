"""Reconcile application state against the on-disk artifacts."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Flag, auto
from pathlib import Path
from typing import Any, Callable

from a2a_tui.collectors import agents as agents_collector
from a2a_tui.collectors import alerts as alerts_collector
from a2a_tui.collectors import logs as logs_collector
from a2a_tui.collectors import memory as memory_collector
from a2a_tui.collectors import orchestrator as orchestrator_collector
from a2a_tui.config import DEFAULT_SETTINGS
from a2a_tui.models import ReaderResult
from a2a_tui.state import AppState

logger = logging.getLogger(__name__)


class RefreshMode(Flag):
    AGENTS = auto()
    QUEUE = auto()
    LOGS = auto()
    MEMORY = auto()
    ALERTS = auto()
    FULL = AGENTS | QUEUE | LOGS | MEMORY | ALERTS


@dataclass
class RefreshReport:
    finished_at: datetime
    results: dict[str, ReaderResult] = field(default_factory=dict)

    def errors(self) -> dict[str, list[str]]:
        return {name: result.errors for name, result in self.results.items() if result.errors}

    def to_dict(self) -> dict[str, Any]:
        return {
            "finished_at": self.finished_at.isoformat(),
            "sources": {name: result.to_dict() for name, result in self.results.items()},
        }


def _guarded(source: str, reader: Callable[..., ReaderResult], *args: Any) -> ReaderResult:
    try:
        return reader(*args)
    except Exception as exc:  # noqa: BLE001
        logger.exception("%s reader failed", source)
        return ReaderResult.absent(source, f"reader failed: {exc}")


def refresh(
    state: AppState,
    project_root: Path,
    mode: RefreshMode = RefreshMode.FULL,
    settings: dict | None = None,
) -> RefreshReport:
    """Pull every artifact selected by ``mode`` into ``state``.

    Never raises. Absent artifacts become empty containers, except the memory
    series which is left untouched when no sample could be read.
    """
    settings = settings or DEFAULT_SETTINGS
    a2a_dir = settings.get("a2a_dir", DEFAULT_SETTINGS["a2a_dir"])
    results: dict[str, ReaderResult] = {}

    if RefreshMode.AGENTS in mode:
        result = _guarded("agents", agents_collector.collect, project_root, a2a_dir)
        state.agents = {card.uuid: card for card in result.value} if result.present else {}
        state.clamp_selection()
        results["agents"] = result

    if RefreshMode.QUEUE in mode:
        limit = settings.get("queue_limit", DEFAULT_SETTINGS["queue_limit"])
        result = _guarded("queue", orchestrator_collector.collect, project_root, a2a_dir, limit)
        state.commands = result.value if result.present else []
        results["queue"] = result

    if RefreshMode.LOGS in mode:
        result = _guarded("logs", logs_collector.collect, project_root, state.logs.capacity)
        state.logs.replace(result.value if result.present else [])
        results["logs"] = result

    if RefreshMode.MEMORY in mode:
        result = _guarded("memory", memory_collector.collect, project_root)
        if result.present:
            state.memory_series.push(result.value)
        results["memory"] = result

    if RefreshMode.ALERTS in mode:
        result = _guarded("alerts", alerts_collector.collect, project_root)
        state.alerts = result.value if result.present else []
        results["alerts"] = result

    state.last_refresh = datetime.now(timezone.utc)
    report = RefreshReport(finished_at=state.last_refresh, results=results)
    for source, errors in report.errors().items():
        logger.debug("refresh %s: %d problem(s): %s", source, len(errors), "; ".join(errors[:3]))
    return report
