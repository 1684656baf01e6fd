"""Orchestrator command queue collector."""

from __future__ import annotations

import logging
from pathlib import Path

from a2a_tui.collectors import a2a_root
from a2a_tui.formatting import split_lines
from a2a_tui.models import ReaderResult
from a2a_tui.state import QUEUE_LIMIT

logger = logging.getLogger(__name__)


def queue_path(project_root: Path, a2a_dir: str = ".a2a") -> Path:
    return a2a_root(project_root, a2a_dir) / "orchestrator" / "commands" / "queue.jsonl"


def collect(project_root: Path, a2a_dir: str = ".a2a", limit: int = QUEUE_LIMIT) -> ReaderResult[list[str]]:
    """Newest ``limit`` queue entries, most recent first."""
    path = queue_path(project_root, a2a_dir)
    try:
        text = path.read_bytes().decode("utf-8", errors="replace")
    except FileNotFoundError:
        return ReaderResult.absent("queue", f"{path}: not found")
    except OSError as exc:
        logger.debug("unreadable queue %s: %s", path, exc)
        return ReaderResult.absent("queue", f"{path}: {exc}")

    lines = split_lines(text)
    return ReaderResult(source="queue", value=list(reversed(lines[-limit:])) if limit > 0 else [])
