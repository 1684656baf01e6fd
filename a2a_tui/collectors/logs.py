"""Log directory collector."""

from __future__ import annotations

import logging
from pathlib import Path

from a2a_tui.collectors import list_files
from a2a_tui.formatting import split_lines
from a2a_tui.models import ReaderResult
from a2a_tui.state import LOG_CAPACITY

logger = logging.getLogger(__name__)


def collect(project_root: Path, limit: int = LOG_CAPACITY) -> ReaderResult[list[str]]:
    """Newest ``limit`` lines across every file in ``logs/``.

    Files are walked from the most recently modified backwards; each one
    contributes its trailing lines until the budget runs out. The returned
    list is oldest-first, so the newest line overall is last.
    """
    log_dir = project_root / "logs"
    if not log_dir.is_dir():
        return ReaderResult.absent("logs", f"{log_dir}: not a directory")

    collected: list[str] = []
    errors: list[str] = []
    for path in list_files(log_dir):
        remaining = limit - len(collected)
        if remaining <= 0:
            break
        try:
            lines = split_lines(path.read_bytes().decode("utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("skipping log file %s: %s", path, exc)
            errors.append(f"{path.name}: {exc}")
            continue
        collected = lines[-remaining:] + collected

    return ReaderResult(source="logs", value=collected, errors=errors)
