"""Memory metrics snapshot collector."""

from __future__ import annotations

from pathlib import Path

from a2a_tui.collectors import read_json
from a2a_tui.formatting import is_finite
from a2a_tui.models import ReaderResult


def metrics_path(project_root: Path) -> Path:
    return project_root / "var" / "memory_metrics.json"


def collect(project_root: Path) -> ReaderResult[float]:
    path = metrics_path(project_root)
    loaded = read_json(path, "memory")
    if not loaded.present:
        return ReaderResult(source="memory", errors=loaded.errors)

    payload = loaded.value
    used = payload.get("used") if isinstance(payload, dict) else None
    if isinstance(used, bool) or not isinstance(used, (int, float)) or not is_finite(used) or used < 0:
        return ReaderResult.absent("memory", f"{path}: missing finite non-negative numeric 'used'")
    return ReaderResult(source="memory", value=used)
