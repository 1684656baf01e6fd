"""Static-analysis (semgrep) report collector."""

from __future__ import annotations

import logging
from pathlib import Path

from a2a_tui.collectors import read_json
from a2a_tui.models import Alert, ReaderResult

logger = logging.getLogger(__name__)


def report_path(project_root: Path) -> Path:
    return project_root / "scripts" / "semgrep-report.json"


def collect(project_root: Path) -> ReaderResult[list[Alert]]:
    path = report_path(project_root)
    loaded = read_json(path, "alerts")
    if not loaded.present:
        return ReaderResult(source="alerts", errors=loaded.errors)

    payload = loaded.value
    if isinstance(payload, dict) and isinstance(payload.get("results"), list):
        entries = payload["results"]
    elif isinstance(payload, list):
        entries = payload
    else:
        return ReaderResult.absent("alerts", f"{path}: expected a list of alerts")

    alerts: list[Alert] = []
    errors: list[str] = []
    for idx, entry in enumerate(entries):
        try:
            alerts.append(Alert.from_dict(entry))
        except ValueError as exc:
            logger.debug("skipping alert #%d in %s: %s", idx, path, exc)
            errors.append(f"#{idx}: {exc}")
    return ReaderResult(source="alerts", value=alerts, errors=errors)
