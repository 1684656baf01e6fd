"""Agent discovery card collector."""

from __future__ import annotations

import logging
from pathlib import Path

from a2a_tui.collectors import a2a_root, read_json
from a2a_tui.models import AgentCard, ReaderResult

logger = logging.getLogger(__name__)


def collect(project_root: Path, a2a_dir: str = ".a2a") -> ReaderResult[list[AgentCard]]:
    discovery = a2a_root(project_root, a2a_dir) / "discovery"
    if not discovery.is_dir():
        return ReaderResult.absent("agents", f"{discovery}: not a directory")

    cards: list[AgentCard] = []
    errors: list[str] = []
    try:
        paths = sorted(p for p in discovery.glob("*.json") if p.is_file())
    except OSError as exc:
        return ReaderResult.absent("agents", f"{discovery}: {exc}")

    for path in paths:
        loaded = read_json(path, "agents")
        if not loaded.present:
            errors.extend(loaded.errors)
            continue
        try:
            cards.append(AgentCard.from_dict(loaded.value))
        except ValueError as exc:
            logger.debug("skipping agent card %s: %s", path, exc)
            errors.append(f"{path.name}: {exc}")

    return ReaderResult(source="agents", value=cards, errors=errors)
