"""Collector helpers and package exports."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from a2a_tui.models import ReaderResult

logger = logging.getLogger(__name__)


def read_json(path: Path, source: str) -> ReaderResult[Any]:
    try:
        return ReaderResult(source=source, value=json.loads(path.read_text(encoding="utf-8")))
    except FileNotFoundError:
        return ReaderResult.absent(source, f"{path}: not found")
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.debug("unreadable %s artifact %s: %s", source, path, exc)
        return ReaderResult.absent(source, f"{path}: {exc}")


def list_files(dir_path: Path, pattern: str = "*") -> list[Path]:
    """Regular files in ``dir_path``, most recently modified first."""
    stamped: list[tuple[float, str, Path]] = []
    try:
        for path in dir_path.glob(pattern):
            try:
                if path.is_file():
                    stamped.append((path.stat().st_mtime, path.name, path))
            except OSError:
                continue
    except OSError:
        return []
    stamped.sort(key=lambda row: (row[0], row[1]), reverse=True)
    return [row[2] for row in stamped]


def a2a_root(project_root: Path, a2a_dir: str = ".a2a") -> Path:
    return project_root / a2a_dir
