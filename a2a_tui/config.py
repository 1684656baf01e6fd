"""Settings resolution and user config merging for the dashboard."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from a2a_tui.state import LOG_CAPACITY, MEMORY_CAPACITY, QUEUE_LIMIT

DEFAULT_SETTINGS: dict[str, Any] = {
    "title": "lbrxAgents Dashboard",
    "a2a_dir": ".a2a",
    "poll_ms": 100,
    "auto_refresh_seconds": 0,
    "queue_limit": QUEUE_LIMIT,
    "log_limit": LOG_CAPACITY,
    "memory_window": MEMORY_CAPACITY,
}

# key -> lowest accepted value
INT_SETTINGS = {
    "poll_ms": 10,
    "auto_refresh_seconds": 0,
    "queue_limit": 1,
    "log_limit": 1,
    "memory_window": 1,
}
STR_SETTINGS = ("title", "a2a_dir")


class ConfigError(ValueError):
    pass


def env_project_root() -> Path:
    return Path(os.environ.get("A2A_DASH_ROOT", "."))


def load_user_config(path: str | None) -> dict:
    if not path:
        return {}

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"config path not found: {config_path}")

    try:
        payload = json.loads(config_path.read_text())
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON config: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"unreadable config: {exc}") from exc

    if not isinstance(payload, dict):
        raise ConfigError("config must be a JSON object")
    return payload


def _coerce_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be an integer")
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{key} must be an integer") from exc
    return max(INT_SETTINGS[key], number)


def resolve_settings(config_path: str | None = None, overrides: dict | None = None) -> dict:
    """Merge defaults, the optional JSON config file and CLI overrides.

    Later layers win. ``None`` override values are treated as "not given".
    """
    resolved = dict(DEFAULT_SETTINGS)
    layers = [load_user_config(config_path), {k: v for k, v in (overrides or {}).items() if v is not None}]

    for layer in layers:
        for key, value in layer.items():
            if key in INT_SETTINGS:
                resolved[key] = _coerce_int(key, value)
            elif key in STR_SETTINGS:
                if not isinstance(value, str) or not value:
                    raise ConfigError(f"{key} must be a non-empty string")
                resolved[key] = value
            # unknown keys are ignored
    return resolved
