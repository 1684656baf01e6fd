"""Dashboard application entrypoint and event loop."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
import time
from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.live import Live

from a2a_tui.config import ConfigError, env_project_root, resolve_settings
from a2a_tui.refresh import RefreshReport, refresh
from a2a_tui.render import render_dashboard
from a2a_tui.state import AppState
from a2a_tui.terminal import KeyInput, TerminalError
from a2a_tui.transitions import Action, apply_key

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: str | None, verbose: bool) -> None:
    package_logger = logging.getLogger("a2a_tui")
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)


def new_state(settings: dict) -> AppState:
    return AppState.with_limits(log_limit=settings["log_limit"], memory_window=settings["memory_window"])


def run_loop(
    state: AppState,
    project_root: Path,
    settings: dict,
    keys,
    draw: Callable[[AppState], None],
    clock: Callable[[], float] = time.monotonic,
) -> int:
    """Draw, wait for one key, apply it; repeat until quit."""
    poll_seconds = settings["poll_ms"] / 1000.0
    auto_refresh = settings["auto_refresh_seconds"]
    refreshed_at = clock()

    while True:
        draw(state)
        action = apply_key(state, keys.poll(poll_seconds))
        if action is Action.QUIT:
            logger.info("quit requested")
            return 0
        if action is Action.REFRESH:
            refresh(state, project_root, settings=settings)
            refreshed_at = clock()
        elif auto_refresh and clock() - refreshed_at >= auto_refresh:
            refresh(state, project_root, settings=settings)
            refreshed_at = clock()


def run_live(console: Console, state: AppState, project_root: Path, settings: dict) -> int:
    with KeyInput() as keys:
        with Live(console=console, screen=True, auto_refresh=False) as live:

            def draw(current: AppState) -> None:
                width, height = console.size
                live.update(render_dashboard(current, width, height, settings), refresh=True)

            try:
                return run_loop(state, project_root, settings, keys, draw)
            except KeyboardInterrupt:
                return 0


def state_to_dict(state: AppState, report: RefreshReport | None = None) -> dict:
    payload = {
        "last_refresh": state.last_refresh.isoformat(),
        "right_panel": state.right_panel.value,
        "selected_index": state.selected_index,
        "agents": [card.to_dict() for card in state.agents.values()],
        "commands": state.commands,
        "logs": list(state.logs),
        "memory_series": list(state.memory_series),
        "alerts": [alert.to_dict() for alert in state.alerts],
    }
    if report is not None:
        payload["refresh"] = report.to_dict()
    return payload


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="A2A agent dashboard")
    parser.add_argument("--root", help="Project root (default: $A2A_DASH_ROOT or current directory)")
    parser.add_argument("--config", default=os.environ.get("A2A_DASH_CONFIG"), help="Optional JSON settings file")
    parser.add_argument("--poll-ms", type=int, help="Keyboard poll timeout in milliseconds")
    parser.add_argument("--auto-refresh", type=int, help="Refresh every N seconds (0 disables)")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--once", action="store_true", help="Print a single snapshot and exit")
    mode.add_argument("--json", action="store_true", help="Emit the refreshed state as JSON")
    parser.add_argument("--log-file", help="Write diagnostics to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = resolve_settings(
            args.config,
            {"poll_ms": args.poll_ms, "auto_refresh_seconds": args.auto_refresh},
        )
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    configure_logging(args.log_file, args.verbose)
    project_root = Path(args.root) if args.root else env_project_root()
    logger.info("starting dashboard for %s", project_root.resolve())

    state = new_state(settings)
    report = refresh(state, project_root, settings=settings)

    if args.json:
        print(json.dumps(state_to_dict(state, report), indent=2))
        return 0

    console = Console()
    if args.once:
        width, height = console.size
        console.print(render_dashboard(state, width, height, settings))
        return 0

    try:
        return run_live(console, state, project_root, settings)
    except TerminalError as exc:
        logger.error("terminal setup failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
