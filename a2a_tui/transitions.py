"""Keyboard actions and the right-panel state machine."""

from __future__ import annotations

from enum import Enum

from a2a_tui.state import AppState, RightPanel


class Action(Enum):
    QUIT = "quit"
    REFRESH = "refresh"
    TOGGLE_PANEL = "toggle_panel"
    SHOW_METRICS = "show_metrics"
    TOGGLE_HELP = "toggle_help"
    NONE = "none"


KEY_BINDINGS: dict[str, Action] = {
    "q": Action.QUIT,
    "\x03": Action.QUIT,
    "r": Action.REFRESH,
    "\t": Action.TOGGLE_PANEL,
    "l": Action.TOGGLE_PANEL,
    "m": Action.SHOW_METRICS,
    "M": Action.SHOW_METRICS,
    "?": Action.TOGGLE_HELP,
}

# (keys, description) in the order the help overlay lists them
HELP_ENTRIES = [
    ("r", "refresh"),
    ("Tab / l", "toggle logs / orchestrator"),
    ("m / M", "metrics panel"),
    ("?", "toggle help"),
    ("q", "quit"),
]

TOGGLE_TRANSITIONS: dict[RightPanel, RightPanel] = {
    RightPanel.ORCHESTRATOR: RightPanel.LOGS,
    RightPanel.LOGS: RightPanel.ORCHESTRATOR,
    RightPanel.METRICS: RightPanel.ORCHESTRATOR,
}


def action_for_key(key: str | None) -> Action:
    if not key:
        return Action.NONE
    return KEY_BINDINGS.get(key, Action.NONE)


def next_panel(panel: RightPanel, action: Action) -> RightPanel:
    if action is Action.TOGGLE_PANEL:
        return TOGGLE_TRANSITIONS[panel]
    if action is Action.SHOW_METRICS:
        return RightPanel.METRICS
    return panel


def apply_action(state: AppState, action: Action) -> Action:
    """Apply the UI part of ``action`` to ``state``.

    Quit and refresh are returned untouched for the event loop to carry out.
    """
    if action is Action.TOGGLE_HELP:
        state.show_help = not state.show_help
    else:
        state.right_panel = next_panel(state.right_panel, action)
    return action


def apply_key(state: AppState, key: str | None) -> Action:
    return apply_action(state, action_for_key(key))
