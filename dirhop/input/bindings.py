"""Action names and their default key tokens."""

from __future__ import annotations

import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)

ACTION_QUIT = "quit"
ACTION_ABORT = "abort"
ACTION_DOWN = "down"
ACTION_UP = "up"
ACTION_ASCEND = "ascend"
ACTION_DESCEND = "descend"
ACTION_RELOAD = "reload"

ACTIONS: tuple[str, ...] = (
    ACTION_QUIT,
    ACTION_ABORT,
    ACTION_DOWN,
    ACTION_UP,
    ACTION_ASCEND,
    ACTION_DESCEND,
    ACTION_RELOAD,
)

DEFAULT_KEY_BINDINGS: dict[str, tuple[str, ...]] = {
    ACTION_QUIT: ("q",),
    ACTION_ABORT: ("CTRL_C",),
    ACTION_DOWN: ("j", "DOWN"),
    ACTION_UP: ("k", "UP"),
    ACTION_ASCEND: ("h", "LEFT", "BACKSPACE"),
    ACTION_DESCEND: ("l", "RIGHT", "ENTER"),
    ACTION_RELOAD: ("r",),
}


def merge_key_bindings(overrides: Mapping[str, object] | None) -> dict[str, tuple[str, ...]]:
    """Apply per-action overrides on top of the defaults.

    An override replaces the default keys for its action. Unknown actions,
    non-list values, and non-string or empty tokens are ignored; an action
    left with no valid tokens keeps its defaults.
    """
    merged = dict(DEFAULT_KEY_BINDINGS)
    if not overrides:
        return merged
    for action, raw_keys in overrides.items():
        if action not in ACTIONS:
            logger.warning("Ignoring key bindings for unknown action %r", action)
            continue
        if not isinstance(raw_keys, (list, tuple)):
            continue
        keys = tuple(key for key in raw_keys if isinstance(key, str) and key)
        if keys:
            merged[action] = keys
    return merged


__all__ = [
    "ACTIONS",
    "ACTION_ABORT",
    "ACTION_ASCEND",
    "ACTION_DESCEND",
    "ACTION_DOWN",
    "ACTION_QUIT",
    "ACTION_RELOAD",
    "ACTION_UP",
    "DEFAULT_KEY_BINDINGS",
    "merge_key_bindings",
]
