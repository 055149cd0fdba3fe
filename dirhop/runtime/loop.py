"""Main interactive event loop for the directory browser.

Alternates between rendering the navigation state and blocking for one key.
The loop is the only writer of ``NavigationState``; rendering is read-only.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

from ..errors import UnreadableDirectoryError
from ..input import KeyComboBinding, KeyComboRegistry, read_key
from ..input.bindings import (
    ACTION_ABORT,
    ACTION_ASCEND,
    ACTION_DESCEND,
    ACTION_DOWN,
    ACTION_QUIT,
    ACTION_RELOAD,
    ACTION_UP,
    DEFAULT_KEY_BINDINGS,
)
from ..render import DrawInstruction, compose_frame, render, write_frame
from ..ui_theme import UITheme
from .navigation import NavigationState
from .terminal import TerminalController

logger = logging.getLogger(__name__)


class LoopState(enum.Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class LoopResult:
    """Outcome of one browsing session; ``committed_path`` is ``None`` on abort."""

    committed_path: Path | None


class BrowserLoop:
    """Key-to-transition state machine around one ``NavigationState``.

    Terminal I/O is injected so the loop can be driven by tests: ``read_key``
    blocks for the next token, ``draw`` receives each rendered frame, and
    ``terminal_size`` reports ``(rows, columns)`` at render time.
    """

    def __init__(
        self,
        state: NavigationState,
        *,
        read_key: Callable[[], str],
        draw: Callable[[list[DrawInstruction]], None],
        terminal_size: Callable[[], tuple[int, int]],
        key_bindings: Mapping[str, tuple[str, ...]] = DEFAULT_KEY_BINDINGS,
    ) -> None:
        self.state = state
        self.loop_state = LoopState.RUNNING
        self.status_message = ""
        self.committed_path: Path | None = None
        self._read_key = read_key
        self._draw = draw
        self._terminal_size = terminal_size
        self._registry = self._build_registry(key_bindings)

    def _build_registry(self, key_bindings: Mapping[str, tuple[str, ...]]) -> KeyComboRegistry:
        handlers: dict[str, Callable[[], bool | None]] = {
            ACTION_QUIT: self.quit,
            ACTION_ABORT: self.abort,
            ACTION_DOWN: self.state.move_selection_down,
            ACTION_UP: self.state.move_selection_up,
            ACTION_ASCEND: self.state.ascend,
            ACTION_DESCEND: self.state.descend,
            ACTION_RELOAD: self.state.reload,
        }
        registry = KeyComboRegistry()
        owners: dict[str, str] = {}
        # First action to claim a key keeps it, so quit and abort always win.
        for action, handler in handlers.items():
            combos = []
            for key in key_bindings.get(action, DEFAULT_KEY_BINDINGS[action]):
                if key in owners:
                    if owners[key] != action:
                        logger.warning(
                            "Key %r is bound to both %s and %s; keeping %s", key, owners[key], action, owners[key]
                        )
                    continue
                owners[key] = action
                combos.append(key)
            registry.register_binding(KeyComboBinding(combos=tuple(combos), handler=handler))
        return registry

    @property
    def running(self) -> bool:
        return self.loop_state is LoopState.RUNNING

    def quit(self) -> bool:
        self.committed_path = self.state.commit()
        self.loop_state = LoopState.TERMINATED
        logger.info("Committed %s", self.committed_path)
        return True

    def abort(self) -> bool:
        self.committed_path = None
        self.loop_state = LoopState.TERMINATED
        return True

    def render_frame(self) -> None:
        rows, columns = self._terminal_size()
        self._draw(render(self.state, rows, columns, status_message=self.status_message))

    def handle_key(self, key: str) -> bool:
        """Apply one key token; returns whether it was bound to an action.

        An unreadable target directory leaves the state untouched and is shown
        as a status message instead of ending the loop.
        """
        if not self.running:
            return False
        self.status_message = ""
        if key == "":
            logger.info("Input closed; leaving without commit")
            self.abort()
            return True
        try:
            handled = self._registry.dispatch(key)
        except UnreadableDirectoryError as exc:
            logger.warning("Cannot open %s: %s", exc.path, exc.reason)
            self.status_message = f"cannot open {exc.path.name or exc.path}: {exc.reason}"
            return True
        return handled is not None

    def run(self) -> LoopResult:
        while self.running:
            self.render_frame()
            self.handle_key(self._read_key())
        return LoopResult(committed_path=self.committed_path)


def run_main_loop(
    state: NavigationState,
    terminal: TerminalController,
    theme: UITheme,
    key_bindings: Mapping[str, tuple[str, ...]] = DEFAULT_KEY_BINDINGS,
) -> LoopResult:
    """Run the browser on ``terminal`` until quit or abort.

    The terminal is restored on the way out, including when an exception
    escapes the loop.
    """

    def draw(instructions: list[DrawInstruction]) -> None:
        write_frame(terminal.stdout_fd, compose_frame(instructions, theme))

    loop = BrowserLoop(
        state,
        read_key=lambda: read_key(terminal.stdin_fd),
        draw=draw,
        terminal_size=terminal.size,
        key_bindings=key_bindings,
    )
    with terminal.raw_mode():
        return loop.run()


__all__ = [
    "BrowserLoop",
    "LoopResult",
    "LoopState",
    "run_main_loop",
]
