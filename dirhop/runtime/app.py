"""Browser bootstrap: load the start directory, run the loop, hand off the result.

Owns the controlling-tty file descriptor for the session so stdout stays free
for the committed-path hand-off.
"""

from __future__ import annotations

import logging
import os
import sys
import termios
from collections.abc import Mapping
from pathlib import Path

from ..errors import CommitError, UnreadableDirectoryError
from ..shell import write_committed_path
from ..ui_theme import resolve_theme
from .config import load_key_bindings, load_theme_name
from .loop import run_main_loop
from .navigation import NavigationState
from .terminal import TerminalController

logger = logging.getLogger(__name__)

TTY_PATH = "/dev/tty"
EXIT_OK = 0
EXIT_COMMIT_FAILED = 1
EXIT_ABORTED = 130


def _open_tty() -> int:
    try:
        return os.open(TTY_PATH, os.O_RDWR)
    except OSError as exc:
        raise SystemExit(f"dirhop needs an interactive terminal: {exc}") from exc


def _close_tty(fd: int) -> None:
    os.close(fd)


def run_browser(
    start_path: Path,
    *,
    theme_name: str | None = None,
    no_color: bool = False,
    output_file: Path | None = None,
    key_bindings: Mapping[str, tuple[str, ...]] | None = None,
) -> int:
    """Browse from ``start_path`` and publish the committed directory.

    Returns a process exit status. Startup failures (unreadable start
    directory, no usable terminal) raise ``SystemExit`` before the loop runs.
    """
    try:
        state = NavigationState.open(start_path)
    except UnreadableDirectoryError as exc:
        raise SystemExit(f"Cannot read directory: {exc}") from exc

    theme = resolve_theme(theme_name if theme_name is not None else load_theme_name(), no_color=no_color)
    bindings = key_bindings if key_bindings is not None else load_key_bindings()

    tty_fd = _open_tty()
    try:
        try:
            terminal = TerminalController(tty_fd, tty_fd)
        except termios.error as exc:
            raise SystemExit(f"dirhop needs an interactive terminal: {exc}") from exc
        result = run_main_loop(state, terminal, theme, bindings)
    finally:
        _close_tty(tty_fd)

    if result.committed_path is None:
        return EXIT_ABORTED

    try:
        write_committed_path(result.committed_path, output_file)
    except CommitError as exc:
        logger.error("%s", exc)
        sys.stderr.write(f"dirhop: {exc}\n")
        return EXIT_COMMIT_FAILED
    return EXIT_OK
