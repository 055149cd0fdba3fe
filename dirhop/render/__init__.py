"""Rendering engine for the directory list view.

Projects navigation state into positioned draw instructions and composes them
into full ANSI frames. Nothing here touches the filesystem or mutates state.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from ..ansi import clip_ansi_line, display_width, printable_text
from ..runtime.navigation import NavigationState
from ..ui_theme import UITheme

STATUS_HINT = "│ q quit"

STYLE_DIRECTORY = "directory"
STYLE_SELECTED = "selected"
STYLE_FILE = "file"
STYLE_STATUS = "status"
STYLE_STATUS_MESSAGE = "status_message"


@dataclass(frozen=True)
class DrawInstruction:
    """One line of text at a 1-based terminal row, tagged with a theme style."""

    row: int
    text: str
    style: str


def directory_label(name: str) -> str:
    return f"/{name}/"


def build_status_line(left_text: str, width: int, right_text: str = STATUS_HINT) -> str:
    """Left-align ``left_text`` and right-align ``right_text`` in ``width - 1`` columns."""
    usable = max(1, width - 1)
    right_width = display_width(right_text)
    if usable <= right_width:
        return right_text[-usable:]
    left = clip_ansi_line(left_text, max(0, usable - right_width - 1))
    gap = " " * (usable - display_width(left) - right_width)
    return f"{left}{gap}{right_text}"


def list_window_start(state: NavigationState, content_rows: int) -> int:
    """Return the first visible list row so the selected directory stays on screen."""
    if content_rows <= 0 or state.selected_entry is None:
        return 0
    return max(0, state.selected_index - content_rows + 1)


def render(
    state: NavigationState,
    rows: int,
    columns: int,
    *,
    status_message: str = "",
) -> list[DrawInstruction]:
    """Project ``state`` onto a ``rows`` x ``columns`` terminal.

    Directory lines come first, then file lines, then one status line pinned
    to the last row. Lines that do not fit are dropped; text is clipped.
    """
    rows = max(1, rows)
    line_width = max(1, columns - 1)
    content_rows = rows - 1
    snapshot = state.snapshot

    lines: list[tuple[str, str]] = []
    has_selection = state.selected_entry is not None
    for idx, entry in enumerate(snapshot.subdirectories):
        style = STYLE_SELECTED if has_selection and idx == state.selected_index else STYLE_DIRECTORY
        lines.append((directory_label(printable_text(entry.name)), style))
    for name in snapshot.files:
        lines.append((printable_text(name), STYLE_FILE))

    start = list_window_start(state, content_rows)
    out: list[DrawInstruction] = []
    for offset, (text, style) in enumerate(lines[start : start + content_rows]):
        out.append(DrawInstruction(row=offset + 1, text=clip_ansi_line(text, line_width), style=style))

    left_status = printable_text(str(snapshot.path))
    status_style = STYLE_STATUS
    if status_message:
        left_status = f"{left_status}  {printable_text(status_message)}"
        status_style = STYLE_STATUS_MESSAGE
    out.append(DrawInstruction(row=rows, text=build_status_line(left_status, columns), style=status_style))
    return out


def compose_frame(instructions: list[DrawInstruction], theme: UITheme) -> str:
    """Build one full-screen redraw: clear, then position and style every line."""
    out: list[str] = ["\033[H\033[2J"]
    for instruction in instructions:
        out.append(f"\033[{instruction.row};1H")
        style = getattr(theme, instruction.style, "")
        if style:
            out.append(style)
            out.append(instruction.text)
            out.append(theme.reset)
        else:
            out.append(instruction.text)
    return "".join(out)


def write_frame(fd: int, frame: str) -> None:
    data = frame.encode("utf-8", errors="replace")
    while data:
        written = os.write(fd, data)
        data = data[written:]


__all__ = [
    "DrawInstruction",
    "STATUS_HINT",
    "build_status_line",
    "compose_frame",
    "directory_label",
    "list_window_start",
    "render",
    "write_frame",
]
