"""Low-level terminal input decoding.

Reads raw bytes from the terminal and translates them into normalized key tokens.
Handles ESC-sequence timing for arrow keys and UTF-8 multibyte characters.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\x04": "CTRL_D",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER",
    b"\n": "ENTER",
}

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _next_byte(fd: int) -> bytes:
    if _PENDING_BYTES:
        return _PENDING_BYTES.pop(0)
    return os.read(fd, 1)


def read_key(fd: int) -> str:
    """Block until one key is available and return its token.

    Returns ``""`` at end of input. Unrecognized escape sequences decode to
    ``"ESC"`` and bytes that are not part of a known sequence are replayed.
    """
    ch = _next_byte(fd)
    if not ch:
        return ""

    control = _CONTROL_KEYS.get(ch)
    if control is not None:
        return control

    if ch != b"\x1b":
        needed = _utf8_length(ch[0]) - 1
        raw = ch
        while needed > 0:
            more = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            if more is None:
                break
            raw += more
            needed -= 1
        return raw.decode("utf-8", errors="replace")

    # Escape / arrow key sequences, both CSI (ESC [) and SS3 (ESC O) forms.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return "ESC"
    final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if final is None:
        return "ESC"
    key = _CSI_FINAL_KEYS.get(final)
    if key is not None:
        return key
    # Drain parameters of unsupported sequences such as ESC [ 3 ~.
    while final is not None and not (0x40 <= final[0] <= 0x7E):
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    return "ESC"
