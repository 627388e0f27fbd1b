"""Single-keypress reader for the terminal frontend.

Arrow keys / WASD move the cursor, Space or Enter anchors and then
commits a selection, and C or Escape cancels it. Reads are polled with a
timeout so the game loop can run its timers between keypresses.
"""

from __future__ import annotations

import os
import sys
from typing import Callable

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    " ": "select",
    "\r": "select",
    "\n": "select",
    "c": "cancel",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
}

# Final byte of ESC [ x (Unix) or of the 0xE0 x prefix pair (Windows).
_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "up",
    "P": "down",
    "M": "right",
    "K": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch.lower(), "")


def _decode(ch: str, read_next: Callable[[], str]) -> str:
    if ch == "\x1b":
        if read_next() == "[":
            return _ARROW_MAP.get(read_next(), "")
        return "cancel"  # bare Escape
    if ch in ("\x00", "\xe0"):
        return _ARROW_MAP.get(read_next(), "")
    return resolve(ch)


def get_key_timeout(timeout: float) -> str | None:
    """Read one keypress, or return ``None`` after *timeout* seconds.

    Possible return values:
        "up", "down", "left", "right"  — move the cursor
        "select"                       — Space / Enter
        "cancel"                       — c / Escape
        "quit"                         — q / Ctrl-C
        ""                             — unrecognised key
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time

        end = time.monotonic() + timeout
        while time.monotonic() < end:
            if msvcrt.kbhit():
                return _decode(msvcrt.getwch(), msvcrt.getwch)
            time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def read_next() -> str:
        # os.read is unbuffered, so select() still sees the rest of a
        # multi-byte sequence.
        ready, _, _ = select.select([fd], [], [], 0.1)
        return os.read(fd, 1).decode("utf-8", errors="ignore") if ready else ""

    try:
        tty.setraw(fd)
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None
        return _decode(os.read(fd, 1).decode("utf-8", errors="ignore"), read_next)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def get_key() -> str:
    """Block until a key is pressed; same return values as ``get_key_timeout``."""
    while True:
        key = get_key_timeout(0.5)
        if key is not None:
            return key
