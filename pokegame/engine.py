"""Terminal helpers: ANSI escape codes, key decoding and the timed input loop."""

from __future__ import annotations

import os
import sys
import time
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, TextIO

try:
    import fcntl
    import termios
except ImportError:  # not a POSIX system
    fcntl = None
    termios = None

KEY_UP = 256
KEY_DOWN = 257
KEY_LEFT = 258
KEY_RIGHT = 259

ANSI_COLOR_BLACK = "\x1b[30m"
ANSI_COLOR_RED = "\x1b[31m"
ANSI_COLOR_GREEN = "\x1b[32m"
ANSI_COLOR_YELLOW = "\x1b[33m"
ANSI_COLOR_BLUE = "\x1b[34m"
ANSI_COLOR_MAGENTA = "\x1b[35m"
ANSI_COLOR_CYAN = "\x1b[36m"
ANSI_COLOR_WHITE = "\x1b[37m"
ANSI_COLOR_BOLD = "\x1b[1m"
ANSI_COLOR_RESET = "\x1b[0m"

ANSI_BG_RED = "\x1b[41m"
ANSI_BG_GREEN = "\x1b[42m"
ANSI_BG_YELLOW = "\x1b[43m"
ANSI_BG_BLUE = "\x1b[44m"
ANSI_BG_MAGENTA = "\x1b[45m"
ANSI_BG_CYAN = "\x1b[46m"
ANSI_BG_WHITE = "\x1b[47m"
ANSI_BG_RESET = "\x1b[0m"

ANSI_CLEAR_SCREEN = "\x1b[2J"
ANSI_CURSOR_HOME = "\x1b[H"
ANSI_RESET_SCREEN = "\x1b[2J\x1b[H"
ANSI_HIDE_CURSOR = "\x1b[?25l"
ANSI_SHOW_CURSOR = "\x1b[?25h"

TICK_SECONDS = 0.2
_READ_SIZE = 20
_ESC = 27
_BRACKET = 91
_ARROWS = {65: KEY_UP, 66: KEY_DOWN, 67: KEY_RIGHT, 68: KEY_LEFT}


def decode_key(data: bytes) -> int:
    """Turn raw bytes read from the terminal into a key code.

    Arrow escape sequences map to the KEY_* codes; anything else yields the
    first byte. No input yields 0.
    """
    if not data:
        return 0
    if len(data) >= 3 and data[0] == _ESC and data[1] == _BRACKET:
        arrow = _ARROWS.get(data[2])
        if arrow is not None:
            return arrow
    return data[0]


def _emit(text: str, out: Optional[TextIO]) -> None:
    (out if out is not None else sys.stdout).write(text)


def clear_screen(out: Optional[TextIO] = None) -> None:
    """Clear the screen and move the cursor home."""
    _emit(ANSI_RESET_SCREEN, out)


def hide_cursor(out: Optional[TextIO] = None) -> None:
    """Hide the terminal cursor."""
    _emit(ANSI_HIDE_CURSOR, out)


def show_cursor(out: Optional[TextIO] = None) -> None:
    """Show the terminal cursor."""
    _emit(ANSI_SHOW_CURSOR, out)


@contextmanager
def raw_terminal() -> Iterator[None]:
    """Put stdin in non-canonical, no-echo, non-blocking mode for the block."""
    if termios is None or fcntl is None:
        raise OSError("raw terminal mode needs a POSIX terminal")
    fd = sys.stdin.fileno()
    saved = None
    if os.isatty(fd):
        saved = termios.tcgetattr(fd)
        changed = termios.tcgetattr(fd)
        changed[3] &= ~(termios.ICANON | termios.ECHO)
        termios.tcsetattr(fd, termios.TCSANOW, changed)
    flags = fcntl.fcntl(fd, fcntl.F_GETFL)
    fcntl.fcntl(fd, fcntl.F_SETFL, flags | os.O_NONBLOCK)
    try:
        yield
    finally:
        if saved is not None:
            termios.tcsetattr(fd, termios.TCSANOW, saved)
        fcntl.fcntl(fd, fcntl.F_SETFL, flags)


def read_key() -> int:
    """Read whatever key is pending on stdin, or 0 if none is."""
    try:
        data = os.read(sys.stdin.fileno(), _READ_SIZE)
    except (BlockingIOError, InterruptedError):
        return 0
    return decode_key(data)


def game_loop(callback: Callable[[int], object]) -> None:
    """Call ``callback`` with the pressed key about five times a second.

    The loop ends when the callback returns a true value.
    """
    with raw_terminal():
        while True:
            time.sleep(TICK_SECONDS)
            if callback(read_key()):
                break