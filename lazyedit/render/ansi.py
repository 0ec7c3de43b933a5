"""Terminal control sequences used to compose a frame."""

from __future__ import annotations

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CURSOR_HOME = "\x1b[H"
CLEAR_LINE = "\x1b[K"
INVERT = "\x1b[7m"
RESET = "\x1b[m"
DEFAULT_FOREGROUND = "\x1b[39m"
NEWLINE = "\r\n"


def foreground(color: int) -> str:
    return f"\x1b[{color}m"


def cursor_position(row: int, col: int) -> str:
    """Move to 0-based ``(row, col)``; the terminal itself counts from 1."""
    return f"\x1b[{row + 1};{col + 1}H"
