"""Compose one full-screen refresh as a single escape-sequence payload.

Nothing here writes to the terminal. ``compose_frame`` returns the whole
frame so the runtime can emit it with one write.
"""

from __future__ import annotations

import time

from .. import __version__
from ..buffer import Line
from ..state import EditorState
from . import ansi
from .syntax import Highlight, highlight_color

NO_NAME = "[No Name]"
MAX_NAME_CHARS = 20


def welcome_banner(cols: int) -> str:
    """Centered version banner shown on an empty buffer."""
    welcome = f"lazyedit -- version {__version__}"[:cols]
    padding = (cols - len(welcome)) // 2
    if padding:
        return "~" + " " * (padding - 1) + welcome
    return welcome


def draw_line(line: Line, col_offset: int, cols: int) -> str:
    """Draw the visible slice of ``line`` with color changes only at tag edges."""
    visible = line.render[col_offset : col_offset + cols]
    tags = line.hl[col_offset : col_offset + cols]
    out: list[str] = []
    current_color: int | None = None
    for ch, tag in zip(visible, tags):
        if ord(ch) < 0x20 or ch == "\x7f":
            symbol = chr(ord("@") + ord(ch)) if ord(ch) <= 26 else "?"
            out.append(ansi.INVERT + symbol + ansi.RESET)
            if current_color is not None:
                out.append(ansi.foreground(current_color))
            continue
        if tag == Highlight.NORMAL:
            if current_color is not None:
                out.append(ansi.DEFAULT_FOREGROUND)
                current_color = None
            out.append(ch)
            continue
        color = highlight_color(tag)
        if color != current_color:
            current_color = color
            out.append(ansi.foreground(color))
        out.append(ch)
    out.append(ansi.DEFAULT_FOREGROUND)
    return "".join(out)


def draw_rows(state: EditorState) -> list[str]:
    viewport = state.viewport
    buffer = state.buffer
    rows: list[str] = []
    for y in range(viewport.rows):
        file_row = y + viewport.row_offset
        if file_row >= buffer.num_lines:
            if buffer.num_lines == 0 and y == viewport.rows // 3:
                rows.append(welcome_banner(viewport.cols))
            else:
                rows.append("~")
        else:
            rows.append(draw_line(buffer[file_row], viewport.col_offset, viewport.cols))
    return rows


def status_line(state: EditorState) -> str:
    """Inverted bar: name, line count, modified flag, and cursor line."""
    buffer = state.buffer
    cols = state.viewport.cols
    name = buffer.path.name if buffer.path is not None else NO_NAME
    modified = " (modified)" if buffer.dirty else ""
    left = f"{name[:MAX_NAME_CHARS]} - {buffer.num_lines} lines{modified}"[:cols]
    right = f"{state.cursor_line + 1}/{buffer.num_lines}"
    gap = cols - len(left)
    if gap >= len(right):
        body = left + " " * (gap - len(right)) + right
    else:
        body = left + " " * gap
    return ansi.INVERT + body + ansi.RESET


def message_line(state: EditorState, now: float) -> str:
    cols = state.viewport.cols
    if state.prompt is not None:
        return state.prompt.text()[:cols]
    if state.status_message and now < state.status_message_until:
        return state.status_message[:cols]
    return ""


def compose_frame(state: EditorState, now: float | None = None) -> str:
    """Build the complete refresh payload for the current state."""
    if now is None:
        now = time.monotonic()
    out: list[str] = [ansi.HIDE_CURSOR, ansi.CURSOR_HOME]
    for row in draw_rows(state):
        out.append(row)
        out.append(ansi.CLEAR_LINE)
        out.append(ansi.NEWLINE)
    out.append(status_line(state))
    out.append(ansi.CLEAR_LINE)
    out.append(ansi.NEWLINE)
    out.append(message_line(state, now))
    out.append(ansi.CLEAR_LINE)
    row, col = state.viewport.cursor_screen_position(state.cursor_line, state.cursor_display_col())
    out.append(ansi.cursor_position(row, col))
    out.append(ansi.SHOW_CURSOR)
    return "".join(out)
