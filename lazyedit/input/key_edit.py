"""Editing-mode keyboard handling.

Maps key tokens to buffer edits and cursor motion. Cursor column updates
live here; the buffer itself only knows about line/column arguments.
"""

from __future__ import annotations

from ..state import EditorState
from .key_common import save_buffer
from .key_prompt import open_save_as_prompt, open_search_prompt

ARROW_KEYS = frozenset({"UP", "DOWN", "LEFT", "RIGHT"})
IGNORED_KEYS = frozenset({"CTRL_L", "ESC", ""})


def move_cursor(state: EditorState, key: str) -> None:
    """Move one step, wrapping across line ends, then clamp the column."""
    buffer = state.buffer
    on_line = state.cursor_line < buffer.num_lines
    if key == "LEFT":
        if state.cursor_col > 0:
            state.cursor_col -= 1
        elif state.cursor_line > 0:
            state.cursor_line -= 1
            state.cursor_col = buffer.line_length(state.cursor_line)
    elif key == "RIGHT":
        if on_line and state.cursor_col < buffer.line_length(state.cursor_line):
            state.cursor_col += 1
        elif on_line:
            state.cursor_line += 1
            state.cursor_col = 0
    elif key == "UP":
        if state.cursor_line > 0:
            state.cursor_line -= 1
    elif key == "DOWN":
        if state.cursor_line < buffer.num_lines:
            state.cursor_line += 1
    state.clamp_cursor()


def page_cursor(state: EditorState, key: str) -> None:
    """Jump to the screen edge, then move a full screen in that direction."""
    rows = state.viewport.rows
    if key == "PAGE_UP":
        state.cursor_line = state.viewport.row_offset
        step = "UP"
    else:
        state.cursor_line = min(state.viewport.row_offset + rows - 1, state.buffer.num_lines)
        step = "DOWN"
    state.clamp_cursor()
    for _ in range(rows):
        move_cursor(state, step)


def insert_char(state: EditorState, ch: str) -> None:
    state.buffer.insert_char(state.cursor_line, state.cursor_col, ch)
    state.cursor_col += 1


def insert_newline(state: EditorState) -> None:
    state.buffer.split_line(state.cursor_line, state.cursor_col)
    state.cursor_line += 1
    state.cursor_col = 0


def delete_char(state: EditorState) -> None:
    """Backspace: remove the character before the cursor or join lines."""
    line, col = state.cursor_line, state.cursor_col
    if line >= state.buffer.num_lines or (line == 0 and col == 0):
        return
    joined_col = state.buffer.line_length(line - 1) if col == 0 else col - 1
    if not state.buffer.delete_char(line, col):
        return
    if col == 0:
        state.cursor_line -= 1
    state.cursor_col = joined_col


def save(state: EditorState) -> None:
    if state.buffer.path is None:
        open_save_as_prompt(state)
        return
    save_buffer(state)


def request_quit(state: EditorState) -> bool:
    """Return ``True`` once quitting is allowed.

    A dirty buffer needs ``quit_times`` extra consecutive presses.
    """
    if state.buffer.dirty and state.quit_remaining > 0:
        state.show_message(
            "WARNING!!! File has unsaved changes. "
            f"Press Ctrl-Q {state.quit_remaining} more times to quit."
        )
        state.quit_remaining -= 1
        return False
    return True


def handle_edit_key(state: EditorState, key: str) -> bool:
    """Handle one editing key and return ``True`` when the editor should quit."""
    if key == "CTRL_Q":
        return request_quit(state)

    if key == "ENTER":
        insert_newline(state)
    elif key == "CTRL_S":
        save(state)
    elif key == "CTRL_F":
        open_search_prompt(state)
    elif key == "HOME":
        state.cursor_col = 0
    elif key == "END":
        state.cursor_col = state.current_line_length()
    elif key == "BACKSPACE":
        delete_char(state)
    elif key == "DELETE":
        if state.cursor_line < state.buffer.num_lines:
            move_cursor(state, "RIGHT")
            delete_char(state)
    elif key in {"PAGE_UP", "PAGE_DOWN"}:
        page_cursor(state, key)
    elif key in ARROW_KEYS:
        move_cursor(state, key)
    elif key == "TAB":
        insert_char(state, "\t")
    elif key in IGNORED_KEYS or key.startswith("CTRL_"):
        pass
    elif len(key) == 1 and key.isprintable():
        insert_char(state, key)

    state.quit_remaining = state.settings.quit_times
    state.dirty = True
    return False
