"""Main interactive event loop for the editor.

One blocking-with-timeout read drives each iteration: read, dispatch,
scroll, and redraw with a single write when something changed.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, replace

from ..input import KeyReader, handle_key
from ..render.frame import compose_frame
from ..state import EditorState
from ..viewport import scroll_to_cursor, text_rows_for_terminal
from .geometry import direct_window_size
from .terminal import TerminalController

CLEAR_SCREEN = "\x1b[2J\x1b[H"


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    input_timeout_ms: int = 100


def apply_window_size(state: EditorState, rows: int, cols: int) -> None:
    """Resize the text window for a ``rows`` x ``cols`` terminal."""
    text_rows = text_rows_for_terminal(rows)
    cols = max(1, cols)
    if state.viewport.rows == text_rows and state.viewport.cols == cols:
        return
    state.viewport = replace(state.viewport, rows=text_rows, cols=cols)
    state.dirty = True


def prepare_frame(state: EditorState, now: float) -> None:
    """Expire the status message and scroll the cursor into view."""
    if state.status_message and now >= state.status_message_until:
        state.status_message = ""
        state.status_message_until = 0.0
        state.dirty = True
    state.clamp_cursor()
    scrolled = scroll_to_cursor(state.viewport, state.cursor_line, state.cursor_display_col())
    if scrolled != state.viewport:
        state.viewport = scrolled
        state.dirty = True


def run_main_loop(
    state: EditorState,
    terminal: TerminalController,
    reader: KeyReader,
    timing: RuntimeLoopTiming,
) -> None:
    """Run until a quit key is accepted.

    Must be called inside ``terminal.raw_mode()``.
    """
    while True:
        size = direct_window_size(terminal.stdout_fd)
        if size is not None:
            apply_window_size(state, *size)
        now = time.monotonic()
        prepare_frame(state, now)
        if state.dirty:
            terminal.write(compose_frame(state, now))
            state.dirty = False

        key = reader.read_key(timeout_ms=timing.input_timeout_ms)
        if not key:
            continue
        if handle_key(state, key):
            terminal.write(CLEAR_SCREEN)
            return
