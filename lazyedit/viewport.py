"""Scroll offsets that keep the cursor inside the visible text window.

``scroll_to_cursor`` is pure: it takes the previous viewport and returns a
new one, so callers can recompute it every frame without hidden state.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

STATUS_ROWS = 2


@dataclass(frozen=True)
class Viewport:
    row_offset: int = 0
    col_offset: int = 0
    rows: int = 1
    cols: int = 1

    def cursor_screen_position(self, line: int, display_col: int) -> tuple[int, int]:
        """Return the 0-based (row, col) of the cursor relative to the window."""
        return line - self.row_offset, display_col - self.col_offset


def text_rows_for_terminal(term_rows: int) -> int:
    """Rows left for text after the status and message lines."""
    return max(1, term_rows - STATUS_ROWS)


def _follow(offset: int, position: int, visible: int) -> int:
    if position < offset:
        return position
    if position >= offset + visible:
        return position - visible + 1
    return offset


def scroll_to_cursor(viewport: Viewport, line: int, display_col: int) -> Viewport:
    """Snap or advance offsets so ``(line, display_col)`` is visible.

    An offset snaps to the cursor when the cursor sits above or left of the
    window and advances by exactly the overflow when it sits below or right.
    """
    row_offset = _follow(viewport.row_offset, line, max(1, viewport.rows))
    col_offset = _follow(viewport.col_offset, display_col, max(1, viewport.cols))
    if row_offset == viewport.row_offset and col_offset == viewport.col_offset:
        return viewport
    return replace(viewport, row_offset=row_offset, col_offset=col_offset)
