"""Incremental search over rendered lines.

``SearchController`` is a small state machine driven one key at a time by
the search prompt. It owns the highlight snapshot of the matched line while
a session is open and always puts it back before moving on or exiting.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from ..buffer import Buffer
from ..render.syntax import Highlight

if TYPE_CHECKING:
    from ..state import EditorState

logger = logging.getLogger(__name__)

FORWARD_KEYS = frozenset({"RIGHT", "DOWN"})
BACKWARD_KEYS = frozenset({"LEFT", "UP"})


class SearchPhase(enum.Enum):
    IDLE = "idle"
    PROMPTING = "prompting"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class SearchController:
    """Search session: last match, direction, and the overlaid line snapshot."""

    def __init__(self) -> None:
        self.phase = SearchPhase.IDLE
        self.last_match: int | None = None
        self.direction = 1
        self._saved_line: int | None = None
        self._saved_hl: list[Highlight] | None = None

    @property
    def active(self) -> bool:
        return self.phase == SearchPhase.PROMPTING

    def begin(self) -> None:
        self.phase = SearchPhase.PROMPTING
        self.last_match = None
        self.direction = 1
        self._saved_line = None
        self._saved_hl = None

    def restore_overlay(self, buffer: Buffer) -> None:
        """Put back the tags that were under the last match highlight."""
        if self._saved_line is not None and self._saved_hl is not None:
            if self._saved_line < buffer.num_lines:
                buffer[self._saved_line].hl = self._saved_hl
        self._saved_line = None
        self._saved_hl = None

    def finish(self, state: EditorState, phase: SearchPhase) -> SearchPhase:
        self.restore_overlay(state.buffer)
        self.last_match = None
        self.direction = 1
        self.phase = phase
        return phase

    def handle_key(self, state: EditorState, key: str, query: str) -> SearchPhase:
        """Advance the session for one prompt key.

        ``query`` is the prompt text after ``key`` was applied to it. Arrow
        keys pick the scan direction; any other key restarts the scan at the
        cursor line going forward.
        """
        self.restore_overlay(state.buffer)
        if key in FORWARD_KEYS:
            self.direction = 1
        elif key in BACKWARD_KEYS:
            self.direction = -1
        else:
            self.last_match = None
            self.direction = 1
        if query:
            self.find_next(state, query)
        return self.phase

    def find_next(self, state: EditorState, query: str) -> int | None:
        """Move the cursor to the next line containing ``query``.

        The scan wraps around both buffer ends and visits every line at most
        once. Returns the matched line index or ``None``.
        """
        buffer = state.buffer
        total = buffer.num_lines
        if total == 0:
            return None
        if self.last_match is None:
            current = min(state.cursor_line, total - 1) - self.direction
        else:
            current = self.last_match
        for _ in range(total):
            current = (current + self.direction) % total
            line = buffer[current]
            match_at = line.render.find(query)
            if match_at < 0:
                continue
            self.last_match = current
            state.cursor_line = current
            state.cursor_col = line.char_column(match_at)
            # Offset past the end makes the next scroll pass snap to the match.
            state.viewport = replace(state.viewport, row_offset=total)
            self._saved_line = current
            self._saved_hl = list(line.hl)
            end = min(len(line.hl), match_at + len(query))
            line.hl[match_at:end] = [Highlight.MATCH] * (end - match_at)
            state.dirty = True
            return current
        logger.debug("no match for %r", query)
        return None
