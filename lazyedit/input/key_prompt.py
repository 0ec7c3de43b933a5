"""Message-line prompt handling for save-as and search.

A prompt edits a one-line query. Save-as acts only on confirm; search is
re-run after every key through ``SearchController``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

from ..search import SearchController, SearchPhase
from ..state import EditorState
from ..viewport import Viewport
from .key_common import save_buffer

SAVE_AS_TEMPLATE = "Save as: {} (ESC to cancel)"
SEARCH_TEMPLATE = "Search: {} (Use ESC/Arrows/Enter)"

_ERASE_KEYS = frozenset({"BACKSPACE", "DELETE"})


class PromptKind(enum.Enum):
    SAVE_AS = "save_as"
    SEARCH = "search"


class PromptOutcome(enum.Enum):
    EDITING = "editing"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


@dataclass
class PromptSession:
    kind: PromptKind
    template: str
    query: str = ""
    origin_line: int = 0
    origin_col: int = 0
    origin_viewport: Viewport | None = None

    def text(self) -> str:
        return self.template.format(self.query)


def edit_query(query: str, key: str) -> tuple[str, PromptOutcome]:
    """Apply one key to a prompt query.

    ENTER only confirms a non-empty query; unknown keys leave it unchanged.
    """
    if key in _ERASE_KEYS:
        return query[:-1], PromptOutcome.EDITING
    if key == "ESC":
        return query, PromptOutcome.CANCELLED
    if key == "ENTER":
        return query, PromptOutcome.CONFIRMED if query else PromptOutcome.EDITING
    if len(key) == 1 and key.isprintable():
        return query + key, PromptOutcome.EDITING
    return query, PromptOutcome.EDITING


def open_save_as_prompt(state: EditorState) -> None:
    state.prompt = PromptSession(PromptKind.SAVE_AS, SAVE_AS_TEMPLATE)
    state.dirty = True


def open_search_prompt(state: EditorState) -> None:
    """Start a search session remembering where the cursor was."""
    state.prompt = PromptSession(
        PromptKind.SEARCH,
        SEARCH_TEMPLATE,
        origin_line=state.cursor_line,
        origin_col=state.cursor_col,
        origin_viewport=state.viewport,
    )
    controller = SearchController()
    controller.begin()
    state.search = controller
    state.dirty = True


def _close_prompt(state: EditorState) -> None:
    state.prompt = None
    state.dirty = True


def _handle_search_key(state: EditorState, session: PromptSession, key: str, outcome: PromptOutcome) -> None:
    controller = state.search
    if controller is None:
        _close_prompt(state)
        return
    if outcome == PromptOutcome.EDITING:
        controller.handle_key(state, key, session.query)
        return

    phase = SearchPhase.CONFIRMED if outcome == PromptOutcome.CONFIRMED else SearchPhase.CANCELLED
    controller.finish(state, phase)
    state.search = None
    _close_prompt(state)
    if phase == SearchPhase.CANCELLED:
        state.cursor_line = session.origin_line
        state.cursor_col = session.origin_col
        if session.origin_viewport is not None:
            state.viewport = session.origin_viewport


def _handle_save_as_key(state: EditorState, session: PromptSession, outcome: PromptOutcome) -> None:
    if outcome == PromptOutcome.EDITING:
        return
    _close_prompt(state)
    if outcome == PromptOutcome.CANCELLED:
        state.show_message("Save aborted")
        return
    state.buffer.path = Path(session.query)
    save_buffer(state)


def handle_prompt_key(state: EditorState, key: str) -> None:
    """Route one key to the open prompt."""
    session = state.prompt
    if session is None:
        return
    session.query, outcome = edit_query(session.query, key)
    state.dirty = True
    if session.kind == PromptKind.SEARCH:
        _handle_search_key(state, session, key, outcome)
    else:
        _handle_save_as_key(state, session, outcome)
