"""Keyboard dispatch facade for prompt and editing modes."""

from __future__ import annotations

from ..state import EditorState
from .key_edit import handle_edit_key
from .key_prompt import handle_prompt_key


def handle_key(state: EditorState, key: str) -> bool:
    """Dispatch one decoded key and return ``True`` when the editor should quit."""
    if not key:
        return False
    if state.prompt is not None:
        handle_prompt_key(state, key)
        return False
    return handle_edit_key(state, key)
