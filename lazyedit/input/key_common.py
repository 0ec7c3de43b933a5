"""Helpers shared by the editing and prompt key handlers."""

from __future__ import annotations

import logging

from ..persistence import save_text
from ..state import EditorState

logger = logging.getLogger(__name__)


def save_buffer(state: EditorState) -> bool:
    """Write the buffer to its path, reporting the result on the message line.

    I/O failures leave the buffer untouched and editing continues.
    """
    path = state.buffer.path
    if path is None:
        return False
    try:
        written = save_text(path, state.buffer.to_text())
    except OSError as exc:
        logger.warning("save to %s failed: %s", path, exc)
        reason = exc.strerror or str(exc)
        state.show_message(f"Can't save! I/O error: {reason}")
        return False
    state.buffer.mark_saved()
    state.show_message(f"{written} bytes written to disk")
    return True
