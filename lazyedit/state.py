"""Aggregate editor state passed explicitly between components."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .buffer import Buffer
from .runtime.config import EditorSettings
from .viewport import Viewport

if TYPE_CHECKING:
    from .input.key_prompt import PromptSession
    from .search import SearchController


@dataclass
class EditorState:
    buffer: Buffer
    settings: EditorSettings = field(default_factory=EditorSettings)
    cursor_line: int = 0
    cursor_col: int = 0
    viewport: Viewport = field(default_factory=Viewport)
    status_message: str = ""
    status_message_until: float = 0.0
    prompt: PromptSession | None = None
    search: SearchController | None = None
    quit_remaining: int = -1
    dirty: bool = True

    def __post_init__(self) -> None:
        if self.quit_remaining < 0:
            self.quit_remaining = self.settings.quit_times

    def current_line_length(self) -> int:
        return self.buffer.line_length(self.cursor_line)

    def cursor_display_col(self) -> int:
        if self.cursor_line < self.buffer.num_lines:
            return self.buffer[self.cursor_line].display_column(self.cursor_col)
        return 0

    def clamp_cursor(self) -> None:
        self.cursor_line = max(0, min(self.cursor_line, self.buffer.num_lines))
        self.cursor_col = max(0, min(self.cursor_col, self.current_line_length()))

    def show_message(self, message: str, now: float | None = None) -> None:
        """Set the transient status message and its expiry time."""
        if now is None:
            now = time.monotonic()
        self.status_message = message
        self.status_message_until = now + self.settings.message_timeout_seconds
        self.dirty = True
