"""Terminal control helpers for the editor session.

Owns the raw-mode lifecycle and alternate-screen switching, plus the single
batched write used for every frame.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

from ..errors import FatalSystemError


class TerminalController:
    """Manage terminal mode transitions for one editing session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise FatalSystemError("tcgetattr", exc) from exc

    def enable_tui_mode(self) -> None:
        """Enter raw mode on the alternate screen."""
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        except termios.error as exc:
            raise FatalSystemError("tcsetattr", exc) from exc
        os.write(self.stdout_fd, b"\x1b[?1049h")

    def disable_tui_mode(self) -> None:
        """Show the cursor, leave the alternate screen, restore tty settings."""
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        except termios.error as exc:
            raise FatalSystemError("tcsetattr", exc) from exc

    def write(self, payload: str) -> None:
        """Write one composed frame in a single call."""
        os.write(self.stdout_fd, payload.encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
