"""Runtime composition layer for lazyedit.

Builds initial state from a file path, enters raw mode, and starts the loop.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ..buffer import Buffer
from ..input import KeyReader
from ..persistence import load_lines
from ..state import EditorState
from .config import EditorSettings
from .geometry import query_window_size
from .loop import RuntimeLoopTiming, apply_window_size, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)

HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-Q = quit | Ctrl-F = find"


def build_state(path: Path | None, settings: EditorSettings) -> EditorState:
    """Create editor state, loading ``path`` when it names an existing file.

    A missing file keeps its name so the first save creates it. A read
    failure starts an unnamed empty buffer and reports the error.
    """
    buffer = Buffer(tab_stop=settings.tab_stop)
    state = EditorState(buffer=buffer, settings=settings)
    message = HELP_MESSAGE
    if path is not None:
        if path.exists():
            try:
                buffer.load_lines(load_lines(path), path=path)
            except OSError as exc:
                logger.warning("open %s failed: %s", path, exc)
                message = f"Can't open! I/O error: {exc.strerror or exc}"
        else:
            buffer.path = path
    state.show_message(message)
    return state


def run_editor(
    path: Path | None,
    settings: EditorSettings,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
) -> None:
    """Open ``path`` and edit it until the user quits.

    Raises ``FatalSystemError`` on terminal failures; the terminal is
    restored before it propagates.
    """
    if stdin_fd is None:
        stdin_fd = sys.stdin.fileno()
    if stdout_fd is None:
        stdout_fd = sys.stdout.fileno()

    state = build_state(path, settings)
    terminal = TerminalController(stdin_fd, stdout_fd)
    reader = KeyReader(stdin_fd)
    with terminal.raw_mode():
        rows, cols = query_window_size(stdin_fd, stdout_fd)
        logger.info("window size %dx%d", rows, cols)
        apply_window_size(state, rows, cols)
        run_main_loop(state, terminal, reader, RuntimeLoopTiming())
