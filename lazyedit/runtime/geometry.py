"""Window size queries with a cursor-position-report fallback.

The direct ``TIOCGWINSZ`` query is preferred. When it fails or reports zero
columns, the cursor is pushed to the bottom-right corner and the terminal is
asked where it ended up.
"""

from __future__ import annotations

import logging
import os
import re
import select

from ..errors import FatalSystemError

logger = logging.getLogger(__name__)

MOVE_FAR_BOTTOM_RIGHT = b"\x1b[999C\x1b[999B"
REQUEST_CURSOR_POSITION = b"\x1b[6n"
REPORT_TIMEOUT_SECONDS = 1.0
MAX_REPORT_BYTES = 32

_REPORT_RE = re.compile(rb"^\x1b\[(\d+);(\d+)R?$")


def parse_cursor_position_report(report: bytes) -> tuple[int, int] | None:
    """Parse ``ESC [ rows ; cols R`` into ``(rows, cols)``."""
    match = _REPORT_RE.match(report)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))


def direct_window_size(fd: int) -> tuple[int, int] | None:
    try:
        size = os.get_terminal_size(fd)
    except OSError:
        return None
    if size.columns == 0:
        return None
    return size.lines, size.columns


def _read_cursor_report(stdin_fd: int) -> bytes:
    data = b""
    while len(data) < MAX_REPORT_BYTES:
        ready, _, _ = select.select([stdin_fd], [], [], REPORT_TIMEOUT_SECONDS)
        if not ready:
            break
        ch = os.read(stdin_fd, 1)
        if not ch:
            break
        data += ch
        if ch == b"R":
            break
    return data


def cursor_report_window_size(stdin_fd: int, stdout_fd: int) -> tuple[int, int] | None:
    try:
        os.write(stdout_fd, MOVE_FAR_BOTTOM_RIGHT + REQUEST_CURSOR_POSITION)
        report = _read_cursor_report(stdin_fd)
    except OSError:
        return None
    return parse_cursor_position_report(report)


def query_window_size(stdin_fd: int, stdout_fd: int) -> tuple[int, int]:
    """Return ``(rows, cols)`` or raise ``FatalSystemError``."""
    size = direct_window_size(stdout_fd)
    if size is None:
        logger.info("direct size query failed; asking terminal for cursor position")
        size = cursor_report_window_size(stdin_fd, stdout_fd)
    if size is None:
        raise FatalSystemError("getWindowSize")
    return size
