"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing through the ``escape`` state machine.
"""

from __future__ import annotations

import os
import select

from ..errors import FatalSystemError
from . import escape

ESC_SEQUENCE_TIMEOUT_MS = 25
MAX_SEQUENCE_BYTES = 32

_NAMED_BYTES = {
    b"\r": "ENTER",
    b"\n": "ENTER",
    b"\t": "TAB",
    b"\x7f": "BACKSPACE",
    b"\x08": "BACKSPACE",
}


def control_key_name(ch: bytes) -> str | None:
    """Return ``CTRL_<letter>`` for control bytes, or ``None`` for others."""
    code = ch[0]
    if ch in _NAMED_BYTES:
        return _NAMED_BYTES[ch]
    if code == 0x1B:
        return escape.ESC
    if code < 0x20:
        return "CTRL_" + chr(code + 0x40)
    return None


class KeyReader:
    """Decode one key token per call from a raw-mode file descriptor."""

    def __init__(self, fd: int, escape_timeout_ms: int = ESC_SEQUENCE_TIMEOUT_MS) -> None:
        self.fd = fd
        self.escape_timeout_ms = escape_timeout_ms
        self._pending: list[bytes] = []

    def _read_byte(self, timeout_ms: int | None) -> bytes | None:
        try:
            if timeout_ms is not None:
                ready, _, _ = select.select([self.fd], [], [], max(0.0, timeout_ms / 1000.0))
                if not ready:
                    return None
            ch = os.read(self.fd, 1)
        except InterruptedError:
            return None
        except OSError as exc:
            raise FatalSystemError("read", exc) from exc
        if not ch:
            return None
        return ch

    def read_key(self, timeout_ms: int | None = None) -> str:
        """Return the next key token, or ``""`` when nothing arrived in time."""
        if self._pending:
            ch = self._pending.pop(0)
        else:
            ch = self._read_byte(timeout_ms)
            if ch is None:
                return ""

        if ch == b"\x1b":
            return self._read_escape_sequence()
        name = control_key_name(ch)
        if name is not None:
            return name
        if ch[0] >= 0x80:
            return self._read_utf8_tail(ch)
        return ch.decode("ascii")

    def _read_escape_sequence(self) -> str:
        state = escape.ESCAPE
        for _ in range(MAX_SEQUENCE_BYTES):
            byte = self._read_byte(self.escape_timeout_ms)
            if byte is None:
                return escape.ESC
            result = escape.step(state, byte)
            if result.push_back:
                self._pending.append(byte)
            if result.key is not None:
                return result.key
            state = result.state
        return escape.ESC

    def _read_utf8_tail(self, lead: bytes) -> str:
        """Collect continuation bytes so a multi-byte character arrives whole."""
        code = lead[0]
        if code >= 0xF0:
            needed = 3
        elif code >= 0xE0:
            needed = 2
        elif code >= 0xC0:
            needed = 1
        else:
            needed = 0
        data = lead
        for _ in range(needed):
            more = self._read_byte(self.escape_timeout_ms)
            if more is None:
                break
            data += more
        return data.decode("utf-8", errors="replace")
