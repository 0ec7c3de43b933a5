"""File load/save gateway for buffer contents.

Bytes that are not valid UTF-8 are carried through the buffer as lone
surrogates and written back unchanged. Errors propagate as ``OSError`` so the
calling command can report them.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


def read_text(path: Path) -> str:
    return path.read_bytes().decode(ENCODING, errors=ENCODING_ERRORS)


def split_lines(text: str) -> list[str]:
    """Split file text into line contents without their terminators.

    Only ``\\n`` separates lines; a trailing ``\\r`` is stripped from each one
    and a final terminator does not produce an extra empty line.
    """
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def load_lines(path: Path) -> list[str]:
    lines = split_lines(read_text(path))
    logger.info("loaded %d lines from %s", len(lines), path)
    return lines


def save_text(path: Path, text: str) -> int:
    """Write ``text`` to ``path`` and return the number of bytes written."""
    data = text.encode(ENCODING, errors=ENCODING_ERRORS)
    with open(path, "wb") as handle:
        written = handle.write(data)
    logger.info("wrote %d bytes to %s", written, path)
    return written
