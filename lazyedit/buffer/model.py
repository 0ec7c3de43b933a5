"""Line buffer with structural edit operations and a dirty counter.

Every operation returns ``True`` when it changed the buffer and ``False``
when the arguments were out of range, instead of raising. These methods are
the only place ``Line.chars`` is rewritten.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from ..render.tabs import TAB_STOP
from .line import Line


class Buffer:
    def __init__(
        self,
        lines: Iterable[str] = (),
        path: Path | None = None,
        tab_stop: int = TAB_STOP,
    ) -> None:
        self.tab_stop = tab_stop
        self.path = path
        self.lines: list[Line] = [Line(text, tab_stop) for text in lines]
        self.dirty = 0

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __getitem__(self, index: int) -> Line:
        return self.lines[index]

    @property
    def num_lines(self) -> int:
        return len(self.lines)

    def line_length(self, index: int) -> int:
        """Return the length of line ``index``; the virtual last line is empty."""
        if 0 <= index < len(self.lines):
            return len(self.lines[index])
        return 0

    def load_lines(self, lines: Iterable[str], path: Path | None = None) -> None:
        self.lines = [Line(text, self.tab_stop) for text in lines]
        if path is not None:
            self.path = path
        self.dirty = 0

    def mark_saved(self) -> None:
        self.dirty = 0

    def insert_line(self, at: int, content: str = "") -> bool:
        at = max(0, min(at, len(self.lines)))
        self.lines.insert(at, Line(content, self.tab_stop))
        self.dirty += 1
        return True

    def delete_line(self, at: int) -> bool:
        if not 0 <= at < len(self.lines):
            return False
        del self.lines[at]
        self.dirty += 1
        return True

    def insert_char(self, line: int, col: int, ch: str) -> bool:
        if not 0 <= line <= len(self.lines):
            return False
        if line == len(self.lines):
            self.insert_line(len(self.lines), "")
        row = self.lines[line]
        if not 0 <= col <= len(row.chars):
            col = len(row.chars)
        row.chars = row.chars[:col] + ch + row.chars[col:]
        row.update()
        self.dirty += 1
        return True

    def delete_char(self, line: int, col: int) -> bool:
        """Delete the character before ``col``, joining lines at column 0."""
        if not 0 <= line < len(self.lines):
            return False
        if line == 0 and col <= 0:
            return False
        row = self.lines[line]
        if col > 0:
            col = min(col, len(row.chars))
            row.chars = row.chars[: col - 1] + row.chars[col:]
            row.update()
            self.dirty += 1
            return True
        prev = self.lines[line - 1]
        prev.chars += row.chars
        prev.update()
        self.dirty += 1
        self.delete_line(line)
        return True

    def split_line(self, line: int, col: int) -> bool:
        if not 0 <= line <= len(self.lines):
            return False
        if line == len(self.lines):
            return self.insert_line(line, "")
        row = self.lines[line]
        col = max(0, min(col, len(row.chars)))
        if col == 0:
            return self.insert_line(line, "")
        self.insert_line(line + 1, row.chars[col:])
        row.chars = row.chars[:col]
        row.update()
        return True

    def to_text(self) -> str:
        return "".join(f"{row.chars}\n" for row in self.lines)
