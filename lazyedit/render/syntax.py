"""Per-character highlight tagging for rendered lines."""

from __future__ import annotations

import enum

SEPARATORS = frozenset(",.()+-/*=~%<>[];")


class Highlight(enum.IntEnum):
    NORMAL = 0
    NUMBER = 1
    MATCH = 2


# SGR foreground codes used by the frame composer.
HIGHLIGHT_COLORS: dict[Highlight, int] = {
    Highlight.NUMBER: 31,
    Highlight.MATCH: 34,
}
DEFAULT_COLOR = 37


def is_separator(ch: str) -> bool:
    return ch.isspace() or ch == "\0" or ch in SEPARATORS


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def highlight_color(tag: Highlight) -> int:
    return HIGHLIGHT_COLORS.get(tag, DEFAULT_COLOR)


def tag_render(render: str) -> list[Highlight]:
    """Classify each display character in one left-to-right pass.

    A digit is a number when it follows a separator or another number. A
    ``.`` only continues a number; it never starts one.
    """
    tags: list[Highlight] = []
    prev_sep = True
    prev_tag = Highlight.NORMAL
    for ch in render:
        if (_is_digit(ch) and (prev_sep or prev_tag == Highlight.NUMBER)) or (
            ch == "." and prev_tag == Highlight.NUMBER
        ):
            tags.append(Highlight.NUMBER)
            prev_tag = Highlight.NUMBER
            prev_sep = False
            continue
        tags.append(Highlight.NORMAL)
        prev_tag = Highlight.NORMAL
        prev_sep = is_separator(ch)
    return tags
