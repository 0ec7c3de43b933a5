"""Tab expansion and character/display column mapping.

``column_to_display`` and ``display_to_column`` walk the same tab rule, so
they stay exact inverses for every valid character column.
"""

from __future__ import annotations

TAB_STOP = 8


def expand_tabs(chars: str, tab_stop: int = TAB_STOP) -> str:
    """Return ``chars`` with each tab padded with spaces to the next stop."""
    if "\t" not in chars:
        return chars
    out: list[str] = []
    col = 0
    for ch in chars:
        if ch == "\t":
            width = tab_stop - (col % tab_stop)
            out.append(" " * width)
            col += width
            continue
        out.append(ch)
        col += 1
    return "".join(out)


def column_to_display(chars: str, col: int, tab_stop: int = TAB_STOP) -> int:
    """Map character column ``col`` to its display column."""
    display_col = 0
    for ch in chars[: max(0, col)]:
        if ch == "\t":
            display_col += (tab_stop - 1) - (display_col % tab_stop)
        display_col += 1
    return display_col


def display_to_column(chars: str, display_col: int, tab_stop: int = TAB_STOP) -> int:
    """Map display column ``display_col`` back to a character column.

    A display column that falls inside a tab's expansion maps to the tab
    itself; columns past the rendered end map to ``len(chars)``.
    """
    current = 0
    for col, ch in enumerate(chars):
        if ch == "\t":
            current += (tab_stop - 1) - (current % tab_stop)
        current += 1
        if current > display_col:
            return col
    return len(chars)
