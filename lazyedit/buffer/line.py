"""Single editable line with its derived render and highlight forms."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..render.syntax import Highlight, tag_render
from ..render.tabs import TAB_STOP, column_to_display, display_to_column, expand_tabs


@dataclass
class Line:
    """Raw characters plus the display text and tags derived from them.

    ``render`` and ``hl`` are only rebuilt through ``update``; the buffer
    calls it after every change to ``chars``.
    """

    chars: str = ""
    tab_stop: int = TAB_STOP
    render: str = field(default="", init=False)
    hl: list[Highlight] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.update()

    def __len__(self) -> int:
        return len(self.chars)

    def update(self) -> None:
        self.render = expand_tabs(self.chars, self.tab_stop)
        self.hl = tag_render(self.render)

    def display_column(self, col: int) -> int:
        return column_to_display(self.chars, col, self.tab_stop)

    def char_column(self, display_col: int) -> int:
        return display_to_column(self.chars, display_col, self.tab_stop)
