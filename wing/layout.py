"""Terminal geometry for the two-pane layout.

Both panes share one height; each spends a fixed number of rows on chrome
(border, padding, title, spacer) so the scrollable area is smaller.
"""

from __future__ import annotations

from dataclasses import dataclass

STATUS_BAR_ROWS = 1
PANE_CHROME_ROWS = 6
PANE_CHROME_COLS = 4
MIN_LEFT_WIDTH = 24
MIN_RIGHT_WIDTH = 20


def pane_height(term_height: int) -> int:
    if term_height <= STATUS_BAR_ROWS:
        return 0
    return term_height - STATUS_BAR_ROWS


def visible_rows(height_of_pane: int) -> int:
    """Scrollable rows inside a pane of ``height_of_pane`` rows."""
    return max(0, height_of_pane - PANE_CHROME_ROWS)


def pane_widths(term_width: int) -> tuple[int, int]:
    """Split ``term_width`` into files-pane and content-pane widths."""
    left = max(MIN_LEFT_WIDTH, term_width // 3)
    if left > term_width - MIN_RIGHT_WIDTH:
        left = term_width // 2
    right = max(MIN_RIGHT_WIDTH, term_width - left - 1)
    return left, right


@dataclass(frozen=True)
class PaneLayout:
    width: int
    height: int
    left_width: int
    right_width: int
    pane_height: int
    visible_rows: int

    @classmethod
    def from_terminal(cls, width: int, height: int) -> PaneLayout:
        left, right = pane_widths(width)
        height_of_pane = pane_height(height)
        return cls(
            width=width,
            height=height,
            left_width=left,
            right_width=right,
            pane_height=height_of_pane,
            visible_rows=visible_rows(height_of_pane),
        )

    @property
    def content_width(self) -> int:
        """Text columns available inside the content pane."""
        return max(1, self.right_width - PANE_CHROME_COLS)


__all__ = [
    "MIN_LEFT_WIDTH",
    "MIN_RIGHT_WIDTH",
    "PANE_CHROME_COLS",
    "PANE_CHROME_ROWS",
    "STATUS_BAR_ROWS",
    "PaneLayout",
    "pane_height",
    "pane_widths",
    "visible_rows",
]
