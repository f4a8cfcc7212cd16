from __future__ import annotations

import unittest

from wing.layout import MIN_LEFT_WIDTH, PaneLayout, pane_height, pane_widths, visible_rows


class LayoutTests(unittest.TestCase):
    def test_pane_height_reserves_status_bar(self) -> None:
        self.assertEqual(pane_height(24), 23)
        self.assertEqual(pane_height(1), 0)

    def test_visible_rows_subtracts_chrome(self) -> None:
        self.assertEqual(visible_rows(20), 14)
        self.assertEqual(visible_rows(4), 0)

    def test_left_pane_is_a_third_with_minimum(self) -> None:
        self.assertEqual(pane_widths(120), (40, 79))
        self.assertEqual(pane_widths(60)[0], MIN_LEFT_WIDTH)

    def test_narrow_terminal_splits_in_half(self) -> None:
        left, right = pane_widths(40)
        self.assertEqual(left, 20)
        self.assertEqual(right, 20)

    def test_content_width_excludes_borders_and_padding(self) -> None:
        layout = PaneLayout.from_terminal(120, 40)
        self.assertEqual(layout.content_width, 75)
        self.assertEqual(layout.visible_rows, 33)


if __name__ == "__main__":
    unittest.main()
