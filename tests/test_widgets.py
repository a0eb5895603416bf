"""Tests for the scroller and table widgets on their own."""

from __future__ import annotations

import unittest

from termwin.events import KeyPress, MouseAction, MouseKind
from termwin.widgets import TableWidget, VScroller, Widget
from termwin.widgets.table import column_label


def _press(x: int, y: int, **buttons: bool) -> MouseAction:
    return MouseAction.at(MouseKind.DOWN, x, y, **buttons)


class ScrollerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.scroller = VScroller(Widget(None, 0, 0, 10, 30), 0, 0, 22)
        self.scroller.set_range(0, 99)

    def test_value_is_clamped_to_range(self) -> None:
        self.scroller.value = 500
        self.assertEqual(self.scroller.value, 99)
        self.scroller.value = -3
        self.assertEqual(self.scroller.value, 0)

    def test_narrowing_the_range_clamps_the_value(self) -> None:
        self.scroller.value = 80
        self.scroller.set_maximum(40)

        self.assertEqual(self.scroller.value, 40)

    def test_arrows_step_and_trough_pages(self) -> None:
        self.scroller.on_mouse_down(_press(0, 21, button1=True))
        self.assertEqual(self.scroller.value, 1)
        self.scroller.on_mouse_down(_press(0, 0, button1=True))
        self.assertEqual(self.scroller.value, 0)
        self.scroller.on_mouse_down(_press(0, 10, button1=True))
        self.assertEqual(self.scroller.value, 20)

    def test_dragging_the_thumb_tracks_the_pointer(self) -> None:
        self.scroller.on_mouse_down(_press(0, 1, button1=True))
        self.scroller.on_mouse_motion(MouseAction.at(MouseKind.MOTION, 0, 40, button1=True))

        self.assertEqual(self.scroller.value, 99)
        self.assertEqual(self.scroller.thumb_position(), 20)

    def test_scrollers_never_take_keyboard_focus(self) -> None:
        parent = Widget(None, 0, 0, 10, 30)
        VScroller(parent, 0, 0, 10)

        self.assertIsNone(parent.active)


class TableWidgetTests(unittest.TestCase):
    def setUp(self) -> None:
        self.table = TableWidget(None, 0, 0, 38, 20, rows=100, columns=26)

    def test_column_labels(self) -> None:
        self.assertEqual([column_label(i) for i in (0, 25, 26, 27, 701, 702)], ["A", "Z", "AA", "AB", "ZZ", "AAA"])

    def test_navigation_keys_move_selection_and_scroll(self) -> None:
        self.table.on_keypress(KeyPress("END"))
        self.assertEqual(self.table.selected_column, 25)
        self.assertEqual(self.table.visible_column, 24)

        self.table.on_keypress(KeyPress("PGDN"))
        self.assertEqual(self.table.selected_row, 19)
        self.assertEqual(self.table.visible_row, 1)

        self.table.on_keypress(KeyPress("CTRL_HOME"))
        self.assertEqual((self.table.selected_row, self.table.selected_column), (0, 0))
        self.assertEqual((self.table.visible_row, self.table.visible_column), (0, 0))

    def test_selection_stays_inside_the_table(self) -> None:
        self.table.on_keypress(KeyPress("UP"))
        self.table.on_keypress(KeyPress("LEFT"))
        self.assertEqual((self.table.selected_row, self.table.selected_column), (0, 0))

        self.table.on_keypress(KeyPress("CTRL_END"))
        self.table.on_keypress(KeyPress("DOWN"))
        self.assertEqual((self.table.selected_row, self.table.selected_column), (99, 25))

    def test_set_visible_row_clamps_to_maximum_row(self) -> None:
        self.table.set_visible_row(1000)
        self.assertEqual(self.table.visible_row, 99)
        self.table.set_visible_row(-4)
        self.assertEqual(self.table.visible_row, 0)

    def test_clicking_a_label_selects_nothing(self) -> None:
        self.table.on_mouse_down(_press(2, 5, button1=True))

        self.assertEqual((self.table.selected_row, self.table.selected_column), (0, 0))

    def test_narrow_column_stops_at_minimum_width(self) -> None:
        for _ in range(20):
            self.table.narrow_column()

        self.assertEqual(self.table.column_widths[0], 3)


if __name__ == "__main__":
    unittest.main()
