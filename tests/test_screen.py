"""Tests for the double-buffered screen's change-only flushing."""

from __future__ import annotations

import unittest
from unittest import mock

from termwin.terminal.screen import RESET_SGR, ECMA48Screen


class ScreenFlushTests(unittest.TestCase):
    def test_flush_writes_only_changed_cells(self) -> None:
        screen = ECMA48Screen(stdout_fd=1, width=10, height=3)
        screen.put_string(2, 1, "hi", "\x1b[1m")

        with mock.patch("termwin.terminal.screen.os.write") as write_mock:
            screen.flush_physical()
            screen.flush_physical()

        write_mock.assert_called_once()
        payload = write_mock.call_args.args[1].decode("utf-8")
        self.assertEqual(payload, f"\x1b[2;3H{RESET_SGR}\x1b[1mhi{RESET_SGR}")

    def test_changing_one_cell_repositions_cursor_once(self) -> None:
        screen = ECMA48Screen(stdout_fd=1, width=10, height=3)
        screen.put_string(0, 0, "abc")
        screen.render_diff()

        screen.put_char(1, 0, "X")
        self.assertEqual(screen.render_diff(), f"\x1b[1;2H{RESET_SGR}X{RESET_SGR}")

    def test_writes_outside_the_screen_are_clipped(self) -> None:
        screen = ECMA48Screen(stdout_fd=1, width=4, height=2)
        screen.put_string(2, 1, "wxyz")
        screen.put_char(-1, 0, "q")
        screen.put_char(0, 5, "q")

        self.assertEqual(screen.row_text(1), "  wx")
        self.assertEqual(screen.row_text(0), "    ")

    def test_resize_forces_full_repaint(self) -> None:
        screen = ECMA48Screen(stdout_fd=1, width=4, height=2)
        screen.render_diff()

        screen.resize(3, 1)
        diff = screen.render_diff()

        self.assertEqual((screen.width, screen.height), (3, 1))
        self.assertIn("\x1b[1;1H", diff)
        self.assertIn("   ", diff)
        self.assertEqual(screen.render_diff(), "")


if __name__ == "__main__":
    unittest.main()
