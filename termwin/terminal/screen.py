"""Double-buffered cell screen for ECMA-48 terminals.

Widgets draw into the logical buffer; ``flush_physical`` writes only the
cells that differ from what the terminal is known to show.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

RESET_SGR = "\x1b[0m"


@dataclass(frozen=True)
class Cell:
    char: str = " "
    attr: str = ""


BLANK = Cell()


def _blank_rows(width: int, height: int) -> list[list[Cell]]:
    return [[BLANK] * width for _ in range(height)]


class ECMA48Screen:
    """Logical screen synced to a tty through ``flush_physical``."""

    def __init__(self, stdout_fd: int, width: int, height: int) -> None:
        self.stdout_fd = stdout_fd
        self.width = max(1, width)
        self.height = max(1, height)
        self._logical = _blank_rows(self.width, self.height)
        self._physical = _blank_rows(self.width, self.height)

    def resize(self, width: int, height: int) -> None:
        """Change dimensions; the next flush repaints every cell."""
        self.width = max(1, width)
        self.height = max(1, height)
        self._logical = _blank_rows(self.width, self.height)
        self._physical = [[Cell(char="")] * self.width for _ in range(self.height)]

    def clear(self, attr: str = "") -> None:
        cell = Cell(" ", attr)
        self._logical = [[cell] * self.width for _ in range(self.height)]

    def put_char(self, x: int, y: int, char: str, attr: str = "") -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self._logical[y][x] = Cell(char, attr)

    def put_string(self, x: int, y: int, text: str, attr: str = "") -> None:
        for offset, char in enumerate(text):
            self.put_char(x + offset, y, char, attr)

    def row_text(self, y: int) -> str:
        return "".join(cell.char for cell in self._logical[y])

    def clear_physical(self) -> None:
        """Blank the terminal and forget what it was showing."""
        os.write(self.stdout_fd, (RESET_SGR + "\x1b[2J\x1b[H").encode("utf-8"))
        self._physical = _blank_rows(self.width, self.height)

    def render_diff(self) -> str:
        """Return the escape stream that brings the terminal up to date."""
        out: list[str] = []
        current_attr: str | None = None
        for y in range(self.height):
            logical_row = self._logical[y]
            physical_row = self._physical[y]
            cursor_x = -1
            for x in range(self.width):
                cell = logical_row[x]
                if cell == physical_row[x]:
                    continue
                if cursor_x != x:
                    out.append(f"\x1b[{y + 1};{x + 1}H")
                if cell.attr != current_attr:
                    out.append(RESET_SGR + cell.attr)
                    current_attr = cell.attr
                out.append(cell.char)
                physical_row[x] = cell
                cursor_x = x + 1
        if out:
            out.append(RESET_SGR)
        return "".join(out)

    def flush_physical(self) -> None:
        payload = self.render_diff()
        if payload:
            os.write(self.stdout_fd, payload.encode("utf-8"))


__all__ = ["BLANK", "Cell", "ECMA48Screen"]
