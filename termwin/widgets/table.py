"""Grid of text cells with a selected cell and a scroll origin.

The table reports its extents (``maximum_row``, ``maximum_column``) and its
scroll origin (``visible_row``, ``visible_column``) so an enclosing window can
mirror them on its scrollers. Cell editing is not supported.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..events import KeyPress, MouseAction, Resize
from .widget import Widget

if TYPE_CHECKING:
    from ..terminal.screen import ECMA48Screen
    from ..theme import Theme

DEFAULT_COLUMN_WIDTH = 10
MINIMUM_COLUMN_WIDTH = 3
ROW_LABEL_WIDTH = 6


def column_label(index: int) -> str:
    """Spreadsheet-style column name: 0 -> A, 25 -> Z, 26 -> AA."""
    label = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        label = chr(ord("A") + remainder) + label
    return label


class TableWidget(Widget):
    """Spreadsheet-like view over ``rows`` x ``columns`` string cells."""

    def __init__(
        self,
        parent: Widget,
        x: int,
        y: int,
        width: int,
        height: int,
        *,
        rows: int = 1,
        columns: int = 1,
    ) -> None:
        super().__init__(parent, x, y, width, height)
        rows = max(1, rows)
        columns = max(1, columns)
        self.cells: list[list[str]] = [[""] * columns for _ in range(rows)]
        self.column_widths: list[int] = [DEFAULT_COLUMN_WIDTH] * columns
        self.selected_row = 0
        self.selected_column = 0
        self.top_row = 0
        self.left_column = 0
        self.show_row_labels = True
        self.show_column_labels = True
        self.highlight_row = False
        self.highlight_column = False
        self._dragging = False

    # Extents ---------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return len(self.cells)

    @property
    def column_count(self) -> int:
        return len(self.column_widths)

    @property
    def maximum_row(self) -> int:
        return self.row_count - 1

    @property
    def maximum_column(self) -> int:
        return self.column_count - 1

    @property
    def visible_row(self) -> int:
        return self.top_row

    @property
    def visible_column(self) -> int:
        return self.left_column

    @property
    def dragging(self) -> bool:
        """Whether a button-1 selection drag started on a cell is in progress."""
        return self._dragging

    def set_visible_row(self, row: int) -> None:
        self.top_row = max(0, min(self.maximum_row, row))

    def set_visible_column(self, column: int) -> None:
        self.left_column = max(0, min(self.maximum_column, column))

    # Cells -----------------------------------------------------------------

    def cell_text(self, row: int, column: int) -> str:
        return self.cells[row][column]

    def set_cell_text(self, row: int, column: int, text: str) -> None:
        self.cells[row][column] = text

    def widen_column(self, column: int | None = None) -> None:
        index = self.selected_column if column is None else column
        self.column_widths[index] += 1

    def narrow_column(self, column: int | None = None) -> None:
        index = self.selected_column if column is None else column
        self.column_widths[index] = max(MINIMUM_COLUMN_WIDTH, self.column_widths[index] - 1)

    # Layout ----------------------------------------------------------------

    @property
    def label_width(self) -> int:
        return ROW_LABEL_WIDTH if self.show_row_labels else 0

    @property
    def label_height(self) -> int:
        return 1 if self.show_column_labels else 0

    def visible_row_count(self) -> int:
        return max(1, self.height - self.label_height)

    def visible_column_count(self) -> int:
        """Number of columns, from ``left_column``, that fit fully (at least one)."""
        available = self.width - self.label_width
        count = 0
        for width in self.column_widths[self.left_column:]:
            available -= width + 1
            if available < 0:
                break
            count += 1
        return max(1, count)

    def ensure_selection_visible(self) -> None:
        rows = self.visible_row_count()
        if self.selected_row < self.top_row:
            self.top_row = self.selected_row
        elif self.selected_row >= self.top_row + rows:
            self.top_row = self.selected_row - rows + 1
        if self.selected_column < self.left_column:
            self.left_column = self.selected_column
        else:
            while self.selected_column >= self.left_column + self.visible_column_count():
                self.left_column += 1
        self.set_visible_row(self.top_row)
        self.set_visible_column(self.left_column)

    def select(self, row: int, column: int) -> None:
        self.selected_row = max(0, min(self.maximum_row, row))
        self.selected_column = max(0, min(self.maximum_column, column))
        self.ensure_selection_visible()

    def cell_at(self, x: int, y: int) -> tuple[int, int] | None:
        """Map widget-relative coordinates to ``(row, column)``, if on a cell."""
        if x < self.label_width or y < self.label_height:
            return None
        row = self.top_row + (y - self.label_height)
        if row > self.maximum_row:
            return None
        offset = x - self.label_width
        for column in range(self.left_column, self.column_count):
            span = self.column_widths[column] + 1
            if offset < span:
                return row, column
            offset -= span
        return None

    # Events ----------------------------------------------------------------

    def on_resize(self, event: Resize) -> None:
        super().on_resize(event)
        self.ensure_selection_visible()

    def on_keypress(self, keypress: KeyPress) -> None:
        key = keypress.key
        page = self.visible_row_count()
        if key == "UP":
            self.select(self.selected_row - 1, self.selected_column)
        elif key == "DOWN":
            self.select(self.selected_row + 1, self.selected_column)
        elif key in {"LEFT", "BACKTAB"}:
            self.select(self.selected_row, self.selected_column - 1)
        elif key in {"RIGHT", "TAB"}:
            self.select(self.selected_row, self.selected_column + 1)
        elif key == "PGUP":
            self.select(self.selected_row - page, self.selected_column)
        elif key == "PGDN":
            self.select(self.selected_row + page, self.selected_column)
        elif key == "HOME":
            self.select(self.selected_row, 0)
        elif key == "END":
            self.select(self.selected_row, self.maximum_column)
        elif key == "CTRL_HOME":
            self.select(0, 0)
        elif key == "CTRL_END":
            self.select(self.maximum_row, self.maximum_column)

    def on_mouse_down(self, mouse: MouseAction) -> None:
        if mouse.wheel_up:
            self.set_visible_row(self.top_row - 1)
            return
        if mouse.wheel_down:
            self.set_visible_row(self.top_row + 1)
            return
        if not mouse.button1:
            return
        target = self.cell_at(mouse.x, mouse.y)
        self._dragging = target is not None
        if target is not None:
            self.select(*target)

    def on_mouse_up(self, mouse: MouseAction) -> None:
        self._dragging = False

    def cancel_drag(self) -> None:
        self._dragging = False

    def on_mouse_motion(self, mouse: MouseAction) -> None:
        if not mouse.button1:
            self._dragging = False
            return
        if not self._dragging:
            return
        x = max(self.label_width, min(self.width - 1, mouse.x))
        y = max(self.label_height, min(self.height - 1, mouse.y))
        target = self.cell_at(x, y)
        row, column = target if target is not None else (self.selected_row, self.selected_column)
        # Dragging past an edge scrolls one cell further in that direction.
        if mouse.y < self.label_height:
            row = self.top_row - 1
        elif mouse.y >= self.height:
            row = self.top_row + self.visible_row_count()
        if mouse.x < self.label_width:
            column = self.left_column - 1
        elif mouse.x >= self.width:
            column = self.left_column + self.visible_column_count()
        self.select(row, column)

    # Drawing ---------------------------------------------------------------

    def draw(self, screen: ECMA48Screen, theme: Theme) -> None:
        left = self.absolute_x
        top = self.absolute_y
        right_edge = left + self.width

        def put(x: int, y: int, text: str, attr: str) -> None:
            clipped = text[: max(0, right_edge - x)]
            if clipped:
                screen.put_string(x, y, clipped, attr)

        if self.show_column_labels:
            x = left + self.label_width
            for column in range(self.left_column, self.column_count):
                if x >= right_edge:
                    break
                width = self.column_widths[column]
                put(x, top, column_label(column).center(width) + " ", theme.table_label)
                x += width + 1

        for line in range(self.visible_row_count()):
            row = self.top_row + line
            y = top + self.label_height + line
            if row > self.maximum_row or y >= top + self.height:
                break
            if self.show_row_labels:
                put(left, y, str(row + 1).rjust(self.label_width - 1) + " ", theme.table_label)
            x = left + self.label_width
            for column in range(self.left_column, self.column_count):
                if x >= right_edge:
                    break
                width = self.column_widths[column]
                selected = row == self.selected_row and column == self.selected_column
                highlighted = (self.highlight_row and row == self.selected_row) or (
                    self.highlight_column and column == self.selected_column
                )
                attr = theme.table_cell_selected if selected or highlighted else theme.table_cell
                put(x, y, self.cells[row][column][:width].ljust(width) + " ", attr)
                x += width + 1


__all__ = ["TableWidget", "column_label"]
