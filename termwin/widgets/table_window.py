"""Window that displays a ``TableWidget`` with border scrollers.

Coordinates the table with the window around it: resizes cascade to the
table before the scroller ranges are recomputed, input goes to the children
first and the scrollers are resynchronized afterwards, and the table command
set follows the window focus.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..commands import Command, CommandShell
from ..events import KeyPress, MouseAction, Resize, ResizeKind
from .scrollable import ScrollableWindow
from .table import TableWidget, column_label

if TYPE_CHECKING:
    from ..terminal.screen import ECMA48Screen
    from ..theme import Theme

MINIMUM_WINDOW_WIDTH = 25
MINIMUM_WINDOW_HEIGHT = 10

FOCUS_COMMANDS: tuple[Command, ...] = (
    Command.CUT,
    Command.TABLE_VIEW_ROW_LABELS,
    Command.TABLE_VIEW_COLUMN_LABELS,
    Command.TABLE_VIEW_HIGHLIGHT_ROW,
    Command.TABLE_VIEW_HIGHLIGHT_COLUMN,
    Command.TABLE_BORDER_NONE,
    Command.TABLE_BORDER_ALL,
    Command.TABLE_BORDER_RIGHT,
    Command.TABLE_BORDER_LEFT,
    Command.TABLE_BORDER_TOP,
    Command.TABLE_BORDER_BOTTOM,
    Command.TABLE_BORDER_DOUBLE_BOTTOM,
    Command.TABLE_BORDER_THICK_BOTTOM,
    Command.TABLE_DELETE_LEFT,
    Command.TABLE_DELETE_UP,
    Command.TABLE_DELETE_ROW,
    Command.TABLE_DELETE_COLUMN,
    Command.TABLE_INSERT_LEFT,
    Command.TABLE_INSERT_RIGHT,
    Command.TABLE_INSERT_ABOVE,
    Command.TABLE_INSERT_BELOW,
    Command.TABLE_COLUMN_NARROW,
    Command.TABLE_COLUMN_WIDEN,
    Command.TABLE_FILE_SAVE_CSV,
    Command.TABLE_FILE_SAVE_TEXT,
)


class TableShell(CommandShell, Protocol):
    screen_width: int
    screen_height: int


class TableWindow(ScrollableWindow):
    """Displays a table in a resizable window centred on the screen."""

    focus_commands = FOCUS_COMMANDS

    def __init__(
        self,
        application: TableShell,
        title: str,
        *,
        rows: int = 50,
        columns: int = 26,
        x: int | None = None,
        y: int | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> None:
        if width is None:
            width = application.screen_width // 2
        if height is None:
            height = application.screen_height // 2 - 2
        super().__init__(
            application,
            title,
            0,
            0,
            width,
            height,
            minimum_width=MINIMUM_WINDOW_WIDTH,
            minimum_height=MINIMUM_WINDOW_HEIGHT,
        )
        self.x = max(0, (application.screen_width - self.width) // 2) if x is None else x
        self.y = max(0, (application.screen_height - self.height) // 2) if y is None else y

        self.table = TableWidget(
            self,
            0,
            0,
            self.interior_width,
            self.interior_height,
            rows=rows,
            columns=columns,
        )
        self.add_scrollers()
        self.sync_scrollers()

    # Focus -----------------------------------------------------------------

    def on_focus(self) -> None:
        for command in self.focus_commands:
            self.application.enable_command(command)

    def on_unfocus(self) -> None:
        for command in self.focus_commands:
            self.application.disable_command(command)

    # Scrollers -------------------------------------------------------------

    def sync_scrollers(self) -> None:
        """Mirror the table's extents and scroll origin on the scrollers."""
        self.top_value = 0
        self.bottom_value = self.table.maximum_row
        self.vertical_value = self.table.visible_row
        self.left_value = 0
        self.right_value = self.table.maximum_column
        self.horizontal_value = self.table.visible_column

    def reflow_data(self) -> None:
        self.sync_scrollers()

    def _apply_scrollers(self) -> None:
        self.table.set_visible_row(self.vertical_value)
        self.table.set_visible_column(self.horizontal_value)

    def _scroll_position(self) -> tuple[int, int]:
        return self.vertical_value, self.horizontal_value

    def _after_mouse(self, before: tuple[int, int]) -> None:
        # The widget handling the gesture decides: a thumb drag drives the
        # table wherever the pointer is, a table drag never yields to the
        # scrollers it crosses.
        scrolled = self._scroll_position() != before
        if self.scroller_dragging() or (scrolled and not self.table.dragging):
            self._apply_scrollers()
        self.sync_scrollers()

    # Events ----------------------------------------------------------------

    def on_resize(self, event: Resize) -> None:
        if event.kind is ResizeKind.WIDGET:
            width, height = self.clamp_size(event.width, event.height)
            self.table.on_resize(Resize(ResizeKind.WIDGET, width - 2, height - 2))
            super().on_resize(Resize(ResizeKind.WIDGET, width, height))
            return

        for child in self.children:
            child.on_resize(event)

    def on_mouse_down(self, mouse: MouseAction) -> None:
        before = self._scroll_position()
        super().on_mouse_down(mouse)
        self._after_mouse(before)

    def on_mouse_up(self, mouse: MouseAction) -> None:
        before = self._scroll_position()
        super().on_mouse_up(mouse)
        self._after_mouse(before)
        # The release may land away from the widget that started a drag.
        self.table.cancel_drag()
        for scroller in (self.h_scroller, self.v_scroller):
            if scroller is not None:
                scroller.cancel_drag()

    def on_mouse_motion(self, mouse: MouseAction) -> None:
        before = self._scroll_position()
        super().on_mouse_motion(mouse)
        self._after_mouse(before)

    def on_keypress(self, keypress: KeyPress) -> None:
        super().on_keypress(keypress)
        self.sync_scrollers()

    def on_command(self, command: Command) -> bool:
        """Apply a view command; return whether it was handled."""
        table = self.table
        if command is Command.TABLE_VIEW_ROW_LABELS:
            table.show_row_labels = not table.show_row_labels
        elif command is Command.TABLE_VIEW_COLUMN_LABELS:
            table.show_column_labels = not table.show_column_labels
        elif command is Command.TABLE_VIEW_HIGHLIGHT_ROW:
            table.highlight_row = not table.highlight_row
        elif command is Command.TABLE_VIEW_HIGHLIGHT_COLUMN:
            table.highlight_column = not table.highlight_column
        elif command is Command.TABLE_COLUMN_NARROW:
            table.narrow_column()
        elif command is Command.TABLE_COLUMN_WIDEN:
            table.widen_column()
        else:
            return False
        table.ensure_selection_visible()
        self.sync_scrollers()
        return True

    def draw(self, screen: ECMA48Screen, theme: Theme) -> None:
        super().draw(screen, theme)
        label = f" {column_label(self.table.selected_column)}{self.table.selected_row + 1} "
        border = theme.window_border_active if self.is_active else theme.window_border
        screen.put_string(self.absolute_x + 2, self.absolute_y + self.height - 1, label[:15], border)


__all__ = [
    "FOCUS_COMMANDS",
    "MINIMUM_WINDOW_HEIGHT",
    "MINIMUM_WINDOW_WIDTH",
    "TableWindow",
]
