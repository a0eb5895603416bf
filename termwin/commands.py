"""Global command identifiers and the shell interface that toggles them.

Windows never mutate menu state directly; they ask the owning shell to enable
or disable the identifiers they declare.
"""

from __future__ import annotations

import enum
from typing import Protocol


class Command(enum.Enum):
    CUT = "cut"
    TABLE_VIEW_ROW_LABELS = "table.view.row_labels"
    TABLE_VIEW_COLUMN_LABELS = "table.view.column_labels"
    TABLE_VIEW_HIGHLIGHT_ROW = "table.view.highlight_row"
    TABLE_VIEW_HIGHLIGHT_COLUMN = "table.view.highlight_column"
    TABLE_BORDER_NONE = "table.border.none"
    TABLE_BORDER_ALL = "table.border.all"
    TABLE_BORDER_LEFT = "table.border.left"
    TABLE_BORDER_RIGHT = "table.border.right"
    TABLE_BORDER_TOP = "table.border.top"
    TABLE_BORDER_BOTTOM = "table.border.bottom"
    TABLE_BORDER_DOUBLE_BOTTOM = "table.border.double_bottom"
    TABLE_BORDER_THICK_BOTTOM = "table.border.thick_bottom"
    TABLE_DELETE_LEFT = "table.delete.left"
    TABLE_DELETE_UP = "table.delete.up"
    TABLE_DELETE_ROW = "table.delete.row"
    TABLE_DELETE_COLUMN = "table.delete.column"
    TABLE_INSERT_LEFT = "table.insert.left"
    TABLE_INSERT_RIGHT = "table.insert.right"
    TABLE_INSERT_ABOVE = "table.insert.above"
    TABLE_INSERT_BELOW = "table.insert.below"
    TABLE_COLUMN_NARROW = "table.column.narrow"
    TABLE_COLUMN_WIDEN = "table.column.widen"
    TABLE_FILE_SAVE_CSV = "table.file.save_csv"
    TABLE_FILE_SAVE_TEXT = "table.file.save_text"


class CommandShell(Protocol):
    """Owner of global command state, normally the ``Application``."""

    def enable_command(self, command: Command) -> None: ...

    def disable_command(self, command: Command) -> None: ...

    def is_command_enabled(self, command: Command) -> bool: ...


__all__ = ["Command", "CommandShell"]
