"""Widget tree: base widget, windows, scrollers, and the table window."""

from .scrollable import ScrollableWindow
from .scroller import HScroller, Scroller, VScroller
from .table import TableWidget, column_label
from .table_window import FOCUS_COMMANDS, TableWindow
from .widget import Widget
from .window import Window

__all__ = [
    "FOCUS_COMMANDS",
    "HScroller",
    "ScrollableWindow",
    "Scroller",
    "TableWidget",
    "TableWindow",
    "VScroller",
    "Widget",
    "Window",
    "column_label",
]
