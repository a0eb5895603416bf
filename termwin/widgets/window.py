"""Top-level bordered window.

A window's children are laid out inside its 1-cell border, so the interior
is ``width - 2`` by ``height - 2``. Resizes below the configured minimum are
clamped, never rejected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..events import MouseAction, Resize, ResizeKind
from .widget import Widget

if TYPE_CHECKING:
    from ..commands import CommandShell
    from ..terminal.screen import ECMA48Screen
    from ..theme import Theme

DEFAULT_MINIMUM_WIDTH = 10
DEFAULT_MINIMUM_HEIGHT = 2

_BORDER_SINGLE = ("┌", "┐", "└", "┘", "─", "│")
_BORDER_DOUBLE = ("╔", "╗", "╚", "╝", "═", "║")


class Window(Widget):
    """Bordered rectangle owned by an application shell."""

    interior_offset = 1

    def __init__(
        self,
        application: CommandShell,
        title: str,
        x: int,
        y: int,
        width: int,
        height: int,
        *,
        minimum_width: int = DEFAULT_MINIMUM_WIDTH,
        minimum_height: int = DEFAULT_MINIMUM_HEIGHT,
    ) -> None:
        self.application = application
        self.title = title
        self.minimum_width = max(2, minimum_width)
        self.minimum_height = max(2, minimum_height)
        width, height = self.clamp_size(width, height)
        super().__init__(None, x, y, width, height)

    @property
    def interior_width(self) -> int:
        return self.width - 2

    @property
    def interior_height(self) -> int:
        return self.height - 2

    @property
    def is_active(self) -> bool:
        return getattr(self.application, "active_window", None) is self

    def clamp_size(self, width: int, height: int) -> tuple[int, int]:
        return max(self.minimum_width, width), max(self.minimum_height, height)

    def resize(self, width: int, height: int) -> None:
        """Resize this window as if the user dragged its corner."""
        self.on_resize(Resize(ResizeKind.WIDGET, width, height))

    def on_resize(self, event: Resize) -> None:
        if event.kind is ResizeKind.WIDGET:
            width, height = self.clamp_size(event.width, event.height)
            self.width = width
            self.height = height

    def is_over_content(self, mouse: MouseAction) -> bool:
        """Return whether the pointer is inside the border, on the interior."""
        return (
            self.absolute_x + 1 <= mouse.absolute_x < self.absolute_x + self.width - 1
            and self.absolute_y + 1 <= mouse.absolute_y < self.absolute_y + self.height - 1
        )

    def on_focus(self) -> None:
        """Called when this window becomes the application's active window."""

    def on_unfocus(self) -> None:
        """Called when another window takes the focus."""

    def draw(self, screen: ECMA48Screen, theme: Theme) -> None:
        self.draw_box(screen, theme)
        super().draw(screen, theme)

    def draw_box(self, screen: ECMA48Screen, theme: Theme) -> None:
        active = self.is_active
        top_left, top_right, bottom_left, bottom_right, horizontal, vertical = (
            _BORDER_DOUBLE if active else _BORDER_SINGLE
        )
        border = theme.window_border_active if active else theme.window_border
        left = self.absolute_x
        top = self.absolute_y
        right = left + self.width - 1
        bottom = top + self.height - 1

        for row in range(top + 1, bottom):
            screen.put_string(left + 1, row, " " * max(0, self.width - 2), theme.window_background)
            screen.put_char(left, row, vertical, border)
            screen.put_char(right, row, vertical, border)
        screen.put_string(left + 1, top, horizontal * max(0, self.width - 2), border)
        screen.put_string(left + 1, bottom, horizontal * max(0, self.width - 2), border)
        screen.put_char(left, top, top_left, border)
        screen.put_char(right, top, top_right, border)
        screen.put_char(left, bottom, bottom_left, border)
        screen.put_char(right, bottom, bottom_right, border)

        if self.title and self.width > 6:
            label = f" {self.title} "[: self.width - 4]
            title_x = left + (self.width - len(label)) // 2
            screen.put_string(title_x, top, label, theme.window_title_active if active else theme.window_title)


__all__ = ["DEFAULT_MINIMUM_HEIGHT", "DEFAULT_MINIMUM_WIDTH", "Window"]
