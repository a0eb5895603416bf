"""Base widget: geometry, ordered children, and input dispatch.

Children are visited in insertion order. Mouse presses and releases go to the
first enabled child under the pointer; motion goes to every child so drags
keep tracking once the pointer leaves the widget that started them. Keys go
to the active child.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..events import KeyPress, MouseAction, Resize, ResizeKind

if TYPE_CHECKING:
    from ..terminal.screen import ECMA48Screen
    from ..theme import Theme


class Widget:
    """Rectangle positioned relative to its parent's drawable area."""

    focusable = True

    # Cells between a widget's edge and where its children start.
    interior_offset = 0

    def __init__(self, parent: Widget | None, x: int, y: int, width: int, height: int) -> None:
        self.parent = parent
        self.children: list[Widget] = []
        self.active: Widget | None = None
        self.enabled = True
        self.x = x
        self.y = y
        self.width = max(0, width)
        self.height = max(0, height)
        if parent is not None:
            parent.add_child(self)

    def add_child(self, child: Widget) -> None:
        self.children.append(child)
        if self.active is None and child.focusable:
            self.active = child

    def activate(self, child: Widget) -> None:
        if child.focusable and child in self.children:
            self.active = child

    @property
    def absolute_x(self) -> int:
        if self.parent is None:
            return self.x
        return self.parent.absolute_x + self.parent.interior_offset + self.x

    @property
    def absolute_y(self) -> int:
        if self.parent is None:
            return self.y
        return self.parent.absolute_y + self.parent.interior_offset + self.y

    def mouse_would_hit(self, mouse: MouseAction) -> bool:
        """Return whether the pointer lies inside this widget's rectangle."""
        left = self.absolute_x
        top = self.absolute_y
        return (
            left <= mouse.absolute_x < left + self.width
            and top <= mouse.absolute_y < top + self.height
        )

    def child_under(self, mouse: MouseAction) -> Widget | None:
        for child in self.children:
            if child.enabled and child.mouse_would_hit(mouse):
                return child
        return None

    def on_resize(self, event: Resize) -> None:
        """Adopt the size of a widget-level resize; ignore screen resizes."""
        if event.kind is ResizeKind.WIDGET:
            self.width = max(0, event.width)
            self.height = max(0, event.height)

    def on_mouse_down(self, mouse: MouseAction) -> None:
        child = self.child_under(mouse)
        if child is None:
            return
        self.activate(child)
        child.on_mouse_down(mouse.relative_to(child))

    def on_mouse_up(self, mouse: MouseAction) -> None:
        child = self.child_under(mouse)
        if child is not None:
            child.on_mouse_up(mouse.relative_to(child))

    def on_mouse_motion(self, mouse: MouseAction) -> None:
        for child in self.children:
            child.on_mouse_motion(mouse.relative_to(child))

    def on_keypress(self, keypress: KeyPress) -> None:
        if self.active is not None and self.active.enabled:
            self.active.on_keypress(keypress)

    def draw(self, screen: ECMA48Screen, theme: Theme) -> None:
        for child in self.children:
            child.draw(screen, theme)


__all__ = ["Widget"]
