"""Horizontal and vertical scrollers drawn in a window's border gutter.

A scroller keeps ``minimum <= value <= maximum`` at all times. The end cells
are arrows that step by one, the trough pages by ``big_change``, and the
wheel steps by one. Dragging with button 1 tracks the pointer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..events import MouseAction
from .widget import Widget

if TYPE_CHECKING:
    from ..terminal.screen import ECMA48Screen
    from ..theme import Theme

DEFAULT_BIG_CHANGE = 20


class Scroller(Widget):
    """Value range with a thumb; subclasses pick the axis."""

    focusable = False

    def __init__(self, parent: Widget, x: int, y: int, width: int, height: int) -> None:
        super().__init__(parent, x, y, width, height)
        self.minimum = 0
        self.maximum = 0
        self._value = 0
        self.small_change = 1
        self.big_change = DEFAULT_BIG_CHANGE
        self._dragging = False

    @property
    def value(self) -> int:
        return self._value

    @property
    def dragging(self) -> bool:
        return self._dragging

    @value.setter
    def value(self, value: int) -> None:
        self._value = max(self.minimum, min(self.maximum, int(value)))

    def set_range(self, minimum: int, maximum: int) -> None:
        self.minimum = int(minimum)
        self.maximum = max(self.minimum, int(maximum))
        self.value = self._value

    def set_minimum(self, minimum: int) -> None:
        self.set_range(minimum, max(minimum, self.maximum))

    def set_maximum(self, maximum: int) -> None:
        self.set_range(min(self.minimum, maximum), maximum)

    def increment(self) -> None:
        self.value = self._value + self.small_change

    def decrement(self) -> None:
        self.value = self._value - self.small_change

    def big_increment(self) -> None:
        self.value = self._value + self.big_change

    def big_decrement(self) -> None:
        self.value = self._value - self.big_change

    @property
    def length(self) -> int:
        raise NotImplementedError

    def _position(self, mouse: MouseAction) -> int:
        raise NotImplementedError

    def thumb_position(self) -> int:
        """Return the track offset of the thumb, between the two arrows."""
        track = self.length - 3
        if track <= 0 or self.maximum == self.minimum:
            return 1
        return 1 + round((self._value - self.minimum) * track / (self.maximum - self.minimum))

    def _value_at(self, position: int) -> int:
        track = self.length - 3
        if track <= 0:
            return self._value
        fraction = (position - 1) / track
        return self.minimum + round(fraction * (self.maximum - self.minimum))

    def on_mouse_down(self, mouse: MouseAction) -> None:
        if mouse.wheel_up:
            self.decrement()
            return
        if mouse.wheel_down:
            self.increment()
            return
        if not mouse.button1:
            return
        position = self._position(mouse)
        self._dragging = False
        if position <= 0:
            self.decrement()
        elif position >= self.length - 1:
            self.increment()
        elif position == self.thumb_position():
            self._dragging = True
        elif position < self.thumb_position():
            self.big_decrement()
        else:
            self.big_increment()

    def on_mouse_up(self, mouse: MouseAction) -> None:
        self._dragging = False

    def cancel_drag(self) -> None:
        self._dragging = False

    def on_mouse_motion(self, mouse: MouseAction) -> None:
        if not mouse.button1:
            self._dragging = False
            return
        if self._dragging:
            position = max(1, min(self.length - 2, self._position(mouse)))
            self.value = self._value_at(position)

    def _cells(self, start_arrow: str, end_arrow: str) -> str:
        length = self.length
        if length <= 0:
            return ""
        if length == 1:
            return start_arrow
        track = ["░"] * max(0, length - 2)
        thumb = self.thumb_position() - 1
        if 0 <= thumb < len(track):
            track[thumb] = "█"
        return start_arrow + "".join(track) + end_arrow


class VScroller(Scroller):
    def __init__(self, parent: Widget, x: int, y: int, height: int) -> None:
        super().__init__(parent, x, y, 1, height)

    @property
    def length(self) -> int:
        return self.height

    def _position(self, mouse: MouseAction) -> int:
        return mouse.y

    def draw(self, screen: ECMA48Screen, theme: Theme) -> None:
        for offset, char in enumerate(self._cells("▲", "▼")):
            attr = theme.scroller_thumb if char == "█" else theme.scroller
            screen.put_char(self.absolute_x, self.absolute_y + offset, char, attr)


class HScroller(Scroller):
    def __init__(self, parent: Widget, x: int, y: int, width: int) -> None:
        super().__init__(parent, x, y, width, 1)

    @property
    def length(self) -> int:
        return self.width

    def _position(self, mouse: MouseAction) -> int:
        return mouse.x

    def draw(self, screen: ECMA48Screen, theme: Theme) -> None:
        for offset, char in enumerate(self._cells("◄", "►")):
            attr = theme.scroller_thumb if char == "█" else theme.scroller
            screen.put_char(self.absolute_x + offset, self.absolute_y, char, attr)


__all__ = ["HScroller", "Scroller", "VScroller"]
