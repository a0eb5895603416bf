"""Window with scrollers in its right and bottom border gutters."""

from __future__ import annotations

from ..events import MouseAction, Resize, ResizeKind
from .scroller import HScroller, VScroller
from .window import Window

# Leaves room on the bottom border, left of the horizontal scroller, for a
# position label.
H_SCROLLER_X = 17


class ScrollableWindow(Window):
    """Window whose scroll state is mirrored by two border scrollers.

    Subclasses create the scrollers (usually with ``add_scrollers``) and
    override ``reflow_data`` to derive the scroller ranges from content.
    """

    h_scroller: HScroller | None = None
    v_scroller: VScroller | None = None

    def add_scrollers(self) -> None:
        self.h_scroller = HScroller(self, H_SCROLLER_X, self.height - 2, 1)
        self.v_scroller = VScroller(self, self.width - 2, 0, 1)
        self.place_scrollers()

    def place_scrollers(self) -> None:
        """Pin the scrollers to the border after a size change."""
        if self.h_scroller is not None:
            self.h_scroller.y = self.height - 2
            self.h_scroller.width = max(1, self.width - self.h_scroller.x - 3)
        if self.v_scroller is not None:
            self.v_scroller.x = self.width - 2
            self.v_scroller.height = max(1, self.height - 2)

    def reflow_data(self) -> None:
        """Recompute scroller ranges from the content extents."""

    def on_resize(self, event: Resize) -> None:
        super().on_resize(event)
        if event.kind is ResizeKind.WIDGET:
            self.place_scrollers()
            self.reflow_data()

    def mouse_on_vertical_scroller(self, mouse: MouseAction) -> bool:
        return self.v_scroller is not None and self.v_scroller.mouse_would_hit(mouse)

    def mouse_on_horizontal_scroller(self, mouse: MouseAction) -> bool:
        return self.h_scroller is not None and self.h_scroller.mouse_would_hit(mouse)

    def mouse_on_scroller(self, mouse: MouseAction) -> bool:
        return self.mouse_on_vertical_scroller(mouse) or self.mouse_on_horizontal_scroller(mouse)

    def scroller_dragging(self) -> bool:
        """Whether either scroller's thumb is being dragged."""
        return any(scroller is not None and scroller.dragging for scroller in (self.h_scroller, self.v_scroller))

    def on_mouse_down(self, mouse: MouseAction) -> None:
        super().on_mouse_down(mouse)
        # The wheel over the border (off both scrollers) still scrolls vertically.
        if (mouse.wheel_up or mouse.wheel_down) and self.v_scroller is not None:
            if not self.is_over_content(mouse) and not self.mouse_on_scroller(mouse):
                if mouse.wheel_up:
                    self.v_scroller.decrement()
                else:
                    self.v_scroller.increment()

    def _scroller_value(self, scroller: HScroller | VScroller | None, attr: str) -> int:
        return getattr(scroller, attr) if scroller is not None else 0

    @property
    def top_value(self) -> int:
        return self._scroller_value(self.v_scroller, "minimum")

    @top_value.setter
    def top_value(self, value: int) -> None:
        if self.v_scroller is not None:
            self.v_scroller.set_minimum(value)

    @property
    def bottom_value(self) -> int:
        return self._scroller_value(self.v_scroller, "maximum")

    @bottom_value.setter
    def bottom_value(self, value: int) -> None:
        if self.v_scroller is not None:
            self.v_scroller.set_maximum(value)

    @property
    def vertical_value(self) -> int:
        return self._scroller_value(self.v_scroller, "value")

    @vertical_value.setter
    def vertical_value(self, value: int) -> None:
        if self.v_scroller is not None:
            self.v_scroller.value = value

    @property
    def left_value(self) -> int:
        return self._scroller_value(self.h_scroller, "minimum")

    @left_value.setter
    def left_value(self, value: int) -> None:
        if self.h_scroller is not None:
            self.h_scroller.set_minimum(value)

    @property
    def right_value(self) -> int:
        return self._scroller_value(self.h_scroller, "maximum")

    @right_value.setter
    def right_value(self, value: int) -> None:
        if self.h_scroller is not None:
            self.h_scroller.set_maximum(value)

    @property
    def horizontal_value(self) -> int:
        return self._scroller_value(self.h_scroller, "value")

    @horizontal_value.setter
    def horizontal_value(self, value: int) -> None:
        if self.h_scroller is not None:
            self.h_scroller.value = value


__all__ = ["H_SCROLLER_X", "ScrollableWindow"]
