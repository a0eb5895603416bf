"""Input event types delivered from the terminal decoder to widgets.

Events are immutable; their arrival order is the order in which the decoder
queued them. Mouse events carry absolute screen coordinates plus coordinates
relative to the widget currently handling them.
"""

from __future__ import annotations

import enum
import time as _time
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .widgets.widget import Widget


class MouseKind(enum.Enum):
    DOWN = "down"
    UP = "up"
    MOTION = "motion"


class ResizeKind(enum.Enum):
    """Which geometry a resize event describes."""

    SCREEN = "screen"
    WIDGET = "widget"


@dataclass(frozen=True)
class KeyPress:
    """One decoded keystroke, as a normalized token like ``"UP"`` or ``"a"``."""

    key: str
    time: float = field(default_factory=_time.monotonic, compare=False)


@dataclass(frozen=True)
class MouseAction:
    """Mouse press, release, motion, or wheel report."""

    kind: MouseKind
    x: int
    y: int
    absolute_x: int
    absolute_y: int
    button1: bool = False
    button2: bool = False
    button3: bool = False
    wheel_up: bool = False
    wheel_down: bool = False
    time: float = field(default_factory=_time.monotonic, compare=False)

    @classmethod
    def at(cls, kind: MouseKind, absolute_x: int, absolute_y: int, **buttons: bool) -> MouseAction:
        """Build a screen-level event whose relative and absolute coordinates match."""
        return cls(kind, absolute_x, absolute_y, absolute_x, absolute_y, **buttons)

    def relative_to(self, widget: Widget) -> MouseAction:
        """Return a copy with ``x``/``y`` re-based onto ``widget``."""
        return replace(
            self,
            x=self.absolute_x - widget.absolute_x,
            y=self.absolute_y - widget.absolute_y,
        )


@dataclass(frozen=True)
class Resize:
    kind: ResizeKind
    width: int
    height: int
    time: float = field(default_factory=_time.monotonic, compare=False)


Event = Union[KeyPress, MouseAction, Resize]


__all__ = [
    "Event",
    "KeyPress",
    "MouseAction",
    "MouseKind",
    "Resize",
    "ResizeKind",
]
