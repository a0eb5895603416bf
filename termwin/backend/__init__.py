"""Backend layer: event delivery and screen flushing for the app loop."""

from .base import Backend, Decoder, Renderer
from .ecma48 import ECMA48Backend
from .queue import EventQueue

__all__ = [
    "Backend",
    "Decoder",
    "ECMA48Backend",
    "EventQueue",
    "Renderer",
]
