"""Terminal collaborators: mode control, input decoding, and screen output."""

from .controller import TerminalController
from .decoder import ECMA48Terminal
from .reader import ESC_SEQUENCE_TIMEOUT_MS, InputReader, decode_sgr_mouse
from .screen import Cell, ECMA48Screen

__all__ = [
    "Cell",
    "ECMA48Screen",
    "ECMA48Terminal",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "InputReader",
    "TerminalController",
    "decode_sgr_mouse",
]
