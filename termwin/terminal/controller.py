"""Terminal mode control for a TUI session.

Owns raw-mode lifecycle, alternate-screen switching, and mouse toggles.
"""

from __future__ import annotations

import os
import shutil
import termios
import tty

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l\x1b[?1000h\x1b[?1002h\x1b[?1006h"
EXIT_TUI_SEQUENCE = b"\x1b[?1000l\x1b[?1002l\x1b[?1006l\x1b[?25h\x1b[?1049l"
MOUSE_ON_SEQUENCE = b"\x1b[?1000h\x1b[?1002h\x1b[?1006h"
MOUSE_OFF_SEQUENCE = b"\x1b[?1000l\x1b[?1002l\x1b[?1006l"


class TerminalController:
    """Manage terminal mode transitions for the tty behind two fds."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._mouse_reporting_enabled = False
        self._tui_mode = False

    @property
    def in_tui_mode(self) -> bool:
        return self._tui_mode

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with mouse reporting enabled."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)
        self._mouse_reporting_enabled = True
        self._tui_mode = True

    def disable_tui_mode(self) -> None:
        """Restore the saved tty state and the main screen buffer."""
        os.write(self.stdout_fd, EXIT_TUI_SEQUENCE)
        self._mouse_reporting_enabled = False
        self._tui_mode = False
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def set_mouse_reporting(self, enabled: bool) -> None:
        """Toggle terminal mouse tracking without changing other TUI state."""
        desired = bool(enabled)
        if desired == self._mouse_reporting_enabled:
            return
        os.write(self.stdout_fd, MOUSE_ON_SEQUENCE if desired else MOUSE_OFF_SEQUENCE)
        self._mouse_reporting_enabled = desired

    def terminal_size(self) -> tuple[int, int]:
        """Return ``(columns, lines)`` of the tty, falling back to 80x24."""
        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError:
            size = shutil.get_terminal_size((80, 24))
        return size.columns, size.lines


__all__ = ["TerminalController"]
