"""Low-level terminal input decoding.

Reads raw bytes from a tty fd and translates them into ``KeyPress`` and
``MouseAction`` events. Handles ESC-sequence timing, CSI/SS3 function keys,
modifier combos, and SGR mouse reports.
"""

from __future__ import annotations

import os
import select

from ..events import Event, KeyPress, MouseAction, MouseKind

ESC_SEQUENCE_TIMEOUT_MS = 25
_MAX_SEQUENCE_BYTES = 64

_CONTROL_KEYS = {
    b"\t": "TAB",
    b"\r": "ENTER",
    b"\n": "ENTER",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\x00": "CTRL_SPACE",
}

_CSI_FINAL_KEYS = {
    "A": "UP",
    "B": "DOWN",
    "C": "RIGHT",
    "D": "LEFT",
    "H": "HOME",
    "F": "END",
    "Z": "BACKTAB",
}

_SS3_KEYS = {
    "P": "F1",
    "Q": "F2",
    "R": "F3",
    "S": "F4",
    **_CSI_FINAL_KEYS,
}

_TILDE_KEYS = {
    1: "HOME",
    2: "INSERT",
    3: "DELETE",
    4: "END",
    5: "PGUP",
    6: "PGDN",
    7: "HOME",
    8: "END",
    11: "F1",
    12: "F2",
    13: "F3",
    14: "F4",
    15: "F5",
    17: "F6",
    18: "F7",
    19: "F8",
    20: "F9",
    21: "F10",
    23: "F11",
    24: "F12",
}

# xterm modifier parameter minus one is a bitmask: shift=1, alt=2, ctrl=4.
_MODIFIER_PREFIXES = ((4, "CTRL_"), (2, "ALT_"), (1, "SHIFT_"))


def _modified(key: str, modifier_param: int) -> str:
    mask = max(0, modifier_param - 1)
    prefix = "".join(name for bit, name in _MODIFIER_PREFIXES if mask & bit)
    return prefix + key


def decode_sgr_mouse(payload: str, final: str) -> MouseAction | None:
    """Decode ``btn;col;row`` from an SGR report ending in ``M`` or ``m``.

    Coordinates are converted from the terminal's 1-based cells to 0-based
    screen cells.
    """
    try:
        btn_s, col_s, row_s = payload.split(";")
        btn = int(btn_s)
        col = int(col_s) - 1
        row = int(row_s) - 1
    except ValueError:
        return None

    button = btn & 0b11
    is_motion = (btn & 0b0010_0000) != 0
    is_wheel = (btn & 0b0100_0000) != 0
    if is_wheel:
        if button not in (0, 1):
            return None
        return MouseAction.at(MouseKind.DOWN, col, row, wheel_up=button == 0, wheel_down=button == 1)

    buttons = {
        "button1": button == 0,
        "button2": button == 1,
        "button3": button == 2,
    }
    if is_motion:
        kind = MouseKind.MOTION
    elif final == "M":
        kind = MouseKind.DOWN
    else:
        kind = MouseKind.UP
    return MouseAction.at(kind, col, row, **buttons)


class InputReader:
    """Stateful byte-to-event decoder bound to one input fd.

    Bytes read ahead while resolving a lone ESC are kept for the next call.
    """

    def __init__(self, fd: int) -> None:
        self.fd = fd
        self._pending: list[bytes] = []

    def _read_ready_byte(self, timeout_ms: int | None) -> bytes | None:
        if self._pending:
            return self._pending.pop(0)
        if timeout_ms is not None:
            ready, _, _ = select.select([self.fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return None
        ch = os.read(self.fd, 1)
        if not ch:
            raise EOFError("terminal input closed")
        return ch

    def read_event(self, timeout_ms: int | None = None) -> Event | None:
        """Decode one event, or return ``None`` on timeout or unknown input.

        ``EOFError`` is raised when the fd reaches end of file.
        """
        ch = self._read_ready_byte(timeout_ms)
        if ch is None:
            return None

        if ch in _CONTROL_KEYS:
            return KeyPress(_CONTROL_KEYS[ch])
        if ch != b"\x1b" and ch[0] < 0x20:
            return KeyPress("CTRL_" + chr(ch[0] + 0x40))
        if ch != b"\x1b":
            return KeyPress(self._read_utf8(ch))

        seq = self._read_ready_byte(ESC_SEQUENCE_TIMEOUT_MS)
        if seq is None:
            return KeyPress("ESC")
        if seq == b"[":
            return self._read_csi()
        if seq == b"O":
            final = self._read_ready_byte(ESC_SEQUENCE_TIMEOUT_MS)
            if final is None:
                return KeyPress("ALT_O")
            key = _SS3_KEYS.get(final.decode("ascii", errors="replace"))
            return KeyPress(key) if key is not None else None
        if seq == b"\x1b":
            self._pending.append(seq)
            return KeyPress("ESC")
        if 0x20 < seq[0] < 0x7F:
            return KeyPress("ALT_" + seq.decode("ascii"))
        self._pending.append(seq)
        return KeyPress("ESC")

    def _read_utf8(self, lead: bytes) -> str:
        first = lead[0]
        if first >= 0xF0:
            extra = 3
        elif first >= 0xE0:
            extra = 2
        elif first >= 0xC0:
            extra = 1
        else:
            extra = 0
        data = bytearray(lead)
        for _ in range(extra):
            nxt = self._read_ready_byte(ESC_SEQUENCE_TIMEOUT_MS)
            if nxt is None:
                break
            data += nxt
        return data.decode("utf-8", errors="replace")

    def _read_csi(self) -> Event | None:
        params = bytearray()
        while True:
            part = self._read_ready_byte(ESC_SEQUENCE_TIMEOUT_MS)
            if part is None:
                return KeyPress("ALT_[")
            if 0x40 <= part[0] <= 0x7E:
                final = part.decode("ascii")
                break
            params += part
            if len(params) > _MAX_SEQUENCE_BYTES:
                return None

        text = params.decode("ascii", errors="replace")
        if text.startswith("<") and final in {"M", "m"}:
            return decode_sgr_mouse(text[1:], final)

        fields = text.split(";") if text else []
        try:
            numbers = [int(value) if value else 1 for value in fields]
        except ValueError:
            return None
        modifier = numbers[1] if len(numbers) > 1 else 1

        if final == "~":
            key = _TILDE_KEYS.get(numbers[0] if numbers else 0)
        else:
            key = _CSI_FINAL_KEYS.get(final)
        if key is None:
            return None
        return KeyPress(_modified(key, modifier))


__all__ = ["ESC_SEQUENCE_TIMEOUT_MS", "InputReader", "decode_sgr_mouse"]
