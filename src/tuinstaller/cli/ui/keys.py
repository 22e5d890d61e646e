"""Keyboard input mapped to menu keys."""

import os
import select
import sys
import termios
from enum import Enum
from typing import Callable, Optional, TextIO

import readchar

from tuinstaller.utils.exceptions import TerminalError

# How long to wait after ESC for the rest of an escape sequence (seconds)
ESCAPE_TIMEOUT = 0.05

# Introducers after ESC: CSI ("[") runs to a final byte, SS3 ("O") is one char
_CSI = "["
_SS3 = "O"


class Key(Enum):
    """Keys the menus react to."""

    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    ESCAPE = "escape"
    OTHER = "other"


_KEY_MAP = {
    readchar.key.UP: Key.UP,
    readchar.key.DOWN: Key.DOWN,
    readchar.key.CR: Key.ENTER,
    readchar.key.LF: Key.ENTER,
    readchar.key.ESC: Key.ESCAPE,
}


def translate_key(raw: str) -> Key:
    """Map a key string (readchar key constants) to a Key.

    ESC followed by a plain character (Alt+key) still counts as Escape.
    """
    if raw in _KEY_MAP:
        return _KEY_MAP[raw]
    if len(raw) == 2 and raw[0] == readchar.key.ESC and raw[1] not in (_CSI, _SS3):
        return Key.ESCAPE
    return Key.OTHER


def _is_final_byte(ch: str) -> bool:
    return "\x40" <= ch <= "\x7e"


class TerminalKeyReader:
    """Reads one key at a time straight from the stdin file descriptor.

    Expects the terminal to already be in cbreak/raw mode (TerminalSession
    holds it for the whole session). Reading the descriptor unbuffered lets
    a short select() tell a lone Escape from the start of an arrow key.
    """

    def __init__(self, stdin: Optional[TextIO] = None, escape_timeout: float = ESCAPE_TIMEOUT):
        self.stdin = stdin
        self.escape_timeout = escape_timeout
        self._pushback: list[str] = []

    def _fd(self) -> int:
        return (self.stdin or sys.stdin).fileno()

    def _read_char(self, fd: int) -> str:
        if self._pushback:
            return self._pushback.pop()
        data = os.read(fd, 1)
        if not data:
            raise EOFError("stdin closed")
        return data.decode("latin-1")

    def _pending(self, fd: int) -> bool:
        if self._pushback:
            return True
        ready, _, _ = select.select([fd], [], [], self.escape_timeout)
        return bool(ready)

    def __call__(self) -> str:
        fd = self._fd()
        first = self._read_char(fd)

        if first in readchar.config.INTERRUPT_KEYS:
            raise KeyboardInterrupt

        if first != readchar.key.ESC or not self._pending(fd):
            return first

        second = self._read_char(fd)
        if second == readchar.key.ESC:
            # Two Escapes in a row: this one is lone, the next starts fresh
            self._pushback.append(second)
            return first

        seq = first + second
        if second == _SS3:
            if self._pending(fd):
                seq += self._read_char(fd)
        elif second == _CSI:
            while self._pending(fd):
                ch = self._read_char(fd)
                seq += ch
                if _is_final_byte(ch):
                    break
        return seq


_terminal_reader = TerminalKeyReader()


def read_key(reader: Optional[Callable[[], str]] = None) -> Key:
    """Block until one key is pressed and return it.

    Raises:
        TerminalError: If stdin cannot be read (closed, not a terminal)
    """
    reader = reader or _terminal_reader
    try:
        raw = reader()
    except (OSError, EOFError, ValueError, termios.error) as e:
        raise TerminalError(f"Failed to read key: {e}") from e
    return translate_key(raw)
