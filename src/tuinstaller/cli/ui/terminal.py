"""Scoped terminal session."""

import sys
import termios
import tty
from typing import Optional, TextIO

from rich.console import Console

from tuinstaller.cli.ui.panels import console as default_console
from tuinstaller.utils.debug import log_error
from tuinstaller.utils.exceptions import TerminalError


class TerminalSession:
    """Cbreak input, alternate screen and hidden cursor for the process lifetime.

    Use as a context manager. Each piece is restored exactly once on exit,
    whether the block returns or raises. If restoring fails while another
    exception is already unwinding, the failure is logged and the original
    exception is the one that propagates.
    """

    def __init__(self, console: Optional[Console] = None, stdin: Optional[TextIO] = None):
        self.console = console or default_console
        self.stdin = stdin
        self._fd: Optional[int] = None
        self._saved_tty: Optional[list] = None
        self._alt_screen = False
        self._cursor_hidden = False

    @property
    def active(self) -> bool:
        return self._saved_tty is not None or self._alt_screen or self._cursor_hidden

    def acquire(self) -> None:
        """Enter cbreak mode, switch to the alternate screen, hide the cursor."""
        if self.active:
            return

        stream = self.stdin or sys.stdin
        try:
            is_tty = stream.isatty()
        except ValueError:
            is_tty = False  # Closed stream
        if not is_tty:
            raise TerminalError("Standard input is not a terminal")

        try:
            self._fd = stream.fileno()
            self._saved_tty = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
            self.console.set_alt_screen(True)
            self._alt_screen = True
            self.console.show_cursor(False)
            self._cursor_hidden = True
        except (OSError, ValueError, termios.error) as e:
            failures = self._restore()
            message = f"Failed to set up terminal: {e}"
            if failures:
                message += f" (restore also failed: {'; '.join(failures)})"
            raise TerminalError(message) from e

    def release(self) -> None:
        """Undo whatever acquire() managed to set up. Idempotent."""
        failures = self._restore()
        if failures:
            raise TerminalError(f"Failed to restore terminal: {'; '.join(failures)}")

    def _restore(self) -> list[str]:
        """Restore each piece separately; return a message per failure."""
        failures = []

        if self._cursor_hidden:
            self._cursor_hidden = False
            try:
                self.console.show_cursor(True)
            except OSError as e:
                failures.append(f"cursor: {e}")

        if self._alt_screen:
            self._alt_screen = False
            try:
                self.console.set_alt_screen(False)
            except OSError as e:
                failures.append(f"alternate screen: {e}")

        if self._saved_tty is not None:
            saved, self._saved_tty = self._saved_tty, None
            try:
                termios.tcsetattr(self._fd, termios.TCSADRAIN, saved)
            except (OSError, termios.error) as e:
                failures.append(f"input mode: {e}")

        return failures

    def __enter__(self) -> "TerminalSession":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc is None:
            self.release()
            return

        failures = self._restore()
        if failures:
            log_error("terminal", f"Failed to restore terminal: {'; '.join(failures)}")
