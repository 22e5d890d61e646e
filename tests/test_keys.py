"""Tests for key translation."""

import io
import os
import sys
import time

import pytest
import readchar
from rich.console import Console

from tuinstaller.cli.ui.keys import Key, TerminalKeyReader, read_key, translate_key
from tuinstaller.cli.ui.terminal import TerminalSession
from tuinstaller.utils.exceptions import TerminalError


@pytest.mark.parametrize(
    "raw,expected",
    [
        (readchar.key.UP, Key.UP),
        (readchar.key.DOWN, Key.DOWN),
        (readchar.key.CR, Key.ENTER),
        (readchar.key.LF, Key.ENTER),
        (readchar.key.ESC, Key.ESCAPE),
        ("\x1b\x1b", Key.ESCAPE),
        ("\x1bq", Key.ESCAPE),
        ("q", Key.OTHER),
        ("j", Key.OTHER),
        (" ", Key.OTHER),
        (readchar.key.LEFT, Key.OTHER),
        (readchar.key.PAGE_DOWN, Key.OTHER),
    ],
)
def test_translate_key(raw, expected):
    assert translate_key(raw) is expected


def test_read_key_uses_reader():
    assert read_key(lambda: readchar.key.DOWN) is Key.DOWN


def test_read_key_wraps_os_error():
    def reader():
        raise OSError("stdin is not a tty")

    with pytest.raises(TerminalError):
        read_key(reader)


def test_read_key_wraps_eof():
    def reader():
        raise EOFError

    with pytest.raises(TerminalError):
        read_key(reader)


def test_read_key_lets_ctrl_c_through():
    def reader():
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        read_key(reader)


class TestTerminalKeyReader:
    """Tests reading real bytes from a pseudo-terminal."""

    @pytest.fixture
    def keyboard(self, pty_pair):
        master_fd, slave = pty_pair
        session = TerminalSession(Console(file=io.StringIO()), stdin=slave)
        session.acquire()
        yield master_fd, TerminalKeyReader(stdin=slave)
        session.release()

    def test_lone_escape_returns_without_next_key(self, keyboard):
        master_fd, reader = keyboard
        os.write(master_fd, b"\x1b")
        assert read_key(reader) is Key.ESCAPE

    def test_arrow_keys(self, keyboard):
        master_fd, reader = keyboard
        os.write(master_fd, b"\x1b[A\x1b[B")
        assert read_key(reader) is Key.UP
        assert read_key(reader) is Key.DOWN

    def test_enter(self, keyboard):
        master_fd, reader = keyboard
        os.write(master_fd, b"\r")
        assert read_key(reader) is Key.ENTER

    def test_escape_then_arrow_leaves_nothing_behind(self, keyboard):
        master_fd, reader = keyboard
        os.write(master_fd, b"\x1b\x1b[Bx")
        assert read_key(reader) is Key.ESCAPE
        assert read_key(reader) is Key.DOWN
        assert read_key(reader) is Key.OTHER

    def test_other_escape_sequences_read_whole(self, keyboard):
        master_fd, reader = keyboard
        os.write(master_fd, b"\x1b[6~\x1bOP\r")
        assert read_key(reader) is Key.OTHER
        assert read_key(reader) is Key.OTHER
        assert read_key(reader) is Key.ENTER

    def test_keys_typed_between_reads_are_kept(self, keyboard):
        master_fd, reader = keyboard
        os.write(master_fd, b"\r")
        assert read_key(reader) is Key.ENTER
        # Typed while the menu is busy drawing
        os.write(master_fd, b"\x1b[B")
        time.sleep(0.1)
        assert read_key(reader) is Key.DOWN

    def test_ctrl_c_raises_keyboard_interrupt(self, devnull_stdin):
        reader = TerminalKeyReader(stdin=devnull_stdin)
        reader._pushback.append(readchar.key.CTRL_C)
        with pytest.raises(KeyboardInterrupt):
            reader()

    def test_non_tty_stdin_raises_terminal_error(self, devnull_stdin):
        with pytest.raises(TerminalError):
            read_key(TerminalKeyReader(stdin=devnull_stdin))

    def test_default_reader_uses_sys_stdin(self, devnull_stdin, monkeypatch):
        monkeypatch.setattr(sys, "stdin", devnull_stdin)
        with pytest.raises(TerminalError):
            read_key()
