"""UI components for the interactive menu."""

from tuinstaller.cli.ui.base import RenderSurface, Viewport
from tuinstaller.cli.ui.keys import Key, TerminalKeyReader, read_key, translate_key
from tuinstaller.cli.ui.menu import ListMenu
from tuinstaller.cli.ui.panels import ListWindow, console, get_terminal_size, window_for
from tuinstaller.cli.ui.surface import RichRenderSurface
from tuinstaller.cli.ui.terminal import TerminalSession

__all__ = [
    "Key",
    "ListMenu",
    "ListWindow",
    "RenderSurface",
    "RichRenderSurface",
    "TerminalKeyReader",
    "TerminalSession",
    "Viewport",
    "console",
    "get_terminal_size",
    "read_key",
    "translate_key",
    "window_for",
]
