"""Generic keyboard-driven list menu."""

import time
from typing import Callable, Optional, Sequence

from tuinstaller.cli.ui.base import RenderSurface, Viewport
from tuinstaller.cli.ui.keys import Key, read_key
from tuinstaller.core.selection import SelectableList
from tuinstaller.utils.debug import debug_menu
from tuinstaller.utils.exceptions import EmptySelectionError


class ListMenu:
    """Runs one selectable list until Enter or Escape.

    Both the main menu and the disk picker go through ``select``; only
    the labels, title and viewport differ.
    """

    def __init__(
        self,
        surface: RenderSurface,
        key_reader: Optional[Callable[[], Key]] = None,
        idle_delay: float = 0.0,
    ):
        self.surface = surface
        self.key_reader = key_reader or read_key
        self.idle_delay = idle_delay

    def select(
        self,
        options: Sequence[str],
        title: str = "",
        cursor_index: int = 0,
        viewport: Viewport = Viewport.FULL,
        status: str = "",
    ) -> Optional[int]:
        """Show selection menu.

        Redraws on every key, including ignored ones.

        Args:
            options: List of option strings
            title: Panel title
            cursor_index: Starting cursor position
            viewport: Screen region shape
            status: Text for the status pane (split viewport only)

        Returns:
            Selected index or None if cancelled (Escape)

        Raises:
            EmptySelectionError: If options is empty
        """
        if not options:
            raise EmptySelectionError(f"Menu '{title}' has no items")

        selection = SelectableList(options, cursor=cursor_index)

        while True:
            self.surface.draw(
                selection.items, selection.cursor, title, viewport, status=status
            )

            key = self.key_reader()

            if key is Key.UP:
                selection.move_up()
            elif key is Key.DOWN:
                selection.move_down()
            elif key is Key.ENTER:
                debug_menu("Confirmed", title=title, cursor=selection.cursor)
                return selection.cursor
            elif key is Key.ESCAPE:
                debug_menu("Escaped", title=title, cursor=selection.cursor)
                return None

            if self.idle_delay > 0:
                time.sleep(self.idle_delay)
