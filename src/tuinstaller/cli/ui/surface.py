"""Rich-backed render surface."""

from typing import Optional, Sequence

from rich.console import Console
from rich.control import Control
from rich.errors import ConsoleError
from rich.layout import Layout
from rich.markup import escape
from rich.panel import Panel

from tuinstaller.cli.ui.base import Viewport
from tuinstaller.cli.ui.panels import console as default_console
from tuinstaller.cli.ui.panels import get_terminal_size, window_for
from tuinstaller.utils.debug import debug_render
from tuinstaller.utils.exceptions import RenderError

LEGEND = "[dim]↑↓ navigate • Enter select • Esc cancel[/dim]"

# Share of the screen height given to the list in a split viewport
SPLIT_LIST_PERCENT = 80

# Borders take two rows, scroll indicators two more
MIN_HEIGHT = 5


class RichRenderSurface:
    """Draws menus as rich panels, redrawing in place from the home position."""

    def __init__(
        self,
        console: Optional[Console] = None,
        highlight_symbol: str = ">> ",
    ):
        self.console = console or default_console
        self.highlight_symbol = highlight_symbol
        self._window_start = 0
        self._last_title: Optional[str] = None

    def draw(
        self,
        items: Sequence[str],
        highlighted: int,
        title: str,
        viewport: Viewport,
        status: str = "",
    ) -> None:
        if title != self._last_title:
            self._window_start = 0
            self._last_title = title

        _, height = get_terminal_size(self.console)
        # One spare row so the trailing newline never scrolls the screen
        height = max(MIN_HEIGHT, height - 1)

        if viewport is Viewport.SPLIT:
            list_height = max(MIN_HEIGHT, height * SPLIT_LIST_PERCENT // 100)
            layout = Layout(name="root")
            layout.split_column(
                Layout(
                    self.build_list_panel(items, highlighted, title, list_height),
                    name="list",
                    ratio=SPLIT_LIST_PERCENT,
                ),
                Layout(
                    self.build_status_panel(status),
                    name="status",
                    ratio=100 - SPLIT_LIST_PERCENT,
                ),
            )
        else:
            layout = Layout(
                self.build_list_panel(items, highlighted, title, height),
                name="root",
            )

        debug_render("Drawing", title=title, highlighted=highlighted, viewport=viewport.value)
        try:
            self.console.control(Control.home())
            self.console.print(layout, height=height)
        except (OSError, ConsoleError) as e:
            raise RenderError(f"Failed to draw '{title}': {e}") from e

    def build_list_panel(
        self,
        items: Sequence[str],
        highlighted: int,
        title: str,
        height: int,
    ) -> Panel:
        """Build the bordered list, scrolled so the highlighted row is visible."""
        inner = max(1, height - 2)
        # Rows for the hint lines come out of the list when it scrolls
        rows = max(1, inner - 2) if len(items) > inner else inner
        window = window_for(highlighted, len(items), rows, self._window_start)
        self._window_start = window.start

        above, below = window.hints()
        lines = [above] if window.scrolled else []

        pad = " " * len(self.highlight_symbol)
        for i in range(window.start, window.end):
            label = escape(items[i])
            if i == highlighted:
                lines.append(
                    f"[bold cyan]{escape(self.highlight_symbol)}{label}[/bold cyan]"
                )
            else:
                lines.append(f"{pad}{label}")

        if window.scrolled:
            lines.append(below)

        return Panel(
            "\n".join(lines),
            title=escape(title),
            subtitle=LEGEND,
            border_style="cyan",
        )

    def build_status_panel(self, status: str) -> Panel:
        """Build the pane under the main menu."""
        return Panel(escape(status), border_style="dim")
