"""Scroll window for lists taller than their panel."""

from typing import NamedTuple

from rich.console import Console

console = Console()


class ListWindow(NamedTuple):
    """Slice of a list that fits on screen."""

    start: int
    end: int
    total: int

    @property
    def hidden_above(self) -> int:
        return self.start

    @property
    def hidden_below(self) -> int:
        return self.total - self.end

    @property
    def scrolled(self) -> bool:
        return self.end - self.start < self.total

    def hints(self) -> tuple[str, str]:
        """Markup for the rows above and below the window."""
        above = f"[dim]↑ {self.hidden_above} more[/dim]" if self.hidden_above else ""
        below = f"[dim]↓ {self.hidden_below} more[/dim]" if self.hidden_below else ""
        return above, below


def window_for(highlighted: int, total: int, rows: int, previous_start: int = 0) -> ListWindow:
    """Place a window of ``rows`` items so ``highlighted`` is inside it.

    The window only moves when the highlight leaves it, so moving inside
    the visible rows does not jump the list.
    """
    rows = max(1, rows)
    if total <= rows:
        return ListWindow(0, total, total)

    start = min(max(previous_start, highlighted - rows + 1), highlighted)
    start = max(0, min(start, total - rows))
    return ListWindow(start, start + rows, total)


def get_terminal_size(target: Console = console) -> tuple[int, int]:
    """Get terminal width and height."""
    return target.size.width, target.size.height
