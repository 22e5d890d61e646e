"""Base protocol for the render surface."""

from enum import Enum
from typing import Protocol, Sequence


class Viewport(Enum):
    """Screen region shape for a list."""

    # 80% list on top, 20% status pane below
    SPLIT = "split"
    FULL = "full"


class RenderSurface(Protocol):
    """Protocol for list renderers.

    Allows swapping the terminal backend (and faking it in tests).
    """

    def draw(
        self,
        items: Sequence[str],
        highlighted: int,
        title: str,
        viewport: Viewport,
        status: str = "",
    ) -> None:
        """Draw a titled, bordered list with one highlighted row.

        Raises:
            RenderError: If the terminal cannot be drawn to.
        """
        ...
