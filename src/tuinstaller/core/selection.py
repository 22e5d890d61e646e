"""Cursor-over-list selection state."""

from typing import Generic, Optional, Sequence, TypeVar

T = TypeVar("T")


class SelectableList(Generic[T]):
    """Cursor over an ordered sequence.

    Movement saturates at both ends (no wraparound). An empty list is
    allowed to exist but has no current item; callers must check
    ``is_empty`` before starting an input loop over it.
    """

    def __init__(self, items: Sequence[T], cursor: int = 0):
        self._items = list(items)
        self._cursor = 0
        if self._items:
            self._cursor = max(0, min(cursor, len(self._items) - 1))

    @property
    def items(self) -> list[T]:
        return list(self._items)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def move_up(self) -> None:
        """Move cursor one row up, stopping at the first row."""
        self._cursor = max(0, self._cursor - 1)

    def move_down(self) -> None:
        """Move cursor one row down, stopping at the last row."""
        self._cursor = min(max(0, len(self._items) - 1), self._cursor + 1)

    def current(self) -> Optional[T]:
        """Item under the cursor, or None for an empty list."""
        if not self._items:
            return None
        return self._items[self._cursor]
