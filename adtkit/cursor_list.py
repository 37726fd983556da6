"""A sequence of integers with a movable cursor between elements."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class CursorList:
    """An integer sequence with a cursor that sits between two elements.

    The cursor position ranges from 0 (before the first element) to
    ``len(self)`` (after the last element).
    """

    __hash__ = None  # mutable container

    def __init__(self, items: Iterable[int] | None = None) -> None:
        self._items: list[int] = list(items) if items is not None else []
        self._cursor = 0

    # Container protocol -------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CursorList):
            return NotImplemented
        return self._items == other._items

    def __str__(self) -> str:
        return "(" + ", ".join(str(item) for item in self._items) + ")"

    def __repr__(self) -> str:
        return f"CursorList({self._items!r}, position={self._cursor})"

    def copy(self) -> CursorList:
        """Return an independent copy with its cursor at the front."""
        return CursorList(self._items)

    # Access -------------------------------------------------------------

    def front(self) -> int:
        """Return the first element."""
        if not self._items:
            raise IndexError("List: front(): no data exist")
        return self._items[0]

    def back(self) -> int:
        """Return the last element."""
        if not self._items:
            raise IndexError("List: back(): no data exist")
        return self._items[-1]

    def position(self) -> int:
        """Return the cursor position, between 0 and len(self)."""
        return self._cursor

    def _require_next(self, operation: str) -> None:
        if self._cursor == len(self._items):
            raise IndexError(f"List: {operation}(): no next cursor")

    def _require_prev(self, operation: str) -> None:
        if self._cursor == 0:
            raise IndexError(f"List: {operation}(): no prev cursor")

    def peek_next(self) -> int:
        """Return the element after the cursor."""
        self._require_next("peek_next")
        return self._items[self._cursor]

    def peek_prev(self) -> int:
        """Return the element before the cursor."""
        self._require_prev("peek_prev")
        return self._items[self._cursor - 1]

    # Manipulation -------------------------------------------------------

    def clear(self) -> None:
        """Remove every element and reset the cursor."""
        self._items.clear()
        self._cursor = 0

    def move_front(self) -> None:
        """Move the cursor to position 0."""
        self._cursor = 0

    def move_back(self) -> None:
        """Move the cursor to position len(self)."""
        self._cursor = len(self._items)

    def move_next(self) -> int:
        """Advance the cursor and return the element passed over."""
        self._require_next("move_next")
        value = self._items[self._cursor]
        self._cursor += 1
        return value

    def move_prev(self) -> int:
        """Move the cursor back and return the element passed over."""
        self._require_prev("move_prev")
        self._cursor -= 1
        return self._items[self._cursor]

    def insert_after(self, x: int) -> None:
        """Insert x just after the cursor."""
        self._items.insert(self._cursor, x)

    def insert_before(self, x: int) -> None:
        """Insert x just before the cursor."""
        self._items.insert(self._cursor, x)
        self._cursor += 1

    def set_after(self, x: int) -> None:
        """Overwrite the element after the cursor."""
        self._require_next("set_after")
        self._items[self._cursor] = x

    def set_before(self, x: int) -> None:
        """Overwrite the element before the cursor."""
        self._require_prev("set_before")
        self._items[self._cursor - 1] = x

    def erase_after(self) -> None:
        """Delete the element after the cursor."""
        self._require_next("erase_after")
        del self._items[self._cursor]

    def erase_before(self) -> None:
        """Delete the element before the cursor."""
        self._require_prev("erase_before")
        self._cursor -= 1
        del self._items[self._cursor]

    # Searching and other operations ---------------------------------------

    def find_next(self, x: int) -> int:
        """Search forward for x.

        On success the cursor is left just after the match and its position
        is returned; otherwise the cursor ends at len(self) and -1 is returned.
        """
        while self._cursor < len(self._items):
            if self.move_next() == x:
                return self._cursor
        return -1

    def find_prev(self, x: int) -> int:
        """Search backward for x.

        On success the cursor is left just before the match and its position
        is returned; otherwise the cursor ends at 0 and -1 is returned.
        """
        while self._cursor > 0:
            if self.move_prev() == x:
                return self._cursor
        return -1

    def cleanup(self) -> None:
        """Remove repeated elements, keeping the frontmost occurrence of each.

        The cursor stays between the same two retained elements.
        """
        seen: set[int] = set()
        kept: list[int] = []
        new_cursor = 0
        for index, item in enumerate(self._items):
            if item in seen:
                continue
            seen.add(item)
            kept.append(item)
            if index < self._cursor:
                new_cursor += 1
        self._items = kept
        self._cursor = new_cursor

    def concat(self, other: CursorList) -> CursorList:
        """Return a new list of these elements followed by those of other."""
        return CursorList(self._items + other._items)