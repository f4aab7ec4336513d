"""A sequence of integers with a cursor that stands between elements."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class CursorList:
    """An integer sequence with a cursor between elements.

    The cursor position is an int from 0 (before the front) up to
    ``len(self)`` (after the back).
    """

    __slots__ = ("_items", "_pos")

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._items: list[int] = list(items)
        self._pos = len(self._items)

    # Access -----------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CursorList):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "(" + ", ".join(str(x) for x in self._items) + ")"

    def __repr__(self) -> str:
        return f"CursorList({self._items!r}, position={self._pos})"

    def copy(self) -> CursorList:
        """Return a copy with its cursor at the back."""
        return CursorList(self._items)

    def front(self) -> int:
        if not self._items:
            raise IndexError("front() of an empty list")
        return self._items[0]

    def back(self) -> int:
        if not self._items:
            raise IndexError("back() of an empty list")
        return self._items[-1]

    def position(self) -> int:
        return self._pos

    def peek_next(self) -> int:
        if self._pos >= len(self._items):
            raise IndexError("peek_next() with cursor at the back")
        return self._items[self._pos]

    def peek_prev(self) -> int:
        if self._pos <= 0:
            raise IndexError("peek_prev() with cursor at the front")
        return self._items[self._pos - 1]

    # Manipulation -----------------------------------------------------------

    def clear(self) -> None:
        self._items.clear()
        self._pos = 0

    def move_front(self) -> None:
        self._pos = 0

    def move_back(self) -> None:
        self._pos = len(self._items)

    def move_next(self) -> int:
        """Advance the cursor and return the element passed over."""
        if self._pos >= len(self._items):
            raise IndexError("move_next() with cursor at the back")
        self._pos += 1
        return self._items[self._pos - 1]

    def move_prev(self) -> int:
        """Move the cursor back and return the element passed over."""
        if self._pos <= 0:
            raise IndexError("move_prev() with cursor at the front")
        self._pos -= 1
        return self._items[self._pos]

    def insert_after(self, x: int) -> None:
        self._items.insert(self._pos, x)

    def insert_before(self, x: int) -> None:
        self._items.insert(self._pos, x)
        self._pos += 1

    def set_after(self, x: int) -> None:
        if self._pos >= len(self._items):
            raise IndexError("set_after() with cursor at the back")
        self._items[self._pos] = x

    def set_before(self, x: int) -> None:
        if self._pos <= 0:
            raise IndexError("set_before() with cursor at the front")
        self._items[self._pos - 1] = x

    def erase_after(self) -> None:
        if self._pos >= len(self._items):
            raise IndexError("erase_after() with cursor at the back")
        del self._items[self._pos]

    def erase_before(self) -> None:
        if self._pos <= 0:
            raise IndexError("erase_before() with cursor at the front")
        self._pos -= 1
        del self._items[self._pos]

    # Other operations -------------------------------------------------------

    def find_next(self, x: int) -> int:
        """Search forward for x; leave the cursor just after it.

        Returns the new position, or -1 with the cursor at the back.
        """
        while self._pos < len(self._items):
            if self.move_next() == x:
                return self._pos
        return -1

    def find_prev(self, x: int) -> int:
        """Search backward for x; leave the cursor just before it.

        Returns the new position, or -1 with the cursor at the front.
        """
        while self._pos > 0:
            if self.move_prev() == x:
                return self._pos
        return -1

    def cleanup(self) -> None:
        """Drop repeated elements, keeping the frontmost occurrence of each.

        The cursor stays between the same retained elements.
        """
        if not self._items:
            raise IndexError("cleanup() of an empty list")
        seen: set[int] = set()
        kept: list[int] = []
        new_pos = 0
        for index, value in enumerate(self._items):
            if value in seen:
                continue
            seen.add(value)
            kept.append(value)
            if index < self._pos:
                new_pos += 1
        self._items = kept
        self._pos = new_pos

    def concat(self, other: CursorList) -> CursorList:
        """Return this list followed by other, with the cursor at the front."""
        joined = CursorList([*self._items, *other._items])
        joined.move_front()
        return joined