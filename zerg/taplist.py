"""A double-ended list that grows in fixed-size blocks, with stable cursors."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

DEFAULT_BLOCK_SIZE = 1000


@dataclass
class TapCursor:
    """A position in a :class:`TapList`, stable across pushes and pops at either end."""

    owner: TapList
    position: int

    def value(self) -> Any:
        """The element under the cursor."""
        return self.owner._at(self.position)

    def advance(self) -> TapCursor:
        """Move one step towards the back and return the cursor."""
        self.position += 1
        return self

    def retreat(self) -> TapCursor:
        """Move one step towards the front and return the cursor."""
        self.position -= 1
        return self


class TapList:
    """List with cheap pushes at both ends and erasure of runs from either end.

    Storage grows one block of ``block_size`` cells at a time.
    """

    def __init__(self, block_size: int = DEFAULT_BLOCK_SIZE) -> None:
        self._items: deque[Any] = deque()
        self._first = 0
        self._blocks = 1
        self.block_size = DEFAULT_BLOCK_SIZE
        self.reserve(block_size)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    @property
    def capacity(self) -> int:
        """Number of cells allocated so far."""
        return self._blocks * self.block_size

    def _at(self, position: int) -> Any:
        offset = position - self._first
        if not 0 <= offset < len(self._items):
            raise IndexError("cursor is outside the list")
        return self._items[offset]

    def _grow(self) -> None:
        if len(self._items) >= self.capacity:
            self._blocks += 1

    def reserve(self, size: int) -> None:
        """Empty the list and use blocks of ``size`` cells from now on."""
        if size < 2:
            raise ValueError("block size must be at least 2")
        self.block_size = size
        self._blocks = 1
        self.clear()

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()
        self._first = 0

    def push_back(self, value: Any) -> None:
        """Append ``value`` at the back."""
        self._grow()
        self._items.append(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the front."""
        self._grow()
        self._items.appendleft(value)
        self._first -= 1

    def pop_front(self) -> None:
        """Drop the front element; does nothing when empty."""
        if self._items:
            self._items.popleft()
            self._first += 1

    def front(self) -> Any:
        """The first element."""
        if not self._items:
            raise IndexError("front of an empty list")
        return self._items[0]

    def back(self) -> Any:
        """The last element."""
        if not self._items:
            raise IndexError("back of an empty list")
        return self._items[-1]

    def begin(self) -> TapCursor:
        """Cursor at the first element."""
        return TapCursor(self, self._first)

    def rbegin(self) -> TapCursor:
        """Cursor at the last element."""
        return TapCursor(self, self._first + max(len(self._items), 1) - 1)

    def erase_from_begin(self, pos: TapCursor) -> None:
        """Remove the elements from the front up to, not including, ``pos``."""
        for _ in range(min(max(pos.position - self._first, 0), len(self._items))):
            self.pop_front()

    def erase_from_end(self, pos: TapCursor) -> None:
        """Remove the elements after ``pos`` up to and including the back."""
        last = self._first + len(self._items) - 1
        for _ in range(min(max(last - pos.position, 0), len(self._items))):
            self._items.pop()