"""A set kept as a sorted list."""

from __future__ import annotations

import bisect
from collections.abc import Callable, Iterable, Iterator
from typing import Any


class SortedVectorSet:
    """Unique values kept in sorted order in a list.

    Two values are the same element when their keys compare equal.
    Insertion and removal cost O(n); lookup is a binary search.
    """

    def __init__(self, items: Iterable[Any] = (), key: Callable[[Any], Any] | None = None) -> None:
        self._key_func = key
        self._items: list[Any] = []
        self.update(items)

    def _key(self, value: Any) -> Any:
        return value if self._key_func is None else self._key_func(value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __contains__(self, value: Any) -> bool:
        return self.find(value) is not None

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortedVectorSet):
            return NotImplemented
        return self._items == other._items

    def __lt__(self, other: SortedVectorSet) -> bool:
        if not isinstance(other, SortedVectorSet):
            return NotImplemented
        return self._items < other._items

    def __le__(self, other: SortedVectorSet) -> bool:
        if not isinstance(other, SortedVectorSet):
            return NotImplemented
        return not other < self

    def __gt__(self, other: SortedVectorSet) -> bool:
        if not isinstance(other, SortedVectorSet):
            return NotImplemented
        return other < self

    def __ge__(self, other: SortedVectorSet) -> bool:
        if not isinstance(other, SortedVectorSet):
            return NotImplemented
        return not self < other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def insert(self, value: Any) -> tuple[int, bool]:
        """Insert ``value`` unless an equal one is present.

        Returns the element's index and whether it was inserted.
        """
        index = self.lower_bound(value)
        if index < len(self._items) and self._key(self._items[index]) == self._key(value):
            return index, False
        self._items.insert(index, value)
        return index, True

    def update(self, values: Iterable[Any]) -> None:
        """Insert every value of ``values``."""
        for value in values:
            self.insert(value)

    def erase(self, value: Any) -> int:
        """Remove ``value``; returns how many elements were removed (0 or 1)."""
        index = self.find(value)
        if index is None:
            return 0
        del self._items[index]
        return 1

    def find(self, value: Any) -> int | None:
        """Index of the element equal to ``value``, or ``None``."""
        index = self.lower_bound(value)
        if index < len(self._items) and not self._key(value) < self._key(self._items[index]):
            return index
        return None

    def count(self, value: Any) -> int:
        """1 if ``value`` is present, else 0."""
        low, high = self.equal_range(value)
        return high - low

    def lower_bound(self, value: Any) -> int:
        """Index of the first element not less than ``value``."""
        return bisect.bisect_left(self._items, self._key(value), key=self._key)

    def upper_bound(self, value: Any) -> int:
        """Index of the first element greater than ``value``."""
        return bisect.bisect_right(self._items, self._key(value), key=self._key)

    def equal_range(self, value: Any) -> tuple[int, int]:
        """``(lower_bound, upper_bound)`` of ``value``."""
        return self.lower_bound(value), self.upper_bound(value)

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()