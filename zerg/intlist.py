"""A growable list of unsigned 32-bit integers."""

from __future__ import annotations

from array import array

_UINT32_MAX = 2**32 - 1


class IntList:
    """Append-only list of unsigned 32-bit integers."""

    def __init__(self) -> None:
        self._data = array("L")

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def add(self, value: int) -> None:
        """Append ``value``, which must fit in 32 unsigned bits."""
        if not 0 <= value <= _UINT32_MAX:
            raise OverflowError(f"{value} does not fit in 32 unsigned bits")
        self._data.append(value)

    def clear(self) -> None:
        """Remove every element."""
        self._data = array("L")