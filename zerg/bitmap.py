"""A two-dimensional bit matrix packed into bytes."""

from __future__ import annotations


class Bitmap:
    """A ``rows`` by ``cols`` matrix of bits, each row packed into bytes."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("bitmap dimensions must not be negative")
        self.rows = rows
        self.cols = cols
        self._stride = cols // 8 + 1
        self._cells = bytearray(self._stride * rows)

    def _locate(self, x: int, y: int) -> tuple[int, int]:
        if not (0 <= x < self.rows and 0 <= y < self.cols):
            raise IndexError(f"bit ({x}, {y}) outside a {self.rows}x{self.cols} bitmap")
        return x * self._stride + y // 8, y % 8

    def set(self, x: int, y: int, value: int) -> None:
        """Set the bit at row ``x``, column ``y``; any non-zero ``value`` sets it to 1."""
        index, bit = self._locate(x, y)
        if value:
            self._cells[index] |= 1 << bit
        else:
            self._cells[index] &= ~(1 << bit) & 0xFF

    def get(self, x: int, y: int) -> int:
        """The bit at row ``x``, column ``y`` as 0 or 1."""
        index, bit = self._locate(x, y)
        return (self._cells[index] >> bit) & 1

    def size(self) -> tuple[int, int]:
        """``(rows, cols)``."""
        return self.rows, self.cols

    def zero(self) -> None:
        """Clear every bit."""
        self._cells[:] = bytes(len(self._cells))

    def one(self) -> None:
        """Store 1 in every byte, which sets the first bit of each group of eight columns."""
        self._cells[:] = b"\x01" * len(self._cells)

    def render(self) -> str:
        """One line per row, ``*`` for a set bit and ``-`` for a clear one, each followed by a space."""
        return "".join(
            "".join(("*" if self.get(x, y) else "-") + " " for y in range(self.cols)) + "\n"
            for x in range(self.rows)
        )

    def count(self) -> int:
        """Number of set bits."""
        return sum(self.count_row(x) for x in range(self.rows))

    def count_col(self, col: int) -> int:
        """Number of set bits in column ``col``."""
        return sum(self.get(x, col) for x in range(self.rows))

    def count_row(self, row: int) -> int:
        """Number of set bits in row ``row``."""
        return sum(self.get(row, y) for y in range(self.cols))