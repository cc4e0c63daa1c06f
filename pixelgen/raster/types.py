from __future__ import annotations

from typing import List, Protocol, Tuple, Union

from .encoding import pack_line, set_packed_bit


class RandomSource(Protocol):
    """Anything that can draw a uniform integer from ``[0, stop)``."""

    def randrange(self, stop: int) -> int:
        ...


class RowSource(Protocol):
    """Produces packed scanlines on demand, one call per image row."""

    def next_row(self, row_index: int) -> Union[bytes, memoryview]:
        ...


class Row:
    """Fixed-width line of 0/1 pixels kept in sync with its packed bytes."""

    def __init__(self, width: int) -> None:
        if width <= 0:
            raise ValueError("Width must be greater than zero")
        half = width // 2
        self._pixels: List[int] = [1 if i > half else 0 for i in range(width)]
        self._buffer = bytearray(pack_line(self._pixels))

    def __len__(self) -> int:
        return len(self._pixels)

    @property
    def pixels(self) -> List[int]:
        return list(self._pixels)

    def swap(self, i: int, j: int) -> None:
        """Exchange two pixels, updating only the bits that changed."""
        if i == j:
            return
        a = self._pixels[i]
        b = self._pixels[j]
        self._pixels[i] = b
        self._pixels[j] = a
        if a != b:
            set_packed_bit(self._buffer, i, b)
            set_packed_bit(self._buffer, j, a)

    def counts(self) -> Tuple[int, int]:
        """Return ``(zeros, ones)``."""
        ones = sum(self._pixels)
        return len(self._pixels) - ones, ones

    def view(self) -> memoryview:
        """Read-only view on the packed buffer; contents follow later swaps."""
        return memoryview(self._buffer).toreadonly()
