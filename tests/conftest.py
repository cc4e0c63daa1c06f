from __future__ import annotations

from typing import Iterable, List

import pytest


class SequenceRandom:
    """Replays a fixed list of draws; each value is reduced modulo ``stop``."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values: List[int] = list(values)
        self.calls: List[int] = []

    def randrange(self, stop: int) -> int:
        if not self._values:
            raise AssertionError("SequenceRandom exhausted")
        self.calls.append(stop)
        return self._values.pop(0) % stop


@pytest.fixture
def sequence_random():
    return SequenceRandom


def _unpack_row(data: bytes, width: int) -> List[int]:
    """Expand an MSB-first packed row back into ``width`` 0/1 values."""
    if len(data) < (width + 7) // 8:
        raise ValueError("Packed data is shorter than the line width")
    return [(data[index // 8] >> (7 - index % 8)) & 1 for index in range(width)]


@pytest.fixture
def unpack_row():
    return _unpack_row
