from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

from .types import RandomSource, Row

logger = logging.getLogger(__name__)


class RowGenerator:
    """Shuffles a single half-black/half-white row, one random swap per call.

    Every call mutates the same row, so consecutive scanlines drift from the
    initial split rather than being generated independently. ``row_index`` is
    accepted to satisfy ``RowSource`` and ignored.
    """

    def __init__(self, width: int, height: int, rng: Optional[RandomSource] = None) -> None:
        if width <= 0:
            raise ValueError("Width must be greater than zero")
        if height <= 0:
            raise ValueError("Height must be greater than zero")
        self._width = width
        self._height = height
        self._rng = rng if rng is not None else random
        self._row = Row(width)
        logger.debug("Row generator %dx%d, initial counts %s", width, height, self._row.counts())

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> List[int]:
        return self._row.pixels

    def counts(self) -> Tuple[int, int]:
        return self._row.counts()

    def next_row(self, row_index: int) -> memoryview:
        """Swap two random pixels and return a view on the packed row.

        The view stays owned by the generator and reflects the next swap, so
        copy it if it has to outlive the following call.
        """
        i = self._rng.randrange(self._width)
        j = self._rng.randrange(self._width)
        self._row.swap(i, j)
        return self._row.view()
