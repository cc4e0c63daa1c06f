from __future__ import annotations

import logging
from typing import BinaryIO

from PIL import Image

from ..raster import RowSource, packed_width

logger = logging.getLogger(__name__)


class ImageWriter:
    """Serializes rows pulled from a ``RowSource`` into a 1-bit grayscale PNG."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0:
            raise ValueError("Width must be greater than zero")
        if height <= 0:
            raise ValueError("Height must be greater than zero")
        self.width = width
        self.height = height

    def collect_rows(self, source: RowSource) -> bytes:
        """Pull every scanline once, in order, copying each as it arrives."""
        row_bytes = packed_width(self.width)
        out = bytearray()
        for index in range(self.height):
            row = bytes(source.next_row(index))
            if len(row) != row_bytes:
                raise ValueError(
                    f"Row {index} has {len(row)} bytes, expected {row_bytes} for width {self.width}"
                )
            out += row
        logger.debug("Collected %d rows of %d bytes", self.height, row_bytes)
        return bytes(out)

    def render(self, source: RowSource) -> Image.Image:
        data = self.collect_rows(source)
        return Image.frombytes("1", (self.width, self.height), data)

    def write(self, source: RowSource, sink: BinaryIO) -> None:
        img = self.render(source)
        img.save(sink, format="PNG")
