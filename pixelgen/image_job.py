from __future__ import annotations

import io
import logging
import random
from dataclasses import dataclass
from typing import BinaryIO, Optional

from .imaging import ImageWriter, PngHeader, read_png_header
from .raster import RandomSource, RowGenerator

DEFAULT_WIDTH = 32
DEFAULT_HEIGHT = 32
DEFAULT_OUTPUT = "generated.png"

logger = logging.getLogger(__name__)


@dataclass
class ImageSettings:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    seed: Optional[int] = None


class ImageJobBuilder:
    def __init__(self, settings: Optional[ImageSettings] = None) -> None:
        self.settings = settings or ImageSettings()

    def build(self) -> bytes:
        buffer = io.BytesIO()
        self.write_to(buffer)
        return buffer.getvalue()

    def write_to(self, sink: BinaryIO) -> None:
        width = self.settings.width
        height = self.settings.height
        generator = RowGenerator(width, height, self._random_source())
        ImageWriter(width, height).write(generator, sink)

    def write_file(self, path: str) -> PngHeader:
        data = self.build()
        try:
            with open(path, "wb") as handle:
                handle.write(data)
        except OSError as exc:
            raise RuntimeError(f"Failed to write image to {path}: {exc}") from exc
        logger.info("Wrote %d bytes to %s", len(data), path)
        return read_png_header(data)

    def _random_source(self) -> RandomSource:
        if self.settings.seed is not None:
            return random.Random(self.settings.seed)
        return random


def generate_image(
    path: str,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    seed: Optional[int] = None,
) -> PngHeader:
    return ImageJobBuilder(ImageSettings(width, height, seed)).write_file(path)
