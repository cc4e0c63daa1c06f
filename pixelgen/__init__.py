from .image_job import ImageJobBuilder, ImageSettings, generate_image
from .imaging import ImageWriter, PngHeader, read_png_header
from .raster import RandomSource, Row, RowGenerator, RowSource

__version__ = "0.1.0"

__all__ = [
    "generate_image",
    "ImageJobBuilder",
    "ImageSettings",
    "ImageWriter",
    "PngHeader",
    "RandomSource",
    "read_png_header",
    "Row",
    "RowGenerator",
    "RowSource",
]
