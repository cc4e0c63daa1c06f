from .header import PngHeader, read_png_header
from .writer import ImageWriter

__all__ = ["ImageWriter", "PngHeader", "read_png_header"]
