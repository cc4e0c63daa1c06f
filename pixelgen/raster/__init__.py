from .encoding import pack_line, packed_width, set_packed_bit
from .generator import RowGenerator
from .types import RandomSource, Row, RowSource

__all__ = [
    "pack_line",
    "packed_width",
    "RandomSource",
    "Row",
    "RowGenerator",
    "RowSource",
    "set_packed_bit",
]
