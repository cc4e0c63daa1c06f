from __future__ import annotations

import struct
import zlib
from dataclasses import dataclass

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
COLOR_TYPE_GRAYSCALE = 0


@dataclass(frozen=True)
class PngHeader:
    """Fields of the IHDR chunk."""

    width: int
    height: int
    bit_depth: int
    color_type: int
    interlace: int

    @property
    def is_grayscale(self) -> bool:
        return self.color_type == COLOR_TYPE_GRAYSCALE


def read_png_header(data: bytes) -> PngHeader:
    """Parse and CRC-check the IHDR chunk at the start of a PNG stream."""
    if data[:8] != PNG_SIGNATURE:
        raise ValueError("Not a PNG stream (bad signature)")
    if len(data) < 8 + 8 + 13 + 4:
        raise ValueError("PNG stream truncated before end of IHDR")
    length, chunk_type = struct.unpack(">I4s", data[8:16])
    if chunk_type != b"IHDR" or length != 13:
        raise ValueError("First PNG chunk is not a valid IHDR")
    body = data[16:29]
    (crc,) = struct.unpack(">I", data[29:33])
    if zlib.crc32(chunk_type + body) & 0xFFFFFFFF != crc:
        raise ValueError("IHDR CRC mismatch")
    width, height, bit_depth, color_type, _, _, interlace = struct.unpack(">IIBBBBB", body)
    return PngHeader(width, height, bit_depth, color_type, interlace)
