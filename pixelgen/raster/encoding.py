from __future__ import annotations

from typing import List


def packed_width(width: int) -> int:
    """Return the number of bytes a packed 1-bit line of ``width`` pixels takes."""
    return (width + 7) // 8


def pack_line(line: List[int]) -> bytes:
    """Pack a 1-bit line MSB-first, zero-padding the last byte."""
    out = bytearray()
    for i in range(0, len(line), 8):
        value = 0
        for bit, pix in enumerate(line[i : i + 8]):
            if pix:
                value |= 1 << (7 - bit)
        out.append(value)
    return bytes(out)


def set_packed_bit(buffer: bytearray, index: int, value: int) -> None:
    """Set pixel ``index`` of an MSB-first packed line in place."""
    mask = 1 << (7 - (index % 8))
    if value:
        buffer[index // 8] |= mask
    else:
        buffer[index // 8] &= ~mask & 0xFF
