from __future__ import annotations

from typing import Final

# Wedge fill colors, cycled by sector index
DEFAULT_PALETTE: Final[tuple[int, ...]] = (
    0xFF6B6B,
    0x4ECDC4,
    0x45B7D1,
    0xFFA07A,
    0x98D8C8,
    0xF67280,
    0xC06C84,
    0x6C5B7B,
    0x355C7D,
    0xF8B195,
)
DEFAULT_PALETTE_SIZE: Final = len(DEFAULT_PALETTE)


def hex_color(value: int) -> str:
    return f"#{value & 0xFFFFFF:06x}"
