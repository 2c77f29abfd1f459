"""Tile map and tile data addressing."""

from __future__ import annotations

from dataclasses import dataclass

from pocketboy.bits import is_bit_set
from pocketboy.video import (
    get_bg_tile_map_mode,
    get_tile_data_addressing_mode,
    get_window_tile_map_mode,
)

TILES_PER_ROW = 32
TILE_DATA_LENGTH = 16

_TILE_MAP_0 = 0x1800
_TILE_MAP_1 = 0x1C00
_ATTRIBUTES_OFFSET = 0x2000


@dataclass(frozen=True)
class TileAttributes:
    """Color-mode attributes of a background or window tile."""

    priority: bool
    y_flip: bool
    x_flip: bool
    from_bank_one: bool
    palette_number: int

    @classmethod
    def from_byte(cls, attributes: int) -> TileAttributes:
        """Decode an attribute byte from video RAM bank one."""
        return cls(
            priority=is_bit_set(attributes, 7),
            y_flip=is_bit_set(attributes, 6),
            x_flip=is_bit_set(attributes, 5),
            from_bank_one=is_bit_set(attributes, 3),
            palette_number=attributes & 0b111,
        )


def _tile_map_index(second_map: bool, tile_map_offset: int) -> int:
    return (_TILE_MAP_1 if second_map else _TILE_MAP_0) + tile_map_offset


def _tile_offset(column_tile_offset: int, row_tile_offset: int) -> int:
    return column_tile_offset * TILES_PER_ROW + row_tile_offset


def get_cgb_tile_attributes(video_ram: bytearray, tile_map_index: int) -> TileAttributes:
    """Return the attributes stored alongside a tile map entry."""
    return TileAttributes.from_byte(video_ram[_ATTRIBUTES_OFFSET + tile_map_index])


def calculate_bg_tile_map_index(lcdc: int, column_tile_offset: int, row_tile_offset: int) -> int:
    """Return the video RAM index of a background tile map entry."""
    offset = _tile_offset(column_tile_offset, row_tile_offset)
    return _tile_map_index(get_bg_tile_map_mode(lcdc), offset)


def calculate_window_tile_map_index(lcdc: int, column_tile_offset: int, row_tile_offset: int) -> int:
    """Return the video RAM index of a window tile map entry."""
    offset = _tile_offset(column_tile_offset, row_tile_offset)
    return _tile_map_index(get_window_tile_map_mode(lcdc), offset)


def calculate_tile_data_index(lcdc: int, index: int) -> int:
    """Return the video RAM index of a tile's data for the addressing mode."""
    if get_tile_data_addressing_mode(lcdc):
        return index * TILE_DATA_LENGTH
    if index >= 128:
        return 0x800 + (index - 128) * TILE_DATA_LENGTH
    return 0x1000 + index * TILE_DATA_LENGTH