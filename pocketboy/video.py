"""Video state, screen dimensions and LCDC register decoding."""

from __future__ import annotations

from dataclasses import dataclass, field

from pocketboy.bits import is_bit_set
from pocketboy.colors import Palettes

GB_SCREEN_WIDTH = 160
GB_SCREEN_HEIGHT = 144
BYTES_PER_COLOR = 4

VIDEO_RAM_SIZE = 0x4000
VIDEO_RAM_BANK_SIZE = 0x2000
OAM_SIZE = 0xA0

_LCDC_BG_AND_WINDOW_ENABLED_INDEX = 0
_LCDC_OBJ_ENABLED_INDEX = 1
_LCDC_OBJ_SIZE_INDEX = 2
_LCDC_BG_TILE_MAP_INDEX = 3
_LCDC_TILE_DATA_INDEX = 4
_LCDC_WINDOW_ENABLED_INDEX = 5
_LCDC_WINDOW_TILE_MAP_INDEX = 6
_LCDC_ENABLED_INDEX = 7


@dataclass
class VideoState:
    """Memory and registers that the renderer reads from."""

    video_ram: bytearray = field(default_factory=lambda: bytearray(VIDEO_RAM_SIZE))
    object_attribute_memory: bytearray = field(default_factory=lambda: bytearray(OAM_SIZE))
    frame_buffer: bytearray = field(
        default_factory=lambda: bytearray(GB_SCREEN_WIDTH * GB_SCREEN_HEIGHT * BYTES_PER_COLOR)
    )
    sprite_buffer: list = field(default_factory=list)
    palettes: Palettes = field(default_factory=Palettes)
    lcdc: int = 0
    stat: int = 0
    scy: int = 0
    scx: int = 0
    ly: int = 0
    lyc: int = 0
    wy: int = 0
    wx: int = 0
    cgb_opri: int = 0
    cgb_vbk: int = 0
    cgb: bool = False
    dmg_compatible: bool = False
    in_color_bios: bool = False


def get_bg_and_window_enabled_mode(lcdc: int) -> bool:
    """LCDC bit 0: background and window enabled (priority on color hardware)."""
    return is_bit_set(lcdc, _LCDC_BG_AND_WINDOW_ENABLED_INDEX)


def get_obj_enabled_mode(lcdc: int) -> bool:
    """LCDC bit 1: sprites enabled."""
    return is_bit_set(lcdc, _LCDC_OBJ_ENABLED_INDEX)


def get_obj_size_mode(lcdc: int) -> bool:
    """LCDC bit 2: 8x16 sprites when set."""
    return is_bit_set(lcdc, _LCDC_OBJ_SIZE_INDEX)


def get_bg_tile_map_mode(lcdc: int) -> bool:
    """LCDC bit 3: background uses the second tile map when set."""
    return is_bit_set(lcdc, _LCDC_BG_TILE_MAP_INDEX)


def get_tile_data_addressing_mode(lcdc: int) -> bool:
    """LCDC bit 4: unsigned tile data addressing when set."""
    return is_bit_set(lcdc, _LCDC_TILE_DATA_INDEX)


def get_window_enabled_mode(lcdc: int) -> bool:
    """LCDC bit 5: window enabled."""
    return is_bit_set(lcdc, _LCDC_WINDOW_ENABLED_INDEX)


def get_window_tile_map_mode(lcdc: int) -> bool:
    """LCDC bit 6: window uses the second tile map when set."""
    return is_bit_set(lcdc, _LCDC_WINDOW_TILE_MAP_INDEX)


def get_lcd_enabled_mode(lcdc: int) -> bool:
    """LCDC bit 7: display enabled."""
    return is_bit_set(lcdc, _LCDC_ENABLED_INDEX)


def _line_index(tile_data_index: int, row_offset: int, y_flip: bool, from_bank_one: bool) -> int:
    byte_offset = 0xF - (row_offset * 2 + 1) if y_flip else row_offset * 2
    index = tile_data_index + byte_offset
    return index + VIDEO_RAM_BANK_SIZE if from_bank_one else index


def get_tile_line_bytes(
    video_ram: bytearray,
    tile_data_index: int,
    row_offset: int,
    y_flip: bool,
    from_bank_one: bool,
) -> tuple[int, int]:
    """Return ``(lsb_byte, msb_byte)`` of one row of a tile."""
    index = _line_index(tile_data_index, row_offset, y_flip, from_bank_one)
    return video_ram[index], video_ram[index + 1]