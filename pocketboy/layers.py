"""Background and window pixel lookup."""

from __future__ import annotations

from pocketboy.colors import as_cgb_bg_color_rgb, as_dmg_bg_color_rgb, calculate_color_id
from pocketboy.prioritization import BackgroundPixel
from pocketboy.tiles import (
    calculate_bg_tile_map_index,
    calculate_tile_data_index,
    calculate_window_tile_map_index,
    get_cgb_tile_attributes,
)
from pocketboy.video import VideoState, get_tile_line_bytes, get_window_enabled_mode


def _tile_pixel(
    state: VideoState, tile_map_index: int, row_offset: int, bit_index: int
) -> BackgroundPixel:
    tile_index = state.video_ram[tile_map_index]
    tile_data_index = calculate_tile_data_index(state.lcdc, tile_index)

    if state.cgb:
        attributes = get_cgb_tile_attributes(state.video_ram, tile_map_index)
        lsb_byte, msb_byte = get_tile_line_bytes(
            state.video_ram,
            tile_data_index,
            row_offset,
            attributes.y_flip,
            attributes.from_bank_one,
        )
        dmg_compatible = state.dmg_compatible
        palette_number = 0 if dmg_compatible else attributes.palette_number
        color_id = calculate_color_id(bit_index, msb_byte, lsb_byte, attributes.x_flip)
        color = as_cgb_bg_color_rgb(state.palettes, palette_number, color_id, dmg_compatible)
        return BackgroundPixel(color=color, prioritize_bg=attributes.priority)

    lsb_byte, msb_byte = get_tile_line_bytes(
        state.video_ram, tile_data_index, row_offset, False, False
    )
    color_id = calculate_color_id(bit_index, msb_byte, lsb_byte, False)
    color = as_dmg_bg_color_rgb(state.palettes, color_id)
    return BackgroundPixel(color=color, prioritize_bg=False)


def read_bg_color(state: VideoState, x: int, y: int) -> BackgroundPixel:
    """Return the background pixel at tile-map coordinates ``(x, y)``."""
    tile_map_index = calculate_bg_tile_map_index(state.lcdc, y // 8, x // 8)
    return _tile_pixel(state, tile_map_index, y % 8, x % 8)


def read_window_color(state: VideoState, x: int, y: int) -> BackgroundPixel | None:
    """Return the window pixel at screen ``(x, y)``, or None outside the window."""
    window_left = state.wx - 7
    if not get_window_enabled_mode(state.lcdc) or x < window_left or y < state.wy:
        return None
    window_x = x - window_left
    window_y = y - state.wy
    tile_map_index = calculate_window_tile_map_index(
        state.lcdc, window_y // 8, (window_x // 8) & 0xFF
    )
    return _tile_pixel(state, tile_map_index, y % 8, window_x % 8)