"""Rendering of a single screen line into the frame buffer."""

from __future__ import annotations

from pocketboy.layers import read_bg_color, read_window_color
from pocketboy.prioritization import resolve_highest_priority_pixel
from pocketboy.sprites import read_sprite_pixel_color
from pocketboy.video import (
    BYTES_PER_COLOR,
    GB_SCREEN_WIDTH,
    VideoState,
    get_bg_and_window_enabled_mode,
)


def write_scanline(state: VideoState) -> None:
    """Draw the line at ``state.ly`` into ``state.frame_buffer``."""
    if state.in_color_bios:
        return

    ly = state.ly
    y = (state.scy + ly) & 0xFF
    bg_and_window_priority = get_bg_and_window_enabled_mode(state.lcdc)
    row_start = ly * GB_SCREEN_WIDTH * BYTES_PER_COLOR

    for viewport_x in range(GB_SCREEN_WIDTH):
        x = (state.scx + viewport_x) & 0xFF

        bg_pixel = read_window_color(state, viewport_x, ly)
        if bg_pixel is None:
            bg_pixel = read_bg_color(state, x, y)

        sprite_pixel = read_sprite_pixel_color(state, viewport_x, ly)
        color = resolve_highest_priority_pixel(
            state.cgb, bg_and_window_priority, bg_pixel, sprite_pixel
        )

        pixel_index = row_start + viewport_x * BYTES_PER_COLOR
        state.frame_buffer[pixel_index : pixel_index + BYTES_PER_COLOR] = bytes(color)