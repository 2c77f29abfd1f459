"""Sprite (object) selection and pixel lookup."""

from __future__ import annotations

from dataclasses import dataclass

from pocketboy.bits import get_bit, is_bit_set
from pocketboy.colors import (
    Color,
    as_cgb_obj_color_rgb,
    as_dmg_obj_color_rgb,
    calculate_color_id,
)
from pocketboy.prioritization import SpritePixel
from pocketboy.video import (
    VideoState,
    get_obj_enabled_mode,
    get_obj_size_mode,
    get_tile_line_bytes,
)

SPRITE_LIMIT_PER_SCANLINE = 10
TOTAL_SPRITES = 40

TILE_DATA_BYTE_SIZE = 16
SPRITE_BYTE_SIZE = 4
SPRITE_WIDTH = 8

_CGB_OPRI_PRIORITY_BIT = 0


@dataclass
class Sprite:
    """A decoded object attribute memory entry, in screen coordinates."""

    y_pos: int
    x_pos: int
    tile_index: int
    priority: bool
    y_flip: bool
    x_flip: bool
    dmg_palette: int
    oam_index: int
    cgb_from_bank_one: bool
    cgb_palette: int

    def has_higher_priority_than(self, other: Sprite, oam_location_prioritization: bool) -> bool:
        """Return whether this sprite is drawn over ``other``."""
        earlier_in_oam = self.oam_index < other.oam_index
        if oam_location_prioritization:
            return earlier_in_oam
        return self.x_pos < other.x_pos or (self.x_pos == other.x_pos and earlier_in_oam)


def _within_scanline(sprite_y_pos: int, y: int, eight_by_sixteen_mode: bool) -> bool:
    sprite_height = 16 if eight_by_sixteen_mode else 8
    last_row = sprite_y_pos + sprite_height
    return sprite_y_pos <= y < last_row and last_row >= 0


def _overlaps(sprite: Sprite, x: int, y: int, eight_by_sixteen_mode: bool) -> bool:
    return (
        _within_scanline(sprite.y_pos, y, eight_by_sixteen_mode)
        and sprite.x_pos <= x < sprite.x_pos + SPRITE_WIDTH
    )


def _pull_sprite(state: VideoState, sprite_number: int) -> Sprite:
    oam_index = sprite_number * SPRITE_BYTE_SIZE
    y_pos, x_pos, tile_index, attributes = state.object_attribute_memory[
        oam_index : oam_index + SPRITE_BYTE_SIZE
    ]
    return Sprite(
        y_pos=y_pos - 16,
        x_pos=x_pos - 8,
        tile_index=tile_index,
        priority=is_bit_set(attributes, 7),
        y_flip=is_bit_set(attributes, 6),
        x_flip=is_bit_set(attributes, 5),
        dmg_palette=get_bit(attributes, 4),
        oam_index=oam_index,
        cgb_from_bank_one=is_bit_set(attributes, 3),
        cgb_palette=attributes & 0b111,
    )


def collect_scanline_sprites(state: VideoState) -> list[Sprite]:
    """Return up to ten sprites from OAM that cover the current line."""
    eight_by_sixteen_mode = get_obj_size_mode(state.lcdc)
    sprites: list[Sprite] = []
    for sprite_number in range(TOTAL_SPRITES):
        sprite = _pull_sprite(state, sprite_number)
        if _within_scanline(sprite.y_pos, state.ly, eight_by_sixteen_mode):
            sprites.append(sprite)
            if len(sprites) == SPRITE_LIMIT_PER_SCANLINE:
                break
    return sprites


def _lookup_possible_sprites(
    state: VideoState, x: int, y: int, eight_by_sixteen_mode: bool
) -> list[Sprite]:
    return [
        sprite
        for sprite in state.sprite_buffer[:TOTAL_SPRITES]
        if _overlaps(sprite, x, y, eight_by_sixteen_mode)
    ]


def _calculate_tile_index(sprite: Sprite, y: int, eight_by_sixteen_mode: bool) -> int:
    if not eight_by_sixteen_mode:
        return sprite.tile_index
    lower_half = (y - sprite.y_pos) >= 8
    if lower_half != sprite.y_flip:
        return sprite.tile_index | 0x01
    return sprite.tile_index & 0xFE


def calculate_sprite_pixel_color(state: VideoState, sprite: Sprite, x: int, y: int) -> Color | None:
    """Return the sprite's color at screen ``(x, y)``, or None if transparent."""
    eight_by_sixteen_mode = get_obj_size_mode(state.lcdc)
    tile_index = _calculate_tile_index(sprite, y, eight_by_sixteen_mode)
    tile_data_index = tile_index * TILE_DATA_BYTE_SIZE
    row_offset = (y - sprite.y_pos) % 8
    column_offset = x - sprite.x_pos

    if column_offset < 0:
        return None

    from_bank_one = sprite.cgb_from_bank_one if state.cgb else False
    lsb_byte, msb_byte = get_tile_line_bytes(
        state.video_ram, tile_data_index, row_offset, sprite.y_flip, from_bank_one
    )
    color_id = calculate_color_id(column_offset, msb_byte, lsb_byte, sprite.x_flip)

    if state.cgb:
        dmg_compatible = state.dmg_compatible
        palette_number = sprite.dmg_palette if dmg_compatible else sprite.cgb_palette
        return as_cgb_obj_color_rgb(state.palettes, palette_number, color_id, dmg_compatible)
    return as_dmg_obj_color_rgb(state.palettes, sprite.dmg_palette, color_id)


def _resolve_highest_priority_sprite(
    state: VideoState, sprites: list[Sprite], x: int, y: int
) -> tuple[Sprite, Color | None] | None:
    oam_location_prioritization = state.cgb and not is_bit_set(
        state.cgb_opri, _CGB_OPRI_PRIORITY_BIT
    )
    best: tuple[Sprite, Color | None] | None = None
    for sprite in sprites:
        color = calculate_sprite_pixel_color(state, sprite, x, y)
        if best is None:
            best = (sprite, color)
            continue
        current_sprite, current_color = best
        if color is not None and (
            current_color is None
            or sprite.has_higher_priority_than(current_sprite, oam_location_prioritization)
        ):
            best = (sprite, color)
    return best


def read_sprite_pixel_color(state: VideoState, x: int, y: int) -> SpritePixel | None:
    """Return the visible sprite pixel at screen ``(x, y)``, if any."""
    if not get_obj_enabled_mode(state.lcdc):
        return None
    eight_by_sixteen_mode = get_obj_size_mode(state.lcdc)
    candidates = _lookup_possible_sprites(state, x, y, eight_by_sixteen_mode)
    best = _resolve_highest_priority_sprite(state, candidates, x, y)
    if best is None:
        return None
    sprite, color = best
    if color is None:
        return None
    return SpritePixel(color=color, prioritize_bg=sprite.priority)