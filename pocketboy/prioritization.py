"""Choosing between background and sprite pixels."""

from __future__ import annotations

from dataclasses import dataclass

from pocketboy.colors import WHITE, Color


@dataclass(frozen=True)
class BackgroundPixel:
    """A background or window pixel and its priority attribute."""

    color: Color
    prioritize_bg: bool


@dataclass(frozen=True)
class SpritePixel:
    """A sprite pixel and whether it yields to the background."""

    color: Color
    prioritize_bg: bool


def resolve_highest_priority_pixel(
    cgb_mode: bool,
    lcdc_bg_and_window_priority: bool,
    bg_pixel: BackgroundPixel,
    sprite_pixel: SpritePixel | None,
) -> Color:
    """Return the color that ends up on screen."""
    if sprite_pixel is None:
        if not cgb_mode and not lcdc_bg_and_window_priority:
            return WHITE
        return bg_pixel.color
    if not cgb_mode:
        if not sprite_pixel.prioritize_bg or bg_pixel.color == WHITE:
            return sprite_pixel.color
        return bg_pixel.color
    if (
        bg_pixel.color == WHITE
        or not lcdc_bg_and_window_priority
        or (not bg_pixel.prioritize_bg and not sprite_pixel.prioritize_bg)
    ):
        return sprite_pixel.color
    return bg_pixel.color