"""Tile color decoding for monochrome and color palettes."""

from __future__ import annotations

from dataclasses import dataclass, field

from pocketboy.bits import get_bit, is_bit_set

Color = tuple[int, int, int, int]

BLACK: Color = (0x00, 0x00, 0x00, 0xFF)
DARK_GRAY: Color = (0xA9, 0xA9, 0xA9, 0xFF)
LIGHT_GRAY: Color = (0xD3, 0xD3, 0xD3, 0xFF)
WHITE: Color = (0xFF, 0xFF, 0xFF, 0xFF)

COLORS_PER_PALETTE = 4
CGB_PALETTES = 8
PALETTE_DATA_SIZE = COLORS_PER_PALETTE * CGB_PALETTES * 2

MONOCHROME_COLORS: tuple[Color, ...] = (WHITE, LIGHT_GRAY, DARK_GRAY, BLACK)

_ADDRESS_MASK = 0b00111111
_AUTO_INCREMENT_BIT = 7


def _palette_data_index(palette_number: int, color_id: int) -> int:
    return ((palette_number * COLORS_PER_PALETTE) + color_id) * 2


def _read_rgb555(data: bytearray, palette_number: int, color_id: int) -> int:
    index = _palette_data_index(palette_number, color_id)
    return data[index & ~1] | (data[index | 1] << 8)


def _next_specification(specification: int) -> int:
    if is_bit_set(specification, _AUTO_INCREMENT_BIT):
        return ((specification + 1) | 0x80) & 0xFF
    return specification


@dataclass
class Palettes:
    """Monochrome palette registers and color palette memory."""

    bgp: int = 0
    obp0: int = 0
    obp1: int = 0
    cgb_bcpd: bytearray = field(default_factory=lambda: bytearray(PALETTE_DATA_SIZE))
    cgb_ocpd: bytearray = field(default_factory=lambda: bytearray(PALETTE_DATA_SIZE))
    cgb_bcps: int = 0
    cgb_ocps: int = 0

    def lookup_background(self, palette_number: int, color_id: int) -> int:
        """Return the RGB555 value of a background palette entry."""
        return _read_rgb555(self.cgb_bcpd, palette_number, color_id)

    def lookup_object(self, palette_number: int, color_id: int) -> int:
        """Return the RGB555 value of an object palette entry."""
        return _read_rgb555(self.cgb_ocpd, palette_number, color_id)

    def read_bcpd(self) -> int:
        """Return the background palette byte addressed by BCPS."""
        return self.cgb_bcpd[self.cgb_bcps & _ADDRESS_MASK]

    def write_bcpd(self, value: int) -> None:
        """Write the background palette byte addressed by BCPS."""
        self.cgb_bcpd[self.cgb_bcps & _ADDRESS_MASK] = value & 0xFF
        self.cgb_bcps = _next_specification(self.cgb_bcps)

    def read_ocpd(self) -> int:
        """Return the object palette byte addressed by OCPS."""
        return self.cgb_ocpd[self.cgb_ocps & _ADDRESS_MASK]

    def write_ocpd(self, value: int) -> None:
        """Write the object palette byte addressed by OCPS."""
        self.cgb_ocpd[self.cgb_ocps & _ADDRESS_MASK] = value & 0xFF
        self.cgb_ocps = _next_specification(self.cgb_ocps)


def calculate_color_id(bit_index: int, msb_byte: int, lsb_byte: int, x_flip: bool) -> int:
    """Return the 2-bit color id of a pixel within a tile line."""
    index = bit_index if x_flip else 7 - bit_index
    return get_bit(msb_byte, index) * 2 + get_bit(lsb_byte, index)


def _shade(color_id: int, palette: int) -> int:
    return (palette >> (color_id * 2)) & 0b11


def _dmg_bg_key(palettes: Palettes, color_id: int) -> int:
    return _shade(color_id, palettes.bgp)


def _dmg_obj_key(palettes: Palettes, palette_number: int, color_id: int) -> int | None:
    if color_id == 0:
        return None
    palette = palettes.obp0 if palette_number == 0 else palettes.obp1
    return _shade(color_id, palette)


def _rgb555_as_color(rgb555: int) -> Color:
    red = rgb555 & 0b11111
    green = (rgb555 >> 5) & 0b11111
    blue = (rgb555 >> 10) & 0b11111
    return ((red * 0xFF) // 31, (green * 0xFF) // 31, (blue * 0xFF) // 31, 0xFF)


def as_dmg_bg_color_rgb(palettes: Palettes, color_id: int) -> Color:
    """Return the monochrome background color for a color id."""
    return MONOCHROME_COLORS[_dmg_bg_key(palettes, color_id)]


def as_dmg_obj_color_rgb(palettes: Palettes, palette_number: int, color_id: int) -> Color | None:
    """Return the monochrome sprite color, or None where it is transparent."""
    key = _dmg_obj_key(palettes, palette_number, color_id)
    return None if key is None else MONOCHROME_COLORS[key]


def as_cgb_bg_color_rgb(
    palettes: Palettes, palette_number: int, color_id: int, dmg_compatible: bool
) -> Color:
    """Return the color-mode background color for a color id."""
    if dmg_compatible:
        color_id = _dmg_bg_key(palettes, color_id)
    return _rgb555_as_color(palettes.lookup_background(palette_number, color_id))


def as_cgb_obj_color_rgb(
    palettes: Palettes, palette_number: int, color_id: int, dmg_compatible: bool
) -> Color | None:
    """Return the color-mode sprite color, or None where it is transparent."""
    if color_id == 0:
        return None
    if dmg_compatible:
        key = _dmg_obj_key(palettes, palette_number, color_id)
        if key is None:
            return None
        color_id = key
    return _rgb555_as_color(palettes.lookup_object(palette_number, color_id))