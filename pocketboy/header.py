"""Cartridge header parsing and cartridge type classification."""

from __future__ import annotations

from dataclasses import dataclass

ENTRY_POINT_ADDRESS = 0x100
TITLE_START_ADDRESS = 0x134
TITLE_END_ADDRESS = 0x143
SGB_SUPPORT_ADDRESS = 0x146
CARTRIDGE_TYPE_ADDRESS = 0x147
ROM_SIZE_ADDRESS = 0x148
RAM_SIZE_ADDRESS = 0x149

_CGB_COMPATIBILITY_INDEX = 15
_CGB_FLAGS = (0xC0, 0x80)

CART_TYPE_ROM_ONLY = 0x0
CART_TYPE_MBC1 = 0x1
CART_TYPE_MBC1_WITH_RAM = 0x2
CART_TYPE_MBC1_WITH_RAM_PLUS_BATTERY = 0x3
CART_TYPE_MBC3_TIMER_BATTERY = 0xF
CART_TYPE_MBC3_TIMER_RAM_BATTERY = 0x10
CART_TYPE_MBC3 = 0x11
CART_TYPE_MBC3_RAM = 0x12
CART_TYPE_MBC3_RAM_BATTERY = 0x13

_MBC1_TYPES = frozenset(
    {CART_TYPE_MBC1, CART_TYPE_MBC1_WITH_RAM, CART_TYPE_MBC1_WITH_RAM_PLUS_BATTERY}
)
_MBC3_TYPES = frozenset(
    {
        CART_TYPE_MBC3,
        CART_TYPE_MBC3_RAM,
        CART_TYPE_MBC3_RAM_BATTERY,
        CART_TYPE_MBC3_TIMER_BATTERY,
        CART_TYPE_MBC3_TIMER_RAM_BATTERY,
    }
)
_BATTERY_TYPES = frozenset(
    {
        CART_TYPE_MBC1_WITH_RAM_PLUS_BATTERY,
        CART_TYPE_MBC3_TIMER_BATTERY,
        CART_TYPE_MBC3_TIMER_RAM_BATTERY,
        CART_TYPE_MBC3_RAM_BATTERY,
    }
)

SUPPORTED_CARTRIDGE_TYPES = frozenset({CART_TYPE_ROM_ONLY}) | _MBC1_TYPES | _MBC3_TYPES

_RAM_SIZES = {
    0x0: 0,
    0x1: 0x800,
    0x2: 0x2000,
    0x3: 0x8000,
    0x4: 0x20000,
    0x5: 0x10000,
}


class CartridgeError(Exception):
    """Raised when a ROM image cannot be loaded."""


def is_supported(type_code: int) -> bool:
    """Return whether the cartridge type is emulated."""
    return type_code in SUPPORTED_CARTRIDGE_TYPES


def is_mbc1(type_code: int) -> bool:
    """Return whether the cartridge type uses an MBC1 controller."""
    return type_code in _MBC1_TYPES


def is_mbc3(type_code: int) -> bool:
    """Return whether the cartridge type uses an MBC3 controller."""
    return type_code in _MBC3_TYPES


def is_battery_backed(type_code: int) -> bool:
    """Return whether the cartridge keeps its RAM on a battery."""
    return type_code in _BATTERY_TYPES


def max_banks_for(rom_size_index: int) -> int:
    """Return the number of 16 KiB ROM banks for a header size index."""
    return 2 ** (rom_size_index + 1)


def ram_size_for(ram_size_index: int) -> int:
    """Return the external RAM size in bytes for a header size index."""
    try:
        return _RAM_SIZES[ram_size_index]
    except KeyError:
        raise CartridgeError(f"Unsupported RAM size index: {ram_size_index}") from None


def _parse_title(title_bytes: bytes) -> str:
    chars = []
    for index, byte in enumerate(title_bytes):
        if byte == 0x00 or (index == _CGB_COMPATIBILITY_INDEX and byte in _CGB_FLAGS):
            break
        chars.append(chr(byte))
    return "".join(chars)


@dataclass
class CartridgeHeader:
    """Fields read from the cartridge header."""

    sgb_support: bool = False
    type_code: int = 0
    max_banks: int = 0
    title: str = ""
    has_battery: bool = False

    @classmethod
    def from_rom(cls, buffer: bytes) -> CartridgeHeader:
        """Parse the header of a ROM image, raising CartridgeError if unusable."""
        if len(buffer) <= ENTRY_POINT_ADDRESS:
            raise CartridgeError("Buffer is too small to contain a valid ROM.")
        type_code = buffer[CARTRIDGE_TYPE_ADDRESS]
        sgb_support = buffer[SGB_SUPPORT_ADDRESS] == 0x03
        rom_size = buffer[ROM_SIZE_ADDRESS]
        title = _parse_title(bytes(buffer[TITLE_START_ADDRESS : TITLE_END_ADDRESS + 1]))
        if not is_supported(type_code):
            raise CartridgeError(f"Unsupported cartridge type {type_code}.")
        return cls(
            sgb_support=sgb_support,
            type_code=type_code,
            max_banks=max_banks_for(rom_size),
            title=title,
            has_battery=is_battery_backed(type_code),
        )