"""MBC1 memory bank controller."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from pocketboy.header import (
    CART_TYPE_MBC1_WITH_RAM,
    CART_TYPE_MBC1_WITH_RAM_PLUS_BATTERY,
    CartridgeHeader,
)

_RAM_TYPES = frozenset({CART_TYPE_MBC1_WITH_RAM, CART_TYPE_MBC1_WITH_RAM_PLUS_BATTERY})

ROM_BANK_SIZE = 0x4000
RAM_BANK_SIZE = 0x2000


class _Cartridge(Protocol):
    header: CartridgeHeader
    rom: bytearray
    ram: bytearray


class MBCMode(Enum):
    """Banking mode selected through the 0x6000-0x7FFF register."""

    ROM = "rom"
    RAM = "ram"


def _ram_supported(cartridge: _Cartridge) -> bool:
    return cartridge.header.type_code in _RAM_TYPES


def _invalid_address(address: int) -> ValueError:
    return ValueError(f"Invalid ROM address: {address:#X}")


@dataclass
class MBC1:
    """Banking registers of an MBC1 controller."""

    ram_enabled: bool = False
    rom_bank_number: int = 1
    ram_bank_number: int = 0
    mode: MBCMode = MBCMode.ROM

    def write_rom(self, cartridge: _Cartridge, address: int, value: int) -> None:
        """Handle a write to the ROM area, which sets banking registers."""
        if 0x0000 <= address <= 0x1FFF:
            if _ram_supported(cartridge):
                self.ram_enabled = (value & 0xF) == 0x0A
        elif 0x2000 <= address <= 0x3FFF:
            masked_value = value & 0x1F
            bank_value = masked_value if masked_value else 1
            max_bank_mask = ((cartridge.header.max_banks - 1) & 0xFFFF) & 0x1F
            bank_value &= max_bank_mask
            self.rom_bank_number = ((self.rom_bank_number & 0x60) + (bank_value & 0x1F)) & 0xFF
        elif 0x4000 <= address <= 0x5FFF:
            if self.mode is MBCMode.RAM:
                self.ram_bank_number = value & 0x3
            elif cartridge.header.max_banks >= 64:
                self.rom_bank_number = (((value & 0x3) << 5) + (self.rom_bank_number & 0x1F)) & 0xFF
        elif 0x6000 <= address <= 0x7FFF:
            if _ram_supported(cartridge):
                self.mode = MBCMode.RAM if value == 1 else MBCMode.ROM
        else:
            raise _invalid_address(address)

    def read_rom(self, cartridge: _Cartridge, address: int) -> int:
        """Read from the fixed or the switchable ROM bank."""
        if 0x0000 <= address <= 0x3FFF:
            return cartridge.rom[address]
        if 0x4000 <= address <= 0x7FFF:
            base = self.rom_bank_number * ROM_BANK_SIZE
            return cartridge.rom[base + (address & 0x3FFF)]
        raise _invalid_address(address)

    def write_ram(self, cartridge: _Cartridge, address: int, value: int) -> None:
        """Write to external RAM in the selected bank, if RAM is enabled."""
        if self.ram_enabled:
            cartridge.ram[self.ram_bank_number * RAM_BANK_SIZE + address] = value & 0xFF

    def read_ram(self, cartridge: _Cartridge, address: int) -> int:
        """Read external RAM in the selected bank, or 0xFF when disabled."""
        if not self.ram_enabled:
            return 0xFF
        return cartridge.ram[self.ram_bank_number * RAM_BANK_SIZE + address]