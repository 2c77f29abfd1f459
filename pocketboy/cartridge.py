"""Cartridge image with its memory bank controller."""

from __future__ import annotations

from dataclasses import dataclass, field

from pocketboy.header import (
    CART_TYPE_ROM_ONLY,
    RAM_SIZE_ADDRESS,
    CartridgeError,
    CartridgeHeader,
    is_mbc1,
    is_mbc3,
    ram_size_for,
)
from pocketboy.mbc1 import MBC1
from pocketboy.mbc3 import MBC3


@dataclass
class Cartridge:
    """ROM, external RAM and controller state of a loaded cartridge."""

    rom: bytearray = field(default_factory=bytearray)
    ram: bytearray = field(default_factory=bytearray)
    header: CartridgeHeader = field(default_factory=CartridgeHeader)
    mbc1: MBC1 = field(default_factory=MBC1)
    mbc3: MBC3 = field(default_factory=MBC3)

    def _controller(self) -> MBC1 | MBC3 | None:
        type_code = self.header.type_code
        if type_code == CART_TYPE_ROM_ONLY:
            return None
        if is_mbc1(type_code):
            return self.mbc1
        if is_mbc3(type_code):
            return self.mbc3
        raise CartridgeError(f"Unsupported cartridge type: {type_code}")

    def read_rom(self, address: int) -> int:
        """Read a byte from the ROM area (0x0000-0x7FFF)."""
        controller = self._controller()
        if controller is None:
            return self.rom[address]
        return controller.read_rom(self, address)

    def write_rom(self, address: int, value: int) -> None:
        """Write to the ROM area, which programs the controller."""
        controller = self._controller()
        if controller is not None:
            controller.write_rom(self, address, value)

    def read_ram(self, address: int) -> int:
        """Read a byte of external RAM at an offset within its window."""
        controller = self._controller()
        if controller is None:
            return 0xFF
        return controller.read_ram(self, address)

    def write_ram(self, address: int, value: int) -> None:
        """Write a byte of external RAM at an offset within its window."""
        controller = self._controller()
        if controller is not None:
            controller.write_ram(self, address, value)


def load_rom_buffer(buffer: bytes) -> Cartridge:
    """Build a cartridge from a ROM image, raising CartridgeError if unusable."""
    header = CartridgeHeader.from_rom(buffer)
    ram = bytearray(ram_size_for(buffer[RAM_SIZE_ADDRESS]))
    return Cartridge(rom=bytearray(buffer), ram=ram, header=header)