"""MBC3 memory bank controller with its real-time clock registers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Protocol

from pocketboy.header import (
    CART_TYPE_MBC3_RAM,
    CART_TYPE_MBC3_RAM_BATTERY,
    CART_TYPE_MBC3_TIMER_BATTERY,
    CART_TYPE_MBC3_TIMER_RAM_BATTERY,
    CartridgeHeader,
)

ROM_BANK_SIZE = 0x4000
RAM_BANK_SIZE = 0x2000

_RAM_TYPES = frozenset(
    {CART_TYPE_MBC3_RAM, CART_TYPE_MBC3_RAM_BATTERY, CART_TYPE_MBC3_TIMER_RAM_BATTERY}
)
_TIMER_TYPES = frozenset({CART_TYPE_MBC3_TIMER_RAM_BATTERY, CART_TYPE_MBC3_TIMER_BATTERY})

_RTC_REGISTERS = {
    0x08: "seconds",
    0x09: "minutes",
    0x0A: "hours",
    0x0B: "days_lower",
    0x0C: "days_upper",
}


class _Cartridge(Protocol):
    header: CartridgeHeader
    rom: bytearray
    ram: bytearray


@dataclass
class RTC:
    """Real-time clock register values."""

    halted: bool = False
    seconds: int = 0
    minutes: int = 0
    hours: int = 0
    days_lower: int = 0
    days_upper: int = 0


def empty_clock() -> RTC:
    """Return a clock reading with every register at zero."""
    return RTC()


def _ram_supported(cartridge: _Cartridge) -> bool:
    return cartridge.header.type_code in _RAM_TYPES


def _timer_supported(cartridge: _Cartridge) -> bool:
    return cartridge.header.type_code in _TIMER_TYPES


def _invalid_address(address: int) -> ValueError:
    return ValueError(f"Invalid ROM address: {address:#X}")


@dataclass
class MBC3:
    """Banking and clock registers of an MBC3 controller."""

    rom_bank_number: int = 1
    ram_rtc_enabled: bool = False
    ram_rtc_selection: int = 0
    rtc: RTC = field(default_factory=empty_clock)
    rtc_latch: int = 0xFF
    get_next_rtc: Callable[[], RTC] = field(default=empty_clock)

    def write_rom(self, cartridge: _Cartridge, address: int, value: int) -> None:
        """Handle a write to the ROM area, which sets banking and latch registers."""
        if 0x0000 <= address <= 0x1FFF:
            if _ram_supported(cartridge) or _timer_supported(cartridge):
                self.ram_rtc_enabled = (value & 0xF) == 0x0A
        elif 0x2000 <= address <= 0x3FFF:
            self.rom_bank_number = (value or 1) & 0x7F
        elif 0x4000 <= address <= 0x5FFF:
            if value <= 0x03 or 0x08 <= value <= 0x0C:
                self.ram_rtc_selection = value
        elif 0x6000 <= address <= 0x7FFF:
            if _timer_supported(cartridge):
                if self.rtc_latch == 0x00 and value == 0x01:
                    self.rtc = self.get_next_rtc()
                self.rtc_latch = value
        else:
            raise _invalid_address(address)

    def read_rom(self, cartridge: _Cartridge, address: int) -> int:
        """Read from the fixed or the switchable ROM bank."""
        if 0x0000 <= address <= 0x3FFF:
            return cartridge.rom[address]
        if 0x4000 <= address <= 0x7FFF:
            return cartridge.rom[self.rom_bank_number * ROM_BANK_SIZE + (address & 0x3FFF)]
        raise _invalid_address(address)

    def write_ram(self, cartridge: _Cartridge, address: int, value: int) -> None:
        """Write to the selected RAM bank or clock register, if enabled."""
        if not self.ram_rtc_enabled:
            return
        selection = self.ram_rtc_selection
        if selection <= 0x03 and _ram_supported(cartridge):
            cartridge.ram[selection * RAM_BANK_SIZE + address] = value & 0xFF
        elif selection in _RTC_REGISTERS and _timer_supported(cartridge):
            setattr(self.rtc, _RTC_REGISTERS[selection], value & 0xFF)

    def read_ram(self, cartridge: _Cartridge, address: int) -> int:
        """Read the selected RAM bank or clock register, or 0xFF."""
        if not self.ram_rtc_enabled:
            return 0xFF
        selection = self.ram_rtc_selection
        if selection <= 0x03 and _ram_supported(cartridge):
            return cartridge.ram[selection * RAM_BANK_SIZE + address]
        if selection in _RTC_REGISTERS and _timer_supported(cartridge):
            return getattr(self.rtc, _RTC_REGISTERS[selection])
        return 0xFF