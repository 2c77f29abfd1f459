import pytest

from pocketboy.cartridge import Cartridge, load_rom_buffer
from pocketboy.header import (
    CART_TYPE_MBC1,
    CART_TYPE_MBC1_WITH_RAM,
    CART_TYPE_MBC3_RAM_BATTERY,
    CART_TYPE_ROM_ONLY,
    CARTRIDGE_TYPE_ADDRESS,
    RAM_SIZE_ADDRESS,
    SGB_SUPPORT_ADDRESS,
    CartridgeError,
)
from pocketboy.mbc1 import MBCMode


def rom_image(size=0x8000, **patches):
    buffer = bytearray(size)
    for address, value in patches.get("bytes", {}).items():
        buffer[address] = value
    return buffer


def test_loads_rom_buffer_and_reads_back():
    buffer = rom_image(
        0xA000,
        bytes={
            0: 0xA0,
            1: 0xCC,
            2: 0x3B,
            3: 0x4C,
            CARTRIDGE_TYPE_ADDRESS: CART_TYPE_MBC1,
            0x7FFF: 0xD4,
            0x8000: 0xBB,
            0x8001: 0xD1,
        },
    )
    cartridge = load_rom_buffer(bytes(buffer))
    assert cartridge.read_rom(0x0000) == 0xA0
    assert cartridge.read_rom(0x0001) == 0xCC
    assert cartridge.read_rom(0x0002) == 0x3B
    assert cartridge.read_rom(0x0003) == 0x4C
    assert cartridge.read_rom(0x7FFF) == 0xD4
    assert cartridge.header.sgb_support is False
    assert cartridge.header.type_code == CART_TYPE_MBC1


def test_rom_is_a_copy_of_the_buffer():
    buffer = rom_image(bytes={5: 0x77})
    cartridge = load_rom_buffer(bytes(buffer))
    assert cartridge.rom == buffer


def test_sgb_support_flag():
    buffer = rom_image(bytes={SGB_SUPPORT_ADDRESS: 0x03})
    assert load_rom_buffer(bytes(buffer)).header.sgb_support is True


def test_ram_sized_from_header():
    buffer = rom_image(bytes={RAM_SIZE_ADDRESS: 0x3})
    assert len(load_rom_buffer(bytes(buffer)).ram) == 0x8000


def test_no_ram_when_index_is_zero():
    assert len(load_rom_buffer(bytes(rom_image())).ram) == 0


def test_battery_flag_for_battery_type():
    buffer = rom_image(bytes={CARTRIDGE_TYPE_ADDRESS: CART_TYPE_MBC3_RAM_BATTERY})
    assert load_rom_buffer(bytes(buffer)).header.has_battery is True


def test_too_small_buffer_raises():
    with pytest.raises(CartridgeError):
        load_rom_buffer(bytes(0x100))


def test_unsupported_type_raises():
    buffer = rom_image(bytes={CARTRIDGE_TYPE_ADDRESS: 0x05})
    with pytest.raises(CartridgeError):
        load_rom_buffer(bytes(buffer))


def test_unsupported_ram_size_raises():
    buffer = rom_image(bytes={RAM_SIZE_ADDRESS: 0x6})
    with pytest.raises(CartridgeError):
        load_rom_buffer(bytes(buffer))


def test_rom_only_reads_rom_directly():
    buffer = rom_image(bytes={0x5ACE: 0x55})
    cartridge = load_rom_buffer(bytes(buffer))
    assert cartridge.header.type_code == CART_TYPE_ROM_ONLY
    assert cartridge.read_rom(0x5ACE) == 0x55


def test_rom_only_ram_reads_ff_and_ignores_writes():
    cartridge = load_rom_buffer(bytes(rom_image(bytes={RAM_SIZE_ADDRESS: 0x2})))
    cartridge.write_ram(0x0001, 0x12)
    assert cartridge.read_ram(0x0001) == 0xFF
    assert not any(cartridge.ram)


def test_rom_only_ignores_rom_writes():
    cartridge = load_rom_buffer(bytes(rom_image(bytes={0x2000: 0x09})))
    cartridge.write_rom(0x2000, 0x01)
    assert cartridge.read_rom(0x2000) == 0x09


def test_mbc1_bank_switch_masks_bank_number():
    buffer = rom_image(0x40000, bytes={0: 0xB1, 1: 0xD2, 0x8000: 0xBB, 0x8001: 0xD1})
    cartridge = load_rom_buffer(bytes(buffer))
    cartridge.header.type_code = CART_TYPE_MBC1
    cartridge.header.max_banks = 16
    cartridge.mbc1.mode = MBCMode.ROM
    cartridge.write_rom(0x2000, 0x12)
    assert cartridge.mbc1.rom_bank_number == 0x2
    assert cartridge.read_rom(0x4001) == 0xD1


def test_mbc1_ram_round_trip():
    buffer = rom_image(
        bytes={CARTRIDGE_TYPE_ADDRESS: CART_TYPE_MBC1_WITH_RAM, RAM_SIZE_ADDRESS: 0x3}
    )
    cartridge = load_rom_buffer(bytes(buffer))
    cartridge.write_rom(0x0000, 0x0A)
    cartridge.write_ram(0x0005, 0xA1)
    assert cartridge.read_ram(0x0005) == 0xA1


def test_unknown_type_code_raises_on_access():
    cartridge = Cartridge()
    cartridge.header.type_code = 0x05
    with pytest.raises(CartridgeError):
        cartridge.read_rom(0x0000)
    with pytest.raises(CartridgeError):
        cartridge.write_ram(0x0000, 0x01)