# pocketboy

Building blocks for emulating a monochrome or colour handheld game console:
cartridge loading and memory bank controllers, joypad state, the double-speed
switch, palettes, and a scanline renderer that composes background, window and
sprites into an RGBA frame buffer.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `pocketboy.bits`: bit and word helpers (`is_bit_set`, `get_bit`,
  `set_bit`, `reset_bit`, `as_word`, `as_bytes`, `get_t_cycle_increment`).
- `pocketboy.keys`: the `Key` enum, `KeyState` for the JOYP register
  (`press`, `release`, `read_joyp`, `write_joyp`), and `key_from_code`,
  which turns browser-style key codes such as `"ArrowDown"` or `"KeyZ"` into
  keys and returns `None` for unbound codes. `KeyState.press` returns the
  joypad interrupt flag (`0x10`) for the caller to raise.
- `pocketboy.speed_switch`: `SpeedSwitch` and the KEY1 register
  (`read_key1`, `write_key1`, `toggle`), each taking whether colour mode is on.
- `pocketboy.header`: `CartridgeHeader.from_rom`, which parses a ROM header
  and raises `CartridgeError` for buffers that are too small or cartridge
  types that are not supported; plus type helpers (`is_supported`, `is_mbc1`,
  `is_mbc3`, `is_battery_backed`, `max_banks_for`, `ram_size_for`).
- `pocketboy.cartridge`: `load_rom_buffer` and `Cartridge`, which routes ROM
  and RAM reads and writes to the right controller: ROM only,
  `pocketboy.mbc1.MBC1`, or `pocketboy.mbc3.MBC3` with its real-time clock
  registers (`RTC`, latched through a `get_next_rtc` callable).
- `pocketboy.colors`: `Palettes` (with BCPS/BCPD and OCPS/OCPD access,
  auto-incrementing when bit 7 is set) and colour lookups for monochrome and
  colour modes.
- `pocketboy.video`: `VideoState`, which holds video RAM, object attribute
  memory, the sprite buffer, palettes, the LCD registers, the frame buffer and
  the `cgb`, `dmg_compatible` and `in_color_bios` flags; plus LCDC bit
  decoders and `get_tile_line_bytes`.
- `pocketboy.tiles`, `pocketboy.sprites`, `pocketboy.layers`,
  `pocketboy.prioritization`: tile addressing, sprite selection
  (`collect_scanline_sprites`, `read_sprite_pixel_color`), background and
  window lookup, and pixel priority.
- `pocketboy.scanline`: `write_scanline`, which draws the line at
  `state.ly` into `state.frame_buffer` (and does nothing while
  `in_color_bios` is set).

## Example

```python
from pocketboy.cartridge import load_rom_buffer
from pocketboy.keys import KeyState, key_from_code

with open("game.gb", "rb") as rom:
    cartridge = load_rom_buffer(rom.read())

print(cartridge.header.title, cartridge.header.has_battery)
first_byte = cartridge.read_rom(0x0100)

keys = KeyState()
keys.press(key_from_code("ArrowDown"))
keys.write_joyp(0x20)
print(hex(keys.read_joyp()))  # 0x27
```

Rendering a line:

```python
from pocketboy.scanline import write_scanline
from pocketboy.sprites import collect_scanline_sprites
from pocketboy.video import VideoState

state = VideoState(lcdc=0b10000011)
state.sprite_buffer = collect_scanline_sprites(state)
write_scanline(state)
rgba_row = state.frame_buffer[: 160 * 4]
```

## What it does not do

pocketboy is a set of components, not a runnable emulator. It has no CPU, no
address-space bus tying the components together, no timers, no audio, no
LCD mode stepping or interrupt handling, no boot ROM, no window or display
front end, and no command to start. Cartridge RAM is held in memory only;
saving it to disk is left to the caller.