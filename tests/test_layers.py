from pocketboy.colors import BLACK, DARK_GRAY, LIGHT_GRAY
from pocketboy.layers import read_bg_color, read_window_color
from pocketboy.prioritization import BackgroundPixel
from pocketboy.video import VideoState

RED = (0xFF, 0x00, 0x00, 0xFF)
BLUE = (0x00, 0x00, 0xFF, 0xFF)


def write_tile(state, base, index, lsb, msb):
    for row in range(8):
        state.video_ram[base + index * 16 + row * 2] = lsb
        state.video_ram[base + index * 16 + row * 2 + 1] = msb


def dmg_state(lcdc=0b10000011):
    state = VideoState()
    state.palettes.bgp = 0b00011011
    state.lcdc = lcdc
    return state


def test_reads_background_pixel_in_dmg_mode():
    state = dmg_state()
    write_tile(state, 0x1000, 0, 0xFF, 0x00)
    assert read_bg_color(state, 0, 0) == BackgroundPixel(DARK_GRAY, False)


def test_background_uses_unsigned_addressing():
    state = dmg_state(lcdc=0b10010011)
    write_tile(state, 0x0000, 0, 0x00, 0xFF)
    assert read_bg_color(state, 3, 5).color == LIGHT_GRAY


def test_background_pixels_repeat_per_tile_map_entry():
    state = dmg_state()
    write_tile(state, 0x1000, 0, 0x80, 0x00)
    assert read_bg_color(state, 0, 0) == read_bg_color(state, 8, 0)
    assert read_bg_color(state, 1, 0).color == BLACK


def test_reads_background_pixel_in_color_mode():
    state = VideoState()
    state.cgb = True
    state.lcdc = 0b10000011
    write_tile(state, 0x1000, 0, 0xFF, 0x00)
    state.video_ram[0x3800] = 0b10000001
    state.palettes.cgb_bcpd[10] = 0x1F
    state.palettes.cgb_bcpd[11] = 0x00
    assert read_bg_color(state, 0, 0) == BackgroundPixel(RED, True)


def test_color_mode_in_dmg_compatibility_uses_bgp():
    state = VideoState()
    state.cgb = True
    state.dmg_compatible = True
    state.lcdc = 0b10000011
    state.palettes.bgp = 0b00011011
    write_tile(state, 0x1000, 0, 0xFF, 0x00)
    state.video_ram[0x3800] = 0b00000001
    state.palettes.cgb_bcpd[4] = 0x00
    state.palettes.cgb_bcpd[5] = 0x7C
    assert read_bg_color(state, 0, 0).color == BLUE


def test_color_mode_x_flip_mirrors_line():
    state = VideoState()
    state.cgb = True
    state.lcdc = 0b10000011
    write_tile(state, 0x1000, 0, 0x80, 0x00)
    state.palettes.cgb_bcpd[2] = 0x1F
    plain = read_bg_color(state, 0, 0)
    state.video_ram[0x3800] = 0b00100000
    flipped = read_bg_color(state, 7, 0)
    assert flipped == plain
    assert plain.color == RED


def test_color_mode_reads_tile_from_bank_one():
    state = VideoState()
    state.cgb = True
    state.lcdc = 0b10000011
    write_tile(state, 0x3000, 0, 0xFF, 0x00)
    state.palettes.cgb_bcpd[2] = 0x1F
    state.video_ram[0x3800] = 0b00001000
    assert read_bg_color(state, 0, 0).color == RED


def test_window_disabled_gives_none():
    state = dmg_state()
    state.wx = 7
    assert read_window_color(state, 0, 0) is None


def test_reads_window_pixel_from_window_tile_map():
    state = dmg_state(lcdc=0b11100011)
    state.wx = 7
    state.video_ram[0x1C00] = 1
    write_tile(state, 0x1000, 1, 0x00, 0xFF)
    assert read_window_color(state, 0, 0) == BackgroundPixel(LIGHT_GRAY, False)


def test_window_outside_area_gives_none():
    state = dmg_state(lcdc=0b11100011)
    state.wx = 10
    state.wy = 4
    assert read_window_color(state, 2, 10) is None
    assert read_window_color(state, 5, 3) is None


def test_window_is_offset_by_its_position():
    state = dmg_state(lcdc=0b11100011)
    state.wx = 10
    state.video_ram[0x1C00] = 1
    write_tile(state, 0x1000, 1, 0x80, 0x00)
    assert read_window_color(state, 3, 0).color == DARK_GRAY
    assert read_window_color(state, 4, 0).color == BLACK