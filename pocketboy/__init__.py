"""Emulation core for a handheld game console: cartridges, input, palettes and scanline rendering."""

__version__ = "0.1.0"