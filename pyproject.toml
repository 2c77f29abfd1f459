[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketboy"
version = "0.1.0"
description = "Handheld game console emulation core: cartridges, memory bank controllers, joypad, palettes and scanline rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["emulator", "gameboy", "game boy color", "scanline", "cartridge", "mbc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pocketboy"]

[tool.hatch.build.targets.sdist]
include = ["pocketboy", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
