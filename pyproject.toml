[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitrun"
version = "1.0.0"
description = "A small pixel-collecting arcade game on a simulated 128x64 monochrome display and 5x5 LED matrix"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "ssd1306", "oled", "led-matrix", "pixel"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bitrun = "bitrun.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bitrun"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
