"""BitRun: a pixel-collecting arcade game with a simulated OLED display and LED matrix."""

__version__ = "1.0.0"
__all__ = ["cli", "display", "font", "game", "matrix"]