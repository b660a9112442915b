"""5x5 RGB LED matrix that shows the remaining lives."""

from collections.abc import Callable

NUM_PIXELS = 25


def rgb_to_grb(r: int, g: int, b: int) -> int:
    """Pack an RGB colour into the 24-bit GRB order the LEDs expect."""
    return ((g & 0xFF) << 16) | ((r & 0xFF) << 8) | (b & 0xFF)


def _pattern(*rows: str) -> tuple:
    return tuple(cell == "1" for row in rows for cell in row)


LIFE_PATTERNS = {
    0: _pattern("01110", "10001", "10001", "10001", "01110"),
    1: _pattern("11111", "00100", "00100", "01100", "00100"),
    2: _pattern("11111", "10000", "11111", "00001", "11111"),
    3: _pattern("11111", "00001", "11111", "00001", "11111"),
}

PAUSED_COLOR = rgb_to_grb(0, 0, 50)
GAME_OVER_COLOR = rgb_to_grb(50, 0, 0)
PLAYING_COLOR = rgb_to_grb(0, 50, 0)


class LedMatrix:
    """Drives a chain of 25 LEDs through ``sink``, which takes 32-bit words."""

    def __init__(self, sink: Callable[[int], None]):
        self.sink = sink
        self.frame = (0,) * NUM_PIXELS

    def send_pixel(self, grb: int) -> None:
        """Send one GRB colour, left-aligned in a 32-bit word."""
        self.sink((grb << 8) & 0xFFFFFFFF)

    def _show(self, frame: tuple) -> None:
        self.frame = frame
        for colour in frame:
            self.send_pixel(colour)

    def show_lives(self, lives: int, paused: bool = False) -> None:
        """Show the number of lives: blue when paused, red at zero, else green."""
        if paused:
            colour = PAUSED_COLOR
        elif lives == 0:
            colour = GAME_OVER_COLOR
        else:
            colour = PLAYING_COLOR
        pattern = LIFE_PATTERNS.get(lives, LIFE_PATTERNS[0])
        self._show(tuple(colour if lit else 0 for lit in pattern))

    def turn_off(self) -> None:
        """Switch every LED off."""
        self._show((0,) * NUM_PIXELS)