"""Monochrome SSD1306-style frame buffer with text and shape drawing."""

from collections.abc import Callable
from typing import Optional

from .font import ROTATED, glyph, small_digit

Transport = Callable[[int, bytes], None]

_CONFIG_SEQUENCE = (
    0xAE,  # display off
    0x20, 0x00,  # horizontal addressing mode
    0x40,  # start line
    0xA1,  # segment remap
    0xA8, None,  # multiplex ratio (height - 1)
    0xC8,  # COM scan direction
    0xD3, 0x00,  # display offset
    0xDA, 0x12,  # COM pin config
    0xD5, 0x80,  # clock divide ratio
    0xD9, 0xF1,  # pre-charge period
    0xDB, 0x30,  # VCOM deselect level
    0x81, 0xFF,  # contrast
    0xA4,  # resume from RAM
    0xA6,  # normal display
    0x8D, 0x14,  # charge pump
    0xAF,  # display on
)


def _is_digit(char: str) -> bool:
    return len(char) == 1 and "0" <= char <= "9"


class Display:
    """A page-organised 1-bit frame buffer that can be pushed to a controller.

    ``transport`` is called as ``transport(address, data)`` for every bus
    write; when it is ``None`` the display only keeps its buffer.
    """

    def __init__(self, width: int, height: int, address: int = 0x3C,
                 transport: Optional[Transport] = None):
        if not 0 < width <= 255 or not 0 < height <= 255 or height % 8:
            raise ValueError(f"unsupported display size {width}x{height}")
        self.width = width
        self.height = height
        self.pages = height // 8
        self.address = address
        self.transport = transport
        self.buffer = bytearray(self.pages * width)

    def _write(self, data: bytes) -> None:
        if self.transport is not None:
            self.transport(self.address, bytes(data))

    def command(self, command: int) -> None:
        """Send one command byte."""
        self._write(bytes([0x80, command & 0xFF]))

    def config(self) -> None:
        """Send the power-up configuration sequence."""
        for command in _CONFIG_SEQUENCE:
            self.command(self.height - 1 if command is None else command)

    def send_data(self) -> None:
        """Push the whole frame buffer to the controller."""
        for command in (0x21, 0, self.width - 1, 0x22, 0, self.pages - 1):
            self.command(command)
        self._write(b"\x40" + bytes(self.buffer))

    def pixel(self, x: int, y: int, value: bool) -> None:
        """Set or clear one pixel; coordinates outside the screen are ignored."""
        x &= 0xFF
        y &= 0xFF
        if x >= self.width or y >= self.height:
            return
        index = (y // 8) * self.width + x
        mask = 1 << (y % 8)
        if value:
            self.buffer[index] |= mask
        else:
            self.buffer[index] &= ~mask & 0xFF

    def get_pixel(self, x: int, y: int) -> bool:
        """Return whether the pixel at (x, y) is lit."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the display")
        return bool(self.buffer[(y // 8) * self.width + x] & (1 << (y % 8)))

    def fill(self, value: bool) -> None:
        """Set every pixel to ``value``."""
        byte = 0xFF if value else 0x00
        self.buffer[:] = bytes([byte]) * len(self.buffer)

    def rect(self, top: int, left: int, width: int, height: int,
             value: bool = True, fill: bool = False) -> None:
        """Draw a rectangle outline, optionally filling its interior."""
        for x in range(left, left + width):
            self.pixel(x, top, value)
            self.pixel(x, top + height - 1, value)
        for y in range(top, top + height):
            self.pixel(left, y, value)
            self.pixel(left + width - 1, y, value)
        if fill:
            for x in range(left + 1, left + width - 1):
                for y in range(top + 1, top + height - 1):
                    self.pixel(x, y, value)

    def line(self, x0: int, y0: int, x1: int, y1: int, value: bool = True) -> None:
        """Draw a straight line between two points (Bresenham)."""
        dx, dy = abs(x1 - x0), abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy
        while True:
            self.pixel(x0, y0, value)
            if x0 == x1 and y0 == y1:
                break
            e2 = err * 2
            if e2 > -dy:
                err -= dy
                x0 += sx
            if e2 < dx:
                err += dx
                y0 += sy

    def hline(self, x0: int, x1: int, y: int, value: bool = True) -> None:
        """Draw a horizontal line from x0 to x1 inclusive."""
        for x in range(x0, x1 + 1):
            self.pixel(x, y, value)

    def vline(self, x: int, y0: int, y1: int, value: bool = True) -> None:
        """Draw a vertical line from y0 to y1 inclusive."""
        for y in range(y0, y1 + 1):
            self.pixel(x, y, value)

    def draw_small_number(self, char: str, x: int, y: int) -> None:
        """Draw a 5x5 digit; anything that is not a digit draws nothing."""
        if not _is_digit(char):
            return
        for row, bits in enumerate(small_digit(char)):
            for col in range(5):
                if (bits >> (4 - col)) & 1:
                    self.pixel(x + col, y + row, True)

    def draw_char(self, char: str, x: int, y: int,
                  use_small_numbers: bool = False) -> None:
        """Draw one 8x8 character, or a small digit when asked for."""
        if use_small_numbers and _is_digit(char):
            self.draw_small_number(char, x, y)
            return
        rotate = char in ROTATED
        for i, bits in enumerate(glyph(char)):
            for j in range(8):
                lit = bool((bits >> j) & 1)
                if rotate:
                    self.pixel(x + 7 - j, y + i, lit)
                else:
                    self.pixel(x + i, y + j, lit)

    def draw_string(self, text: str, x: int, y: int,
                    use_small_numbers: bool = False) -> None:
        """Draw text, wrapping to the next 8-pixel line at the right edge."""
        for char in text:
            char_width = 5 if use_small_numbers and _is_digit(char) else 8
            if x + char_width > self.width:
                x = 0
                y += 8
                if y + 8 > self.height:
                    break
            self.draw_char(char, x, y, use_small_numbers)
            x += char_width

    def render(self) -> str:
        """Return the buffer as text rows, ``#`` for lit pixels."""
        return "\n".join(
            "".join("#" if self.get_pixel(x, y) else " " for x in range(self.width))
            for y in range(self.height)
        )