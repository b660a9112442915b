"""Bitmap font used by the OLED display.

Each regular glyph is eight column bytes; bit ``j`` of column ``i`` is the
pixel at row ``j``. Glyphs listed in :data:`ROTATED` are stored row-wise
and are drawn rotated by a quarter turn. Small digits are 5x5 bitmaps
stored one row per byte, most significant of the five bits on the left.
"""

BLANK = bytes(8)

_DIGITS = "0123456789"

_DIGIT_GLYPHS = (
    "3e 41 41 49 41 41 3e 00",
    "00 00 42 7f 40 00 00 00",
    "30 49 49 49 49 46 00 00",
    "49 49 49 49 49 49 36 00",
    "3f 20 20 78 20 20 00 00",
    "4f 49 49 49 49 30 00 00",
    "3f 48 48 48 48 48 30 00",
    "01 01 01 61 31 0d 03 00",
    "36 49 49 49 49 49 36 00",
    "06 09 09 09 09 09 7f 00",
)

_UPPER_GLYPHS = (
    "78 14 12 11 12 14 78 00",  # A
    "7f 49 49 49 49 49 7f 00",  # B
    "7e 41 41 41 41 41 41 00",  # C
    "7f 41 41 41 41 41 7e 00",  # D
    "7f 49 49 49 49 49 49 00",  # E
    "7f 09 09 09 09 01 01 00",  # F
    "7f 41 41 41 51 51 73 00",  # G
    "7f 08 08 08 08 08 7f 00",  # H
    "00 00 00 7f 00 00 00 00",  # I
    "21 41 41 3f 01 01 01 00",  # J
    "00 7f 08 08 14 22 41 00",  # K
    "7f 40 40 40 40 40 40 00",  # L
    "7f 02 04 08 04 02 7f 00",  # M
    "7f 02 04 08 10 20 7f 00",  # N
    "3e 41 41 41 41 41 3e 00",  # O
    "7f 11 11 11 11 11 0e 00",  # P
    "3e 41 41 49 51 61 7e 00",  # Q
    "7f 11 11 11 31 51 0e 00",  # R
    "46 49 49 49 49 30 00 00",  # S
    "01 01 01 7f 01 01 01 00",  # T
    "3f 40 40 40 40 40 3f 00",  # U
    "0f 10 20 40 20 10 0f 00",  # V
    "7f 20 10 08 10 20 7f 00",  # W
    "00 41 22 14 14 22 41 00",  # X
    "01 02 04 78 04 02 01 00",  # Y
    "41 61 59 45 43 41 00 00",  # Z
)

_LOWER_GLYPHS = (
    "00 00 20 54 54 54 54 78",  # a
    "00 00 30 48 48 48 48 7f",  # b
    "00 38 44 40 44 38 00 00",  # c
    "00 fe 12 12 12 12 0c 00",  # d
    "00 38 54 54 54 18 00 00",  # e
    "08 7c 09 01 02 00 00 00",  # f
    "00 18 a4 a4 9c 00 00 00",  # g
    "7f 04 04 7c 04 04 78 00",  # h
    "00 44 7d 40 00 00 00 00",  # i
    "20 40 44 3d 00 00 00 00",  # j
    "7f 08 14 62 00 00 00 00",  # k
    "00 41 7f 40 00 00 00 00",  # l
    "7c 04 18 04 7c 00 00 00",  # m
    "7c 04 04 7c 00 00 00 00",  # n
    "38 44 44 44 38 00 00 00",  # o
    "7c 14 14 08 00 00 00 00",  # p
    "08 14 14 7c 00 00 00 00",  # q
    "7c 04 04 08 00 00 00 00",  # r
    "48 54 54 24 00 00 00 00",  # s
    "04 3e 44 40 00 00 00 00",  # t
    "3c 40 40 3c 00 00 00 00",  # u
    "1c 20 40 20 1c 00 00 00",  # v
    "3c 40 30 40 3c 00 00 00",  # w
    "44 28 10 28 44 00 00 00",  # x
    "4c 90 90 7c 00 00 00 00",  # y
    "44 64 54 4c 00 00 00 00",  # z
)

_SYMBOL_GLYPHS = {
    ":": "00 00 00 0c 0c 00 00 00",
    ".": "00 00 00 04 00 00 00 00",
    ">": "00 00 24 12 09 12 24 00",
    "-": "00 00 00 0f 00 00 00 00",
}

_SMALL_DIGITS = (
    "0e 11 11 11 0e",
    "02 06 02 02 07",
    "07 01 07 04 07",
    "07 01 03 01 07",
    "05 05 07 01 01",
    "07 04 07 01 07",
    "07 04 07 05 07",
    "07 01 02 02 02",
    "07 05 07 05 07",
    "07 05 07 01 07",
)

ROTATED = frozenset(_SYMBOL_GLYPHS)
"""Characters whose glyphs are drawn rotated by a quarter turn."""


def _build_table() -> dict:
    table = {}
    table.update(zip(_DIGITS, _DIGIT_GLYPHS))
    table.update(zip("ABCDEFGHIJKLMNOPQRSTUVWXYZ", _UPPER_GLYPHS))
    table.update(zip("abcdefghijklmnopqrstuvwxyz", _LOWER_GLYPHS))
    table.update(_SYMBOL_GLYPHS)
    return {char: bytes.fromhex(data) for char, data in table.items()}


_GLYPHS = _build_table()
_SMALL = {char: bytes.fromhex(data) for char, data in zip(_DIGITS, _SMALL_DIGITS)}


def _check_char(char: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def glyph(char: str) -> bytes:
    """Return the eight bytes of ``char``'s glyph; unknown characters are blank."""
    _check_char(char)
    return _GLYPHS.get(char, BLANK)


def small_digit(char: str) -> bytes:
    """Return the five rows of the small 5x5 glyph for a decimal digit."""
    _check_char(char)
    try:
        return _SMALL[char]
    except KeyError:
        raise ValueError(f"no small glyph for {char!r}") from None