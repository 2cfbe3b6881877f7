"""Software frame buffer with a bitmap font for the on-screen overlay."""

from __future__ import annotations

import struct
from datetime import datetime
from os import PathLike
from typing import Union

DEFAULT_WIDTH = 130
DEFAULT_HEIGHT = 33

GLYPH_HEIGHT = 16
GLYPH_WIDTH = 8
GLYPH_COUNT = 256
FONT_SIZE = GLYPH_HEIGHT * GLYPH_COUNT

TIME_X = 51
TIME_Y = 0
TIME_COLOR = 0x7FFF00FF

_DWORD = 0xFFFFFFFF


def _char_code(ch: Union[str, int]) -> int:
    if isinstance(ch, int):
        code = ch
    elif isinstance(ch, str) and len(ch) == 1:
        code = ord(ch)
    else:
        raise ValueError(f"expected a single character, got {ch!r}")
    if not 0 <= code < GLYPH_COUNT:
        raise ValueError(f"character code {code} is outside the font")
    return code


class Font:
    """An 8x16 bitmap font of 256 glyphs, one byte per glyph row."""

    def __init__(self, data: bytes = b"") -> None:
        if len(data) > FONT_SIZE:
            raise ValueError(f"font data is {len(data)} bytes, at most {FONT_SIZE} allowed")
        self._data = bytes(data) + bytes(FONT_SIZE - len(data))

    def glyph_rows(self, ch: Union[str, int]) -> bytes:
        """Return the 16 row bitmaps of a character, top row first."""
        start = GLYPH_HEIGHT * _char_code(ch)
        return self._data[start:start + GLYPH_HEIGHT]


def load_font(path: Union[str, PathLike]) -> Font:
    """Load a raw font file; a missing file yields a blank font."""
    try:
        with open(path, "rb") as stream:
            data = stream.read(FONT_SIZE)
    except FileNotFoundError:
        return Font()
    return Font(data)


def format_time(now: datetime) -> str:
    """Format a moment as the two-line clock shown on screen."""
    return (
        f"{now.hour:02d}:{now.minute:02d}:{now.second:02d}\n"
        f"{now.day:02d}.{now.month:02d}.{now.year}"
    )


class Frame:
    """A width x height buffer of 32-bit ARGB pixels."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        self._allocate(width, height)

    def _allocate(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"frame size must not be negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = [0] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def put_pixel(self, x: int, y: int, rgb: int) -> None:
        """Set a pixel; points outside the frame are ignored."""
        if self._inside(x, y):
            self._pixels[self._width * y + x] = rgb & _DWORD

    def pixel(self, x: int, y: int) -> int:
        """Return the colour of a pixel inside the frame."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self._width}x{self._height} frame")
        return self._pixels[self._width * y + x]

    def circle(self, x: int, y: int, r: int, rgb: int) -> None:
        """Fill a disc of radius ``r`` centred at (x, y)."""
        r2 = r * r
        for dy in range(-r, r + 1):
            for dx in range(-r, r + 1):
                if dx * dx + dy * dy <= r2:
                    self.put_pixel(x + dx, y + dy, rgb)

    def clear(self, rgb: int) -> None:
        """Fill the whole frame with one colour."""
        self._pixels = [rgb & _DWORD] * (self._width * self._height)

    def clear_black(self) -> None:
        """Fill the whole frame with zero (transparent black)."""
        self.clear(0)

    def resize(self, w: int, h: int) -> None:
        """Replace the buffer with a new black one of the given size."""
        self._allocate(w, h)

    def draw_letter(self, x: int, y: int, ch: Union[str, int], rgb: int, font: Font) -> None:
        """Draw one glyph with its top-left corner at (x, y)."""
        for dy, row in enumerate(font.glyph_rows(ch)):
            for dx in range(GLYPH_WIDTH):
                if row & (0x80 >> dx):
                    self.put_pixel(x + dx, y + dy, rgb)

    def draw_letters(self, x: int, y: int, text: str, rgb: int, font: Font) -> None:
        """Draw text; a newline moves down one glyph height back to ``x``."""
        cx = x
        for ch in text:
            if ch == "\n":
                y += GLYPH_HEIGHT
                cx = x
            else:
                self.draw_letter(cx, y, ch, rgb, font)
                cx += GLYPH_WIDTH

    def print_time(self, font: Font, now: datetime = None) -> None:
        """Draw the current (or given) time and date in the overlay corner."""
        if now is None:
            now = datetime.now()
        self.draw_letters(TIME_X, TIME_Y, format_time(now), TIME_COLOR, font)

    def to_bgra_bytes(self) -> bytes:
        """Return the pixels row by row as little-endian 32-bit values (B, G, R, A)."""
        return struct.pack(f"<{len(self._pixels)}I", *self._pixels)