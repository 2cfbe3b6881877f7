"""Basic shared types and bit/byte helpers used across the game."""

from __future__ import annotations

from dataclasses import dataclass

_BYTE = 0xFF
_WORD = 0xFFFF
_DWORD = 0xFFFFFFFF


@dataclass(frozen=True)
class Point2D:
    """Integer point on a plane."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle with signed 16-bit coordinates and sizes."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        for name in ("x", "y", "width", "height"):
            value = getattr(self, name)
            if not -0x8000 <= value <= 0x7FFF:
                raise ValueError(f"{name}={value} does not fit a signed 16-bit word")


def sign(value):
    """Return 1, -1 or 0 according to the sign of ``value``."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def lo_byte(word: int) -> int:
    """Low byte of a 16-bit word."""
    return (word & _WORD) & _BYTE


def hi_byte(word: int) -> int:
    """High byte of a 16-bit word."""
    return ((word & _WORD) >> 8) & _BYTE


def lo_word(dword: int) -> int:
    """Low word of a 32-bit double word."""
    return (dword & _DWORD) & _WORD


def hi_word(dword: int) -> int:
    """High word of a 32-bit double word."""
    return ((dword & _DWORD) >> 16) & _WORD


def long_byte(dword: int, index: int) -> int:
    """Byte number ``index`` (0 is the lowest) of a 32-bit double word."""
    if not 0 <= index <= 3:
        raise ValueError(f"byte index must be in 0..3, got {index}")
    if index < 2:
        return ((dword & _WORD) >> (8 * index)) & _BYTE
    return ((dword & _DWORD) >> (8 * index)) & _BYTE


def make_word(low: int, high: int) -> int:
    """Build a 16-bit word from its low and high bytes."""
    return (((high & _BYTE) << 8) | (low & _BYTE)) & _WORD


def make_long(low: int, high: int) -> int:
    """Build a 32-bit double word from its low and high words."""
    return (((high & _WORD) << 16) | (low & _WORD)) & _DWORD


def make_long_bytes(b0: int, b1: int, b2: int, b3: int) -> int:
    """Build a 32-bit double word from four bytes, ``b0`` being the lowest."""
    return (
        ((b3 & _BYTE) << 24)
        | ((b2 & _BYTE) << 16)
        | ((b1 & _BYTE) << 8)
        | (b0 & _BYTE)
    )


def set_bit(value: int, bit: int) -> int:
    """Return ``value`` with bit number ``bit`` set."""
    return value | (1 << bit)


def reset_bit(value: int, bit: int) -> int:
    """Return ``value`` with bit number ``bit`` cleared."""
    return value & ~(1 << bit)


def get_bit(value: int, bit: int) -> int:
    """Return the masked bit number ``bit`` of ``value`` (zero when clear)."""
    return value & (1 << bit)


def has_bits(value: int, bits: int) -> bool:
    """Tell whether every bit of ``bits`` is set in ``value``."""
    return (value & bits) == bits