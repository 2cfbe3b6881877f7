"""Windowing-toolkit constants: display modes, mouse, special keys, modifiers and cursors."""

from __future__ import annotations

from enum import IntEnum, IntFlag
from typing import Iterable, Union


class DisplayMode(IntFlag):
    """Bits that select the kind of drawing surface requested for a window."""

    RGB = 0
    RGBA = 0
    SINGLE = 0
    INDEX = 1
    DOUBLE = 2
    ACCUM = 4
    ALPHA = 8
    DEPTH = 16
    STENCIL = 32
    MULTISAMPLE = 128
    STEREO = 256
    LUMINANCE = 512


class MouseButton(IntEnum):
    """Mouse button identifiers."""

    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


class ButtonState(IntEnum):
    """Whether a mouse button went down or up."""

    DOWN = 0
    UP = 1


class SpecialKey(IntEnum):
    """Codes of function and navigation keys."""

    F1 = 1
    F2 = 2
    F3 = 3
    F4 = 4
    F5 = 5
    F6 = 6
    F7 = 7
    F8 = 8
    F9 = 9
    F10 = 10
    F11 = 11
    F12 = 12
    LEFT = 100
    UP = 101
    RIGHT = 102
    DOWN = 103
    PAGE_UP = 104
    PAGE_DOWN = 105
    HOME = 106
    END = 107
    INSERT = 108


class Modifier(IntFlag):
    """Modifier keys held while an input event happened."""

    SHIFT = 1
    CTRL = 2
    ALT = 4


class Cursor(IntEnum):
    """Mouse cursor shapes."""

    RIGHT_ARROW = 0
    LEFT_ARROW = 1
    INFO = 2
    DESTROY = 3
    HELP = 4
    CYCLE = 5
    SPRAY = 6
    WAIT = 7
    TEXT = 8
    CROSSHAIR = 9
    UP_DOWN = 10
    LEFT_RIGHT = 11
    TOP_SIDE = 12
    BOTTOM_SIDE = 13
    LEFT_SIDE = 14
    RIGHT_SIDE = 15
    TOP_LEFT_CORNER = 16
    TOP_RIGHT_CORNER = 17
    BOTTOM_RIGHT_CORNER = 18
    BOTTOM_LEFT_CORNER = 19
    INHERIT = 100
    NONE = 101
    FULL_CROSSHAIR = 102


_ALL_MODIFIERS = Modifier.SHIFT | Modifier.CTRL | Modifier.ALT


def display_mode(names: Union[str, Iterable[str]]) -> DisplayMode:
    """Combine display mode names into one mode.

    ``names`` is either an iterable of names or one string of names
    separated by spaces or ``|``.  Names are case-insensitive.
    """
    if isinstance(names, str):
        names = names.replace("|", " ").split()
    mode = DisplayMode(0)
    for name in names:
        try:
            mode |= DisplayMode.__members__[name.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown display mode {name!r}") from None
    return mode


def special_key_name(code: int) -> str:
    """Return the name of a special key code."""
    try:
        return SpecialKey(code).name
    except ValueError:
        raise ValueError(f"unknown special key code {code}") from None


def modifiers_from_mask(mask: int) -> Modifier:
    """Turn a modifier bit mask into a set of modifier flags."""
    if mask < 0 or mask & ~int(_ALL_MODIFIERS):
        raise ValueError(f"invalid modifier mask {mask}")
    return Modifier(mask)