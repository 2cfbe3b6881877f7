import pytest

from labgame.glut import (
    DisplayMode,
    Modifier,
    SpecialKey,
    display_mode,
    modifiers_from_mask,
    special_key_name,
)


def test_documented_values_through_helpers():
    assert display_mode(["DOUBLE"]) == 2
    assert display_mode(["DEPTH"]) == 16
    assert display_mode(["RGB", "DOUBLE", "DEPTH"]) == 18
    assert special_key_name(104) == "PAGE_UP"
    assert special_key_name(100) == "LEFT"
    assert int(modifiers_from_mask(2)) == int(Modifier.CTRL) == 2


def test_display_mode_combines_names():
    mode = display_mode(["RGB", "DOUBLE", "DEPTH"])
    assert mode == DisplayMode.RGB | DisplayMode.DOUBLE | DisplayMode.DEPTH
    assert DisplayMode.DOUBLE in mode
    assert DisplayMode.STENCIL not in mode


def test_display_mode_from_string_is_case_insensitive():
    assert display_mode("rgb | double depth") == display_mode(["RGB", "DOUBLE", "DEPTH"])


def test_display_mode_empty_is_zero():
    assert display_mode([]) == DisplayMode.RGB
    assert display_mode("") == DisplayMode.SINGLE


def test_display_mode_repeated_name_is_idempotent():
    assert display_mode(["DEPTH", "DEPTH"]) == DisplayMode.DEPTH


def test_display_mode_unknown_name():
    with pytest.raises(ValueError):
        display_mode(["DOUBLE", "TRIPLE"])


@pytest.mark.parametrize("key", list(SpecialKey))
def test_special_key_name_round_trip(key):
    assert SpecialKey[special_key_name(int(key))] is key


def test_special_key_name_values():
    assert special_key_name(1) == "F1"
    assert special_key_name(SpecialKey.HOME) == "HOME"


@pytest.mark.parametrize("code", [0, 13, 99, 109])
def test_special_key_name_unknown(code):
    with pytest.raises(ValueError):
        special_key_name(code)


@pytest.mark.parametrize("mask", range(8))
def test_modifiers_round_trip(mask):
    assert int(modifiers_from_mask(mask)) == mask


def test_modifiers_membership():
    mods = modifiers_from_mask(Modifier.SHIFT | Modifier.ALT)
    assert Modifier.SHIFT in mods
    assert Modifier.ALT in mods
    assert Modifier.CTRL not in mods


@pytest.mark.parametrize("mask", [-1, 8, 9, 256])
def test_modifiers_invalid_mask(mask):
    with pytest.raises(ValueError):
        modifiers_from_mask(mask)