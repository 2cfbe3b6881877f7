import pytest

from labgame.comdf import (
    Point2D,
    Rectangle,
    get_bit,
    has_bits,
    hi_byte,
    hi_word,
    lo_byte,
    lo_word,
    long_byte,
    make_long,
    make_long_bytes,
    make_word,
    reset_bit,
    set_bit,
    sign,
)


@pytest.mark.parametrize("value", [-7, -1, 0, 1, 42, -3.5, 2.25])
def test_sign_times_abs_is_value(value):
    assert sign(value) * abs(value) == value


def test_sign_of_zero():
    assert sign(0) == 0


def test_word_bytes_pinned():
    assert lo_byte(0x1234) == 0x34
    assert hi_byte(0x1234) == 0x12


@pytest.mark.parametrize("word", [0, 1, 0x00FF, 0xFF00, 0x1234, 0xFFFF])
def test_word_round_trip(word):
    assert make_word(lo_byte(word), hi_byte(word)) == word


@pytest.mark.parametrize("dword", [0, 0xFFFFFFFF, 0x12345678, 0x7FFF00FF])
def test_long_round_trip(dword):
    assert make_long(lo_word(dword), hi_word(dword)) == dword


@pytest.mark.parametrize("dword", [0, 0xFFFFFFFF, 0x12345678, 0xFF00FF00])
def test_long_bytes_round_trip(dword):
    parts = [long_byte(dword, i) for i in range(4)]
    assert make_long_bytes(*parts) == dword
    assert all(0 <= p <= 0xFF for p in parts)


def test_long_byte_matches_word_helpers():
    dword = 0xA1B2C3D4
    assert long_byte(dword, 0) == lo_byte(lo_word(dword))
    assert long_byte(dword, 1) == hi_byte(lo_word(dword))
    assert long_byte(dword, 2) == lo_byte(hi_word(dword))
    assert long_byte(dword, 3) == hi_byte(hi_word(dword))


@pytest.mark.parametrize("index", [-1, 4])
def test_long_byte_rejects_bad_index(index):
    with pytest.raises(ValueError):
        long_byte(0x12345678, index)


@pytest.mark.parametrize("bit", [0, 3, 15, 31])
def test_set_and_reset_bit(bit):
    value = set_bit(0, bit)
    assert get_bit(value, bit) == 1 << bit
    assert reset_bit(value, bit) == 0
    assert get_bit(reset_bit(value, bit), bit) == 0


def test_set_bit_keeps_other_bits():
    value = set_bit(0b1010, 0)
    assert value == 0b1011
    assert reset_bit(value, 1) == 0b1001


def test_has_bits():
    assert has_bits(0b1110, 0b0110)
    assert not has_bits(0b1010, 0b0110)
    assert has_bits(0b1010, 0)


def test_point_equality():
    assert Point2D(3, 4) == Point2D(3, 4)
    assert Point2D(3, 4) != Point2D(4, 3)


def test_rectangle_fields_and_limits():
    rect = Rectangle(1, 2, 30, 40)
    assert (rect.x, rect.y, rect.width, rect.height) == (1, 2, 30, 40)
    with pytest.raises(ValueError):
        Rectangle(0, 0, 0x8000, 1)
    with pytest.raises(ValueError):
        Rectangle(-0x8001, 0, 1, 1)