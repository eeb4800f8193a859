import pytest

from quadkit.color import (
    BLACK,
    BLUE,
    Color,
    RED,
    WHITE,
    color_u8,
    hsl_to_rgb,
    rgb_to_hsl,
)


def test_color_from_bytes_macro():
    assert Color(1.0, 0.0, 0.0, 1.0) == color_u8(255, 0, 0, 255)
    assert Color(1.0, 0.5, 0.0, 1.0) == color_u8(255, 127.5, 0, 255)
    assert Color(0.0, 1.0, 0.5, 1.0) == color_u8(0, 255, 127.5, 255)


def test_from_rgba_matches_color_u8():
    assert Color.from_rgba(10, 20, 30, 40) == color_u8(10, 20, 30, 40)


def test_from_rgba_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color.from_rgba(256, 0, 0, 0)
    with pytest.raises(ValueError):
        Color.from_rgba(0, -1, 0, 0)


def test_from_hex_light_blue():
    assert Color.from_hex(0x3CA7D5) == Color.from_rgba(0x3C, 0xA7, 0xD5, 255)


def test_from_hex_ignores_top_byte():
    assert Color.from_hex(0xFF3CA7D5) == Color.from_hex(0x3CA7D5)


def test_from_hex_rejects_too_large():
    with pytest.raises(ValueError):
        Color.from_hex(0x1_0000_0000)


def test_bytes_round_trip():
    data = bytes([12, 200, 0, 255])
    assert Color.from_bytes(data).to_bytes() == data


def test_from_bytes_wrong_length():
    with pytest.raises(ValueError):
        Color.from_bytes([1, 2, 3])


def test_to_bytes_saturates():
    assert Color(2.0, -1.0, float("nan"), 1.0).to_bytes() == bytes([255, 0, 0, 255])


def test_white_to_bytes():
    assert WHITE.to_bytes() == bytes([255, 255, 255, 255])


def test_to_tuple():
    assert Color(0.1, 0.2, 0.3, 0.4).to_tuple() == (0.1, 0.2, 0.3, 0.4)


def test_gray_hsl():
    assert rgb_to_hsl(Color(0.5, 0.5, 0.5, 1.0)) == (0.0, 0.0, 0.5)
    assert hsl_to_rgb(0.0, 0.0, 0.5) == Color(0.5, 0.5, 0.5, 1.0)


def test_black_hsl():
    assert rgb_to_hsl(BLACK) == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("color", [RED, BLUE, Color(1.0, 0.0, 0.0, 1.0), Color(0.2, 0.9, 0.4, 1.0)])
def test_hsl_round_trip(color):
    h, s, l = rgb_to_hsl(color)
    back = hsl_to_rgb(h, s, l)
    assert back.to_tuple() == pytest.approx(color.to_tuple(), abs=1e-9)


def test_hsl_components_in_unit_range():
    h, s, l = rgb_to_hsl(Color(0.9, 0.1, 0.7, 1.0))
    assert 0.0 <= h <= 1.0
    assert 0.0 <= s <= 1.0
    assert 0.0 <= l <= 1.0