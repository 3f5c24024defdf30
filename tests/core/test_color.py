"""Tests for Color and CSS-style color strings."""

import pytest

from cubeview.core.color import Color, ColorStyleError, parse_style


def test_hex_roundtrip():
    c = Color.from_hex(0xD4A574)
    assert c.get_hex() == 0xD4A574
    assert c.get_style() == "#d4a574"


def test_set_style_hex6():
    c = Color().set_style("#ff0000")
    assert c.to_tuple() == (1.0, 0.0, 0.0)


def test_set_style_hex3():
    assert Color().set_style("#0f0").get_hex() == 0x00FF00


def test_set_style_uppercase():
    assert Color().set_style("#00FF80").get_hex() == 0x00FF80


def test_set_style_rgb_function():
    assert Color().set_style("rgb(255, 128, 0)").get_hex() == 0xFF8000
    assert Color().set_style("rgb(100%, 0%, 0%)").get_hex() == 0xFF0000


def test_set_style_named():
    assert Color().set_style("orange").get_hex() == 0xFFA500


@pytest.mark.parametrize("name, expected", [
    ("cornflowerblue", 0x6495ED),
    ("darkred", 0x8B0000),
    ("DarkRed", 0x8B0000),
])
def test_set_style_x11_names(name, expected):
    assert Color().set_style(name).get_hex() == expected


@pytest.mark.parametrize("style, expected", [
    ("hsl(0, 100%, 50%)", 0xFF0000),
    ("hsl(120deg, 100%, 50%)", 0x00FF00),
    ("hsla(240, 100%, 50%, 0.5)", 0x0000FF),
    ("rgba(255, 0, 0, 1)", 0xFF0000),
])
def test_set_style_functional_forms(style, expected):
    assert Color().set_style(style).get_hex() == expected


@pytest.mark.parametrize("bad", ["", "#12", "#gggggg", "rgb(300, 0, 0)", "rgb(1, 2)", "hsl(0, 1, 2)", "not-a-color", None])
def test_malformed_style_raises(bad):
    with pytest.raises(ColorStyleError):
        parse_style(bad)


def test_malformed_style_leaves_color_unchanged():
    c = Color.from_hex(0x123456)
    with pytest.raises(ColorStyleError):
        c.set_style("#xyz")
    assert c.get_hex() == 0x123456


def test_style_error_is_value_error():
    assert issubclass(ColorStyleError, ValueError)


def test_copy_is_independent():
    c = Color.from_hex(0x112233)
    d = c.copy()
    d.set_hex(0xFFFFFF)
    assert c.get_hex() == 0x112233
    assert c != d
