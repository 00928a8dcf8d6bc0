import pytest
from engine.colors import (
    RGBA,
    WHITE,
    ColorParseError,
    parse_color,
    parse_color_hex,
    parse_color_rgb,
    palette_resolver,
    to_rgba,
)

RED = RGBA(255, 0, 0)
GREEN = RGBA(0, 255, 0)
BLUE = RGBA(0, 0, 255)


def test_parse_hex_lengths():
    assert parse_color_hex("#fff") == WHITE
    assert parse_color_hex("#ffff") == WHITE
    assert parse_color_hex("#ffffff") == WHITE
    assert parse_color_hex("#ffffffff") == WHITE

    assert parse_color_hex("#f00") == RED
    assert parse_color_hex("#0f0f") == GREEN
    assert parse_color_hex("#0000ff") == BLUE
    assert parse_color_hex("#80808080") == RGBA(128, 128, 128, 128)

    assert parse_color_hex("F00") == RED
    assert parse_color_hex("0000FF") == BLUE


def test_parse_hex_errors():
    with pytest.raises(ColorParseError) as exc:
        parse_color_hex("white")
    assert exc.value.reason == ColorParseError.NON_HEX_DIGIT

    with pytest.raises(ColorParseError) as exc:
        parse_color_hex("#12345")
    assert exc.value.reason == ColorParseError.WRONG_HEX_LEN

    with pytest.raises(ColorParseError):
        parse_color_hex("12,34,56")


def test_parse_rgb_forms():
    assert parse_color_rgb("0,0,0") == RGBA(0, 0, 0, 255)
    assert parse_color_rgb("rgb(10,20,30)") == RGBA(10, 20, 30)
    assert parse_color_rgb("(255,150,200,25)") == RGBA(255, 150, 200, 25)
    assert parse_color_rgb("rgba(10, 20, 30)") == RGBA(10, 20, 30)


def test_parse_rgb_errors():
    with pytest.raises(ColorParseError) as exc:
        parse_color_rgb("FFF")
    assert exc.value.reason == ColorParseError.WRONG_RGB_LEN

    with pytest.raises(ColorParseError) as exc:
        parse_color_rgb("1,2,x")
    assert exc.value.reason == ColorParseError.NON_ASCII_DIGIT

    with pytest.raises(ColorParseError):
        parse_color_rgb("1,2,300")


def test_parse_color_dispatch():
    assert parse_color("32,32,220") == RGBA(32, 32, 220)
    assert parse_color(" #F00 ") == RED
    assert parse_color("0000FF # comment") == BLUE
    assert parse_color("396") == RGBA(51, 153, 102)
    with pytest.raises(ColorParseError):
        parse_color("WHITE")


def test_to_rgba_is_lenient():
    assert to_rgba("0F0") == GREEN
    assert to_rgba("not a color") is None


def test_rgba_is_a_tuple():
    assert RGBA(1, 2, 3) == (1, 2, 3, 255)
    assert RGBA(1, 2, 3).rgb == (1, 2, 3)


def test_palette_resolver_prefers_names():
    resolve = palette_resolver({"red": [255, 92, 92], "Fade": [10, 10, 10, 128]})
    assert resolve("red") == RGBA(255, 92, 92)
    assert resolve("RED") == RGBA(255, 92, 92)
    assert resolve("fade") == RGBA(10, 10, 10, 128)
    # literal colors still work
    assert resolve("#00f") == BLUE
    assert resolve("mauve") is None
