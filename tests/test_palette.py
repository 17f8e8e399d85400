import pytest

from pixlang.instructions import Clear, ColorBlock, Layer
from pixlang.palette import (
    Color,
    ColorError,
    build_palette,
    parse_hexadecimal,
    resolve_color,
)
from pixlang.syntax import ColorEntry, HexadecimalColor, NamedColor


def test_parse_six_digit_hexadecimal():
    assert parse_hexadecimal("FF0000") == Color(255, 0, 0, 255)


def test_parse_three_digit_hexadecimal():
    assert parse_hexadecimal("F00") == Color(255, 0, 0, 255)


def test_parse_eight_digit_hexadecimal():
    assert parse_hexadecimal("FF000080") == Color(255, 0, 0, 128)


def test_parse_hexadecimal_lowercase():
    assert parse_hexadecimal("ff8800") == Color(255, 136, 0, 255)


def test_parse_hexadecimal_invalid_length():
    with pytest.raises(ColorError) as info:
        parse_hexadecimal("FFFF")
    assert info.value.message == "invalid hex color 'FFFF', expected 3, 6, or 8 digits"


def test_parse_hexadecimal_invalid_digit():
    with pytest.raises(ColorError) as info:
        parse_hexadecimal("GG0000")
    assert info.value.message == "invalid hex color 'GG0000'"


def test_short_form_matches_long_form():
    assert parse_hexadecimal("a1c") == parse_hexadecimal("aa11cc")


def test_build_palette_from_color_block():
    instructions = [
        ColorBlock(
            [ColorEntry("red", "FF0000"), ColorEntry("blue", "0000FF")]
        )
    ]
    palette = build_palette(instructions)
    assert palette["red"] == Color(255, 0, 0, 255)
    assert palette["blue"] == Color(0, 0, 255, 255)


def test_build_palette_ignores_other_instructions():
    instructions = [
        Clear(),
        Layer("fundo", [ColorBlock([ColorEntry("hidden", "FF0000")])]),
    ]
    assert build_palette(instructions) == {}


def test_build_palette_later_entry_wins():
    instructions = [
        ColorBlock([ColorEntry("red", "FF0000")]),
        ColorBlock([ColorEntry("red", "0000FF")]),
    ]
    assert build_palette(instructions)["red"] == Color(0, 0, 255, 255)


def test_build_palette_rejects_bad_color():
    with pytest.raises(ColorError):
        build_palette([ColorBlock([ColorEntry("bad", "FFFF")])])


def test_resolve_hexadecimal_color():
    assert resolve_color(HexadecimalColor("00FF00"), {}) == Color(0, 255, 0, 255)


def test_resolve_named_color():
    palette = {"skin": Color(255, 203, 150, 255)}
    assert resolve_color(NamedColor("skin"), palette) == Color(255, 203, 150, 255)


def test_resolve_undefined_named_color():
    with pytest.raises(ColorError) as info:
        resolve_color(NamedColor("missing"), {})
    assert info.value.message == "undefined color 'missing'"