"""Color parsing and palette resolution."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .instructions import ColorBlock, Instruction
from .syntax import ColorValue, HexadecimalColor, NamedColor

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


@dataclass(frozen=True)
class Color:
    """An RGBA color with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255


Palette = dict[str, Color]


class ColorError(Exception):
    """Raised when a color cannot be parsed or resolved."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def parse_hexadecimal(text: str) -> Color:
    """Parse 3, 6 or 8 hexadecimal digits (no leading '#') into a Color."""
    if len(text) not in (3, 6, 8):
        raise ColorError(
            f"invalid hex color '{text}', expected 3, 6, or 8 digits"
        )
    if not set(text) <= _HEX_DIGITS:
        raise ColorError(f"invalid hex color '{text}'")

    if len(text) == 3:
        red, green, blue = (int(digit, 16) * 17 for digit in text)
        return Color(red, green, blue)

    channels = [int(text[i:i + 2], 16) for i in range(0, len(text), 2)]
    return Color(*channels)


def build_palette(instructions: Iterable[Instruction]) -> Palette:
    """Collect the named colors of all top-level color blocks."""
    palette: Palette = {}
    for instruction in instructions:
        if isinstance(instruction, ColorBlock):
            for entry in instruction.entries:
                palette[entry.name] = parse_hexadecimal(entry.color)
    return palette


def resolve_color(value: ColorValue, palette: Palette) -> Color:
    """Turn a color value into a Color, looking names up in ``palette``."""
    if isinstance(value, HexadecimalColor):
        return parse_hexadecimal(value.digits)
    if isinstance(value, NamedColor):
        try:
            return palette[value.name]
        except KeyError:
            raise ColorError(f"undefined color '{value.name}'") from None
    raise TypeError(f"not a color value: {value!r}")