"""Syntax tree of a pix program: expressions, colors, points and statements."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class Operator(Enum):
    """A binary operator of the expression language."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"
    EQUAL = "="
    LESS_THAN = "<"
    GREATER_THAN = ">"
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN_OR_EQUAL = ">="
    AND = "and"
    OR = "or"

    def symbol(self) -> str:
        """The operator as written in source text."""
        return self.value


@dataclass(frozen=True)
class Number:
    """A non-negative integer literal."""

    value: int


@dataclass(frozen=True)
class CoordinateX:
    """The x coordinate of the pixel being evaluated."""


@dataclass(frozen=True)
class CoordinateY:
    """The y coordinate of the pixel being evaluated."""


@dataclass(frozen=True)
class UnaryNot:
    """Logical negation of a boolean operand."""

    operand: Expression


@dataclass(frozen=True)
class BinaryOperation:
    """An operator applied to two operands."""

    left: Expression
    operator: Operator
    right: Expression


Expression = Union[Number, CoordinateX, CoordinateY, UnaryNot, BinaryOperation]


@dataclass(frozen=True)
class Point:
    """A grid position."""

    x: int
    y: int


@dataclass(frozen=True)
class HexadecimalColor:
    """A color given by its hexadecimal digits, without the leading '#'."""

    digits: str


@dataclass(frozen=True)
class NamedColor:
    """A color referring to a palette entry by name."""

    name: str


ColorValue = Union[HexadecimalColor, NamedColor]


@dataclass(frozen=True)
class ColorEntry:
    """A named palette entry; ``color`` holds hexadecimal digits."""

    name: str
    color: str


class Format(Enum):
    """An export file format."""

    PNG = "png"
    SVG = "svg"
    WEBP = "webp"
    GIF = "gif"


def _freeze(instance: object, name: str) -> None:
    object.__setattr__(instance, name, tuple(getattr(instance, name)))


@dataclass(frozen=True)
class GridStatement:
    width: int
    height: int


@dataclass(frozen=True)
class DrawStatement:
    condition: Expression
    color: ColorValue


@dataclass(frozen=True)
class EraseStatement:
    condition: Expression


@dataclass(frozen=True)
class ClearStatement:
    pass


@dataclass(frozen=True)
class PixelStatement:
    point: Point
    color: ColorValue


@dataclass(frozen=True)
class LineStatement:
    start: Point
    end: Point
    color: ColorValue


@dataclass(frozen=True)
class RectangleStatement:
    start: Point
    end: Point
    color: ColorValue


@dataclass(frozen=True)
class TriangleStatement:
    first: Point
    second: Point
    third: Point
    color: ColorValue


@dataclass(frozen=True)
class CircleStatement:
    center: Point
    radius: int
    color: ColorValue


@dataclass(frozen=True)
class ExportStatement:
    filename: str
    format: Format
    scale: Optional[int] = None


@dataclass(frozen=True)
class ColorBlockStatement:
    entries: tuple[ColorEntry, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze(self, "entries")


@dataclass(frozen=True)
class FrameStatement:
    delay: int


@dataclass(frozen=True)
class CopyStatement:
    start: Point
    end: Point
    destination: Point


@dataclass(frozen=True)
class MoveStatement:
    start: Point
    end: Point
    destination: Point


@dataclass(frozen=True)
class LayerStatement:
    name: str
    statements: tuple[Statement, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze(self, "statements")


@dataclass(frozen=True)
class MirrorStatement:
    start: Point
    end: Point
    statements: tuple[Statement, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze(self, "statements")


Statement = Union[
    GridStatement,
    DrawStatement,
    EraseStatement,
    ClearStatement,
    PixelStatement,
    LineStatement,
    RectangleStatement,
    TriangleStatement,
    CircleStatement,
    ExportStatement,
    ColorBlockStatement,
    FrameStatement,
    CopyStatement,
    MoveStatement,
    LayerStatement,
    MirrorStatement,
]


@dataclass(frozen=True)
class Program:
    """A parsed program: its statements in source order."""

    statements: tuple[Statement, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze(self, "statements")