"""Instructions produced by the evaluator and consumed by the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .syntax import ColorEntry, ColorValue, Expression, Format, Point


class ValueType(Enum):
    """The static type of an expression."""

    NUMBER = "number"
    BOOLEAN = "boolean"


class EvaluateError(Exception):
    """Raised when a program or expression fails to evaluate."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def _freeze(instance: object, name: str) -> None:
    object.__setattr__(instance, name, tuple(getattr(instance, name)))


@dataclass(frozen=True)
class Draw:
    condition: Expression
    color: ColorValue


@dataclass(frozen=True)
class Erase:
    condition: Expression


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class Pixel:
    condition: Expression
    point: Point
    color: ColorValue


@dataclass(frozen=True)
class Line:
    condition: Expression
    start: Point
    end: Point
    color: ColorValue


@dataclass(frozen=True)
class Rectangle:
    condition: Expression
    start: Point
    end: Point
    color: ColorValue


@dataclass(frozen=True)
class Triangle:
    condition: Expression
    first: Point
    second: Point
    third: Point
    color: ColorValue


@dataclass(frozen=True)
class Circle:
    condition: Expression
    center: Point
    radius: int
    color: ColorValue


@dataclass(frozen=True)
class Export:
    filename: str
    format: Format
    scale: Optional[int] = None


@dataclass(frozen=True)
class ColorBlock:
    entries: tuple[ColorEntry, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze(self, "entries")


@dataclass(frozen=True)
class Frame:
    delay: int


@dataclass(frozen=True)
class Copy:
    start: Point
    end: Point
    destination: Point


@dataclass(frozen=True)
class Move:
    start: Point
    end: Point
    destination: Point


@dataclass(frozen=True)
class Layer:
    name: str
    instructions: tuple[Instruction, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze(self, "instructions")


@dataclass(frozen=True)
class Mirror:
    start: Point
    end: Point
    instructions: tuple[Instruction, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze(self, "instructions")


Instruction = Union[
    Draw, Erase, Clear, Pixel, Line, Rectangle, Triangle, Circle,
    Export, ColorBlock, Frame, Copy, Move, Layer, Mirror,
]


@dataclass(frozen=True)
class EvaluatedProgram:
    """A validated program: grid dimensions and its instructions."""

    grid_width: int
    grid_height: int
    instructions: tuple[Instruction, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze(self, "instructions")