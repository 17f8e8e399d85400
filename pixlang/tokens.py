"""Token types produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, order=True)
class Position:
    """A one-based line and column in the source text."""

    line: int
    column: int


class TokenKind(Enum):
    """The kind of a token."""

    # Literals
    NUMBER = "number"
    HEXADECIMAL_COLOR = "hexadecimal color"
    STRING_LITERAL = "string literal"
    IDENTIFIER = "identifier"

    # Delimiters
    LEFT_PARENTHESIS = "("
    RIGHT_PARENTHESIS = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    COLON = ":"
    COMMA = ","

    # Arithmetic operators
    PLUS = "+"
    MINUS = "-"
    ASTERISK = "*"
    SLASH = "/"
    CARET = "^"

    # Logical keywords
    AND = "and"
    OR = "or"
    NOT = "not"

    # Keywords
    WITH = "with"
    IN = "in"
    BY = "by"
    TO = "to"
    RADIUS = "radius"
    SCALE = "scale"
    COLOR = "color"
    X = "x"
    Y = "y"

    # Statements
    DRAW = "draw"
    ERASE = "erase"
    CLEAR = "clear"
    GRID = "grid"
    EXPORT = "export"

    # Shape statements
    PIXEL = "pixel"
    LINE = "line"
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"
    CIRCLE = "circle"

    # Format keywords
    PNG = "png"
    SVG = "svg"
    WEBP = "webp"
    GIF = "gif"

    # Block keywords
    LAYER = "layer"
    MIRROR = "mirror"
    FRAME = "frame"

    # Movement keywords
    COPY = "copy"
    MOVE = "move"
    AT = "at"

    # Comparison operators
    EQUAL = "="
    LESS_THAN = "<"
    GREATER_THAN = ">"
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN_OR_EQUAL = ">="


@dataclass(frozen=True)
class Token:
    """A token with its kind, source text and position.

    ``value`` carries the payload of literal tokens: the integer of a
    number, the digits of a hexadecimal color, the content of a string
    literal or the name of an identifier. It is ``None`` otherwise.
    """

    kind: TokenKind
    text: str
    position: Position
    value: int | str | None = None