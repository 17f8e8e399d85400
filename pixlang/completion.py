"""Context-aware completion suggestions for pix source text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import takewhile
from typing import Optional

from .lexer import LexerError, tokenize
from .tokens import Position, Token, TokenKind


class CompletionKind(Enum):
    """What a completion item stands for."""

    KEYWORD = "Keyword"
    COLOR = "Color"
    VARIABLE = "Variable"
    FORMAT = "Format"
    SNIPPET = "Snippet"


@dataclass(frozen=True)
class CompletionItem:
    """A single suggestion, optionally with a snippet to insert."""

    label: str
    kind: CompletionKind
    snippet: Optional[str] = None

    def to_dict(self) -> dict[str, str]:
        """The item as a JSON-ready mapping; ``snippet`` is left out when absent."""
        data = {"label": self.label, "kind": self.kind.value}
        if self.snippet is not None:
            data["snippet"] = self.snippet
        return data


_STATEMENT_KEYWORDS = (
    "grid", "draw", "erase", "clear", "export", "color",
    "pixel", "line", "rectangle", "triangle", "circle",
    "frame", "copy", "move", "layer", "mirror",
)

_SHAPE_KINDS = frozenset(
    {TokenKind.PIXEL, TokenKind.CIRCLE, TokenKind.LINE, TokenKind.RECTANGLE, TokenKind.TRIANGLE}
)
_FORMAT_KINDS = frozenset({TokenKind.PNG, TokenKind.SVG, TokenKind.WEBP, TokenKind.GIF})
_STATEMENT_START_KINDS = _SHAPE_KINDS | {
    TokenKind.DRAW,
    TokenKind.ERASE,
    TokenKind.CLEAR,
    TokenKind.GRID,
    TokenKind.EXPORT,
}
_EXPRESSION_PREFIX_KINDS = frozenset(
    {TokenKind.DRAW, TokenKind.ERASE, TokenKind.AND, TokenKind.OR, TokenKind.NOT}
)


def _keyword(name: str) -> CompletionItem:
    return CompletionItem(name, CompletionKind.KEYWORD)


def _point_snippet() -> CompletionItem:
    return CompletionItem("(x, y)", CompletionKind.SNIPPET, "(${1}, ${2})")


def _statement_keywords() -> list[CompletionItem]:
    return [_keyword(name) for name in _STATEMENT_KEYWORDS]


def _with_completions() -> list[CompletionItem]:
    return [_keyword("color"), CompletionItem("#", CompletionKind.COLOR)]


def _format_completions() -> list[CompletionItem]:
    return [CompletionItem(name, CompletionKind.FORMAT) for name in ("png", "svg", "webp", "gif")]


def _expression_starters() -> list[CompletionItem]:
    return [
        CompletionItem("x", CompletionKind.VARIABLE),
        CompletionItem("y", CompletionKind.VARIABLE),
        _keyword("not"),
    ]


def _expression_continuations() -> list[CompletionItem]:
    return [_keyword("and"), _keyword("or"), _keyword("with")]


def _opens_color_block(tokens: list[Token], index: int) -> bool:
    return (
        tokens[index].kind is TokenKind.COLOR
        and index + 1 < len(tokens)
        and tokens[index + 1].kind is TokenKind.LEFT_BRACE
    )


def _is_preceded_by(tokens: list[Token], index: int, kind: TokenKind) -> bool:
    return index > 0 and tokens[index - 1].kind is kind


def _is_inside_color_block(tokens: list[Token], count: int) -> bool:
    inside = False
    for index in range(count):
        if _opens_color_block(tokens, index):
            inside = True
        if tokens[index].kind is TokenKind.RIGHT_BRACE:
            inside = False
    return inside


def _color_names(tokens: list[Token]) -> list[CompletionItem]:
    names = []
    inside = False
    for index, token in enumerate(tokens):
        if _opens_color_block(tokens, index):
            inside = True
            continue
        if not inside:
            continue
        if token.kind is TokenKind.RIGHT_BRACE:
            inside = False
            continue
        if (
            token.kind is TokenKind.IDENTIFIER
            and index + 1 < len(tokens)
            and tokens[index + 1].kind is TokenKind.COLON
        ):
            names.append(CompletionItem(str(token.value), CompletionKind.COLOR))
    return names


def _completions_after_point(tokens: list[Token], index: int) -> list[CompletionItem]:
    preceding = tokens[:index]
    start = next(
        (token for token in reversed(preceding) if token.kind in _STATEMENT_START_KINDS),
        None,
    )
    if start is None:
        return _statement_keywords()

    kinds = [token.kind for token in preceding]
    if start.kind is TokenKind.PIXEL:
        return [_keyword("with")]
    if start.kind is TokenKind.CIRCLE:
        return [_keyword("with" if TokenKind.RADIUS in kinds else "radius")]
    if start.kind in (TokenKind.LINE, TokenKind.RECTANGLE):
        return [_keyword("with" if TokenKind.TO in kinds else "to")]
    if start.kind is TokenKind.TRIANGLE:
        return [_keyword("with" if kinds.count(TokenKind.TO) >= 2 else "to")]
    return _statement_keywords()


def _completions_after_number(second: Optional[Token]) -> list[CompletionItem]:
    if second is None:
        return _statement_keywords()
    if second.kind is TokenKind.GRID:
        return [_keyword("by")]
    if second.kind is TokenKind.RADIUS:
        return [_keyword("with")]
    if second.kind in (TokenKind.SCALE, TokenKind.BY):
        return []
    return _statement_keywords()


def complete(source: str, line: int, column: int) -> list[CompletionItem]:
    """Suggest completions for the one-based ``line`` and ``column`` in ``source``."""
    try:
        tokens = tokenize(source)
    except LexerError:
        return _statement_keywords()

    cursor = Position(line, column)
    count = sum(1 for _ in takewhile(lambda token: token.position < cursor, tokens))

    if _is_inside_color_block(tokens, count):
        return []
    if count == 0:
        return _statement_keywords()

    index = count - 1
    previous = tokens[index]
    second = tokens[index - 1] if index > 0 else None
    kind = previous.kind

    if kind is TokenKind.WITH:
        return _with_completions()
    if kind is TokenKind.COLOR:
        if _is_preceded_by(tokens, index, TokenKind.WITH):
            return _color_names(tokens)
        return _statement_keywords()
    if kind is TokenKind.IN:
        return _format_completions()
    if kind in _FORMAT_KINDS:
        return [_keyword("scale")]
    if kind in (TokenKind.GRID, TokenKind.EXPORT):
        return []
    if kind is TokenKind.NUMBER:
        return _completions_after_number(second)
    if kind is TokenKind.STRING_LITERAL:
        if _is_preceded_by(tokens, index, TokenKind.EXPORT):
            return [_keyword("in")]
        return _statement_keywords()
    if kind in _SHAPE_KINDS or kind is TokenKind.TO:
        return [_point_snippet()]
    if kind is TokenKind.RIGHT_PARENTHESIS:
        return _completions_after_point(tokens, index)
    if kind in _EXPRESSION_PREFIX_KINDS:
        return _expression_starters()
    if kind in (TokenKind.X, TokenKind.Y):
        return _expression_continuations()
    return _statement_keywords()