"""Turns source text into tokens."""

from __future__ import annotations

from .tokens import Position, Token, TokenKind

_SINGLE_CHARACTER_KINDS = {
    "(": TokenKind.LEFT_PARENTHESIS,
    ")": TokenKind.RIGHT_PARENTHESIS,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
    "^": TokenKind.CARET,
    "=": TokenKind.EQUAL,
    "<": TokenKind.LESS_THAN,
    ">": TokenKind.GREATER_THAN,
}

_TWO_CHARACTER_KINDS = {
    "<=": TokenKind.LESS_THAN_OR_EQUAL,
    ">=": TokenKind.GREATER_THAN_OR_EQUAL,
}

_KEYWORDS = {
    kind.value: kind
    for kind in (
        TokenKind.AND, TokenKind.OR, TokenKind.NOT, TokenKind.WITH,
        TokenKind.IN, TokenKind.BY, TokenKind.TO, TokenKind.RADIUS,
        TokenKind.SCALE, TokenKind.COLOR, TokenKind.X, TokenKind.Y,
        TokenKind.DRAW, TokenKind.ERASE, TokenKind.CLEAR, TokenKind.GRID,
        TokenKind.EXPORT, TokenKind.PIXEL, TokenKind.LINE,
        TokenKind.RECTANGLE, TokenKind.TRIANGLE, TokenKind.CIRCLE,
        TokenKind.PNG, TokenKind.SVG, TokenKind.WEBP, TokenKind.GIF,
        TokenKind.LAYER, TokenKind.MIRROR, TokenKind.FRAME, TokenKind.COPY,
        TokenKind.MOVE, TokenKind.AT,
    )
}

_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_MAX_NUMBER = 0xFFFFFFFF


class LexerError(Exception):
    """Raised when the source text cannot be tokenized."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class Lexer:
    """Reads source text and produces a list of tokens."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._index = 0
        self._line = 1
        self._column = 1

    def tokenize(self) -> list[Token]:
        """Tokenize the whole source, raising LexerError on bad input."""
        self._index, self._line, self._column = 0, 1, 1
        tokens: list[Token] = []

        while self._index < len(self._source):
            character = self._source[self._index]

            if character.isspace():
                self._advance()
                continue

            if character == "/" and self._peek() == "/":
                self._skip_comment()
                continue

            pair = self._source[self._index:self._index + 2]
            if pair in _TWO_CHARACTER_KINDS:
                position = self._position()
                self._advance()
                self._advance()
                tokens.append(Token(_TWO_CHARACTER_KINDS[pair], pair, position))
            elif character in _SINGLE_CHARACTER_KINDS:
                position = self._position()
                self._advance()
                tokens.append(
                    Token(_SINGLE_CHARACTER_KINDS[character], character, position)
                )
            elif character in _DIGITS:
                tokens.append(self._number_token())
            elif character == "#":
                tokens.append(self._hexadecimal_color_token())
            elif character == '"':
                tokens.append(self._string_literal_token())
            elif character in _LETTERS:
                tokens.append(self._keyword_token())
            else:
                raise LexerError(
                    f"[ERROR] Unexpected character '{character}' "
                    f"at line {self._line}, column {self._column}"
                )

        return tokens

    def _position(self) -> Position:
        return Position(self._line, self._column)

    def _current(self) -> str | None:
        if self._index < len(self._source):
            return self._source[self._index]
        return None

    def _peek(self) -> str | None:
        if self._index + 1 < len(self._source):
            return self._source[self._index + 1]
        return None

    def _advance(self) -> None:
        if self._current() == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        self._index += 1

    def _take_while(self, allowed: frozenset[str]) -> str:
        start = self._index
        while (character := self._current()) is not None and character in allowed:
            self._advance()
        return self._source[start:self._index]

    def _skip_comment(self) -> None:
        while (character := self._current()) is not None and character != "\n":
            self._advance()

    def _keyword_token(self) -> Token:
        position = self._position()
        text = self._take_while(_LETTERS)
        kind = _KEYWORDS.get(text)
        if kind is None:
            return Token(TokenKind.IDENTIFIER, text, position, text)
        return Token(kind, text, position)

    def _number_token(self) -> Token:
        position = self._position()
        text = self._take_while(_DIGITS)
        value = int(text)
        if value > _MAX_NUMBER:
            raise LexerError(
                f"[ERROR] Number '{text}' is too large "
                f"at line {position.line}, column {position.column}"
            )
        return Token(TokenKind.NUMBER, text, position, value)

    def _hexadecimal_color_token(self) -> Token:
        position = self._position()
        self._advance()  # skip '#'
        digits = self._take_while(_HEX_DIGITS)
        if len(digits) not in (3, 6, 8):
            raise LexerError(
                f"[ERROR] Hexadecimal color '#{digits}' must have 3, 6, or 8 digits "
                f"at line {position.line}, column {position.column}"
            )
        return Token(TokenKind.HEXADECIMAL_COLOR, f"#{digits}", position, digits)

    def _string_literal_token(self) -> Token:
        position = self._position()
        unterminated = LexerError(
            f"[ERROR] String is missing a closing quote "
            f"at line {position.line}, column {position.column}"
        )
        self._advance()  # skip opening quote
        start = self._index
        while (character := self._current()) != '"':
            if character is None or character == "\n":
                raise unterminated
            self._advance()
        content = self._source[start:self._index]
        self._advance()  # skip closing quote
        return Token(TokenKind.STRING_LITERAL, f'"{content}"', position, content)


def tokenize(source: str) -> list[Token]:
    """Tokenize ``source`` in one call."""
    return Lexer(source).tokenize()