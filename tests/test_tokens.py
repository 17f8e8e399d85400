import dataclasses

import pytest

from pixlang.tokens import Position, Token, TokenKind


def test_positions_order_by_line_then_column():
    assert Position(1, 9) < Position(2, 1)
    assert Position(2, 3) < Position(2, 4)
    assert not Position(3, 1) < Position(3, 1)


def test_positions_compare_equal_by_value():
    assert Position(4, 7) == Position(4, 7)
    assert Position(4, 7) != Position(7, 4)


def test_token_value_defaults_to_none():
    token = Token(TokenKind.LEFT_PARENTHESIS, "(", Position(1, 1))
    assert token.value is None
    assert token.text == "("


def test_tokens_with_same_fields_are_equal():
    first = Token(TokenKind.NUMBER, "42", Position(1, 1), 42)
    second = Token(TokenKind.NUMBER, "42", Position(1, 1), 42)
    assert first == second
    assert hash(first) == hash(second)


def test_tokens_differ_by_value():
    first = Token(TokenKind.IDENTIFIER, "skin", Position(1, 1), "skin")
    second = Token(TokenKind.IDENTIFIER, "skin", Position(1, 1), "hair")
    assert first != second


def test_token_is_immutable():
    token = Token(TokenKind.COMMA, ",", Position(1, 1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.text = ";"
    assert token.text == ","
    assert token.kind is TokenKind.COMMA


def test_keyword_kinds_carry_their_spelling():
    assert TokenKind("circle") is TokenKind.CIRCLE
    assert TokenKind("<=") is TokenKind.LESS_THAN_OR_EQUAL