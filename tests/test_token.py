import dataclasses

import pytest

from monkeylang.token import Token, TokenType, lookup_ident


@pytest.mark.parametrize(
    "word, expected",
    [
        ("fn", TokenType.FUNCTION),
        ("let", TokenType.LET),
        ("true", TokenType.TRUE),
        ("false", TokenType.FALSE),
        ("if", TokenType.IF),
        ("else", TokenType.ELSE),
        ("return", TokenType.RETURN),
    ],
)
def test_lookup_ident_keywords(word, expected):
    assert lookup_ident(word) is expected


@pytest.mark.parametrize("word", ["five", "add", "Let", "fnx", "_x", "result"])
def test_lookup_ident_plain_identifiers(word):
    assert lookup_ident(word) is TokenType.IDENT


@pytest.mark.parametrize(
    "member, value",
    [
        (TokenType.EQ, "=="),
        (TokenType.NOT_EQ, "!="),
        (TokenType.ASSIGN, "="),
        (TokenType.LET, "LET"),
        (TokenType.EOF, "EOF"),
    ],
)
def test_token_type_values_and_str(member, value):
    assert member.value == value
    assert str(member) == value
    assert TokenType(value) is member


def test_token_equality_and_immutability():
    first = Token(TokenType.IDENT, "five")
    second = Token(TokenType.IDENT, "five")
    assert first == second
    assert hash(first) == hash(second)
    with pytest.raises(dataclasses.FrozenInstanceError):
        first.literal = "ten"