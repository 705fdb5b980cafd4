"""Turns source text into a stream of tokens."""

from __future__ import annotations

from collections.abc import Iterator

from monkeylang.token import Token, TokenType, lookup_ident

_END = "\0"
_WHITESPACE = frozenset(" \t\n\r")

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "!": TokenType.BANG,
    "/": TokenType.SLASH,
    "*": TokenType.ASTERISK,
    "<": TokenType.LT,
    ">": TokenType.GT,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

_TWO_CHAR_TOKENS: dict[str, TokenType] = {
    "==": TokenType.EQ,
    "!=": TokenType.NOT_EQ,
}


def _is_letter(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    """Reads tokens one at a time from a source string.

    Once the input is exhausted every further call to :meth:`next_token`
    yields an EOF token.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0

    def _char_at(self, index: int) -> str:
        return self._source[index] if index < len(self._source) else _END

    @property
    def _ch(self) -> str:
        return self._char_at(self._pos)

    def _read_while(self, predicate) -> str:
        start = self._pos
        while predicate(self._ch):
            self._pos += 1
        return self._source[start:self._pos]

    def next_token(self) -> Token:
        """Return the next token in the input."""
        self._read_while(lambda ch: ch in _WHITESPACE)
        ch = self._ch

        pair = ch + self._char_at(self._pos + 1)
        if pair in _TWO_CHAR_TOKENS:
            self._pos += 2
            return Token(_TWO_CHAR_TOKENS[pair], pair)

        if ch in _SINGLE_CHAR_TOKENS:
            tok = Token(_SINGLE_CHAR_TOKENS[ch], ch)
        elif ch == _END:
            tok = Token(TokenType.EOF, "")
        elif _is_letter(ch):
            word = self._read_while(_is_letter)
            return Token(lookup_ident(word), word)
        elif _is_digit(ch):
            return Token(TokenType.INT, self._read_while(_is_digit))
        else:
            tok = Token(TokenType.ILLEGAL, ch)

        self._pos += 1
        return tok

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, the first EOF token."""
        while (tok := self.next_token()).type is not TokenType.EOF:
            yield tok