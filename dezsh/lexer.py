"""Tokenizer for shell command lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

_END = "\0"
_SPACE = frozenset(" \t\n\v\f\r")
_WORD_STOP = frozenset("|&;<>()")
_WORD_START_EXTRA = frozenset("._$-")
_QUOTES = frozenset("\"'")


class TokenType(Enum):
    """Kinds of token produced by the lexer."""

    WORD = auto()
    VARIABLE = auto()
    PIPE = auto()
    REDIRECT_OUT = auto()
    REDIRECT_OUT_APPEND = auto()
    REDIRECT_IN = auto()
    AND_IF = auto()
    OR_IF = auto()
    SEMI = auto()
    BACKGROUND = auto()
    LPAREN = auto()
    RPAREN = auto()
    EOF = auto()


@dataclass(frozen=True)
class Token:
    """A token with its text and the zero-based position where it starts."""

    type: TokenType
    value: str
    line: int
    column: int


# Operators that may be doubled: (single, double) forms.
_DOUBLED = {
    "|": ((TokenType.PIPE, "|"), (TokenType.OR_IF, "||")),
    "&": ((TokenType.BACKGROUND, "&"), (TokenType.AND_IF, "&&")),
    ">": ((TokenType.REDIRECT_OUT, ">"), (TokenType.REDIRECT_OUT_APPEND, ">>")),
}

_SINGLE = {
    "<": TokenType.REDIRECT_IN,
    ";": TokenType.SEMI,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


class Lexer:
    """Turns a command line into a list of tokens ending with an EOF token."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._line = 0
        self._col = 0
        self._curr = text[0] if text else _END

    def tokenize(self) -> list[Token]:
        """Return every token of the input, the last one being EOF."""
        return list(self._tokens())

    def _tokens(self) -> Iterator[Token]:
        while True:
            token = self._next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    def _advance(self) -> None:
        if self._curr == "\n":
            self._line += 1
            self._col = 0
        else:
            self._col += 1
        self._pos += 1
        self._curr = self._text[self._pos] if self._pos < len(self._text) else _END

    def _skip_whitespace(self) -> None:
        while self._curr != _END and self._curr in _SPACE:
            self._advance()

    def _next_token(self) -> Token:
        self._skip_whitespace()
        if self._curr == _END:
            return Token(TokenType.EOF, "", self._line, self._col)
        if self._curr in _QUOTES:
            return self._quoted_string()
        if _is_alnum(self._curr) or self._curr in _WORD_START_EXTRA:
            return self._word()
        return self._operator()

    def _word(self) -> Token:
        start, line, col = self._pos, self._line, self._col
        while (
            self._curr != _END
            and self._curr not in _SPACE
            and self._curr not in _WORD_STOP
        ):
            self._advance()
        return Token(TokenType.WORD, self._text[start:self._pos], line, col)

    def _operator(self) -> Token:
        line, col = self._line, self._col
        char = self._curr
        self._advance()
        if char in _DOUBLED:
            single, double = _DOUBLED[char]
            if self._curr == char:
                self._advance()
                return Token(double[0], double[1], line, col)
            return Token(single[0], single[1], line, col)
        if char in _SINGLE:
            return Token(_SINGLE[char], char, line, col)
        return Token(TokenType.WORD, char, line, col)

    def _quoted_string(self) -> Token:
        quote = self._curr
        self._advance()
        line, col = self._line, self._col
        chars = []
        while self._curr != _END and self._curr != quote:
            chars.append(self._curr)
            self._advance()
        if self._curr == quote:
            self._advance()
        return Token(TokenType.WORD, "".join(chars), line, col)


def tokenize(text: str) -> list[Token]:
    """Tokenize ``text`` into a list ending with an EOF token."""
    return Lexer(text).tokenize()