"""Tokenizer for the small JavaScript subset the browser runs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from saba.errors import UnexpectedInputError

RESERVED_WORDS = ("var", "function", "return")

_PUNCTUATORS = frozenset("+-;=(){},.")
_WHITESPACE = frozenset(" \n")


@dataclass(frozen=True)
class Punctuator:
    """A single punctuation character such as ``+`` or ``{``."""

    value: str


@dataclass(frozen=True)
class Number:
    """A non-negative integer literal."""

    value: int


@dataclass(frozen=True)
class Identifier:
    """A name of a variable, function or property."""

    value: str


@dataclass(frozen=True)
class Keyword:
    """One of the reserved words."""

    value: str


@dataclass(frozen=True)
class StringLiteral:
    """A double-quoted string, without its quotes."""

    value: str


Token = Union[Punctuator, Number, Identifier, Keyword, StringLiteral]


def _is_identifier_char(c: str) -> bool:
    return (c.isascii() and c.isalnum()) or c in "$_"


def _is_identifier_start(c: str) -> bool:
    return (c.isascii() and c.isalpha()) or c in "$_"


class JsLexer:
    """Iterates over the tokens of a piece of JavaScript source."""

    def __init__(self, js: str) -> None:
        self._input = js
        self._pos = 0

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        text = self._input
        while self._pos < len(text) and text[self._pos] in _WHITESPACE:
            self._pos += 1
        if self._pos >= len(text):
            raise StopIteration

        # Reserved words are recognised as prefixes, without a word boundary.
        for word in RESERVED_WORDS:
            if text.startswith(word, self._pos):
                self._pos += len(word)
                return Keyword(word)

        c = text[self._pos]
        if c in _PUNCTUATORS:
            self._pos += 1
            return Punctuator(c)
        if c.isascii() and c.isdigit():
            return Number(self._consume_number())
        if _is_identifier_start(c):
            return Identifier(self._consume_identifier())
        if c == '"':
            return StringLiteral(self._consume_string())
        raise UnexpectedInputError(f"char {c!r} is not supported yet")

    def _consume_while(self, predicate) -> str:
        start = self._pos
        text = self._input
        while self._pos < len(text) and predicate(text[self._pos]):
            self._pos += 1
        return text[start:self._pos]

    def _consume_number(self) -> int:
        return int(self._consume_while(lambda c: c.isascii() and c.isdigit()))

    def _consume_identifier(self) -> str:
        return self._consume_while(_is_identifier_char)

    def _consume_string(self) -> str:
        self._pos += 1
        value = self._consume_while(lambda c: c != '"')
        if self._pos < len(self._input):
            self._pos += 1
        return value


def tokenize(js: str) -> list[Token]:
    """Return every token of ``js`` in order."""
    return list(JsLexer(js))