"""Syntax tree and parser for the small JavaScript subset the browser runs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

from saba import js_lexer as tok
from saba.errors import UnexpectedInputError


@dataclass(frozen=True)
class ExpressionStatement:
    """A statement made of a single expression."""

    expression: Optional[Node]


@dataclass(frozen=True)
class AdditiveExpression:
    """``left + right`` or ``left - right``."""

    operator: str
    left: Optional[Node]
    right: Optional[Node]


@dataclass(frozen=True)
class AssignmentExpression:
    """``left = right``."""

    operator: str
    left: Optional[Node]
    right: Optional[Node]


@dataclass(frozen=True)
class MemberExpression:
    """``object.property``."""

    object: Optional[Node]
    property: Optional[Node]


@dataclass(frozen=True)
class NumericLiteral:
    """A non-negative integer."""

    value: int


@dataclass(frozen=True)
class VariableDeclaration:
    """``var`` followed by its declarators."""

    declarations: tuple[Optional[Node], ...]


@dataclass(frozen=True)
class VariableDeclarator:
    """One declared variable and its initial value."""

    id: Optional[Node]
    init: Optional[Node]


@dataclass(frozen=True)
class Identifier:
    """A name."""

    name: str


@dataclass(frozen=True)
class StringLiteral:
    """A string value."""

    value: str


@dataclass(frozen=True)
class BlockStatement:
    """Statements between curly brackets."""

    body: tuple[Optional[Node], ...]


@dataclass(frozen=True)
class ReturnStatement:
    """``return`` with its argument."""

    argument: Optional[Node]


@dataclass(frozen=True)
class FunctionDeclaration:
    """``function id(params) { body }``."""

    id: Optional[Node]
    params: tuple[Optional[Node], ...]
    body: Optional[Node]


@dataclass(frozen=True)
class CallExpression:
    """``callee(arguments)``."""

    callee: Optional[Node]
    arguments: tuple[Optional[Node], ...]


Node = Union[
    ExpressionStatement,
    AdditiveExpression,
    AssignmentExpression,
    MemberExpression,
    NumericLiteral,
    VariableDeclaration,
    VariableDeclarator,
    Identifier,
    StringLiteral,
    BlockStatement,
    ReturnStatement,
    FunctionDeclaration,
    CallExpression,
]


@dataclass(frozen=True)
class Program:
    """The top-level statements of a script."""

    body: tuple[Node, ...] = ()


class _Peekable:
    """A token stream with one token of lookahead."""

    _EMPTY = object()

    def __init__(self, tokens: Iterable[tok.Token]) -> None:
        self._iter: Iterator[tok.Token] = iter(tokens)
        self._peeked: object = self._EMPTY

    def peek(self) -> Optional[tok.Token]:
        if self._peeked is self._EMPTY:
            self._peeked = next(self._iter, None)
        return self._peeked  # type: ignore[return-value]

    def next(self) -> Optional[tok.Token]:
        token = self.peek()
        self._peeked = self._EMPTY
        return token


def _is_punct(token: Optional[tok.Token], chars: str) -> bool:
    return isinstance(token, tok.Punctuator) and token.value in chars


class JsParser:
    """Builds a :class:`Program` from a stream of tokens."""

    def __init__(self, t: Iterable[tok.Token]) -> None:
        self._t = _Peekable(t)

    def parse_ast(self) -> Program:
        """Parse every source element until the tokens run out."""
        body = []
        while (node := self._source_element()) is not None:
            body.append(node)
        return Program(tuple(body))

    def _primary_expression(self) -> Optional[Node]:
        token = self._t.next()
        if isinstance(token, tok.Identifier):
            return Identifier(token.value)
        if isinstance(token, tok.StringLiteral):
            return StringLiteral(token.value)
        if isinstance(token, tok.Number):
            return NumericLiteral(token.value)
        return None

    def _member_expression(self) -> Optional[Node]:
        expr = self._primary_expression()
        if _is_punct(self._t.peek(), "."):
            self._t.next()
            return MemberExpression(expr, self._identifier())
        return expr

    def _arguments(self) -> tuple[Optional[Node], ...]:
        arguments = []
        while True:
            token = self._t.peek()
            if token is None:
                return tuple(arguments)
            if isinstance(token, tok.Punctuator):
                if token.value == ")":
                    self._t.next()
                    return tuple(arguments)
                if token.value != ",":
                    raise UnexpectedInputError(
                        f"unexpected {token.value!r} in arguments"
                    )
                self._t.next()
            else:
                arguments.append(self._assignment_expression())

    def _left_hand_side_expression(self) -> Optional[Node]:
        expr = self._member_expression()
        if _is_punct(self._t.peek(), "("):
            self._t.next()
            return CallExpression(expr, self._arguments())
        return expr

    def _additive_expression(self) -> Optional[Node]:
        left = self._left_hand_side_expression()
        token = self._t.peek()
        if isinstance(token, tok.Punctuator) and token.value in "+-":
            self._t.next()
            return AdditiveExpression(token.value, left, self._assignment_expression())
        return left

    def _assignment_expression(self) -> Optional[Node]:
        expr = self._additive_expression()
        if _is_punct(self._t.peek(), "="):
            self._t.next()
            return AssignmentExpression("=", expr, self._assignment_expression())
        return expr

    def _initialiser(self) -> Optional[Node]:
        token = self._t.next()
        if _is_punct(token, "="):
            return self._assignment_expression()
        return None

    def _identifier(self) -> Optional[Node]:
        token = self._t.next()
        if isinstance(token, tok.Identifier):
            return Identifier(token.value)
        return None

    def _variable_declaration(self) -> Node:
        ident = self._identifier()
        declarator = VariableDeclarator(ident, self._initialiser())
        return VariableDeclaration((declarator,))

    def _statement(self) -> Optional[Node]:
        token = self._t.peek()
        if token is None:
            return None

        node: Optional[Node]
        if isinstance(token, tok.Keyword):
            if token.value == "var":
                self._t.next()
                node = self._variable_declaration()
            elif token.value == "return":
                self._t.next()
                node = ReturnStatement(self._assignment_expression())
            else:
                node = None
        else:
            node = ExpressionStatement(self._assignment_expression())

        if _is_punct(self._t.peek(), ";"):
            self._t.next()
        return node

    def _expect(self, char: str, what: str) -> None:
        token = self._t.next()
        if not _is_punct(token, char):
            raise UnexpectedInputError(f"{what} should have {char!r} but got {token!r}")

    def _function_body(self) -> Node:
        self._expect("{", "function")
        body = []
        while True:
            token = self._t.peek()
            if token is None:
                raise UnexpectedInputError("function body is not closed")
            if _is_punct(token, "}"):
                self._t.next()
                return BlockStatement(tuple(body))
            body.append(self._source_element())

    def _parameter_list(self) -> tuple[Optional[Node], ...]:
        self._expect("(", "function")
        params = []
        while True:
            token = self._t.peek()
            if token is None:
                return tuple(params)
            if isinstance(token, tok.Punctuator):
                if token.value == ")":
                    self._t.next()
                    return tuple(params)
                if token.value != ",":
                    raise UnexpectedInputError(
                        f"unexpected {token.value!r} in parameter list"
                    )
                self._t.next()
            else:
                params.append(self._identifier())

    def _function_declaration(self) -> Node:
        ident = self._identifier()
        params = self._parameter_list()
        return FunctionDeclaration(ident, params, self._function_body())

    def _source_element(self) -> Optional[Node]:
        token = self._t.peek()
        if token is None:
            return None
        if isinstance(token, tok.Keyword) and token.value == "function":
            self._t.next()
            return self._function_declaration()
        return self._statement()


def parse(js: str) -> Program:
    """Tokenize and parse ``js``."""
    return JsParser(tok.JsLexer(js)).parse_ast()