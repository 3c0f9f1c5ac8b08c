import pytest

from saba.errors import UnexpectedInputError
from saba.js_lexer import (
    Identifier,
    JsLexer,
    Keyword,
    Number,
    Punctuator,
    StringLiteral,
    tokenize,
)


def test_empty():
    assert tokenize("") == []


def test_empty_lexer_stops_immediately():
    with pytest.raises(StopIteration):
        next(JsLexer(""))


def test_num():
    assert tokenize("42") == [Number(42)]


def test_add_nums():
    assert tokenize("1 + 2") == [Number(1), Punctuator("+"), Number(2)]


def test_assign_variable():
    assert tokenize('var foo="bar";') == [
        Keyword("var"),
        Identifier("foo"),
        Punctuator("="),
        StringLiteral("bar"),
        Punctuator(";"),
    ]


def test_add_variable_and_num():
    assert tokenize("var foo=42; var result=foo+1;") == [
        Keyword("var"),
        Identifier("foo"),
        Punctuator("="),
        Number(42),
        Punctuator(";"),
        Keyword("var"),
        Identifier("result"),
        Punctuator("="),
        Identifier("foo"),
        Punctuator("+"),
        Number(1),
        Punctuator(";"),
    ]


def test_add_local_variable_and_num():
    source = "function foo() { var a=42; return a; } var result = foo() + 1;"
    assert tokenize(source) == [
        Keyword("function"),
        Identifier("foo"),
        Punctuator("("),
        Punctuator(")"),
        Punctuator("{"),
        Keyword("var"),
        Identifier("a"),
        Punctuator("="),
        Number(42),
        Punctuator(";"),
        Keyword("return"),
        Identifier("a"),
        Punctuator(";"),
        Punctuator("}"),
        Keyword("var"),
        Identifier("result"),
        Punctuator("="),
        Identifier("foo"),
        Punctuator("("),
        Punctuator(")"),
        Punctuator("+"),
        Number(1),
        Punctuator(";"),
    ]


def test_lexer_is_an_iterator():
    lexer = JsLexer("1 + 2")
    assert iter(lexer) is lexer
    assert next(lexer) == Number(1)
    assert list(lexer) == [Punctuator("+"), Number(2)]


def test_trailing_whitespace_ends_stream():
    assert tokenize("42 \n ") == [Number(42)]


def test_unterminated_string_takes_rest():
    assert tokenize('"abc') == [StringLiteral("abc")]


def test_unsupported_character_raises():
    with pytest.raises(UnexpectedInputError):
        tokenize("1 * 2")