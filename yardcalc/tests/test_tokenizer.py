"""Tests for the tokenizer: character classes, literals, spans and lexical errors."""

import pytest

from yardcalc.errors import ErrorKind, InvalidCharacter, MalformedNumber
from yardcalc.models import CharClass, TokenKind
from yardcalc.tokenizer import classify, format_tokens, tokenize


def _texts(expr):
    return [t.text for t in tokenize(expr)]


# --- Character classification ---

@pytest.mark.parametrize("char,expected", [
    ("0", CharClass.DIGIT),
    ("9", CharClass.DIGIT),
    ("+", CharClass.OPERATOR),
    ("^", CharClass.OPERATOR),
    ("%", CharClass.OPERATOR),
    ("(", CharClass.OPEN),
    (")", CharClass.CLOSE),
    (".", CharClass.PERIOD),
    (" ", CharClass.BLANK),
    ("\t", CharClass.BLANK),
    ("\n", CharClass.BLANK),
    ("x", CharClass.INVALID),
    ("=", CharClass.INVALID),
])
def test_classify(char, expected):
    assert classify(char) is expected


# --- Token stream ---

def test_simple_expression():
    tokens = tokenize("1.5 * (2 - 3)")
    assert [t.kind for t in tokens] == [
        TokenKind.NUMBER,
        TokenKind.OPERATOR,
        TokenKind.OPEN,
        TokenKind.NUMBER,
        TokenKind.OPERATOR,
        TokenKind.NUMBER,
        TokenKind.CLOSE,
    ]
    assert tokens[0].value == 1.5


def test_whitespace_is_skipped():
    assert _texts(" 1 +\t2\n") == _texts("1+2") == ["1", "+", "2"]


def test_multi_digit_literal_is_one_token():
    tokens = tokenize("542/122")
    assert [t.text for t in tokens] == ["542", "/", "122"]
    assert tokens[0].value == 542.0
    assert tokens[2].value == 122.0


def test_spans_index_into_source():
    source = "  10.25 ^ 2"
    tokens = tokenize(source)
    assert [(t.start, t.end) for t in tokens] == [(2, 7), (8, 9), (10, 11)]
    for t in tokens:
        assert source[t.start:t.end] == t.text


@pytest.mark.parametrize("literal,value", [
    ("0", 0.0),
    ("007", 7.0),
    ("3.14", 3.14),
    (".5", 0.5),
    ("5.", 5.0),
])
def test_literal_forms(literal, value):
    (token,) = tokenize(literal)
    assert token.kind is TokenKind.NUMBER
    assert token.value == value


def test_empty_input_gives_no_tokens():
    assert tokenize("") == []
    assert tokenize("   ") == []


def test_grammar_is_not_checked():
    assert _texts("1 + + 2") == ["1", "+", "+", "2"]


def test_tokens_are_immutable():
    (token,) = tokenize("4")
    with pytest.raises(AttributeError):
        token.value = 5.0


def test_format_tokens():
    assert format_tokens(tokenize("(1.50+2)")) == "( 1.50 + 2 )"


# --- Errors ---

def test_second_period_is_malformed():
    with pytest.raises(MalformedNumber) as exc:
        tokenize("1 + 2.3.4")
    assert exc.value.kind is ErrorKind.MALFORMED_NUMBER
    assert exc.value.position == 7


def test_bare_period_is_malformed():
    with pytest.raises(MalformedNumber) as exc:
        tokenize("1 .5 . 2")
    assert exc.value.position == 5


@pytest.mark.parametrize("expr,position", [
    ("1 $ 2", 2),
    ("sin(1)", 0),
    ("2 x 3", 2),
    ("1 // 2 = 0", 7),
])
def test_invalid_character(expr, position):
    with pytest.raises(InvalidCharacter) as exc:
        tokenize(expr)
    assert exc.value.position == position
    assert exc.value.kind is ErrorKind.INVALID_CHARACTER


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        tokenize("?")
