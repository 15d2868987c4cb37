"""Tokenizer — scans expression text into Token objects.

Numbers are maximal runs of digits with at most one period; every operator
and paren is a single character; blanks are skipped.
"""

from __future__ import annotations

import logging

from yardcalc.errors import InvalidCharacter, MalformedNumber
from yardcalc.models import OPERATORS, CharClass, Token, TokenKind

logger = logging.getLogger(__name__)

_BLANKS = frozenset(" \t\n\r")
_DIGITS = frozenset("0123456789")


def classify(char: str) -> CharClass:
    """Return the lexical category of a single character."""
    if char in _DIGITS:
        return CharClass.DIGIT
    if char in OPERATORS:
        return CharClass.OPERATOR
    if char == "(":
        return CharClass.OPEN
    if char == ")":
        return CharClass.CLOSE
    if char == ".":
        return CharClass.PERIOD
    if char in _BLANKS:
        return CharClass.BLANK
    return CharClass.INVALID


def _scan_number(text: str, start: int) -> Token:
    """Consume the literal beginning at ``start``.

    Raises MalformedNumber on a second period or a literal without digits.
    """
    end = start
    seen_period = False
    while end < len(text):
        cls = classify(text[end])
        if cls is CharClass.PERIOD:
            if seen_period:
                raise MalformedNumber(
                    f"more than one decimal point in {text[start:end + 1]!r}", end
                )
            seen_period = True
        elif cls is not CharClass.DIGIT:
            break
        end += 1

    literal = text[start:end]
    if literal == ".":
        raise MalformedNumber("decimal point without digits", start)
    return Token.number(literal, start)


def tokenize(text: str) -> list[Token]:
    """Split an infix expression into tokens.

    Grammar is not checked here: ``"1 + + 2"`` and ``""`` tokenize fine and
    fail later in evaluation.
    """
    tokens: list[Token] = []
    i = 0
    while i < len(text):
        char = text[i]
        cls = classify(char)
        if cls is CharClass.BLANK:
            i += 1
        elif cls in (CharClass.DIGIT, CharClass.PERIOD):
            token = _scan_number(text, i)
            tokens.append(token)
            i = token.end
        elif cls is CharClass.OPERATOR:
            tokens.append(Token(TokenKind.OPERATOR, char, i))
            i += 1
        elif cls is CharClass.OPEN:
            tokens.append(Token(TokenKind.OPEN, char, i))
            i += 1
        elif cls is CharClass.CLOSE:
            tokens.append(Token(TokenKind.CLOSE, char, i))
            i += 1
        else:
            raise InvalidCharacter(f"unexpected character {char!r}", i)

    logger.debug("Tokenized %r into %d tokens", text, len(tokens))
    return tokens


def format_tokens(tokens: list[Token]) -> str:
    """Render tokens space-separated, e.g. the postfix form ``3 4 2 * +``.

    Number tokens keep their source text, so the rendering tokenizes back to
    the same values.
    """
    return " ".join(t.text for t in tokens)
