"""Postfix evaluation and the public evaluate() entry points.

Arithmetic follows IEEE-754 double semantics the way C's <math.h> does:
division by zero gives an infinity, domain errors give NaN. Python's float
operators raise in those places, so the three affected operators are wrapped.
"""

from __future__ import annotations

import logging
import math
import operator
from typing import Callable

from yardcalc.converter import to_postfix
from yardcalc.errors import ArityMismatch, EvalError, UnbalancedParentheses
from yardcalc.models import EvalResult, Token, TokenKind
from yardcalc.tokenizer import format_tokens, tokenize

logger = logging.getLogger(__name__)


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x == int(x) and int(x) % 2 == 1


def _divide(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _remainder(a: float, b: float) -> float:
    """C fmod: the result takes the sign of ``a``."""
    try:
        return math.fmod(a, b)
    except ValueError:
        # fmod(x, 0) and fmod(inf, y)
        return math.nan


def _power(a: float, b: float) -> float:
    """C pow: NaN for a negative base with a fractional exponent."""
    try:
        return math.pow(a, b)
    except ValueError:
        if a == 0.0 and b < 0.0:
            return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
        return math.nan
    except OverflowError:
        if a < 0.0 and _is_odd_integer(b):
            return -math.inf
        return math.inf


_APPLY: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    "%": _remainder,
    "^": _power,
}


def apply_operator(symbol: str, a: float, b: float) -> float:
    """Compute ``a <symbol> b``; ``a`` is the operand pushed first."""
    return _APPLY[symbol](a, b)


def evaluate_postfix(tokens: list[Token]) -> float:
    """Evaluate a postfix token sequence.

    Raises:
        ArityMismatch: an operator finds fewer than two operands, or the
            expression leaves anything other than exactly one value.
        UnbalancedParentheses: a parenthesis token in the input.
    """
    stack: list[float] = []

    for token in tokens:
        if token.kind is TokenKind.NUMBER:
            stack.append(token.value)
        elif token.kind is TokenKind.OPERATOR:
            if len(stack) < 2:
                raise ArityMismatch(f"operator {token.text!r} needs two operands", token.start)
            b = stack.pop()
            a = stack.pop()
            stack.append(apply_operator(token.text, a, b))
        else:
            raise UnbalancedParentheses("parenthesis in postfix input", token.start)

    if len(stack) != 1:
        raise ArityMismatch(f"expression left {len(stack)} values, expected 1")
    return stack[0]


def evaluate(expression: str) -> float:
    """Evaluate an infix expression and return its value.

    Raises:
        EvalError: one of InvalidCharacter, MalformedNumber,
            UnbalancedParentheses or ArityMismatch.
    """
    result = evaluate_postfix(to_postfix(tokenize(expression)))
    logger.debug("%r = %r", expression, result)
    return result


def try_evaluate(expression: str) -> EvalResult:
    """Evaluate without raising; failures come back as an EvalResult."""
    postfix = ""
    try:
        rpn = to_postfix(tokenize(expression))
        postfix = format_tokens(rpn)
        value = evaluate_postfix(rpn)
    except EvalError as e:
        logger.debug("%r failed: %s", expression, e)
        return EvalResult(
            expression=expression,
            postfix=postfix,
            error_kind=e.kind.value,
            message=e.message,
            position=e.position,
        )
    return EvalResult(expression=expression, value=value, postfix=postfix)
