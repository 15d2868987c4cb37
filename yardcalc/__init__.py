"""yardcalc — infix arithmetic evaluator built on the shunting-yard algorithm.

Tokenizes an expression, reorders it into postfix with an operator stack, and
evaluates the postfix form on a value stack. Six binary operators
(``^ * / % + -``), parentheses, integer and decimal literals.

Usage:
    python -m yardcalc eval "2 + 3 * 4"        # Print the result
    python -m yardcalc eval "2 ^ 3 ^ 2" --rpn  # Also show postfix
    python -m yardcalc rpn "(1 + 2) * 3"       # Postfix only
    python -m yardcalc check                   # Run the regression suite
"""

from yardcalc.errors import (
    ArityMismatch,
    ErrorKind,
    EvalError,
    InvalidCharacter,
    MalformedNumber,
    UnbalancedParentheses,
)
from yardcalc.evaluator import evaluate, evaluate_postfix, try_evaluate
from yardcalc.converter import to_postfix
from yardcalc.tokenizer import format_tokens, tokenize

__all__ = [
    "ArityMismatch",
    "ErrorKind",
    "EvalError",
    "InvalidCharacter",
    "MalformedNumber",
    "UnbalancedParentheses",
    "evaluate",
    "evaluate_postfix",
    "format_tokens",
    "to_postfix",
    "tokenize",
    "try_evaluate",
]
