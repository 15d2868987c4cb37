"""Typed evaluation errors.

Every failure in the pipeline is raised as a subclass of EvalError carrying an
ErrorKind, so callers can tell a bad literal apart from a missing paren.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    INVALID_CHARACTER = "invalid-character"
    MALFORMED_NUMBER = "malformed-number"
    UNBALANCED_PARENTHESES = "unbalanced-parentheses"
    ARITY_MISMATCH = "arity-mismatch"


class EvalError(ValueError):
    """Base class for all expression evaluation failures."""

    kind: ErrorKind

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at position {self.position})"


class InvalidCharacter(EvalError):
    kind = ErrorKind.INVALID_CHARACTER


class MalformedNumber(EvalError):
    kind = ErrorKind.MALFORMED_NUMBER


class UnbalancedParentheses(EvalError):
    kind = ErrorKind.UNBALANCED_PARENTHESES


class ArityMismatch(EvalError):
    kind = ErrorKind.ARITY_MISMATCH
