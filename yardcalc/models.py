"""Data models for the yardcalc pipeline.

CharClass, TokenKind, Associativity, Operator, Token, EvalResult — the typed
structures that flow through tokenizer → converter → evaluator → CLI.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CharClass(str, Enum):
    """Lexical category of a single input character."""

    DIGIT = "digit"
    OPERATOR = "operator"
    OPEN = "open"
    CLOSE = "close"
    PERIOD = "period"
    BLANK = "blank"
    INVALID = "invalid"


class TokenKind(str, Enum):
    """Token categories produced by the tokenizer."""

    NUMBER = "number"
    OPERATOR = "operator"
    OPEN = "open"
    CLOSE = "close"


class Associativity(str, Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Operator:
    """A binary operator and its binding rules.

    Lower precedence numbers bind tighter: ``^`` (1) binds before ``*`` (2),
    which binds before ``+`` (3).
    """

    symbol: str
    precedence: int
    associativity: Associativity

    @property
    def left_associative(self) -> bool:
        return self.associativity is Associativity.LEFT


OPERATORS: dict[str, Operator] = {
    "^": Operator("^", 1, Associativity.RIGHT),
    "*": Operator("*", 2, Associativity.LEFT),
    "/": Operator("/", 2, Associativity.LEFT),
    "%": Operator("%", 2, Associativity.LEFT),
    "+": Operator("+", 3, Associativity.LEFT),
    "-": Operator("-", 3, Associativity.LEFT),
}


@dataclass(frozen=True)
class Token:
    """One lexical unit of an expression.

    ``text`` is the exact source slice and ``start`` its index in the source
    string. ``value`` is only meaningful for NUMBER tokens.
    """

    kind: TokenKind
    text: str
    start: int
    value: float = 0.0

    @property
    def end(self) -> int:
        """Index one past the last character of the token."""
        return self.start + len(self.text)

    @property
    def operator(self) -> Operator:
        """Operator definition for an OPERATOR token."""
        return OPERATORS[self.text]

    @classmethod
    def number(cls, text: str, start: int) -> Token:
        return cls(kind=TokenKind.NUMBER, text=text, start=start, value=float(text))


@dataclass
class EvalResult:
    """Outcome of one evaluation, as returned by ``try_evaluate``."""

    expression: str
    value: Optional[float] = None
    postfix: str = ""
    error_kind: Optional[str] = None
    message: str = ""
    position: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict.

        Infinities and NaN have no JSON literal: ``value`` becomes null and
        ``value_text`` carries ``"inf"``, ``"-inf"`` or ``"nan"``.
        """
        d = {
            "expression": self.expression,
            "ok": self.ok,
            "postfix": self.postfix,
        }
        if self.ok:
            if math.isfinite(self.value):
                d["value"] = self.value
            else:
                d["value"] = None
                d["value_text"] = repr(self.value)
        else:
            d["error"] = {
                "kind": self.error_kind,
                "message": self.message,
                "position": self.position,
            }
        return d
