"""Shunting-yard conversion from infix to postfix token order.

Pure reordering: numbers go straight to the output, operators wait on a stack
until an operator that binds looser (or a closing paren, or end of input)
flushes them.
"""

from __future__ import annotations

import logging

from yardcalc.errors import UnbalancedParentheses
from yardcalc.models import Token, TokenKind
from yardcalc.tokenizer import format_tokens

logger = logging.getLogger(__name__)


def _should_pop(top: Token, incoming: Token) -> bool:
    """True if ``top`` must be emitted before ``incoming`` is pushed."""
    if top.kind is not TokenKind.OPERATOR:
        return False
    top_op, op = top.operator, incoming.operator
    if top_op.precedence < op.precedence:
        return True
    return top_op.precedence == op.precedence and op.left_associative


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Convert infix tokens to postfix (RPN) order.

    The result holds only NUMBER and OPERATOR tokens.

    Raises:
        UnbalancedParentheses: a ``)`` without a matching ``(``, or a ``(``
            that is never closed.
    """
    output: list[Token] = []
    stack: list[Token] = []  # operators and open parens only

    for token in tokens:
        if token.kind is TokenKind.NUMBER:
            output.append(token)
        elif token.kind is TokenKind.OPERATOR:
            while stack and _should_pop(stack[-1], token):
                output.append(stack.pop())
            stack.append(token)
        elif token.kind is TokenKind.OPEN:
            stack.append(token)
        elif token.kind is TokenKind.CLOSE:
            while stack and stack[-1].kind is not TokenKind.OPEN:
                output.append(stack.pop())
            if not stack:
                raise UnbalancedParentheses("closing parenthesis without a match", token.start)
            stack.pop()

    while stack:
        top = stack.pop()
        if top.kind is TokenKind.OPEN:
            raise UnbalancedParentheses("parenthesis is never closed", top.start)
        output.append(top)

    logger.debug("Postfix: %s", format_tokens(output))
    return output
