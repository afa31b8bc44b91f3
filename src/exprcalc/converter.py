"""Infix to postfix conversion (shunting-yard)."""

from __future__ import annotations

from typing import Sequence

from exprcalc.exceptions import InvalidTokenError, MalformedStructureError
from exprcalc.tokens import Token, TokenKind


def convert(tokens: Sequence[Token]) -> tuple[Token, ...]:
    """
    Reorder infix tokens into Reverse Polish order.

    An incoming operator pops every stacked operator whose precedence is
    greater than or equal to its own, so all operators associate to the
    left, ``^`` included: ``2 ^ 3 ^ 2`` is ``(2 ^ 3) ^ 2``.

    Args:
        tokens: Output of :func:`exprcalc.tokenizer.tokenize`

    Returns:
        The postfix sequence; empty for empty input

    Raises:
        InvalidTokenError: If any token is INVALID
        MalformedStructureError: If the parentheses do not match
    """
    for token in tokens:
        if token.kind is TokenKind.INVALID:
            raise InvalidTokenError(token.text)

    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        if token.kind is TokenKind.NUMBER:
            output.append(token)
        elif token.kind is TokenKind.OPERATOR:
            while stack and stack[-1].precedence >= token.precedence:
                output.append(stack.pop())
            stack.append(token)
        elif token.is_open_paren:
            stack.append(token)
        else:
            while stack and not stack[-1].is_open_paren:
                output.append(stack.pop())
            if not stack:
                raise MalformedStructureError("unmatched ')'")
            stack.pop()

    while stack:
        top = stack.pop()
        if top.kind is TokenKind.PARENTHESIS:
            raise MalformedStructureError("unmatched '('")
        output.append(top)

    return tuple(output)
