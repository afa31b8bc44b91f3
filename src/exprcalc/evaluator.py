"""Postfix (RPN) evaluation."""

from __future__ import annotations

import math
from typing import Sequence

from exprcalc.exceptions import (
    InsufficientOperandsError,
    InvalidExpressionFormatError,
    MalformedNumberError,
    MalformedStructureError,
    NumericOverflowError,
)
from exprcalc.operations import BINARY_OPERATIONS, negate
from exprcalc.tokens import UNARY_MINUS, Token, TokenKind


def parse_number(lexeme: str) -> float:
    """
    Read a NUMBER lexeme as a float.

    Raises:
        MalformedNumberError: For lexemes such as ``"1.2.3"`` or ``"."``
        NumericOverflowError: If the literal is too large for a float
    """
    try:
        value = float(lexeme)
    except ValueError as e:
        raise MalformedNumberError(lexeme) from e
    if math.isinf(value):
        raise NumericOverflowError("number literal", value)
    return value


def evaluate(postfix: Sequence[Token]) -> float:
    """
    Compute the value of a postfix token sequence.

    Binary operators pop the right operand first, then the left one.
    The input sequence is only read, never modified.

    Args:
        postfix: Output of :func:`exprcalc.converter.convert`

    Returns:
        The single value left on the stack

    Raises:
        InsufficientOperandsError: If an operator finds too few values
        DivisionByZeroError: On ``/`` or ``%`` with a zero right operand
        InvalidExpressionFormatError: If not exactly one value remains
        MalformedNumberError: If a number lexeme cannot be parsed
        NumericOverflowError: If a literal or a result is not finite
        DomainError: If ``^`` is undefined for its operands
        MalformedStructureError: If the sequence holds parentheses or
            unknown tokens
    """
    stack: list[float] = []

    for token in postfix:
        if token.kind is TokenKind.NUMBER:
            stack.append(parse_number(token.text))
            continue

        if token.kind is not TokenKind.OPERATOR:
            raise MalformedStructureError(f"unexpected token '{token.text}' in postfix input")

        if token.text == UNARY_MINUS:
            if not stack:
                raise InsufficientOperandsError(token.text)
            stack.append(negate(stack.pop()))
            continue

        operation = BINARY_OPERATIONS.get(token.text)
        if operation is None:
            raise MalformedStructureError(f"unknown operator '{token.text}'")
        if len(stack) < 2:
            raise InsufficientOperandsError(token.text)

        right = stack.pop()
        left = stack.pop()
        stack.append(operation(left, right))

    if len(stack) != 1:
        raise InvalidExpressionFormatError(len(stack))

    return stack[0]
