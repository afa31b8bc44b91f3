"""Custom exceptions for the expression evaluator."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Distinguishable failure conditions of a single evaluation."""

    INVALID_TOKEN = "invalid_token"
    MALFORMED_STRUCTURE = "malformed_structure"
    INSUFFICIENT_OPERANDS = "insufficient_operands"
    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_EXPRESSION_FORMAT = "invalid_expression_format"
    MALFORMED_NUMBER = "malformed_number"
    OVERFLOW = "overflow"
    DOMAIN = "domain"


class CalculatorError(Exception):
    """Base exception for all exprcalc errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class ConfigurationError(CalculatorError):
    """Raised when a setting cannot be parsed or is out of range."""

    def __init__(self, name: str, value: Any, reason: str) -> None:
        super().__init__(f"Invalid setting {name} ({reason})", value)
        self.name = name
        self.reason = reason


class ExpressionError(CalculatorError):
    """Base exception for failures while evaluating an expression."""

    kind: ErrorKind


class InvalidTokenError(ExpressionError):
    """Raised when the input contains a character outside the grammar."""

    kind = ErrorKind.INVALID_TOKEN

    def __init__(self, character: str) -> None:
        super().__init__("Invalid token", repr(character))
        self.character = character


class MalformedStructureError(ExpressionError):
    """Raised for unmatched parentheses and other structural faults."""

    kind = ErrorKind.MALFORMED_STRUCTURE

    def __init__(self, reason: str = "unmatched parentheses") -> None:
        super().__init__(f"Malformed expression, {reason}")
        self.reason = reason


class InsufficientOperandsError(ExpressionError):
    """Raised when an operator finds too few values on the stack."""

    kind = ErrorKind.INSUFFICIENT_OPERANDS

    def __init__(self, operator: str) -> None:
        if operator == "~":
            message = "Insufficient operands for unary operator"
        else:
            message = f"Insufficient operands for operator '{operator}'"
        super().__init__(message)
        self.operator = operator


class DivisionByZeroError(ExpressionError):
    """Raised when dividing or taking a remainder by zero."""

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, operator: str, dividend: float) -> None:
        super().__init__("Attempted division/modulo by zero")
        self.operator = operator
        self.dividend = dividend


class InvalidExpressionFormatError(ExpressionError):
    """Raised when evaluation does not leave exactly one value."""

    kind = ErrorKind.INVALID_EXPRESSION_FORMAT

    def __init__(self, remaining: int) -> None:
        super().__init__("Invalid expression format")
        self.remaining = remaining


class MalformedNumberError(ExpressionError):
    """Raised when a number lexeme cannot be read as a float."""

    kind = ErrorKind.MALFORMED_NUMBER

    def __init__(self, lexeme: str) -> None:
        super().__init__("Malformed number", repr(lexeme))
        self.lexeme = lexeme


class NumericOverflowError(ExpressionError):
    """Raised when a literal or a result leaves the finite float range."""

    kind = ErrorKind.OVERFLOW

    def __init__(self, operation: str, *operands: float) -> None:
        super().__init__(f"Overflow in {operation}", operands or None)
        self.operation = operation
        self.operands = operands


class DomainError(ExpressionError):
    """Raised when an operation is undefined for its operands."""

    kind = ErrorKind.DOMAIN

    def __init__(self, operation: str, operands: tuple[float, ...], reason: str) -> None:
        super().__init__(reason, operands)
        self.operation = operation
        self.operands = operands
        self.reason = reason
