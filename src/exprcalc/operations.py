"""Arithmetic applied by the evaluator, with overflow and domain checks."""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Callable, Final, Mapping

from exprcalc.exceptions import DivisionByZeroError, DomainError, NumericOverflowError


def _finite(result: float, operation: str, *operands: float) -> float:
    if not math.isfinite(result):
        raise NumericOverflowError(operation, *operands)
    return result


def add(a: float, b: float) -> float:
    """
    Add two numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Raises:
        NumericOverflowError: If the sum is not finite
    """
    return _finite(a + b, "addition", a, b)


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0

    Raises:
        NumericOverflowError: If the difference is not finite
    """
    return _finite(a - b, "subtraction", a, b)


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
        - Zero: multiply(a, 0) == 0

    Raises:
        NumericOverflowError: If the product is not finite
    """
    return _finite(a * b, "multiplication", a, b)


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    Raises:
        DivisionByZeroError: If b is zero
        NumericOverflowError: If the quotient is not finite
    """
    if b == 0:
        raise DivisionByZeroError("/", a)
    return _finite(a / b, "division", a, b)


def modulo(a: float, b: float) -> float:
    """
    Floating-point remainder of a divided by b.

    The result takes the sign of the dividend (C ``fmod``), so
    ``modulo(-10, 3) == -1``, unlike Python's ``%``.

    Raises:
        DivisionByZeroError: If b is zero
    """
    if b == 0:
        raise DivisionByZeroError("%", a)
    return math.fmod(a, b)


def power(base: float, exponent: float) -> float:
    """
    Raise base to the power of exponent.

    Properties:
        - Identity: power(a, 1) == a
        - Zero exponent: power(a, 0) == 1

    Raises:
        DomainError: If the result is undefined for real numbers
        NumericOverflowError: If the result is not finite
    """
    if base == 0 and exponent < 0:
        raise DomainError(
            "exponentiation", (base, exponent), "0 cannot be raised to a negative power"
        )

    if base < 0 and not float(exponent).is_integer():
        raise DomainError(
            "exponentiation", (base, exponent), "Negative base with non-integer exponent"
        )

    try:
        result = math.pow(base, exponent)
    except OverflowError as e:
        raise NumericOverflowError("exponentiation", base, exponent) from e
    except ValueError as e:
        raise DomainError("exponentiation", (base, exponent), str(e)) from e

    return _finite(result, "exponentiation", base, exponent)


def negate(a: float) -> float:
    """Unary minus."""
    return -a


BINARY_OPERATIONS: Final[Mapping[str, Callable[[float, float], float]]] = MappingProxyType(
    {
        "+": add,
        "-": subtract,
        "*": multiply,
        "/": divide,
        "%": modulo,
        "^": power,
    }
)
