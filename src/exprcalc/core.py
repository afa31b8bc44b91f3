"""Pipeline facade: text in, value or typed error out."""

from __future__ import annotations

from dataclasses import dataclass

from exprcalc.converter import convert
from exprcalc.evaluator import evaluate
from exprcalc.exceptions import ErrorKind, ExpressionError
from exprcalc.tokenizer import tokenize


@dataclass(frozen=True)
class Evaluation:
    """
    Outcome of evaluating one expression.

    Exactly one of ``value`` and ``error`` is set.

    Example:
        >>> evaluate_expression("(3 + 4) * 2").value
        14.0
        >>> evaluate_expression("5 / 0").kind
        <ErrorKind.DIVISION_BY_ZERO: 'division_by_zero'>
    """

    expression: str
    value: float | None = None
    error: ExpressionError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("Evaluation needs exactly one of value and error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        """Error kind, or None on success."""
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> float:
        """
        Return the value.

        Raises:
            ExpressionError: The stored error, if evaluation failed
        """
        if self.error is not None:
            raise self.error
        assert self.value is not None
        return self.value


def calculate(expression: str) -> float:
    """
    Evaluate an expression, raising on failure.

    Raises:
        ExpressionError: Any subclass, see :class:`ErrorKind`
    """
    return evaluate(convert(tokenize(expression)))


def evaluate_expression(expression: str) -> Evaluation:
    """Evaluate an expression without raising; see :class:`Evaluation`."""
    try:
        value = calculate(expression)
    except ExpressionError as e:
        return Evaluation(expression, error=e)
    return Evaluation(expression, value=value)
