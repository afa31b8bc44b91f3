"""Interactive session state: result formatting and evaluation history."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass

from exprcalc.config import DEFAULT_PRECISION, Settings
from exprcalc.core import Evaluation, evaluate_expression

logger = logging.getLogger(__name__)


def format_value(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Render a number with ``precision`` significant digits, ``%g`` style."""
    return f"{value:.{precision}g}"


def format_result(evaluation: Evaluation, precision: int = DEFAULT_PRECISION) -> str:
    """
    Render an evaluation for display.

    Example:
        >>> format_result(evaluate_expression("1 / 8"))
        '0.125'
        >>> format_result(evaluate_expression("3 4"))
        'Error: Invalid expression format'
    """
    if evaluation.error is not None:
        return f"Error: {evaluation.error}"
    assert evaluation.value is not None
    return format_value(evaluation.value, precision)


@dataclass(frozen=True)
class HistoryEntry:
    """One evaluated expression and its formatted result."""

    expression: str
    result: str

    def __str__(self) -> str:
        return f"Expression: {self.expression} | Result: {self.result}"


class Session:
    """
    Evaluates expressions and keeps an append-only history of them.

    Example:
        >>> session = Session()
        >>> session.evaluate("2 ^ 3").value
        8.0
        >>> str(session.last)
        'Expression: 2 ^ 3 | Result: 8'
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        limit = self.settings.history_limit or None
        self._history: deque[HistoryEntry] = deque(maxlen=limit)

    @property
    def history(self) -> list[HistoryEntry]:
        """Entries oldest first."""
        return list(self._history)

    @property
    def last(self) -> HistoryEntry | None:
        return self._history[-1] if self._history else None

    def evaluate(self, expression: str) -> Evaluation:
        """Evaluate ``expression`` and record it with its formatted result."""
        evaluation = evaluate_expression(expression)
        result = format_result(evaluation, self.settings.precision)

        error = evaluation.error
        if error is None:
            logger.debug("Evaluated %r -> %s", expression, result)
        else:
            logger.info("Evaluation of %r failed (%s): %s", expression, error.kind.value, error)

        self._history.append(HistoryEntry(expression, result))
        return evaluation

    def clear_history(self) -> None:
        self._history.clear()
        logger.debug("History cleared")

    def __len__(self) -> int:
        return len(self._history)

    def __repr__(self) -> str:
        return f"Session(history_len={len(self._history)})"
