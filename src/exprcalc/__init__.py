"""
Arithmetic expression evaluator.

Text is evaluated in three pure stages:
- tokenize: text to tokens, unary signs resolved by a two-state lexer
- convert: tokens to postfix order (shunting-yard)
- evaluate: postfix tokens to a finite float

``evaluate_expression`` runs all three and returns an :class:`Evaluation`
holding either the value or a typed :class:`ExpressionError`.
"""

__version__ = "0.1.0"

from exprcalc.converter import convert
from exprcalc.core import Evaluation, calculate, evaluate_expression
from exprcalc.evaluator import evaluate, parse_number
from exprcalc.exceptions import (
    CalculatorError,
    ConfigurationError,
    DivisionByZeroError,
    DomainError,
    ErrorKind,
    ExpressionError,
    InsufficientOperandsError,
    InvalidExpressionFormatError,
    InvalidTokenError,
    MalformedNumberError,
    MalformedStructureError,
    NumericOverflowError,
)
from exprcalc.tokenizer import LexState, canonical_form, is_invalid, next_state, tokenize
from exprcalc.tokens import PRECEDENCE, UNARY_MINUS, Token, TokenKind

__all__ = [
    "PRECEDENCE",
    "UNARY_MINUS",
    "CalculatorError",
    "ConfigurationError",
    "DivisionByZeroError",
    "DomainError",
    "ErrorKind",
    "Evaluation",
    "ExpressionError",
    "InsufficientOperandsError",
    "InvalidExpressionFormatError",
    "InvalidTokenError",
    "LexState",
    "MalformedNumberError",
    "MalformedStructureError",
    "NumericOverflowError",
    "Token",
    "TokenKind",
    "calculate",
    "canonical_form",
    "convert",
    "evaluate",
    "evaluate_expression",
    "is_invalid",
    "next_state",
    "parse_number",
    "tokenize",
]
