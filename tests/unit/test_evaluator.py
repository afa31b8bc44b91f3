"""Unit tests for the postfix evaluator."""

import pytest

from exprcalc import (
    DivisionByZeroError,
    DomainError,
    InsufficientOperandsError,
    InvalidExpressionFormatError,
    MalformedNumberError,
    MalformedStructureError,
    NumericOverflowError,
    Token,
    TokenKind,
    evaluate,
    parse_number,
)


def postfix(*lexemes: str) -> tuple:
    tokens = []
    for lexeme in lexemes:
        if lexeme in {"+", "-", "*", "/", "%", "^", "~"}:
            tokens.append(Token(TokenKind.OPERATOR, lexeme))
        else:
            tokens.append(Token(TokenKind.NUMBER, lexeme))
    return tuple(tokens)


class TestEvaluate:
    """Tests for successful evaluation."""

    def test_single_number(self):
        assert evaluate(postfix("42")) == 42.0

    def test_addition(self):
        assert evaluate(postfix("3", "4", "+")) == 7.0

    def test_operand_order(self):
        assert evaluate(postfix("10", "4", "-")) == 6.0
        assert evaluate(postfix("10", "4", "/")) == 2.5

    def test_chained(self):
        assert evaluate(postfix("3", "4", "2", "*", "+")) == 11.0

    def test_unary_minus(self):
        assert evaluate(postfix("5", "~")) == -5.0

    def test_double_negation(self):
        assert evaluate(postfix("5", "~", "~")) == 5.0

    def test_modulo_follows_dividend_sign(self):
        assert evaluate(postfix("10", "3", "%")) == 1.0
        assert evaluate(postfix("10", "~", "3", "%")) == -1.0

    def test_fractional_modulo(self):
        assert evaluate(postfix("5.5", "2", "%")) == pytest.approx(1.5)

    def test_power(self):
        assert evaluate(postfix("2", "10", "^")) == 1024.0

    def test_decimal_literal(self):
        assert evaluate(postfix(".5", "2.", "*")) == 1.0

    def test_returns_float(self):
        assert isinstance(evaluate(postfix("1", "2", "+")), float)

    def test_input_not_mutated(self):
        tokens = postfix("1", "2", "+")
        evaluate(tokens)
        assert tokens == postfix("1", "2", "+")

    def test_accepts_list(self):
        assert evaluate(list(postfix("6", "3", "/"))) == 2.0


class TestEvaluateErrors:
    """Tests for evaluation failures."""

    def test_unary_without_operand(self):
        with pytest.raises(InsufficientOperandsError) as exc_info:
            evaluate(postfix("~"))
        assert exc_info.value.operator == "~"
        assert "unary" in str(exc_info.value)

    def test_binary_with_one_operand(self):
        with pytest.raises(InsufficientOperandsError) as exc_info:
            evaluate(postfix("3", "+"))
        assert exc_info.value.operator == "+"
        assert "'+'" in str(exc_info.value)

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZeroError) as exc_info:
            evaluate(postfix("5", "0", "/"))
        assert exc_info.value.operator == "/"
        assert exc_info.value.dividend == 5.0

    def test_modulo_by_zero(self):
        with pytest.raises(DivisionByZeroError) as exc_info:
            evaluate(postfix("5", "0", "%"))
        assert exc_info.value.operator == "%"

    def test_division_by_negative_zero(self):
        with pytest.raises(DivisionByZeroError):
            evaluate(postfix("5", "0", "~", "/"))

    def test_too_many_values(self):
        with pytest.raises(InvalidExpressionFormatError) as exc_info:
            evaluate(postfix("3", "4"))
        assert exc_info.value.remaining == 2

    def test_empty(self):
        with pytest.raises(InvalidExpressionFormatError) as exc_info:
            evaluate(())
        assert exc_info.value.remaining == 0

    def test_malformed_number(self):
        with pytest.raises(MalformedNumberError) as exc_info:
            evaluate(postfix("1.2.3"))
        assert exc_info.value.lexeme == "1.2.3"

    def test_lone_point(self):
        with pytest.raises(MalformedNumberError):
            evaluate(postfix("."))

    def test_huge_literal(self):
        with pytest.raises(NumericOverflowError):
            evaluate(postfix("1" + "0" * 400))

    def test_overflowing_product(self):
        with pytest.raises(NumericOverflowError):
            evaluate(postfix("1" + "0" * 300, "1" + "0" * 300, "*"))

    def test_undefined_power(self):
        with pytest.raises(DomainError):
            evaluate(postfix("0", "1", "~", "^"))

    def test_parenthesis_in_postfix(self):
        tokens = (Token(TokenKind.NUMBER, "1"), Token(TokenKind.PARENTHESIS, "("))
        with pytest.raises(MalformedStructureError):
            evaluate(tokens)

    def test_unknown_operator(self):
        tokens = postfix("1", "2") + (Token(TokenKind.OPERATOR, "&"),)
        with pytest.raises(MalformedStructureError):
            evaluate(tokens)


class TestParseNumber:
    """Tests for parse_number."""

    def test_integer(self):
        assert parse_number("12") == 12.0

    def test_trailing_point(self):
        assert parse_number("3.") == 3.0

    def test_rejects_two_points(self):
        with pytest.raises(MalformedNumberError):
            parse_number("1..2")
