"""Turn expression text into a flat list of tokens."""

from __future__ import annotations

import string
from enum import Enum
from typing import Iterable

from exprcalc.tokens import OPERATOR_CHARS, UNARY_MINUS, Token, TokenKind


class LexState(Enum):
    """Whether the next operator character can be a sign."""

    EXPECT_OPERAND = "expect_operand"
    EXPECT_OPERATOR = "expect_operator"


def is_number_char(char: str) -> bool:
    return char in string.digits or char == "."


def next_state(state: LexState, char: str) -> LexState:
    """
    Return the lexer state after consuming ``char``.

    A digit or ``.`` and ``)`` move to EXPECT_OPERATOR; any operator
    character and ``(`` move to EXPECT_OPERAND. Anything else (whitespace)
    leaves the state unchanged.
    """
    if is_number_char(char) or char == ")":
        return LexState.EXPECT_OPERATOR
    if char in OPERATOR_CHARS or char == "(":
        return LexState.EXPECT_OPERAND
    return state


def classify_operator(state: LexState, char: str) -> Token | None:
    """
    Build the token for an operator character in the given state.

    Returns None for a unary plus, which produces no token.
    """
    if state is LexState.EXPECT_OPERAND:
        if char == "-":
            return Token.operator(UNARY_MINUS)
        if char == "+":
            return None
    return Token.operator(char)


def tokenize(expression: str) -> list[Token]:
    """
    Split an arithmetic expression into tokens.

    Whitespace separates tokens and is dropped. A run of digits and decimal
    points becomes one NUMBER token, even if it holds several points.

    The tokenizer never raises. On the first character outside the grammar
    the tokens collected so far are discarded and the result is a single
    INVALID token holding that character.

    Args:
        expression: The raw expression text

    Returns:
        The tokens in input order

    Example:
        >>> [t.text for t in tokenize("-(1.5 + 2)")]
        ['~', '(', '1.5', '+', '2', ')']
    """
    tokens: list[Token] = []
    state = LexState.EXPECT_OPERAND
    i = 0
    length = len(expression)

    while i < length:
        char = expression[i]

        if char.isspace():
            i += 1
            continue

        if is_number_char(char):
            start = i
            while i < length and is_number_char(expression[i]):
                i += 1
            tokens.append(Token.number(expression[start:i]))
            state = next_state(state, char)
            continue

        if char in OPERATOR_CHARS:
            token = classify_operator(state, char)
            if token is not None:
                tokens.append(token)
        elif char in "()":
            tokens.append(Token.parenthesis(char))
        else:
            return [Token.invalid(char)]

        state = next_state(state, char)
        i += 1

    return tokens


def is_invalid(tokens: list[Token]) -> bool:
    """True when ``tokens`` is the single-INVALID-token result of tokenize."""
    return len(tokens) == 1 and tokens[0].kind is TokenKind.INVALID


def canonical_form(tokens: Iterable[Token]) -> str:
    """
    Join token lexemes with single spaces.

    Unary minus is written back as ``-``, so tokenizing the result yields
    the same tokens again.
    """
    return " ".join("-" if _is_unary_minus(token) else token.text for token in tokens)


def _is_unary_minus(token: Token) -> bool:
    return token.kind is TokenKind.OPERATOR and token.text == UNARY_MINUS
