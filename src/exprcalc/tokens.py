"""Lexical token types and the operator precedence table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping

UNARY_MINUS: Final[str] = "~"
OPERATOR_CHARS: Final[frozenset[str]] = frozenset("+-*/%^")
PARENTHESES: Final[frozenset[str]] = frozenset("()")

# Higher binds tighter. Anything absent (an open parenthesis on the stack) is 0.
PRECEDENCE: Final[Mapping[str, int]] = MappingProxyType(
    {
        UNARY_MINUS: 4,
        "^": 3,
        "*": 2,
        "/": 2,
        "%": 2,
        "+": 1,
        "-": 1,
    }
)


class TokenKind(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    PARENTHESIS = "parenthesis"
    INVALID = "invalid"


@dataclass(frozen=True)
class Token:
    """A classified lexeme."""

    kind: TokenKind
    text: str

    @classmethod
    def number(cls, text: str) -> Token:
        return cls(TokenKind.NUMBER, text)

    @classmethod
    def operator(cls, text: str) -> Token:
        return cls(TokenKind.OPERATOR, text)

    @classmethod
    def parenthesis(cls, text: str) -> Token:
        return cls(TokenKind.PARENTHESIS, text)

    @classmethod
    def invalid(cls, text: str) -> Token:
        return cls(TokenKind.INVALID, text)

    @property
    def precedence(self) -> int:
        return PRECEDENCE.get(self.text, 0)

    @property
    def is_open_paren(self) -> bool:
        return self.kind is TokenKind.PARENTHESIS and self.text == "("

    def __str__(self) -> str:
        return self.text
