"""Token kinds and the token record produced by the lexer."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenKind(enum.Enum):
    """Every kind of token the language knows."""

    PRINT = enum.auto()
    PRINTLN = enum.auto()
    VAR = enum.auto()
    IF = enum.auto()
    ELSE = enum.auto()
    WHILE = enum.auto()
    IDENTIFIER = enum.auto()
    INTEGER = enum.auto()
    LOGICAL_OR = enum.auto()
    BITWISE_OR = enum.auto()
    LOGICAL_AND = enum.auto()
    BITWISE_AND = enum.auto()
    BITWISE_XOR = enum.auto()
    GREATER = enum.auto()
    GREATER_EQUAL = enum.auto()
    LESSER = enum.auto()
    LESSER_EQUAL = enum.auto()
    EQUAL = enum.auto()
    ASSIGN = enum.auto()
    NOT_EQUAL = enum.auto()
    BITWISE_NOT = enum.auto()
    LOGICAL_NOT = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    PERCENT = enum.auto()
    LEFT_PAREN = enum.auto()
    RIGHT_PAREN = enum.auto()
    LEFT_BRACE = enum.auto()
    RIGHT_BRACE = enum.auto()
    SEMICOLON = enum.auto()


KEYWORDS: dict[str, TokenKind] = {
    "print": TokenKind.PRINT,
    "println": TokenKind.PRINTLN,
    "var": TokenKind.VAR,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "while": TokenKind.WHILE,
    "or": TokenKind.LOGICAL_OR,
    "and": TokenKind.LOGICAL_AND,
}


@dataclass(frozen=True)
class Token:
    """A scanned token with the line and column it was found at.

    ``value`` holds the name of an identifier or the value of an integer
    literal and is ``None`` for every other kind.
    """

    kind: TokenKind
    line: int
    column: int
    value: str | int | None = None

    @property
    def position(self) -> tuple[int, int]:
        """The ``(line, column)`` pair of this token."""
        return (self.line, self.column)