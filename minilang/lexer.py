"""Turns source text into a list of tokens."""

from __future__ import annotations

import unicodedata

from minilang.tokens import KEYWORDS, Token, TokenKind

_I64_MODULUS = 1 << 64
_I64_MIN = -(1 << 63)

_SINGLE: dict[str, TokenKind] = {
    "^": TokenKind.BITWISE_XOR,
    "~": TokenKind.BITWISE_NOT,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "%": TokenKind.PERCENT,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ";": TokenKind.SEMICOLON,
}

# first character -> (second character, kind when doubled, kind when alone)
_PAIRED: dict[str, tuple[str, TokenKind, TokenKind]] = {
    "|": ("|", TokenKind.LOGICAL_OR, TokenKind.BITWISE_OR),
    "&": ("&", TokenKind.LOGICAL_AND, TokenKind.BITWISE_AND),
    ">": ("=", TokenKind.GREATER_EQUAL, TokenKind.GREATER),
    "<": ("=", TokenKind.LESSER_EQUAL, TokenKind.LESSER),
    "=": ("=", TokenKind.EQUAL, TokenKind.ASSIGN),
    "!": ("=", TokenKind.NOT_EQUAL, TokenKind.LOGICAL_NOT),
}

_WHITESPACE = frozenset(" \t\r")


def _wrap(value: int) -> int:
    return (value - _I64_MIN) % _I64_MODULUS + _I64_MIN


def _is_numeric(ch: str) -> bool:
    return unicodedata.category(ch) in ("Nd", "Nl", "No")


def _is_identifier_char(ch: str) -> bool:
    return ch == "_" or ("a" <= ch <= "z") or ("A" <= ch <= "Z")


class LexerError(Exception):
    """Raised when the source holds a character no token starts with."""

    def __init__(self, line: int, column: int) -> None:
        super().__init__(f"Lexer scanning failed at line {line} position {column}")
        self.line = line
        self.column = column

    @property
    def position(self) -> tuple[int, int]:
        return (self.line, self.column)


class Lexer:
    """Scans source text into tokens.

    Columns count lexemes and whitespace characters rather than raw
    characters: each token or blank advances the column by one.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.tokens: list[Token] = []
        self.end_position: tuple[int, int] = (1, 1)

    def scan(self) -> list[Token]:
        """Scan the whole source and return its tokens.

        Raises LexerError at the first character that starts no token.
        """
        text = self.source + " "
        length = len(text)
        tokens: list[Token] = []
        pos = 0
        line = 1
        column = 1

        while pos < length:
            ch = text[pos]
            if "0" <= ch <= "9":
                value = 0
                while pos < length and _is_numeric(text[pos]):
                    value = _wrap(value * 10 + ord(text[pos]) - ord("0"))
                    pos += 1
                tokens.append(Token(TokenKind.INTEGER, line, column, value))
            elif _is_identifier_char(ch):
                start = pos
                while pos < length and _is_identifier_char(text[pos]):
                    pos += 1
                word = text[start:pos]
                kind = KEYWORDS.get(word)
                if kind is None:
                    tokens.append(Token(TokenKind.IDENTIFIER, line, column, word))
                else:
                    tokens.append(Token(kind, line, column))
            elif ch in _PAIRED:
                second, doubled, alone = _PAIRED[ch]
                if pos + 1 < length and text[pos + 1] == second:
                    tokens.append(Token(doubled, line, column))
                    pos += 2
                else:
                    tokens.append(Token(alone, line, column))
                    pos += 1
            elif ch in _SINGLE:
                tokens.append(Token(_SINGLE[ch], line, column))
                pos += 1
            elif ch == "\n":
                line += 1
                column = 0
                pos += 1
            elif ch in _WHITESPACE:
                pos += 1
            else:
                raise LexerError(line, column)
            column += 1

        self.tokens = tokens
        self.end_position = (line, column)
        return list(tokens)


def tokenize(source: str) -> tuple[list[Token], tuple[int, int]]:
    """Scan ``source`` and return its tokens with the position after the end."""
    lexer = Lexer(source)
    tokens = lexer.scan()
    return tokens, lexer.end_position