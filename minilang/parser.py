"""Builds statement trees from a list of tokens."""

from __future__ import annotations

from collections.abc import Iterable

from minilang.nodes import (
    AssignStatement,
    BinaryExpression,
    BinaryOperator,
    DefineStatement,
    Expression,
    IfStatement,
    IntegerLiteral,
    Parenthesized,
    PrintlnStatement,
    PrintStatement,
    Statement,
    UnaryExpression,
    UnaryOperator,
    Variable,
    WhileStatement,
)
from minilang.tokens import Token, TokenKind

# Binary operator levels, loosest binding first.
_LEVELS: tuple[dict[TokenKind, BinaryOperator], ...] = (
    {TokenKind.LOGICAL_OR: BinaryOperator.LOGICAL_OR},
    {TokenKind.LOGICAL_AND: BinaryOperator.LOGICAL_AND},
    {TokenKind.BITWISE_OR: BinaryOperator.BITWISE_OR},
    {TokenKind.BITWISE_XOR: BinaryOperator.BITWISE_XOR},
    {TokenKind.BITWISE_AND: BinaryOperator.BITWISE_AND},
    {
        TokenKind.EQUAL: BinaryOperator.EQUAL,
        TokenKind.NOT_EQUAL: BinaryOperator.NOT_EQUAL,
    },
    {
        TokenKind.GREATER: BinaryOperator.GREATER,
        TokenKind.GREATER_EQUAL: BinaryOperator.GREATER_EQUAL,
        TokenKind.LESSER: BinaryOperator.LESSER,
        TokenKind.LESSER_EQUAL: BinaryOperator.LESSER_EQUAL,
    },
    {
        TokenKind.PLUS: BinaryOperator.PLUS,
        TokenKind.MINUS: BinaryOperator.MINUS,
    },
    {
        TokenKind.STAR: BinaryOperator.MULTIPLY,
        TokenKind.SLASH: BinaryOperator.DIVIDE,
        TokenKind.PERCENT: BinaryOperator.REMAINDER,
    },
)

_UNARY: dict[TokenKind, UnaryOperator] = {
    TokenKind.LOGICAL_NOT: UnaryOperator.LOGICAL_NOT,
    TokenKind.BITWISE_NOT: UnaryOperator.BITWISE_NOT,
    TokenKind.MINUS: UnaryOperator.MINUS,
}


class ParseError(Exception):
    """Raised when the tokens do not form a valid program."""

    def __init__(self, line: int, column: int) -> None:
        super().__init__(f"Parser parsing failed at line {line} position {column}")
        self.line = line
        self.column = column

    @property
    def position(self) -> tuple[int, int]:
        return (self.line, self.column)


class Parser:
    """Recursive-descent parser over a token list.

    Statements parsed so far are kept in ``statements``, so they remain
    available when parsing stops at an error.
    """

    def __init__(self, tokens: Iterable[Token], end_position: tuple[int, int]) -> None:
        self.tokens: list[Token] = list(tokens)
        self.end_position = end_position
        self.statements: list[Statement] = []
        self._pos = 0

    def parse(self) -> list[Statement]:
        """Parse every statement and return them in order.

        Raises ParseError at the first token that does not fit.
        """
        while not self._at_end():
            self.statements.append(self._statement())
        return list(self.statements)

    # -- token access -------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self.tokens)

    def _current(self) -> Token:
        if self._at_end():
            raise ParseError(*self.end_position)
        return self.tokens[self._pos]

    def _advance(self) -> None:
        self._pos += 1

    def _error(self) -> ParseError:
        return ParseError(*self._current().position)

    def _expect(self, kind: TokenKind) -> Token:
        token = self._current()
        if token.kind is not kind:
            raise self._error()
        self._advance()
        return token

    def _require_more(self) -> None:
        if self._at_end():
            raise ParseError(*self.end_position)

    # -- statements ---------------------------------------------------

    def _statement(self) -> Statement:
        kind = self._current().kind
        if kind is TokenKind.PRINT:
            return self._print(PrintStatement)
        if kind is TokenKind.PRINTLN:
            return self._print(PrintlnStatement)
        if kind is TokenKind.VAR:
            return self._define()
        if kind is TokenKind.IDENTIFIER:
            return self._assign()
        if kind is TokenKind.IF:
            return self._if()
        if kind is TokenKind.WHILE:
            return self._while()
        raise self._error()

    def _print(self, statement_type: type) -> Statement:
        line = self._current().line
        self._advance()
        self._require_more()
        if self._current().kind is TokenKind.SEMICOLON:
            self._advance()
            return statement_type(None, line)
        expression = self._expression()
        self._expect(TokenKind.SEMICOLON)
        return statement_type(expression, line)

    def _define(self) -> DefineStatement:
        line = self._current().line
        self._advance()
        self._require_more()
        name = self._expect(TokenKind.IDENTIFIER).value
        self._require_more()
        self._expect(TokenKind.ASSIGN)
        self._require_more()
        expression = self._expression()
        self._expect(TokenKind.SEMICOLON)
        return DefineStatement(name, expression, line)

    def _assign(self) -> AssignStatement:
        token = self._expect(TokenKind.IDENTIFIER)
        self._require_more()
        self._expect(TokenKind.ASSIGN)
        self._require_more()
        expression = self._expression()
        self._expect(TokenKind.SEMICOLON)
        return AssignStatement(token.value, expression, token.line)

    def _block(self) -> tuple[Statement, ...]:
        self._expect(TokenKind.LEFT_BRACE)
        self._require_more()
        statements = []
        while self._current().kind is not TokenKind.RIGHT_BRACE:
            statements.append(self._statement())
        self._advance()
        return tuple(statements)

    def _if(self) -> IfStatement:
        line = self._current().line
        self._advance()
        self._require_more()
        condition = self._expression()
        statements = self._block()
        else_statements: tuple[Statement, ...] = ()
        if not self._at_end() and self._current().kind is TokenKind.ELSE:
            self._advance()
            self._require_more()
            else_statements = self._block()
        return IfStatement(condition, statements, else_statements, line)

    def _while(self) -> WhileStatement:
        line = self._current().line
        self._advance()
        self._require_more()
        condition = self._expression()
        statements = self._block()
        return WhileStatement(condition, statements, line)

    # -- expressions --------------------------------------------------

    def _expression(self) -> Expression:
        return self._binary(0)

    def _binary(self, level: int) -> Expression:
        if level == len(_LEVELS):
            return self._unary()
        operators = _LEVELS[level]
        expression = self._binary(level + 1)
        while (operator := operators.get(self._current().kind)) is not None:
            self._advance()
            self._require_more()
            right = self._binary(level + 1)
            expression = BinaryExpression(expression, operator, right)
        return expression

    def _unary(self) -> Expression:
        self._require_more()
        operator = _UNARY.get(self._current().kind)
        if operator is None:
            return self._primary()
        self._advance()
        self._require_more()
        return UnaryExpression(operator, self._unary())

    def _primary(self) -> Expression:
        token = self._current()
        if token.kind is TokenKind.INTEGER:
            self._advance()
            return IntegerLiteral(token.value)
        if token.kind is TokenKind.IDENTIFIER:
            self._advance()
            return Variable(token.value)
        if token.kind is TokenKind.LEFT_PAREN:
            self._advance()
            self._require_more()
            inner = self._expression()
            self._expect(TokenKind.RIGHT_PAREN)
            return Parenthesized(inner)
        raise self._error()


def parse(tokens: Iterable[Token], end_position: tuple[int, int]) -> list[Statement]:
    """Parse ``tokens`` into a list of statements."""
    return Parser(tokens, end_position).parse()