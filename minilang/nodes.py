"""Expression and statement trees, and how they are evaluated and run."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import Protocol, TextIO, Union

_I64_MODULUS = 1 << 64
_I64_MIN = -(1 << 63)


def wrap_i64(value: int) -> int:
    """Reduce ``value`` to the signed 64-bit range, wrapping on overflow."""
    return (value - _I64_MIN) % _I64_MODULUS + _I64_MIN


def _truncated_quotient(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


class EvaluationError(Exception):
    """Raised when an expression or statement cannot be evaluated."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.message = message
        self.line = line
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} at line {self.line}"

    def at_line(self, line: int) -> EvaluationError:
        """Return a copy of this error attributed to ``line``."""
        return EvaluationError(self.message, line)


class BinaryOperator(enum.Enum):
    """Operators that take two operands."""

    LOGICAL_OR = "||"
    LOGICAL_AND = "&&"
    BITWISE_OR = "|"
    BITWISE_XOR = "^"
    BITWISE_AND = "&"
    EQUAL = "=="
    NOT_EQUAL = "!="
    LESSER = "<"
    LESSER_EQUAL = "<="
    GREATER = ">"
    GREATER_EQUAL = ">="
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    REMAINDER = "%"

    def apply(self, left: int, right: int) -> int:
        """Apply the operator to two already evaluated operands."""
        op = BinaryOperator
        if self is op.LOGICAL_OR:
            return int(left != 0 or right != 0)
        if self is op.LOGICAL_AND:
            return int(left != 0 and right != 0)
        if self is op.BITWISE_OR:
            return left | right
        if self is op.BITWISE_XOR:
            return left ^ right
        if self is op.BITWISE_AND:
            return left & right
        if self is op.EQUAL:
            return int(left == right)
        if self is op.NOT_EQUAL:
            return int(left != right)
        if self is op.LESSER:
            return int(left < right)
        if self is op.LESSER_EQUAL:
            return int(left <= right)
        if self is op.GREATER:
            return int(left > right)
        if self is op.GREATER_EQUAL:
            return int(left >= right)
        if self is op.PLUS:
            return wrap_i64(left + right)
        if self is op.MINUS:
            return wrap_i64(left - right)
        if self is op.MULTIPLY:
            return wrap_i64(left * right)
        if right == 0:
            raise EvaluationError("Zero division error")
        quotient = _truncated_quotient(left, right)
        if self is op.DIVIDE:
            return wrap_i64(quotient)
        return wrap_i64(left - right * quotient)


class UnaryOperator(enum.Enum):
    """Operators that take one operand."""

    LOGICAL_NOT = "!"
    BITWISE_NOT = "~"
    MINUS = "-"

    def apply(self, value: int) -> int:
        """Apply the operator to an already evaluated operand."""
        if self is UnaryOperator.LOGICAL_NOT:
            return int(value == 0)
        if self is UnaryOperator.BITWISE_NOT:
            return ~value
        return wrap_i64(-value)


Variables = dict[str, int]


@dataclass(frozen=True)
class IntegerLiteral:
    """An integer constant."""

    value: int

    def evaluate(self, variables: Variables) -> int:
        return self.value


@dataclass(frozen=True)
class Variable:
    """A reference to a named variable."""

    name: str

    def evaluate(self, variables: Variables) -> int:
        try:
            return variables[self.name]
        except KeyError:
            raise EvaluationError(f"'{self.name}' Undefined variable error") from None


@dataclass(frozen=True)
class Parenthesized:
    """An expression written inside parentheses."""

    expression: Expression

    def evaluate(self, variables: Variables) -> int:
        return self.expression.evaluate(variables)


@dataclass(frozen=True)
class UnaryExpression:
    """A unary operator applied to an operand."""

    operator: UnaryOperator
    operand: Expression

    def evaluate(self, variables: Variables) -> int:
        return self.operator.apply(self.operand.evaluate(variables))


@dataclass(frozen=True)
class BinaryExpression:
    """A binary operator applied to two operands.

    Both operands are always evaluated, left first; logical operators do
    not short-circuit.
    """

    left: Expression
    operator: BinaryOperator
    right: Expression

    def evaluate(self, variables: Variables) -> int:
        left = self.left.evaluate(variables)
        right = self.right.evaluate(variables)
        return self.operator.apply(left, right)


Expression = Union[
    IntegerLiteral, Variable, Parenthesized, UnaryExpression, BinaryExpression
]


class Statement(Protocol):
    line: int

    def execute(self, variables: Variables, out: TextIO | None = None) -> None: ...


def _evaluate_at(expression: Expression, variables: Variables, line: int) -> int:
    try:
        return expression.evaluate(variables)
    except EvaluationError as error:
        raise error.at_line(line) from None


def _run_block(
    statements: tuple[Statement, ...], variables: Variables, out: TextIO | None
) -> None:
    for statement in statements:
        statement.execute(variables, out)


@dataclass(frozen=True)
class PrintStatement:
    """Writes a value followed by a space, or a lone space."""

    expression: Expression | None
    line: int

    def execute(self, variables: Variables, out: TextIO | None = None) -> None:
        stream = out if out is not None else sys.stdout
        if self.expression is None:
            stream.write(" ")
        else:
            stream.write(f"{_evaluate_at(self.expression, variables, self.line)} ")


@dataclass(frozen=True)
class PrintlnStatement:
    """Writes a value followed by a newline, or an empty line."""

    expression: Expression | None
    line: int

    def execute(self, variables: Variables, out: TextIO | None = None) -> None:
        stream = out if out is not None else sys.stdout
        if self.expression is None:
            stream.write("\n")
        else:
            stream.write(f"{_evaluate_at(self.expression, variables, self.line)}\n")


@dataclass(frozen=True)
class DefineStatement:
    """Introduces a new variable; redefining one is an error."""

    name: str
    expression: Expression
    line: int

    def execute(self, variables: Variables, out: TextIO | None = None) -> None:
        if self.name in variables:
            raise EvaluationError(f"'{self.name}' Redefining variable error", self.line)
        variables[self.name] = _evaluate_at(self.expression, variables, self.line)


@dataclass(frozen=True)
class AssignStatement:
    """Gives an existing variable a new value."""

    name: str
    expression: Expression
    line: int

    def execute(self, variables: Variables, out: TextIO | None = None) -> None:
        if self.name not in variables:
            raise EvaluationError(f"'{self.name}' Undefined variable error", self.line)
        variables[self.name] = _evaluate_at(self.expression, variables, self.line)


@dataclass(frozen=True)
class IfStatement:
    """Runs one block when the condition is non-zero, the other otherwise."""

    condition: Expression
    statements: tuple[Statement, ...]
    else_statements: tuple[Statement, ...]
    line: int

    def execute(self, variables: Variables, out: TextIO | None = None) -> None:
        if _evaluate_at(self.condition, variables, self.line) != 0:
            _run_block(self.statements, variables, out)
        else:
            _run_block(self.else_statements, variables, out)


@dataclass(frozen=True)
class WhileStatement:
    """Runs a block for as long as the condition is non-zero."""

    condition: Expression
    statements: tuple[Statement, ...]
    line: int

    def execute(self, variables: Variables, out: TextIO | None = None) -> None:
        while _evaluate_at(self.condition, variables, self.line) != 0:
            _run_block(self.statements, variables, out)