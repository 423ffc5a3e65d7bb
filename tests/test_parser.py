import pytest

from minilang.lexer import tokenize
from minilang.nodes import (
    AssignStatement,
    BinaryExpression,
    BinaryOperator,
    DefineStatement,
    IfStatement,
    IntegerLiteral,
    Parenthesized,
    PrintlnStatement,
    PrintStatement,
    UnaryExpression,
    UnaryOperator,
    Variable,
    WhileStatement,
)
from minilang.parser import ParseError, Parser, parse


def _parse(source):
    tokens, end = tokenize(source)
    return parse(tokens, end)


def _error(source):
    tokens, end = tokenize(source)
    with pytest.raises(ParseError) as info:
        parse(tokens, end)
    return info.value, tokens, end


def test_empty_program():
    assert _parse("") == []


def test_print_without_expression():
    assert _parse("print;") == [PrintStatement(None, 1)]


def test_println_with_expression():
    assert _parse("println 5;") == [PrintlnStatement(IntegerLiteral(5), 1)]


def test_define_and_assign():
    assert _parse("var a = 1;\na = a;") == [
        DefineStatement("a", IntegerLiteral(1), 1),
        AssignStatement("a", Variable("a"), 2),
    ]


def test_multiplication_binds_tighter_than_addition():
    (statement,) = _parse("print 1 + 2 * 3;")
    assert statement.expression == BinaryExpression(
        IntegerLiteral(1),
        BinaryOperator.PLUS,
        BinaryExpression(IntegerLiteral(2), BinaryOperator.MULTIPLY, IntegerLiteral(3)),
    )


def test_binary_operators_are_left_associative():
    (statement,) = _parse("print 1 - 2 - 3;")
    assert statement.expression == BinaryExpression(
        BinaryExpression(IntegerLiteral(1), BinaryOperator.MINUS, IntegerLiteral(2)),
        BinaryOperator.MINUS,
        IntegerLiteral(3),
    )


def test_logical_and_binds_tighter_than_or():
    (statement,) = _parse("print a || b && c;")
    assert statement.expression == BinaryExpression(
        Variable("a"),
        BinaryOperator.LOGICAL_OR,
        BinaryExpression(Variable("b"), BinaryOperator.LOGICAL_AND, Variable("c")),
    )


@pytest.mark.parametrize(
    "words, symbols",
    [("print 1 or 0;", "print 1 || 0;"), ("print 1 and 0;", "print 1 && 0;")],
)
def test_keyword_operators_match_symbols(words, symbols):
    assert _parse(words) == _parse(symbols)


def test_comparison_binds_tighter_than_equality():
    (statement,) = _parse("print a == b < c;")
    assert statement.expression == BinaryExpression(
        Variable("a"),
        BinaryOperator.EQUAL,
        BinaryExpression(Variable("b"), BinaryOperator.LESSER, Variable("c")),
    )


def test_nested_unary_operators():
    (statement,) = _parse("print -~!x;")
    assert statement.expression == UnaryExpression(
        UnaryOperator.MINUS,
        UnaryExpression(
            UnaryOperator.BITWISE_NOT,
            UnaryExpression(UnaryOperator.LOGICAL_NOT, Variable("x")),
        ),
    )


def test_parentheses_are_kept():
    (statement,) = _parse("print (1 + 2) * 3;")
    assert statement.expression == BinaryExpression(
        Parenthesized(
            BinaryExpression(IntegerLiteral(1), BinaryOperator.PLUS, IntegerLiteral(2))
        ),
        BinaryOperator.MULTIPLY,
        IntegerLiteral(3),
    )


def test_if_with_else():
    assert _parse("if x { print 1; } else { print 2; }") == [
        IfStatement(
            Variable("x"),
            (PrintStatement(IntegerLiteral(1), 1),),
            (PrintStatement(IntegerLiteral(2), 1),),
            1,
        )
    ]


def test_if_without_else_followed_by_statement():
    assert _parse("if x { }\nprint 2;") == [
        IfStatement(Variable("x"), (), (), 1),
        PrintStatement(IntegerLiteral(2), 2),
    ]


def test_while_with_nested_body():
    assert _parse("while x {\n x = x - 1;\n}") == [
        WhileStatement(
            Variable("x"),
            (
                AssignStatement(
                    "x",
                    BinaryExpression(Variable("x"), BinaryOperator.MINUS, IntegerLiteral(1)),
                    2,
                ),
            ),
            1,
        )
    ]


def test_missing_semicolon_at_end_reports_end_position():
    error, _, end = _error("print 1")
    assert error.position == end


def test_unexpected_statement_start():
    error, tokens, _ = _error("; print 1;")
    assert error.position == tokens[0].position


def test_define_requires_identifier():
    error, tokens, _ = _error("var 1 = 2;")
    assert error.position == tokens[1].position


def test_assign_requires_equals_sign():
    error, tokens, _ = _error("x 5;")
    assert error.position == tokens[1].position


def test_unclosed_parenthesis():
    error, tokens, _ = _error("print (1;")
    assert error.position == tokens[3].position


def test_unclosed_block_reports_end_position():
    error, _, end = _error("if 1 { print 1; ")
    assert error.position == end


def test_error_message_names_position():
    error, tokens, _ = _error(";")
    line, column = tokens[0].position
    assert str(error) == f"Parser parsing failed at line {line} position {column}"


def test_statements_before_error_are_kept():
    tokens, end = tokenize("println 5; println")
    parser = Parser(tokens, end)
    with pytest.raises(ParseError):
        parser.parse()
    assert parser.statements == [PrintlnStatement(IntegerLiteral(5), 1)]


def test_parse_function_matches_parser():
    tokens, end = tokenize("var a = 1; while a { a = 0; }")
    assert parse(tokens, end) == Parser(tokens, end).parse()