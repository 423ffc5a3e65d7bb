import io

from minilang.cli import main, run
from minilang.lexer import LexerError, Lexer, tokenize


def _run(source):
    out = io.StringIO()
    variables = run(source, out)
    return out.getvalue(), variables


def test_println_literal():
    output, _ = _run("println 5;")
    assert output == "5\n"


def test_print_separates_with_spaces():
    output, _ = _run("print 4; print; println;")
    assert output == "4  \n"


def test_while_loop_output():
    output, variables = _run(
        "var i = 0;\nwhile i < 3 {\n print i;\n i = i + 1;\n}\n"
    )
    assert output == "0 1 2 "
    assert variables == {"i": 3}


def test_if_else_branches():
    output, _ = _run("if 0 { println 1; } else { println 2; }\nif 9 { println 7; }")
    assert output == "2\n7\n"


def test_undefined_variable_stops_execution():
    output, _ = _run("println 1;\nprintln x;\nprintln 2;")
    assert output == "1\n'x' Undefined variable error at line 2\n"


def test_zero_division_reported():
    output, _ = _run("println 1 / 0;")
    assert output == "Zero division error at line 1\n"


def test_redefinition_reported_and_value_kept():
    output, variables = _run("var a = 1; var a = 2; println a;")
    assert output == "'a' Redefining variable error at line 1\n"
    assert variables == {"a": 1}


def test_assign_to_undefined_variable():
    output, variables = _run("b = 1;")
    assert output == "'b' Undefined variable error at line 1\n"
    assert variables == {}


def test_parse_error_reported_then_earlier_statements_run():
    source = "println 5; println"
    _, end = tokenize(source)
    output, _ = _run(source)
    assert output == f"Parser parsing failed at line {end[0]} position {end[1]}\n5\n"


def test_lexer_error_reported_and_nothing_runs():
    source = "println 1;\n$"
    try:
        Lexer(source).scan()
    except LexerError as error:
        expected = f"{error}\n"
    output, variables = _run(source)
    assert output == expected
    assert output.startswith("Lexer scanning failed at line 2 position")
    assert variables == {}


def test_main_without_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Source file required.\n"


def test_main_with_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 0
    assert capsys.readouterr().out == "Cannot read the file.\n"


def test_main_with_invalid_utf8(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"\xff\xfe\xfd")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Cannot read the file.\n"


def test_main_runs_file(tmp_path, capsys):
    path = tmp_path / "program.txt"
    path.write_text("var n = 6;\nprintln n;\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "6\n"