"""Command-line entry point: runs a program from a source file."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from minilang.lexer import LexerError, tokenize
from minilang.nodes import EvaluationError
from minilang.parser import ParseError, Parser


def run(source: str, out: TextIO | None = None) -> dict[str, int]:
    """Scan, parse and execute ``source``, writing output to ``out``.

    Errors are reported on ``out``. A parse error is reported first and
    the statements parsed before it are still executed. Returns the
    variables as they stand when execution ends.
    """
    stream = out if out is not None else sys.stdout
    variables: dict[str, int] = {}

    try:
        tokens, end_position = tokenize(source)
    except LexerError as error:
        stream.write(f"{error}\n")
        return variables

    parser = Parser(tokens, end_position)
    try:
        parser.parse()
    except ParseError as error:
        stream.write(f"{error}\n")

    for statement in parser.statements:
        try:
            statement.execute(variables, stream)
        except EvaluationError as error:
            stream.write(f"{error}\n")
            break
    return variables


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program named by the first argument. Always returns 0."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Source file required.")
        return 0
    try:
        with open(args[0], encoding="utf-8", newline="") as handle:
            source = handle.read()
    except (OSError, UnicodeDecodeError):
        print("Cannot read the file.")
        return 0
    run(source, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())