# minilang

minilang is a small interpreter for a scripting language whose only values are
64-bit signed integers. It has variables, `if`/`else`, `while` loops and
output statements.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running a program

```
minilang program.ml
```

The file is read as UTF-8. Without an argument the command prints
`Source file required.`; if the file cannot be read it prints
`Cannot read the file.`. The program's output and any error messages go to
standard output, and the command always exits with status 0.

## The language

```
var n = 10;
var a = 0;
var b = 1;
var t = 0;
while n > 0 {
    print a;
    t = a + b;
    a = b;
    b = t;
    n = n - 1;
}
println;
```

This prints `0 1 1 2 3 5 8 13 21 34 ` followed by a newline.

Statements:

- `var name = expr;` defines a new variable. Defining the same variable a
  second time is an error.
- `name = expr;` assigns to a variable that is already defined; assigning to
  an undefined one is an error.
- `print expr;` writes the value and then a space. `print;` writes a single
  space.
- `println expr;` writes the value and then a newline. `println;` writes an
  empty line.
- `if expr { ... } else { ... }` runs the first block when the condition is
  non-zero, otherwise the `else` block. The `else` block is optional.
- `while expr { ... }` runs the block for as long as the condition is non-zero.

All variables share one scope; a variable defined inside a block stays
defined after it.

Identifiers are made of ASCII letters and underscores (no digits). Integer
literals are made of decimal digits. Spaces, tabs, carriage returns and
newlines separate tokens; any other character is a scanning error.

Operators, from lowest to highest precedence:

| Operators                | Meaning                             |
|--------------------------|-------------------------------------|
| `or`, `\|\|`             | logical or (result 0 or 1)          |
| `and`, `&&`              | logical and (result 0 or 1)         |
| `\|`                     | bitwise or                          |
| `^`                      | bitwise xor                         |
| `&`                      | bitwise and                         |
| `==`, `!=`               | equality (result 0 or 1)            |
| `<`, `<=`, `>`, `>=`     | comparison (result 0 or 1)          |
| `+`, `-`                 | addition, subtraction               |
| `*`, `/`, `%`            | multiplication, division, remainder |
| `!`, `~`, `-`            | logical not, bitwise not, negation  |

Binary operators group to the left. Both operands of every binary operator
are always evaluated; `or` and `and` do not short-circuit. Arithmetic and
integer literals wrap around on 64-bit overflow. Division truncates toward
zero and the remainder takes the sign of the left operand. Dividing or taking
a remainder by zero is an error.

## Errors

- A scanning error is reported as
  `Lexer scanning failed at line L position P` and nothing is run.
- A parsing error is reported as
  `Parser parsing failed at line L position P`. The statements parsed before
  the error are still run.
- A runtime error (undefined variable, redefined variable, zero division)
  stops the program and is reported with the line of the statement, for
  example `'x' Undefined variable error at line 3`.

Positions count tokens and blanks on a line rather than raw characters: each
token, space or tab advances the position by one.

## Using it from Python

```python
import io
from minilang.cli import run

out = io.StringIO()
variables = run("var x = 6 * 7; println x;", out)
print(out.getvalue())  # "42\n"
print(variables)       # {'x': 42}
```

`run(source, out=None)` writes program output and error messages to `out`
(standard output by default) and returns the variables as they stand when
execution ends.

For finer control:

- `minilang.lexer.tokenize(source)` returns the list of `Token` objects and
  the position after the end of the source; it raises `LexerError`.
- `minilang.parser.parse(tokens, end_position)` returns the statements; it
  raises `ParseError`. A `Parser` keeps the statements parsed so far in its
  `statements` attribute.
- Each statement has `execute(variables, out=None)`, which works on a plain
  `dict` of variables and raises `minilang.nodes.EvaluationError` on runtime
  errors.

## What it does not do

The language has no strings, functions, comments, arrays or input; its only
values are integers. There is no interactive prompt: the `minilang` command
runs a whole file at a time.