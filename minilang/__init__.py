"""An interpreter for a small integer-only scripting language: lexer, parser, evaluator and command."""

__version__ = "0.0.1"
__all__ = ["cli", "lexer", "nodes", "parser", "tokens"]