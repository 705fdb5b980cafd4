"""Lexer, syntax tree nodes and token-printing REPL for the Monkey programming language."""

__version__ = "0.1.0"
__all__ = ["token", "lexer", "nodes", "repl", "cli"]