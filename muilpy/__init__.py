"""Lexer, parser and AST tooling for the muil component-description language."""

__version__ = "0.1.0"
