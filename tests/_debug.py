"""Shared debug printers for lexer/parser/ast tests."""

from __future__ import annotations

import os

from muilpy.ast import AstProgram, print_program
from muilpy.diagnostics import Diagnostic, format_diagnostic
from muilpy.lexer import TokenStream, dump_tokens

PRINT_TOKENS = os.getenv("PRINT_TOKENS", "0").lower() in {"1", "true", "yes", "on"}
PRINT_AST = os.getenv("PRINT_AST", "0").lower() in {"1", "true", "yes", "on"}
PRINT_SOURCE = os.getenv("PRINT_SOURCE", "0").lower() in {"1", "true", "yes", "on"}
PRINT_DIAGNOSTICS = os.getenv("PRINT_DIAGNOSTICS", "0").lower() in {
    "1",
    "true",
    "yes",
    "on",
}


def debug_print_source(test_name: str, source: str) -> None:
    if not PRINT_SOURCE:
        return
    print(f"\n===== {test_name} SOURCE =====")
    print(source)


def debug_dump_tokens(test_name: str, stream: TokenStream) -> None:
    if not PRINT_TOKENS:
        return
    debug_print_source(test_name, stream.source)
    print(f"\n===== {test_name} TOKENS =====")
    for index, tok in enumerate(stream):
        print(f"{index:03d} {tok.kind.name:<12} range={tok.range.as_tuple()} at={tok.line}:{tok.column}")
    print(dump_tokens(stream), end="")


def debug_dump_ast(test_name: str, program: AstProgram, source: str | None = None) -> None:
    if not PRINT_AST:
        return
    if source is not None:
        debug_print_source(test_name, source)
    print(f"\n===== {test_name} AST =====")
    print(print_program(program, include_extends=True), end="")


def debug_dump_diagnostics(test_name: str, diagnostics: list[Diagnostic], source: str | None = None) -> None:
    if not PRINT_DIAGNOSTICS:
        return
    if source is not None:
        debug_print_source(test_name, source)
    print(f"===== {test_name} DIAGNOSTICS =====")
    if not diagnostics:
        print("(none)")
        return
    for diagnostic in diagnostics:
        print(format_diagnostic(diagnostic))
