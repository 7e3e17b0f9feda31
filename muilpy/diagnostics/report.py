"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from muilpy.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """One-line human readable rendering, used by the scripts and log output."""
    text = f"{diagnostic.severity.upper()} {diagnostic.code} {diagnostic.line}:{diagnostic.column} {diagnostic.message}"
    if diagnostic.hint:
        text += f" (hint: {diagnostic.hint})"
    return text
