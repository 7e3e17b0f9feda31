"""Deterministic debug rendering of the AST."""

from __future__ import annotations

import json

from muilpy.ast.model import AstComponent, AstProgram, AstProperty, AstType

INDENT = "  "


def format_type(type_: AstType) -> str:
    """Render `A | B | C`, wrapped in brackets for array types."""
    text = " | ".join(type_.names)
    if type_.is_array:
        return f"[{text}]"
    return text


def print_property(prop: AstProperty, level: int = 0) -> str:
    optional = "true" if prop.is_optional else "false"
    return f"{INDENT * level}Property: {prop.name}, Type: {format_type(prop.type)}, Optional: {optional}\n"


def print_component(component: AstComponent, level: int = 0, *, include_extends: bool = False) -> str:
    parts = [f"{INDENT * level}Component: {component.name}\n"]
    if include_extends and component.extends is not None:
        parts.append(f"{INDENT * (level + 1)}Extends: {format_type(component.extends)}\n")
    for prop in component.properties:
        parts.append(print_property(prop, level + 1))
    return "".join(parts)


def print_program(program: AstProgram, *, include_extends: bool = False) -> str:
    return "".join(
        print_component(statement, 0, include_extends=include_extends) for statement in program.statements
    )


def program_to_dict(program: AstProgram) -> dict[str, dict[str, dict[str, str | bool]]]:
    """Nest components and properties by name; a later duplicate name replaces an earlier one."""
    return {
        component.name: {
            prop.name: {"type": format_type(prop.type), "optional": prop.is_optional}
            for prop in component.properties
        }
        for component in program.components
    }


def dump_json(program: AstProgram, *, indent: int | None = 2) -> str:
    return json.dumps(program_to_dict(program), indent=indent)
