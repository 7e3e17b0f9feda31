"""Typed AST for muil components."""

from muilpy.ast.model import (
    AstComponent,
    AstNode,
    AstProgram,
    AstProperty,
    AstStatement,
    AstType,
    AstTypeRef,
    NodeKind,
    node_kind,
)
from muilpy.ast.printer import (
    dump_json,
    format_type,
    print_component,
    print_program,
    print_property,
    program_to_dict,
)
from muilpy.ast.visitor import AstVisitor, visit_node, visit_program

__all__ = [
    "AstComponent",
    "AstNode",
    "AstProgram",
    "AstProperty",
    "AstStatement",
    "AstType",
    "AstTypeRef",
    "AstVisitor",
    "NodeKind",
    "dump_json",
    "format_type",
    "node_kind",
    "print_component",
    "print_program",
    "print_property",
    "program_to_dict",
    "visit_node",
    "visit_program",
]
