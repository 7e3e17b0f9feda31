"""Callback-driven traversal over the muil AST."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from muilpy.ast.model import AstComponent, AstNode, AstProgram, AstProperty, AstType


@dataclass(frozen=True, slots=True)
class AstVisitor:
    """Per-kind callbacks. A missing callback turns that branch into a no-op."""

    visit_component: Callable[[AstComponent], None] | None = None
    visit_property: Callable[[AstProperty], None] | None = None
    visit_type: Callable[[AstType], None] | None = None


def visit_node(visitor: AstVisitor, node: AstNode) -> None:
    """Dispatch `node` to the visitor.

    Components also walk their properties in order when a property callback
    is registered. Property types are not visited automatically; read them off
    the property node.
    """
    match node:
        case AstComponent():
            if visitor.visit_component is not None:
                visitor.visit_component(node)
            if visitor.visit_property is not None:
                for prop in node.properties:
                    visitor.visit_property(prop)
        case AstProperty():
            if visitor.visit_property is not None:
                visitor.visit_property(node)
        case AstType():
            if visitor.visit_type is not None:
                visitor.visit_type(node)
        case _:
            raise TypeError(f"Cannot visit non-AST object: {node!r}")


def visit_program(visitor: AstVisitor, program: AstProgram) -> None:
    for statement in program.statements:
        visit_node(visitor, statement)
