"""AST data model for muil source."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum


class NodeKind(StrEnum):
    COMPONENT = "component"
    PROPERTY = "property"
    TYPE = "type"


@dataclass(frozen=True, slots=True)
class AstTypeRef:
    """One named alternative of a type.

    `is_composite` means "another alternative follows", so the last entry of
    a union is never composite.
    """

    name: str
    is_array: bool = False
    is_composite: bool = False


@dataclass(frozen=True, slots=True)
class AstType:
    """A simple or union type, `Int`, `Int | String` or `[Int | String]`."""

    alternatives: tuple[AstTypeRef, ...]

    def __len__(self) -> int:
        return len(self.alternatives)

    def __iter__(self) -> Iterator[AstTypeRef]:
        return iter(self.alternatives)

    def __getitem__(self, index: int) -> AstTypeRef:
        return self.alternatives[index]

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(alternative.name for alternative in self.alternatives)

    @property
    def is_array(self) -> bool:
        return bool(self.alternatives) and self.alternatives[0].is_array

    @property
    def is_union(self) -> bool:
        return len(self.alternatives) > 1


@dataclass(frozen=True, slots=True)
class AstProperty:
    name: str
    type: AstType
    is_optional: bool = False


@dataclass(frozen=True, slots=True)
class AstComponent:
    """Component declaration with properties in declaration order."""

    name: str
    properties: tuple[AstProperty, ...] = ()
    extends: AstType | None = None

    def find_property(self, name: str) -> AstProperty | None:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None


@dataclass(frozen=True, slots=True)
class AstProgram:
    statements: tuple[AstStatement, ...] = ()

    @property
    def components(self) -> tuple[AstComponent, ...]:
        return tuple(statement for statement in self.statements if isinstance(statement, AstComponent))

    def find_component(self, name: str) -> AstComponent | None:
        for component in self.components:
            if component.name == name:
                return component
        return None


type AstStatement = AstComponent
type AstNode = AstComponent | AstProperty | AstType


def node_kind(node: AstNode) -> NodeKind:
    match node:
        case AstComponent():
            return NodeKind.COMPONENT
        case AstProperty():
            return NodeKind.PROPERTY
        case AstType():
            return NodeKind.TYPE
        case _:
            raise TypeError(f"Not an AST node: {node!r}")


__all__ = [
    "AstComponent",
    "AstNode",
    "AstProgram",
    "AstProperty",
    "AstStatement",
    "AstType",
    "AstTypeRef",
    "NodeKind",
    "node_kind",
]
