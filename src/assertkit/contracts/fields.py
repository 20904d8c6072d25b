# src/assertkit/contracts/fields.py
"""Field tree produced by the GraphQL field resolver.

A field tree is an immutable value: a tuple of FieldNode for an object type,
or a Polymorphic descriptor for an interface or union. Equality is
structural, which is what implementor field subtraction relies on.

The resolver also returns one of two Resolution sentinels:
- SCALAR: the type is a leaf; the caller attaches the field name
- REJECTED: a composite type was reached with no depth left; the parent
  drops the field, so REJECTED never appears in a finished tree
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Resolution(Enum):
    """Non-tree outcomes of resolving a type."""

    SCALAR = "scalar"
    REJECTED = "rejected"


SCALAR = Resolution.SCALAR
REJECTED = Resolution.REJECTED


@dataclass(frozen=True, slots=True)
class ScalarField:
    """Leaf selection.

    Attributes:
        name: Field name as declared in the schema
        text: Override text rendered in place of the name (None = render name)
    """

    name: str
    text: str | None = None

    @property
    def label(self) -> str:
        return self.name if self.text is None else self.text


@dataclass(frozen=True, slots=True)
class ObjectField:
    """Composite selection over an object type."""

    name: str
    children: tuple[FieldNode, ...]
    text: str | None = None

    @property
    def label(self) -> str:
        return self.name if self.text is None else self.text


@dataclass(frozen=True, slots=True)
class Polymorphic:
    """Selection over an interface or union.

    Attributes:
        shared: Fields declared on the interface (empty for unions)
        per_implementor: (type name, fields unique to that type) pairs in
            implementor registration order
    """

    shared: tuple[FieldNode, ...]
    per_implementor: tuple[tuple[str, tuple[FieldNode, ...]], ...]

    def implementor_fields(self, type_name: str) -> tuple[FieldNode, ...]:
        """Unique fields for one implementor.

        Raises:
            KeyError: If type_name is not an implementor of this selection
        """
        for name, fields in self.per_implementor:
            if name == type_name:
                return fields
        raise KeyError(type_name)


@dataclass(frozen=True, slots=True)
class PolymorphicField:
    """Composite selection over an interface or union type."""

    name: str
    selection: Polymorphic
    text: str | None = None

    @property
    def label(self) -> str:
        return self.name if self.text is None else self.text

    @property
    def shared(self) -> tuple[FieldNode, ...]:
        return self.selection.shared

    @property
    def per_implementor(self) -> tuple[tuple[str, tuple[FieldNode, ...]], ...]:
        return self.selection.per_implementor


type FieldNode = ScalarField | ObjectField | PolymorphicField

# Tuple of fields for an object type, or a polymorphic descriptor
type FieldTree = tuple[FieldNode, ...] | Polymorphic

TYPENAME_FIELD = "__typename"
TYPENAME = ScalarField(TYPENAME_FIELD)


def tree_to_data(tree: FieldTree) -> Any:
    """Convert a field tree to plain JSON-compatible data.

    Scalars become their label, object fields become {label: [...]},
    polymorphic fields become {label: {"shared": [...], "on": {type: [...]}}}.
    Used by the CLI and handy for snapshot comparisons.
    """
    if isinstance(tree, Polymorphic):
        return {
            "shared": [_node_to_data(node) for node in tree.shared],
            "on": {type_name: [_node_to_data(node) for node in fields] for type_name, fields in tree.per_implementor},
        }
    return [_node_to_data(node) for node in tree]


def _node_to_data(node: FieldNode) -> Any:
    match node:
        case ScalarField():
            return node.label
        case ObjectField():
            return {node.label: tree_to_data(node.children)}
        case PolymorphicField():
            return {node.label: tree_to_data(node.selection)}
        case _:
            raise TypeError(f"Not a field node: {node!r}")
