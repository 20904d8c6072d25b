# src/assertkit/contracts/schema.py
"""Schema abstraction consumed by the GraphQL field generator.

A schema is a read-only registry of type descriptors. The generator only
needs three capabilities from it, captured by SchemaProtocol:

- lookup a type descriptor by name
- list the implementors of an interface
- list the members of a union

MappingSchema is a plain in-memory implementation used by tests and by
callers who describe a schema by hand. GraphQLCoreSchema (in
assertkit.graphql.adapter) implements the same protocol over a graphql-core
GraphQLSchema.

Type references:
    A field's type is a TypeRef: either a type name, or a NonNull/ListOf
    wrapper around another TypeRef. Wrappers carry no meaning for field
    selection, so unwrap() strips them all.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from assertkit.contracts.errors import SchemaLookupError

# =============================================================================
# Type references
# =============================================================================


@dataclass(frozen=True, slots=True)
class NonNull:
    """Non-null wrapper around a type reference."""

    of_type: TypeRef


@dataclass(frozen=True, slots=True)
class ListOf:
    """List wrapper around a type reference."""

    of_type: TypeRef


type TypeRef = str | NonNull | ListOf


def unwrap(type_ref: TypeRef) -> str:
    """Strip NonNull/ListOf wrappers until a type name is reached.

    Idempotent and independent of wrapper order:
    unwrap(NonNull(ListOf("Pet"))) == unwrap(ListOf(NonNull("Pet"))) == "Pet"
    """
    while isinstance(type_ref, NonNull | ListOf):
        type_ref = type_ref.of_type
    return type_ref


# =============================================================================
# Type descriptors
# =============================================================================


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """A field declared on an object or interface type."""

    name: str
    type: TypeRef


@dataclass(frozen=True, slots=True)
class ScalarType:
    """Leaf type with no sub-fields (scalars and enums)."""

    name: str


@dataclass(frozen=True, slots=True)
class ObjectType:
    """Object type with ordered fields.

    Attributes:
        name: Type name
        fields: Fields in declaration order
        interfaces: Names of the interfaces this object implements
    """

    name: str
    fields: tuple[FieldDescriptor, ...] = ()
    interfaces: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class InterfaceType:
    """Interface type. Implementors are resolved through the schema."""

    name: str
    fields: tuple[FieldDescriptor, ...] = ()


@dataclass(frozen=True, slots=True)
class UnionType:
    """Union type. Declares no fields of its own."""

    name: str
    members: tuple[str, ...] = ()


type TypeDescriptor = ScalarType | ObjectType | InterfaceType | UnionType


# =============================================================================
# Schema protocol
# =============================================================================


@runtime_checkable
class SchemaProtocol(Protocol):
    """Capabilities the field generator needs from a schema."""

    def lookup(self, type_name: str) -> TypeDescriptor:
        """Return the descriptor for a type.

        Raises:
            SchemaLookupError: If the schema has no such type
        """
        ...

    def implementors(self, interface_name: str) -> Sequence[str]:
        """Names of object types implementing an interface, in registration order."""
        ...

    def members(self, union_name: str) -> Sequence[str]:
        """Names of a union's member types, in declaration order."""
        ...


class MappingSchema:
    """In-memory schema built from a sequence of type descriptors.

    Registration order is the order of the descriptors passed in; it
    determines interface implementor order.

    Example:
        >>> schema = MappingSchema(
        ...     [
        ...         ScalarType("String"),
        ...         ObjectType("Cat", (FieldDescriptor("name", "String"),)),
        ...     ]
        ... )
        >>> schema.lookup("Cat").fields[0].name
        'name'
    """

    def __init__(self, types: Iterable[TypeDescriptor]) -> None:
        self._types: dict[str, TypeDescriptor] = {}
        for descriptor in types:
            if descriptor.name in self._types:
                raise ValueError(f"Duplicate type name: '{descriptor.name}'")
            self._types[descriptor.name] = descriptor

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._types

    def __len__(self) -> int:
        return len(self._types)

    def lookup(self, type_name: str) -> TypeDescriptor:
        try:
            return self._types[type_name]
        except KeyError:
            raise SchemaLookupError(type_name) from None

    def implementors(self, interface_name: str) -> list[str]:
        return [
            descriptor.name
            for descriptor in self._types.values()
            if isinstance(descriptor, ObjectType) and interface_name in descriptor.interfaces
        ]

    def members(self, union_name: str) -> list[str]:
        descriptor = self.lookup(union_name)
        if not isinstance(descriptor, UnionType):
            raise TypeError(f"'{union_name}' is not a union type")
        return list(descriptor.members)
