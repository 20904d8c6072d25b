# src/assertkit/graphql/adapter.py
"""SchemaProtocol implementation backed by graphql-core.

Translates graphql-core's GraphQLSchema types into assertkit type
descriptors on demand. Enums are leaves just like scalars. Input object
types cannot be selected from and are rejected.
"""

from __future__ import annotations

from pathlib import Path

from graphql import (
    GraphQLEnumType,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLOutputType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLUnionType,
    build_schema,
)

from assertkit.contracts.errors import SchemaLookupError
from assertkit.contracts.schema import (
    FieldDescriptor,
    InterfaceType,
    ListOf,
    NonNull,
    ObjectType,
    ScalarType,
    TypeDescriptor,
    TypeRef,
    UnionType,
)


def type_ref_for(graphql_type: GraphQLOutputType) -> TypeRef:
    """Convert a graphql-core (possibly wrapped) output type to a TypeRef."""
    if isinstance(graphql_type, GraphQLNonNull):
        return NonNull(type_ref_for(graphql_type.of_type))
    if isinstance(graphql_type, GraphQLList):
        return ListOf(type_ref_for(graphql_type.of_type))
    return graphql_type.name


class GraphQLCoreSchema:
    """Read-only view of a GraphQLSchema as a SchemaProtocol.

    Attributes:
        graphql_schema: The wrapped schema, also used for execution
    """

    def __init__(self, graphql_schema: GraphQLSchema) -> None:
        self.graphql_schema = graphql_schema
        self._descriptors: dict[str, TypeDescriptor] = {}

    @classmethod
    def from_sdl(cls, sdl: str) -> GraphQLCoreSchema:
        """Build from schema definition language text."""
        return cls(build_schema(sdl))

    @classmethod
    def from_file(cls, path: Path) -> GraphQLCoreSchema:
        """Build from an SDL file."""
        return cls.from_sdl(path.read_text(encoding="utf-8"))

    def lookup(self, type_name: str) -> TypeDescriptor:
        descriptor = self._descriptors.get(type_name)
        if descriptor is None:
            descriptor = self._convert(type_name)
            self._descriptors[type_name] = descriptor
        return descriptor

    def implementors(self, interface_name: str) -> list[str]:
        interface = self.graphql_schema.get_type(interface_name)
        if not isinstance(interface, GraphQLInterfaceType):
            raise SchemaLookupError(interface_name)
        return [obj.name for obj in self.graphql_schema.get_implementations(interface).objects]

    def members(self, union_name: str) -> list[str]:
        union = self.graphql_schema.get_type(union_name)
        if not isinstance(union, GraphQLUnionType):
            raise SchemaLookupError(union_name)
        return [member.name for member in union.types]

    def _convert(self, type_name: str) -> TypeDescriptor:
        graphql_type = self.graphql_schema.get_type(type_name)
        match graphql_type:
            case None:
                raise SchemaLookupError(type_name)
            case GraphQLScalarType() | GraphQLEnumType():
                return ScalarType(type_name)
            case GraphQLObjectType():
                return ObjectType(
                    type_name,
                    fields=tuple(FieldDescriptor(name, type_ref_for(field.type)) for name, field in graphql_type.fields.items()),
                    interfaces=tuple(interface.name for interface in graphql_type.interfaces),
                )
            case GraphQLInterfaceType():
                return InterfaceType(
                    type_name,
                    fields=tuple(FieldDescriptor(name, type_ref_for(field.type)) for name, field in graphql_type.fields.items()),
                )
            case GraphQLUnionType():
                return UnionType(type_name, members=tuple(member.name for member in graphql_type.types))
            case _:
                raise TypeError(f"'{type_name}' is a {type(graphql_type).__name__} and cannot be selected from")
