"""Shared contracts: schema descriptors, field trees and exceptions.

This package is a LEAF MODULE with no outbound dependencies to core/graphql.

Import patterns:
    from assertkit.contracts import MappingSchema, ObjectType, ScalarField
    from assertkit.contracts import AssertionFailure, SchemaLookupError
"""

from assertkit.contracts.errors import (
    AssertionFailure,
    MalformedOverrideError,
    SchemaLookupError,
)
from assertkit.contracts.fields import (
    REJECTED,
    SCALAR,
    TYPENAME,
    TYPENAME_FIELD,
    FieldNode,
    FieldTree,
    ObjectField,
    Polymorphic,
    PolymorphicField,
    Resolution,
    ScalarField,
    tree_to_data,
)
from assertkit.contracts.schema import (
    FieldDescriptor,
    InterfaceType,
    ListOf,
    MappingSchema,
    NonNull,
    ObjectType,
    ScalarType,
    SchemaProtocol,
    TypeDescriptor,
    TypeRef,
    UnionType,
    unwrap,
)

__all__ = [
    "REJECTED",
    "SCALAR",
    "TYPENAME",
    "TYPENAME_FIELD",
    "AssertionFailure",
    "FieldDescriptor",
    "FieldNode",
    "FieldTree",
    "InterfaceType",
    "ListOf",
    "MalformedOverrideError",
    "MappingSchema",
    "NonNull",
    "ObjectField",
    "ObjectType",
    "Polymorphic",
    "PolymorphicField",
    "Resolution",
    "ScalarField",
    "ScalarType",
    "SchemaLookupError",
    "SchemaProtocol",
    "TypeDescriptor",
    "TypeRef",
    "UnionType",
    "tree_to_data",
    "unwrap",
]
