# src/assertkit/graphql/resolver.py
"""Schema-driven field resolution.

Computes every selectable field of a type down to a bounded nesting depth.

Depth rules:
- Every descent into a composite type's fields costs one level of nesting.
- A composite type reached with no nesting left resolves to REJECTED and the
  parent drops that field. Selecting an object without sub-fields is not a
  valid document, so the field cannot be kept.
- Scalars are immune to the cutoff.
- Every object, interface and implementor field list ends with the
  __typename marker.

Polymorphism:
- Interfaces resolve to Polymorphic(shared, per_implementor). Implementors
  are siblings of the interface, so they are resolved at the interface's own
  nesting (not nesting - 1). Each implementor keeps only the fields the
  interface does not already select.
- Unions resolve to Polymorphic((), per_implementor) with each member's full
  field list, typename marker included.
"""

from __future__ import annotations

from collections.abc import Sequence


from assertkit.contracts.fields import (
    REJECTED,
    SCALAR,
    TYPENAME,
    FieldNode,
    FieldTree,
    ObjectField,
    Polymorphic,
    PolymorphicField,
    Resolution,
    ScalarField,
)
from assertkit.contracts.schema import (
    FieldDescriptor,
    InterfaceType,
    ObjectType,
    ScalarType,
    SchemaProtocol,
    TypeRef,
    UnionType,
    unwrap,
)
from assertkit.core.config import get_settings
from assertkit.core.logging import get_logger

logger = get_logger(__name__)


def resolve(schema: SchemaProtocol, type_ref: TypeRef, nesting: int) -> Resolution | FieldTree:
    """Resolve the selectable fields of a type.

    Args:
        schema: Schema to look types up in
        type_ref: Type name, optionally wrapped in NonNull/ListOf
        nesting: Remaining depth budget (>= 0)

    Returns:
        SCALAR for leaf types, REJECTED for composite types at nesting 0,
        a tuple of FieldNode for object types, or a Polymorphic descriptor
        for interfaces and unions.

    Raises:
        SchemaLookupError: If a referenced type is not in the schema
        ValueError: If nesting is negative
    """
    if nesting < 0:
        raise ValueError(f"nesting must be >= 0, got {nesting}")

    descriptor = schema.lookup(unwrap(type_ref))

    match descriptor:
        case ScalarType():
            return SCALAR
        case ObjectType() | InterfaceType() | UnionType() if nesting == 0:
            return REJECTED
        case ObjectType():
            return _resolve_fields(schema, descriptor.fields, nesting)
        case InterfaceType():
            return _resolve_interface(schema, descriptor, nesting)
        case UnionType():
            return _resolve_union(schema, descriptor, nesting)
        case _:
            raise TypeError(f"Unknown type descriptor: {descriptor!r}")


def _resolve_fields(schema: SchemaProtocol, fields: Sequence[FieldDescriptor], nesting: int) -> tuple[FieldNode, ...]:
    nodes: list[FieldNode] = []
    for field in fields:
        result = resolve(schema, field.type, nesting - 1)
        match result:
            case Resolution.REJECTED:
                continue
            case Resolution.SCALAR:
                nodes.append(ScalarField(field.name))
            case Polymorphic():
                nodes.append(PolymorphicField(field.name, result))
            case _:
                nodes.append(ObjectField(field.name, result))
    nodes.append(TYPENAME)
    return tuple(nodes)


def _resolve_object(schema: SchemaProtocol, type_name: str, nesting: int) -> tuple[FieldNode, ...]:
    descriptor = schema.lookup(type_name)
    if not isinstance(descriptor, ObjectType):
        raise TypeError(f"Expected '{type_name}' to be an object type, got {type(descriptor).__name__}")
    return _resolve_fields(schema, descriptor.fields, nesting)


def _resolve_interface(schema: SchemaProtocol, descriptor: InterfaceType, nesting: int) -> Polymorphic:
    shared = _resolve_fields(schema, descriptor.fields, nesting)
    per_implementor = []
    for type_name in schema.implementors(descriptor.name):
        fields = _resolve_object(schema, type_name, nesting)
        unique = tuple(node for node in fields if node != TYPENAME and node not in shared)
        per_implementor.append((type_name, unique))
    return Polymorphic(shared, tuple(per_implementor))


def _resolve_union(schema: SchemaProtocol, descriptor: UnionType, nesting: int) -> Polymorphic:
    per_member = tuple(
        (type_name, _resolve_object(schema, type_name, nesting)) for type_name in schema.members(descriptor.name)
    )
    return Polymorphic((), per_member)


def fields_for(schema: SchemaProtocol, type_ref: TypeRef, nesting: int | None = None) -> FieldTree:
    """All selectable fields of a composite type.

    Args:
        schema: Schema to look types up in
        type_ref: Object, interface or union type (wrappers allowed)
        nesting: Depth budget; defaults to settings.default_nesting (3)

    Returns:
        Tuple of FieldNode for objects, Polymorphic for interfaces/unions

    Raises:
        SchemaLookupError: If a referenced type is not in the schema
        ValueError: If the type is a scalar or nesting leaves nothing to select

    Example:
        >>> from assertkit.contracts import FieldDescriptor, MappingSchema, ObjectType, ScalarType
        >>> schema = MappingSchema([ScalarType("String"), ObjectType("Cat", (FieldDescriptor("name", "String"),))])
        >>> [node.name for node in fields_for(schema, "Cat")]
        ['name', '__typename']
    """
    if nesting is None:
        nesting = get_settings().default_nesting

    result = resolve(schema, type_ref, nesting)
    if result is SCALAR:
        raise ValueError(f"'{unwrap(type_ref)}' is a scalar type and has no fields to select")
    if result is REJECTED:
        raise ValueError(f"Nothing to select for '{unwrap(type_ref)}' at nesting {nesting}")

    logger.debug(
        "Resolved selectable fields",
        type_name=unwrap(type_ref),
        nesting=nesting,
        polymorphic=isinstance(result, Polymorphic),
    )
    return result
