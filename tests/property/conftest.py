# tests/property/conftest.py
"""Shared Hypothesis strategies for property-based tests.

Strategy Categories:
- Type references (bare names, NonNull/ListOf wrappers)
- Generated schemas (objects, an optional interface, an optional union)
- Field trees and override collections

Usage:
    from tests.property.conftest import generated_schemas, field_names

    @given(generated=generated_schemas())
    def test_resolver_property(generated: GeneratedSchema) -> None:
        ...
"""

# Example budgets live in tests.property.settings

from __future__ import annotations

from dataclasses import dataclass

from hypothesis import strategies as st

from assertkit.contracts import (
    FieldDescriptor,
    InterfaceType,
    ListOf,
    MappingSchema,
    NonNull,
    ObjectField,
    ObjectType,
    ScalarField,
    ScalarType,
    TypeDescriptor,
    TypeRef,
    UnionType,
)

SCALAR_NAMES = ("String", "Int")
INTERFACE_NAME = "Node"
UNION_NAME = "SearchResult"

# Keeps generated trees small enough that deep nesting stays fast
MAX_FIELDS = 3
MAX_OBJECTS = 3

field_names = st.text(alphabet="abcdefghij", min_size=1, max_size=6)


def type_refs(names: list[str]) -> st.SearchStrategy[TypeRef]:
    """A type name, optionally wrapped."""
    bare = st.sampled_from(names)
    return st.one_of(
        bare,
        bare.map(NonNull),
        bare.map(ListOf),
        bare.map(lambda name: NonNull(ListOf(NonNull(name)))),
    )


@dataclass(frozen=True)
class GeneratedSchema:
    """A generated schema plus the names tests need to pick from."""

    schema: MappingSchema
    objects: tuple[str, ...]
    interface: str | None
    union: str | None

    @property
    def composites(self) -> tuple[str, ...]:
        return self.objects + tuple(name for name in (self.interface, self.union) if name is not None)


@st.composite
def generated_schemas(draw: st.DrawFn) -> GeneratedSchema:
    """Random schemas with recursion, wrappers, an optional interface and union.

    Every referenced type exists. Implementors declare the interface's
    fields first, with identical types, followed by their own fields.
    """
    object_names = [f"Obj{i}" for i in range(draw(st.integers(1, MAX_OBJECTS)))]
    has_interface = draw(st.booleans())
    has_union = draw(st.booleans())
    composites = object_names + ([INTERFACE_NAME] if has_interface else []) + ([UNION_NAME] if has_union else [])
    refs = type_refs([*SCALAR_NAMES, *composites])

    def field_list(prefix: str) -> tuple[FieldDescriptor, ...]:
        types = draw(st.lists(refs, max_size=MAX_FIELDS))
        return tuple(FieldDescriptor(f"{prefix}{index}", type_ref) for index, type_ref in enumerate(types))

    descriptors: list[TypeDescriptor] = [ScalarType(name) for name in SCALAR_NAMES]

    shared: tuple[FieldDescriptor, ...] = ()
    implementors: list[str] = []
    if has_interface:
        shared = field_list("shared")
        implementors = draw(st.lists(st.sampled_from(object_names), unique=True))
        descriptors.append(InterfaceType(INTERFACE_NAME, shared))

    for name in object_names:
        implements = name in implementors
        fields = (shared if implements else ()) + field_list(f"{name.lower()}_")
        descriptors.append(ObjectType(name, fields, interfaces=(INTERFACE_NAME,) if implements else ()))

    if has_union:
        members = draw(st.lists(st.sampled_from(object_names), min_size=1, unique=True))
        descriptors.append(UnionType(UNION_NAME, tuple(members)))

    return GeneratedSchema(
        schema=MappingSchema(descriptors),
        objects=tuple(object_names),
        interface=INTERFACE_NAME if has_interface else None,
        union=UNION_NAME if has_union else None,
    )


# =============================================================================
# Field trees and overrides
# =============================================================================


def flat_trees() -> st.SearchStrategy[tuple[ScalarField | ObjectField, ...]]:
    """Field tuples with unique names, one level of object nesting."""
    leaf = field_names.map(ScalarField)
    nested = st.builds(
        ObjectField,
        field_names,
        st.lists(leaf, max_size=3, unique_by=lambda node: node.name).map(tuple),
    )
    return st.lists(st.one_of(leaf, nested), max_size=5, unique_by=lambda node: node.name).map(tuple)


override_texts = st.text(alphabet="abcdefghij(): ", min_size=1, max_size=12)
