# tests/contracts/test_schema.py
"""Tests for schema descriptors and MappingSchema."""

import pytest

from assertkit.contracts import (
    FieldDescriptor,
    InterfaceType,
    ListOf,
    MappingSchema,
    NonNull,
    ObjectType,
    ScalarType,
    SchemaLookupError,
    SchemaProtocol,
    UnionType,
    unwrap,
)


class TestUnwrap:
    """Tests for stripping NonNull/ListOf wrappers."""

    def test_bare_name_unchanged(self) -> None:
        assert unwrap("Pet") == "Pet"

    def test_wrapper_order_is_irrelevant(self) -> None:
        """NonNull(ListOf(X)) and ListOf(NonNull(X)) unwrap to the same name."""
        assert unwrap(NonNull(ListOf("Pet"))) == "Pet"
        assert unwrap(ListOf(NonNull("Pet"))) == "Pet"

    def test_deeply_nested_wrappers(self) -> None:
        assert unwrap(NonNull(ListOf(NonNull(ListOf(NonNull("Pet")))))) == "Pet"

    def test_idempotent(self) -> None:
        ref = NonNull(ListOf("Pet"))
        assert unwrap(unwrap(ref)) == unwrap(ref)


class TestMappingSchema:
    """Tests for the in-memory schema."""

    def test_satisfies_protocol(self, pets_schema: MappingSchema) -> None:
        assert isinstance(pets_schema, SchemaProtocol)

    def test_lookup_returns_descriptor(self, pets_schema: MappingSchema) -> None:
        cat = pets_schema.lookup("Cat")

        assert isinstance(cat, ObjectType)
        assert [field.name for field in cat.fields] == ["name", "favoriteToy", "weight"]
        assert cat.interfaces == ("Pet",)

    def test_lookup_unknown_type_raises(self, pets_schema: MappingSchema) -> None:
        with pytest.raises(SchemaLookupError, match="Type 'Horse' not found in schema") as exc_info:
            pets_schema.lookup("Horse")

        assert exc_info.value.type_name == "Horse"

    def test_lookup_error_is_lookup_error(self, pets_schema: MappingSchema) -> None:
        """Callers catching LookupError also catch unknown types."""
        with pytest.raises(LookupError):
            pets_schema.lookup("Horse")

    def test_implementors_in_registration_order(self, pets_schema: MappingSchema) -> None:
        assert pets_schema.implementors("Pet") == ["Cat", "Dog"]

    def test_implementors_of_unimplemented_interface(self) -> None:
        schema = MappingSchema([InterfaceType("Node", (FieldDescriptor("id", "ID"),)), ScalarType("ID")])

        assert schema.implementors("Node") == []

    def test_members_in_declaration_order(self, pets_schema: MappingSchema) -> None:
        assert pets_schema.members("Animal") == ["Cat", "Dog"]

    def test_members_of_non_union_raises(self, pets_schema: MappingSchema) -> None:
        with pytest.raises(TypeError, match="not a union"):
            pets_schema.members("Cat")

    def test_duplicate_type_names_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate type name: 'Cat'"):
            MappingSchema([ObjectType("Cat"), ObjectType("Cat")])

    def test_contains_and_len(self, pets_schema: MappingSchema) -> None:
        assert "Dog" in pets_schema
        assert "Horse" not in pets_schema
        assert len(pets_schema) == 7


class TestDescriptors:
    """Tests for descriptor value semantics."""

    def test_descriptors_are_frozen(self) -> None:
        from dataclasses import FrozenInstanceError

        cat = ObjectType("Cat")
        with pytest.raises(FrozenInstanceError):
            cat.name = "Dog"  # type: ignore[misc]

    def test_structural_equality(self) -> None:
        assert FieldDescriptor("pets", NonNull(ListOf("Pet"))) == FieldDescriptor("pets", NonNull(ListOf("Pet")))
        assert UnionType("Animal", ("Cat",)) != UnionType("Animal", ("Dog",))
