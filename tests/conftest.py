# tests/conftest.py
"""Shared test fixtures.

Pets schema:
    The same pets domain is provided twice:
    - pets_schema: hand-built MappingSchema, registration order Cat, Dog
      (tests that assert exact document text use this one)
    - pets_graphql_schema: graphql-core GraphQLSchema with resolvers, used
      by execution tests

        interface Pet { name: String }
        type Person { name: String, pets: [Pet]! }
        type Cat implements Pet { name: String, favoriteToy: String, weight: Int }
        type Dog implements Pet { name: String, owner: Person }
        type Query { person(name: String): Person, dog(name: String): Dog }
        type Mutation { addPerson(input: AddPersonInput): Person }

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest
from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInt,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
)
from hypothesis import Verbosity, settings

from assertkit.contracts import (
    FieldDescriptor,
    InterfaceType,
    ListOf,
    MappingSchema,
    NonNull,
    ObjectType,
    ScalarType,
    UnionType,
)
from assertkit.core.config import get_settings

settings.register_profile("ci", max_examples=100, deadline=None)
settings.register_profile("nightly", max_examples=1000, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose, deadline=None)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from ASSERTKIT_* variables in the developer's shell."""
    for name in list(os.environ):
        if name.startswith("ASSERTKIT_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Hand-built schema
# =============================================================================


def make_pets_schema() -> MappingSchema:
    return MappingSchema(
        [
            ScalarType("String"),
            ScalarType("Int"),
            InterfaceType("Pet", (FieldDescriptor("name", "String"),)),
            ObjectType(
                "Person",
                (
                    FieldDescriptor("name", "String"),
                    FieldDescriptor("pets", NonNull(ListOf("Pet"))),
                ),
            ),
            ObjectType(
                "Cat",
                (
                    FieldDescriptor("name", "String"),
                    FieldDescriptor("favoriteToy", "String"),
                    FieldDescriptor("weight", "Int"),
                ),
                interfaces=("Pet",),
            ),
            ObjectType(
                "Dog",
                (
                    FieldDescriptor("name", "String"),
                    FieldDescriptor("owner", "Person"),
                ),
                interfaces=("Pet",),
            ),
            UnionType("Animal", ("Cat", "Dog")),
        ]
    )


@pytest.fixture
def pets_schema() -> MappingSchema:
    return make_pets_schema()


# =============================================================================
# graphql-core schema
# =============================================================================


def make_pets_graphql_schema() -> GraphQLSchema:
    pet = GraphQLInterfaceType(
        "Pet",
        lambda: {"name": GraphQLField(GraphQLString)},
        resolve_type=lambda _value, _info, _type: "Dog",
    )
    person = GraphQLObjectType(
        "Person",
        lambda: {
            "name": GraphQLField(GraphQLString, resolve=lambda _obj, _info: "Name"),
            "pets": GraphQLField(GraphQLNonNull(GraphQLList(pet)), resolve=lambda _obj, _info: [{}, {}]),
        },
    )
    cat = GraphQLObjectType(
        "Cat",
        lambda: {
            "name": GraphQLField(GraphQLString),
            "favoriteToy": GraphQLField(GraphQLString),
            "weight": GraphQLField(GraphQLInt),
        },
        interfaces=[pet],
    )
    dog = GraphQLObjectType(
        "Dog",
        lambda: {
            "name": GraphQLField(GraphQLString, resolve=lambda _obj, _info: "Miki"),
            "owner": GraphQLField(person, resolve=lambda _obj, _info: {}),
        },
        interfaces=[pet],
    )
    add_person_input = GraphQLInputObjectType("AddPersonInput", {"name": GraphQLInputField(GraphQLString)})
    query = GraphQLObjectType(
        "Query",
        {
            "person": GraphQLField(
                person,
                args={"name": GraphQLArgument(GraphQLString)},
                resolve=lambda _obj, _info, **_args: {},
            ),
            "dog": GraphQLField(
                dog,
                args={"name": GraphQLArgument(GraphQLString)},
                resolve=lambda _obj, _info, **_args: {},
            ),
        },
    )
    mutation = GraphQLObjectType(
        "Mutation",
        {
            "addPerson": GraphQLField(
                person,
                args={"input": GraphQLArgument(add_person_input)},
                resolve=lambda _obj, _info, **_args: {},
            ),
        },
    )
    return GraphQLSchema(query=query, mutation=mutation, types=[cat, dog])


@pytest.fixture
def pets_graphql_schema() -> GraphQLSchema:
    return make_pets_graphql_schema()


PETS_SDL = """
interface Pet {
  name: String
}

type Person {
  name: String
  pets: [Pet]!
}

type Cat implements Pet {
  name: String
  favoriteToy: String
  weight: Int
}

type Dog implements Pet {
  name: String
  owner: Person
}

union Animal = Cat | Dog

input AddPersonInput {
  name: String
}

type Query {
  person(name: String): Person
  dog(name: String): Dog
  animals: [Animal]
}
"""
