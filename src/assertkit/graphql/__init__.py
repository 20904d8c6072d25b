# src/assertkit/graphql/__init__.py
"""GraphQL test helpers: field generation, document formatting, response assertions.

Usage:
    from assertkit.graphql import GraphQLCase, document_for, fields_for
"""

from assertkit.graphql.adapter import GraphQLCoreSchema
from assertkit.graphql.case import GraphQLCase
from assertkit.graphql.formatter import document_for, format_fields, selection_for
from assertkit.graphql.overrides import apply_overrides
from assertkit.graphql.resolver import fields_for, resolve

__all__ = [
    "GraphQLCase",
    "GraphQLCoreSchema",
    "apply_overrides",
    "document_for",
    "fields_for",
    "format_fields",
    "resolve",
    "selection_for",
]
