# src/assertkit/graphql/case.py
"""Schema-bound GraphQL test helpers.

GraphQLCase binds the generator and the response assertions to one schema
so tests don't repeat it:

    case = GraphQLCase(schema)

    query = f'''
    {{
      dog {{
    {case.document_for("Dog", 4)}
      }}
    }}
    '''
    case.assert_response_equals(query, {"dog": {...}})
    data = case.assert_response_matches(query, {"dog": {"name": ANY}})

Execution uses graphql-core, so it needs a graphql-core GraphQLSchema.
Field generation works with any SchemaProtocol.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from graphql import ExecutionResult, GraphQLSchema, graphql_sync

from assertkit.comparisons import deep_equal
from assertkit.contracts.errors import AssertionFailure
from assertkit.contracts.fields import FieldTree
from assertkit.contracts.schema import SchemaProtocol, TypeRef
from assertkit.core.config import AssertkitSettings, get_settings
from assertkit.core.logging import get_logger
from assertkit.graphql.adapter import GraphQLCoreSchema
from assertkit.graphql.formatter import document_for, selection_for
from assertkit.graphql.overrides import Overrides
from assertkit.graphql.resolver import fields_for
from assertkit.predicates import matches

logger = get_logger(__name__)


class GraphQLCase:
    """Generator and response assertions bound to one schema.

    Attributes:
        schema: SchemaProtocol used for field generation
        settings: Defaults for nesting
    """

    def __init__(self, schema: GraphQLSchema | SchemaProtocol, settings: AssertkitSettings | None = None) -> None:
        self.schema: SchemaProtocol = GraphQLCoreSchema(schema) if isinstance(schema, GraphQLSchema) else schema
        self.settings = settings if settings is not None else get_settings()

    def _nesting(self, nesting: int | None) -> int:
        return self.settings.default_nesting if nesting is None else nesting

    def fields_for(self, type_ref: TypeRef, nesting: int | None = None) -> FieldTree:
        return fields_for(self.schema, type_ref, self._nesting(nesting))

    def document_for(self, type_ref: TypeRef, nesting: int | None = None, overrides: Overrides = ()) -> str:
        return document_for(self.schema, type_ref, self._nesting(nesting), overrides, width=self.settings.indent_width)

    def selection_for(self, type_ref: TypeRef, nesting: int | None = None, overrides: Overrides = ()) -> str:
        return selection_for(self.schema, type_ref, self._nesting(nesting), overrides, width=self.settings.indent_width)

    def execute(
        self,
        document: str,
        *,
        variables: Mapping[str, Any] | None = None,
        context: Any = None,
        root_value: Any = None,
    ) -> ExecutionResult:
        """Run a document against the bound schema.

        Raises:
            TypeError: If the case was built from a schema graphql-core cannot execute
        """
        if not isinstance(self.schema, GraphQLCoreSchema):
            raise TypeError(f"Cannot execute documents against {type(self.schema).__name__}; pass a GraphQLSchema")
        result = graphql_sync(
            self.schema.graphql_schema,
            document,
            root_value=root_value,
            context_value=context,
            variable_values=dict(variables) if variables is not None else None,
        )
        logger.debug("Executed document", errors=len(result.errors or ()))
        return result

    def _data(self, document: str, expected: Any, variables: Mapping[str, Any] | None, context: Any) -> Any:
        result = self.execute(document, variables=variables, context=context)
        if result.errors:
            raise AssertionFailure(
                "Query returned errors",
                left=[error.formatted for error in result.errors],
                right=expected,
                args_=(document, expected),
            )
        return result.data

    def assert_response_equals(
        self,
        document: str,
        expected: Mapping[str, Any],
        *,
        variables: Mapping[str, Any] | None = None,
        context: Any = None,
    ) -> bool:
        """Assert the response data equals ``expected``, ignoring key and list order."""
        data = self._data(document, expected, variables, context)
        if not deep_equal(data, expected):
            raise AssertionFailure(
                "Response did not match the expected response",
                left=data,
                right=expected,
                args_=(document, expected),
            )
        return True

    def assert_response_matches(
        self,
        document: str,
        pattern: Mapping[str, Any],
        *,
        variables: Mapping[str, Any] | None = None,
        context: Any = None,
    ) -> Any:
        """Assert the response data matches ``pattern`` (see predicates.matches).

        Returns:
            The response data, for further assertions on the parts the
            pattern left open
        """
        data = self._data(document, pattern, variables, context)
        if not matches(pattern, data):
            raise AssertionFailure(
                "Response did not match the expected pattern",
                left=data,
                right=pattern,
                args_=(document, pattern),
            )
        return data
