# src/assertkit/graphql/formatter.py
"""Render field trees as GraphQL selection text.

Output format (indent width 2):

    owner {
      pets {
        name
        __typename
        ...on Dog {
          owner {
            name
            __typename
          }
        }
      }
      __typename
    }

- One line per scalar field.
- One block per composite field, children indented one level deeper.
- Interface/union selections render the shared fields first, then one
  inline fragment per implementor. Implementors with no unique fields are
  omitted, since an empty fragment is not valid selection syntax.
- Every line ends with a newline and carries no trailing whitespace.
"""

from __future__ import annotations

from assertkit.contracts.fields import (
    FieldNode,
    FieldTree,
    ObjectField,
    Polymorphic,
    PolymorphicField,
    ScalarField,
)
from assertkit.contracts.schema import SchemaProtocol, TypeRef
from assertkit.core.config import get_settings
from assertkit.graphql.overrides import Overrides, apply_overrides
from assertkit.graphql.resolver import fields_for


def format_fields(tree: FieldTree, indent: int = 0, *, width: int | None = None) -> str:
    """Render a field tree as a flat selection list.

    Args:
        tree: Tuple of fields or a Polymorphic descriptor
        indent: Spaces before each top-level line
        width: Spaces added per nesting level (default: settings.indent_width)

    Returns:
        Newline-terminated selection text, no wrapping braces
    """
    if width is None:
        width = get_settings().indent_width
    lines: list[str] = []
    _render_tree(tree, indent, width, lines)
    return "".join(lines)


def _render_tree(tree: FieldTree, indent: int, width: int, lines: list[str]) -> None:
    if isinstance(tree, Polymorphic):
        _render_polymorphic(tree, indent, width, lines)
        return
    for node in tree:
        _render_node(node, indent, width, lines)


def _render_polymorphic(selection: Polymorphic, indent: int, width: int, lines: list[str]) -> None:
    for node in selection.shared:
        _render_node(node, indent, width, lines)
    for type_name, fields in selection.per_implementor:
        if fields:
            _render_block(f"...on {type_name}", fields, indent, width, lines)


def _render_node(node: FieldNode, indent: int, width: int, lines: list[str]) -> None:
    match node:
        case ScalarField():
            lines.append(f"{' ' * indent}{node.label}\n")
        case ObjectField():
            _render_block(node.label, node.children, indent, width, lines)
        case PolymorphicField():
            _render_block(node.label, node.selection, indent, width, lines)
        case _:
            raise TypeError(f"Cannot format {node!r}")


def _render_block(label: str, tree: FieldTree, indent: int, width: int, lines: list[str]) -> None:
    padding = " " * indent
    lines.append(f"{padding}{label} {{\n")
    _render_tree(tree, indent + width, width, lines)
    lines.append(f"{padding}}}\n")


def document_for(
    schema: SchemaProtocol,
    type_ref: TypeRef,
    nesting: int | None = None,
    overrides: Overrides = (),
    *,
    indent: int | None = None,
    width: int | None = None,
) -> str:
    """Selection text for every field of a type, ready to splice into a query.

    The fields are rendered as a flat list without wrapping braces, each
    top-level line indented by one level (the usual position inside an
    enclosing ``query { type { ... } }`` block).

    Example:
        >>> from assertkit.contracts import FieldDescriptor, MappingSchema, ObjectType, ScalarType
        >>> schema = MappingSchema([ScalarType("String"), ObjectType("Cat", (FieldDescriptor("name", "String"),))])
        >>> print(document_for(schema, "Cat"), end="")
          name
          __typename
    """
    if width is None:
        width = get_settings().indent_width
    if indent is None:
        indent = width
    tree = apply_overrides(fields_for(schema, type_ref, nesting), overrides)
    return format_fields(tree, indent, width=width)


def selection_for(
    schema: SchemaProtocol,
    type_ref: TypeRef,
    nesting: int | None = None,
    overrides: Overrides = (),
    *,
    indent: int = 0,
    width: int | None = None,
) -> str:
    """Same fields as document_for(), wrapped in one ``{ ... }`` block."""
    if width is None:
        width = get_settings().indent_width
    tree = apply_overrides(fields_for(schema, type_ref, nesting), overrides)
    padding = " " * indent
    return f"{padding}{{\n{format_fields(tree, indent + width, width=width)}{padding}}}\n"
