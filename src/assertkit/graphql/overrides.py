# src/assertkit/graphql/overrides.py
"""Field-name overrides for generated field trees.

Overrides replace the text a field is rendered with, typically to splice in
arguments:

    apply_overrides(fields, {"owner": {"pets": 'pets(filter: {name: "X"})'}})
    apply_overrides(fields, [("owner.pets", 'pets(filter: {name: "X"})')])

Both forms are equivalent. A dotted key is shorthand for nested overrides.

Rules:
- A string replacement sets the field's rendered text; children are kept.
- A nested collection is applied to the field's children. For interface and
  union fields it is applied to the shared fields and to every implementor.
- Keys naming fields that are not in the tree are ignored.
- Entries are applied in order, so the last override for a field wins.
- Structure is never changed: no field is added or removed.
- Malformed entries are logged and skipped.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from assertkit.contracts.errors import MalformedOverrideError
from assertkit.contracts.fields import (
    FieldNode,
    ObjectField,
    Polymorphic,
    PolymorphicField,
    ScalarField,
)
from assertkit.core.logging import get_logger

logger = get_logger(__name__)

type Replacement = str | Overrides
type Overrides = Mapping[str, Replacement] | Sequence[tuple[str, Replacement]]


def apply_overrides[TreeT: (tuple[FieldNode, ...], Polymorphic)](tree: TreeT, overrides: Overrides) -> TreeT:
    """Apply overrides to a field tree.

    Args:
        tree: Tuple of fields or a Polymorphic descriptor
        overrides: Mapping or ordered (key, replacement) pairs

    Returns:
        A new tree of the same shape with override text set
    """
    for entry in _entries(overrides):
        try:
            key, replacement = _validate(entry)
            tree = _apply(tree, key, replacement)
        except MalformedOverrideError as exc:
            logger.warning("Ignoring malformed override", entry=repr(exc.entry), reason=exc.reason)
    return tree


def _entries(overrides: Overrides) -> Iterator[Any]:
    if isinstance(overrides, Mapping):
        yield from overrides.items()
    elif isinstance(overrides, str | bytes) or not isinstance(overrides, Sequence):
        logger.warning("Ignoring malformed override", entry=repr(overrides), reason="not a mapping or sequence of pairs")
    else:
        yield from overrides


def _validate(entry: Any) -> tuple[str, Replacement]:
    if not isinstance(entry, tuple | list) or len(entry) != 2:
        raise MalformedOverrideError(entry, "expected a (key, replacement) pair")
    key, replacement = entry
    if not isinstance(key, str) or not key or any(not part for part in key.split(".")):
        raise MalformedOverrideError(entry, "key must be a field name or dotted path")
    if not isinstance(replacement, str | Mapping | list | tuple):
        raise MalformedOverrideError(entry, f"replacement must be text or nested overrides, got {type(replacement).__name__}")
    return key, replacement


def _apply[TreeT: (tuple[FieldNode, ...], Polymorphic)](tree: TreeT, key: str, replacement: Replacement) -> TreeT:
    head, _, rest = key.partition(".")
    if rest:
        replacement = [(rest, replacement)]

    if isinstance(tree, Polymorphic):
        return Polymorphic(
            shared=_apply(tree.shared, head, replacement),
            per_implementor=tuple(
                (type_name, _apply(fields, head, replacement)) for type_name, fields in tree.per_implementor
            ),
        )
    return tuple(_override_node(node, replacement) if node.name == head else node for node in tree)


def _override_node(node: FieldNode, replacement: Replacement) -> FieldNode:
    if isinstance(replacement, str):
        return dataclasses.replace(node, text=replacement)

    match node:
        case ScalarField():
            # Scalars have nothing to apply nested overrides to
            return node
        case ObjectField():
            return dataclasses.replace(node, children=apply_overrides(node.children, replacement))
        case PolymorphicField():
            return dataclasses.replace(node, selection=apply_overrides(node.selection, replacement))
        case _:
            raise TypeError(f"Not a field node: {node!r}")
