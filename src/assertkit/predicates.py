# src/assertkit/predicates.py
"""Boolean predicates behind the assertion helpers.

Use these directly when a plain True/False is wanted, e.g. inside
``assert any(...)`` or as the comparison for another helper:

    assert lists_equal(left, right, lambda a, b: structs_equal(a, b, ["id"]))
"""

from __future__ import annotations

import operator
import queue
from collections.abc import Mapping, Sequence
from typing import Any

from assertkit.comparisons import Comparison, compare

# Sentinel for "key/attribute not present"; never equal to a real value
_MISSING = object()


def lists_equal(left: Sequence[Any], right: Sequence[Any], comparison: Comparison = operator.eq) -> bool:
    """True if both lists hold matching elements, in any order.

    Example:
        >>> lists_equal([1, 2, 3], [1, 3, 2])
        True
        >>> lists_equal(["dog"], ["cat"], lambda a, b: len(a) == len(b))
        True
    """
    if len(left) != len(right):
        return False
    return not compare(left, right, comparison)


def map_values_equal(
    left: Mapping[Any, Any],
    right: Mapping[Any, Any],
    keys: Sequence[Any],
    *,
    strict: bool = True,
) -> bool:
    """True if both mappings have equal values at ``keys``.

    With strict=True (default) a key missing from both mappings counts as
    unequal. With strict=False two missing values compare equal.
    """
    if strict and not all(key in left and key in right for key in keys):
        return False
    return all(left.get(key, _MISSING) == right.get(key, _MISSING) for key in keys)


def structs_equal(left: Any, right: Any, attrs: Sequence[str]) -> bool:
    """True if both objects are of the same type with equal ``attrs``.

    Comparing objects with ``==`` is brittle when they carry incidental state
    (loaded relations, timestamps). This compares only what matters.
    An object and a mapping with the same values are never equal.
    """
    if type(left) is not type(right):
        return False
    return all(_attr(left, attr) is not _MISSING and _attr(left, attr) == _attr(right, attr) for attr in attrs)


def map_in_list(mapping: Mapping[Any, Any], items: Sequence[Mapping[Any, Any]], keys: Sequence[Any]) -> bool:
    """True if some item of ``items`` has the same values as ``mapping`` at ``keys``."""
    if not all(key in mapping for key in keys):
        return False
    return any(all(item.get(key, _MISSING) == mapping[key] for key in keys) for item in items)


def struct_in_list(obj: Any, items: Sequence[Any], attrs: Sequence[str]) -> bool:
    """True if some item of ``items`` is structs_equal() to ``obj``."""
    return any(structs_equal(obj, item, attrs) for item in items)


def matches(pattern: Any, value: Any) -> bool:
    """Structural match of ``value`` against ``pattern``.

    - mapping patterns match mappings that contain at least the pattern's
      keys, each with a matching value (extra keys are allowed)
    - list/tuple patterns match lists/tuples of the same length element-wise
    - classes match instances via isinstance
    - other callables are predicates called with the value
    - anything else is compared with ``==``, so ``unittest.mock.ANY`` is a
      wildcard

    Example:
        >>> from unittest.mock import ANY
        >>> matches({"dog": {"name": ANY}}, {"dog": {"name": "Miki", "age": 3}})
        True
        >>> matches([str, lambda n: n > 2], ["a", 3])
        True
    """
    if isinstance(pattern, Mapping):
        return isinstance(value, Mapping) and all(key in value and matches(sub, value[key]) for key, sub in pattern.items())
    if isinstance(pattern, list | tuple):
        return (
            isinstance(value, list | tuple)
            and len(pattern) == len(value)
            and all(matches(sub, item) for sub, item in zip(pattern, value, strict=True))
        )
    if isinstance(pattern, type):
        return isinstance(value, pattern)
    if callable(pattern):
        return bool(pattern(value))
    return bool(pattern == value)


def receive_only(mailbox: queue.Queue[Any], pattern: Any, timeout: float = 0.1) -> bool:
    """True if the first message matches ``pattern`` and no other is waiting.

    Waits up to ``timeout`` seconds for the first message. The matched
    message is consumed; anything queued behind it makes the check fail.
    """
    return receive_exactly(mailbox, [pattern], timeout)


def receive_exactly(mailbox: queue.Queue[Any], patterns: Sequence[Any], timeout: float = 0.1) -> bool:
    """True if messages match ``patterns`` in order and nothing follows.

    Waits up to ``timeout`` seconds for each expected message. Consumes the
    messages it checks.
    """
    for pattern in patterns:
        try:
            message = mailbox.get(timeout=timeout)
        except queue.Empty:
            return False
        if not matches(pattern, message):
            return False
    return mailbox.empty()


def _attr(obj: Any, attr: str) -> Any:
    return getattr(obj, attr, _MISSING)
