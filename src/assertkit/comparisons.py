# src/assertkit/comparisons.py
"""Order-independent comparisons that return diffs.

Every function here returns the parts of its inputs that did not match,
rather than a bare boolean. The assertion helpers put those diffs in their
failure messages, so a failing comparison of two 500-element lists shows the
two elements that differ instead of both lists.

Comparison functions are always called as comparison(left_element,
right_element), so asymmetric comparisons (e.g. "left is a prefix of
right") behave predictably.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Mapping, Sequence
from typing import Any

type Comparison = Callable[[Any, Any], bool]

# Sentinel for "key not present", distinct from a stored None
_MISSING = object()


def compare(left: Sequence[Any], right: Sequence[Any], comparison: Comparison = operator.eq) -> list[Any]:
    """Elements of ``left`` with no match in ``right``.

    For each element of ``left`` in order, the first not-yet-matched element
    of ``right`` accepted by ``comparison`` is consumed. Elements of ``left``
    that find no remaining match are returned, in their original order.

    Example:
        >>> compare([1, 2, 2, 3], [2, 1, 4])
        [2, 3]
    """
    remaining = list(right)
    unmatched: list[Any] = []
    for left_element in left:
        for index, right_element in enumerate(remaining):
            if comparison(left_element, right_element):
                del remaining[index]
                break
        else:
            unmatched.append(left_element)
    return unmatched


def compare_lists(
    left: Sequence[Any],
    right: Sequence[Any],
    comparison: Comparison = operator.eq,
) -> tuple[list[Any], list[Any], bool]:
    """Compare two lists ignoring order.

    Returns:
        (left_diff, right_diff, equal) where left_diff holds elements of
        ``left`` unmatched in ``right`` and vice versa.
    """
    left_diff = compare(left, right, comparison)
    right_diff = compare(right, left, lambda right_element, left_element: comparison(left_element, right_element))
    return left_diff, right_diff, not left_diff and not right_diff


def compare_maps(
    left: Mapping[Any, Any],
    right: Mapping[Any, Any],
    comparison: Comparison = operator.eq,
) -> tuple[dict[Any, Any], dict[Any, Any], bool]:
    """Compare two mappings item by item.

    ``comparison`` receives (key, value) pairs.
    """
    left_diff, right_diff, equal = compare_lists(list(left.items()), list(right.items()), comparison)
    return dict(left_diff), dict(right_diff), equal


def maps_equal(
    left: Mapping[Any, Any],
    right: Mapping[Any, Any],
    keys: Sequence[Any] | Mapping[Any, Any] | Callable[[Mapping[Any, Any], Mapping[Any, Any]], Mapping[Any, Any]] | None = None,
) -> tuple[dict[Any, Any], dict[Any, Any], bool]:
    """Compare two mappings, optionally only at some keys.

    ``keys`` may be:
    - None: compare every item
    - a sequence of keys: compare the values at those keys with ``==``
    - a mapping of key -> None (``==``), a comparison function, or a nested
      set of rules of the same forms for nested mappings
    - a function(left, right) returning the diff of left against right;
      it is called both ways round

    Returns:
        (left_diff, right_diff, equal) where each diff maps the differing keys
        to that side's value (or nested diff).

    Example:
        >>> maps_equal({"a": 1, "b": 2}, {"a": 1, "b": 3}, ["a"])
        ({}, {}, True)
    """
    if keys is None:
        diff_fn = _item_diff
    elif callable(keys) and not isinstance(keys, Mapping):
        diff_fn = keys
    else:
        rules = keys

        def diff_fn(a: Mapping[Any, Any], b: Mapping[Any, Any]) -> Mapping[Any, Any]:
            return _keyed_diff(a, b, rules)

    left_diff = dict(diff_fn(left, right))
    right_diff = dict(diff_fn(right, left))
    return left_diff, right_diff, not left_diff and not right_diff


def _item_diff(a: Mapping[Any, Any], b: Mapping[Any, Any]) -> dict[Any, Any]:
    return {key: value for key, value in a.items() if b.get(key, _MISSING) != value}


def _keyed_diff(a: Mapping[Any, Any], b: Mapping[Any, Any], rules: Sequence[Any] | Mapping[Any, Any]) -> dict[Any, Any]:
    entries = rules.items() if isinstance(rules, Mapping) else ((key, None) for key in rules)
    diff: dict[Any, Any] = {}
    for key, rule in entries:
        if key not in a:
            continue
        value = a[key]
        other = b.get(key, _MISSING)
        if rule is None:
            if value != other:
                diff[key] = value
        elif callable(rule):
            if not rule(value, other):
                diff[key] = value
        else:
            if not isinstance(value, Mapping) or not isinstance(other, Mapping):
                if value != other:
                    diff[key] = value
                continue
            nested, _, equal = maps_equal(value, other, rule)
            if not equal:
                diff[key] = nested
    return diff


def deep_equal(left: Any, right: Any) -> bool:
    """Nested equality ignoring mapping key order and list element order.

    Mappings must have the same keys with deep-equal values; lists and tuples
    must contain deep-equal elements in any order; everything else uses ``==``.
    Booleans only equal booleans, so ``True`` does not match ``1``.
    """
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        return left.keys() == right.keys() and all(deep_equal(value, right[key]) for key, value in left.items())
    if isinstance(left, list | tuple) and isinstance(right, list | tuple):
        return len(left) == len(right) and compare_lists(left, right, deep_equal)[2]
    if isinstance(left, bool) is not isinstance(right, bool):
        return False
    return bool(left == right)
