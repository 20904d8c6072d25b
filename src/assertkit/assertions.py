# src/assertkit/assertions.py
"""Assertion helpers with readable failure messages.

Every helper returns True on success and raises AssertionFailure (an
AssertionError) on failure. Failures carry ``left`` and ``right`` shrunk to
the parts that did not match:

    >>> assert_lists_equal([1, 2, 3], [3, 2, 1])
    True

    assert_lists_equal([1, 2, 4], [1, 3, 2])
    # AssertionFailure: Comparison of each element with `==` failed!
    # left:  [4]
    # right: [3]

File and mailbox helpers:

    with assert_creates_file(tmp_path / "out.txt"):
        export(tmp_path / "out.txt")

    assert_receive_exactly(events, ["started", {"status": "done"}])
"""

from __future__ import annotations

import operator
import queue
import re
from collections.abc import Callable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from assertkit.comparisons import Comparison, compare_lists
from assertkit.contracts.errors import AssertionFailure
from assertkit.core.config import get_settings
from assertkit.predicates import map_in_list, matches, structs_equal

_MISSING = object()

type ContentComparison = str | re.Pattern[str] | Callable[[str], bool]


# =============================================================================
# Collections
# =============================================================================


def assert_lists_equal(
    left: Sequence[Any],
    right: Sequence[Any],
    comparison: Comparison | None = None,
    message: str | None = None,
) -> bool:
    """Assert two lists hold matching elements, ignoring order.

    Args:
        left: Actual list
        right: Expected list
        comparison: Element comparison called as comparison(left_el, right_el)
        message: Failure message override
    """
    left_diff, right_diff, equal = compare_lists(left, right, comparison or operator.eq)
    if not equal:
        if message is None:
            shown = "==" if comparison is None else _describe(comparison)
            message = f"Comparison of each element with `{shown}` failed!"
        raise AssertionFailure(message, left=left_diff, right=right_diff, args_=(left, right))
    return True


def assert_map_in_list(mapping: Mapping[Any, Any], items: Sequence[Mapping[Any, Any]], keys: Sequence[Any]) -> bool:
    """Assert some mapping in ``items`` has the same values as ``mapping`` at ``keys``."""
    if not map_in_list(mapping, items, keys):
        reduced = [{key: item[key] for key in keys if key in item} for item in items]
        raise AssertionFailure(
            f"Map matching the values for keys {list(keys)!r} not found",
            left=mapping,
            right=reduced,
            args_=(mapping, items),
        )
    return True


def assert_maps_equal(left: Mapping[Any, Any], right: Mapping[Any, Any], keys: Sequence[Any]) -> bool:
    """Assert two mappings have equal values at ``keys``."""
    left_diff = {key: left[key] for key in keys if key in left and right.get(key, _MISSING) != left[key]}
    right_diff = {key: right[key] for key in keys if key in right and left.get(key, _MISSING) != right[key]}
    if left_diff or right_diff:
        raise AssertionFailure(
            f"Values for {list(keys)!r} not equal!",
            left=left_diff,
            right=right_diff,
            args_=(left, right),
        )
    return True


def assert_struct_in_list(obj: Any, items: Sequence[Any], attrs: Sequence[str]) -> bool:
    """Assert some object in ``items`` has the type of ``obj`` and equal ``attrs``."""
    if not any(structs_equal(obj, item, attrs) for item in items):
        raise AssertionFailure(
            f"Struct matching the values for keys {list(attrs)!r} not found",
            left=_attrs_of(obj, attrs),
            right=[_attrs_of(item, attrs) for item in items],
            args_=(obj, items),
        )
    return True


def assert_structs_equal(left: Any, right: Any, attrs: Sequence[str]) -> bool:
    """Assert two objects are of the same type with equal ``attrs``."""
    if type(left) is not type(right):
        raise AssertionFailure(
            f"Expected objects of the same type, got {type(left).__name__} and {type(right).__name__}",
            left=left,
            right=right,
            args_=(left, right),
        )
    left_values = _attrs_of(left, attrs)
    right_values = _attrs_of(right, attrs)
    differing = [attr for attr in attrs if left_values.get(attr, _MISSING) != right_values.get(attr, _MISSING)]
    # An attribute neither object has is not evidence of equality
    missing = [attr for attr in attrs if attr not in left_values and attr not in right_values]
    if differing or missing:
        raise AssertionFailure(
            f"Values for {differing + missing!r} not equal!",
            left={attr: left_values[attr] for attr in differing if attr in left_values},
            right={attr: right_values[attr] for attr in differing if attr in right_values},
            args_=(left, right),
        )
    return True


def assert_all_have_value(items: Sequence[Any], key: str, value: Any) -> bool:
    """Assert every mapping (by key) or object (by attribute) in ``items`` has ``key`` == ``value``."""
    offenders = [item for item in items if _value_of(item, key) != value]
    if offenders:
        raise AssertionFailure(
            f"Not all items have {key!r} equal to {value!r}",
            left=offenders,
            right=value,
            args_=(items, key, value),
        )
    return True


# =============================================================================
# Files
# =============================================================================


@contextmanager
def assert_changes_file(path: str | Path, comparison: ContentComparison) -> Iterator[Path]:
    """Assert the block changes the file at ``path`` to match ``comparison``.

    ``comparison`` is a substring, a compiled regex, or a predicate over the
    file's text. Fails before the block runs if the file already matches;
    a file that does not exist yet may be created by the block.
    """
    path = Path(path)
    before = path.read_text() if path.exists() else None
    if before is not None and _content_matches(before, comparison):
        raise AssertionFailure(f"File {path} already matches before the change", left=before, right=comparison)

    yield path

    if not path.exists():
        raise AssertionFailure(f"File {path} does not exist", left=None, right=comparison)
    after = path.read_text()
    if after == before:
        raise AssertionFailure(f"File {path} was not changed", left=after, right=comparison)
    if not _content_matches(after, comparison):
        raise AssertionFailure(f"File {path} does not match the expected content", left=after, right=comparison)


@contextmanager
def assert_creates_file(path: str | Path) -> Iterator[Path]:
    """Assert the block creates the file at ``path``."""
    path = Path(path)
    if path.exists():
        raise AssertionFailure(f"File {path} existed before the block ran", left=str(path), right=None)

    yield path

    if not path.exists():
        raise AssertionFailure(f"File {path} was not created", left=None, right=str(path))


@contextmanager
def assert_deletes_file(path: str | Path) -> Iterator[Path]:
    """Assert the block deletes the file at ``path``."""
    path = Path(path)
    if not path.exists():
        raise AssertionFailure(f"File {path} did not exist before the block ran", left=None, right=str(path))

    yield path

    if path.exists():
        raise AssertionFailure(f"File {path} was not deleted", left=str(path), right=None)


# =============================================================================
# Mailboxes
# =============================================================================


def assert_receive_only(mailbox: queue.Queue[Any], pattern: Any, timeout: float | None = None) -> Any:
    """Assert the next message matches ``pattern`` and nothing else is queued.

    Returns:
        The matched message
    """
    return assert_receive_exactly(mailbox, [pattern], timeout)[0]


def assert_receive_exactly(mailbox: queue.Queue[Any], patterns: Sequence[Any], timeout: float | None = None) -> list[Any]:
    """Assert the next messages match ``patterns`` in order and nothing follows.

    Patterns use predicates.matches(), so ``unittest.mock.ANY`` matches any
    message.

    Args:
        mailbox: Queue the code under test puts messages on
        patterns: Expected message patterns, in order
        timeout: Seconds to wait for each message (default: settings.mailbox_timeout_sec)

    Returns:
        The received messages
    """
    if timeout is None:
        timeout = get_settings().mailbox_timeout_sec

    received: list[Any] = []
    for pattern in patterns:
        try:
            message = mailbox.get(timeout=timeout)
        except queue.Empty:
            raise AssertionFailure(
                f"No message matching {pattern!r} received within {timeout}s",
                left=received,
                right=list(patterns),
            ) from None
        received.append(message)
        if not matches(pattern, message):
            raise AssertionFailure("Received message did not match the expected pattern", left=message, right=pattern)

    extra = _drain(mailbox)
    if extra:
        raise AssertionFailure("Received unexpected messages after the expected ones", left=extra, right=list(patterns))
    return received


# =============================================================================
# Helpers
# =============================================================================


def _describe(comparison: Comparison) -> str:
    return getattr(comparison, "__qualname__", repr(comparison))


def _attrs_of(obj: Any, attrs: Sequence[str]) -> dict[str, Any]:
    return {attr: getattr(obj, attr) for attr in attrs if hasattr(obj, attr)}


def _value_of(item: Any, key: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(key, _MISSING)
    return getattr(item, key, _MISSING)


def _content_matches(content: str, comparison: ContentComparison) -> bool:
    if isinstance(comparison, str):
        return comparison in content
    if isinstance(comparison, re.Pattern):
        return comparison.search(content) is not None
    return bool(comparison(content))


def _drain(mailbox: queue.Queue[Any]) -> list[Any]:
    drained: list[Any] = []
    while True:
        try:
            drained.append(mailbox.get_nowait())
        except queue.Empty:
            return drained
