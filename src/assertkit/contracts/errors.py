# src/assertkit/contracts/errors.py
"""Exceptions raised by assertkit.

AssertionFailure is the only exception test code is expected to see from a
failing assertion helper. The schema errors are caller errors raised by the
GraphQL field generator.
"""

from typing import Any


class AssertionFailure(AssertionError):
    """Raised when an assertion helper fails.

    Subclasses AssertionError so pytest reports it as a regular test failure.
    The diff sides are shrunk to only the elements that did not match, which
    keeps failure output readable for large collections.

    Attributes:
        message: Human-readable failure description
        left: Left-hand side of the comparison (usually the diff of the actual value)
        right: Right-hand side of the comparison (usually the diff of the expected value)
        args_: The original arguments passed to the assertion
    """

    def __init__(
        self,
        message: str,
        *,
        left: Any = None,
        right: Any = None,
        args_: tuple[Any, ...] = (),
    ) -> None:
        self.message = message
        self.left = left
        self.right = right
        self.args_ = args_
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.message}\nleft:  {self.left!r}\nright: {self.right!r}"


class SchemaLookupError(LookupError):
    """Raised when a schema has no entry for a referenced type.

    Fatal to the current resolve call. Not retried or recovered internally.

    Attributes:
        type_name: The identifier that could not be found
    """

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Type '{type_name}' not found in schema")


class MalformedOverrideError(ValueError):
    """Raised for an override entry that cannot be interpreted.

    apply_overrides() treats this as a no-op: it is caught, logged and the
    entry is skipped.
    """

    def __init__(self, entry: Any, reason: str) -> None:
        self.entry = entry
        self.reason = reason
        super().__init__(f"Malformed override {entry!r}: {reason}")
