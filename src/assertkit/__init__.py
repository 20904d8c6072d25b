"""
assertkit: Test assertions with readable diffs, plus GraphQL document generation.

Order-independent list/map/struct assertions, file-change and mailbox
assertions, and a schema-driven generator that selects every field of a
GraphQL type down to a bounded depth.

Usage:
    from assertkit import assert_lists_equal, assert_structs_equal
    from assertkit.graphql import GraphQLCase
"""

from assertkit.assertions import (
    assert_all_have_value,
    assert_changes_file,
    assert_creates_file,
    assert_deletes_file,
    assert_lists_equal,
    assert_map_in_list,
    assert_maps_equal,
    assert_receive_exactly,
    assert_receive_only,
    assert_struct_in_list,
    assert_structs_equal,
)
from assertkit.contracts.errors import AssertionFailure
from assertkit.validation import assert_validation_error

__version__ = "0.4.0"

__all__ = [
    "AssertionFailure",
    "__version__",
    "assert_all_have_value",
    "assert_changes_file",
    "assert_creates_file",
    "assert_deletes_file",
    "assert_lists_equal",
    "assert_map_in_list",
    "assert_maps_equal",
    "assert_receive_exactly",
    "assert_receive_only",
    "assert_struct_in_list",
    "assert_structs_equal",
    "assert_validation_error",
]
