# tests/test_comparisons.py
"""Tests for diff-returning comparisons."""

from assertkit.comparisons import compare, compare_lists, compare_maps, deep_equal, maps_equal


class TestCompare:
    def test_returns_unmatched_left_elements(self) -> None:
        assert compare([1, 2, 2, 3], [2, 1, 4]) == [2, 3]

    def test_equal_lists(self) -> None:
        assert compare([1, 2, 3], [3, 2, 1]) == []

    def test_matched_elements_are_consumed(self) -> None:
        """Each right element matches at most one left element."""
        assert compare(["a", "a"], ["a"]) == ["a"]

    def test_comparison_receives_left_then_right(self) -> None:
        calls: list[tuple[str, str]] = []

        def prefix_of(left: str, right: str) -> bool:
            calls.append((left, right))
            return right.startswith(left)

        assert compare(["ab"], ["abc"], prefix_of) == []
        assert calls == [("ab", "abc")]

    def test_custom_comparison(self) -> None:
        assert compare(["dog"], ["cat"], lambda a, b: len(a) == len(b)) == []


class TestCompareLists:
    def test_both_diffs(self) -> None:
        left_diff, right_diff, equal = compare_lists([1, 2, 4], [1, 3, 2])

        assert left_diff == [4]
        assert right_diff == [3]
        assert equal is False

    def test_equal(self) -> None:
        assert compare_lists([{"a": 1}, {"b": 2}], [{"b": 2}, {"a": 1}]) == ([], [], True)

    def test_asymmetric_comparison_keeps_argument_order(self) -> None:
        """The right-hand diff still calls comparison(left_el, right_el)."""

        def prefix_of(left: str, right: str) -> bool:
            return right.startswith(left)

        left_diff, right_diff, equal = compare_lists(["ab", "x"], ["abc", "y"], prefix_of)

        assert left_diff == ["x"]
        assert right_diff == ["y"]
        assert not equal


class TestCompareMaps:
    def test_differing_items(self) -> None:
        assert compare_maps({"a": 1, "b": 2}, {"a": 1, "b": 3}) == ({"b": 2}, {"b": 3}, False)

    def test_equal_maps(self) -> None:
        assert compare_maps({"a": 1}, {"a": 1}) == ({}, {}, True)


class TestMapsEqual:
    def test_all_keys(self) -> None:
        assert maps_equal({"a": 1, "b": 2}, {"a": 1, "b": 3}) == ({"b": 2}, {"b": 3}, False)

    def test_missing_key_differs_from_none(self) -> None:
        assert maps_equal({"a": None}, {}) == ({"a": None}, {}, False)

    def test_selected_keys(self) -> None:
        assert maps_equal({"a": 1, "b": 2}, {"a": 1, "b": 3}, ["a"]) == ({}, {}, True)

    def test_comparison_per_key(self) -> None:
        keys = {"name": str.__eq__, "age": lambda a, b: abs(a - b) <= 1}

        assert maps_equal({"name": "x", "age": 30}, {"name": "x", "age": 31}, keys)[2]

    def test_nested_rules(self) -> None:
        left = {"user": {"id": 1, "seen": "today"}, "kind": "visit"}
        right = {"user": {"id": 1, "seen": "yesterday"}, "kind": "visit"}

        assert maps_equal(left, right, {"user": ["id"], "kind": None}) == ({}, {}, True)
        assert maps_equal(left, right, {"user": ["seen"]}) == (
            {"user": {"seen": "today"}},
            {"user": {"seen": "yesterday"}},
            False,
        )

    def test_callable_keys(self) -> None:
        def only_ids(a: dict, b: dict) -> dict:
            return {key: value for key, value in a.items() if key == "id" and b.get(key) != value}

        assert maps_equal({"id": 1, "x": 1}, {"id": 1, "x": 2}, only_ids) == ({}, {}, True)
        assert maps_equal({"id": 1}, {"id": 2}, only_ids) == ({"id": 1}, {"id": 2}, False)


class TestDeepEqual:
    def test_ignores_key_order(self) -> None:
        assert deep_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})

    def test_ignores_list_order_at_any_depth(self) -> None:
        left = {"pets": [{"name": "Miki", "tags": ["a", "b"]}, {"name": "Rex"}]}
        right = {"pets": [{"name": "Rex"}, {"name": "Miki", "tags": ["b", "a"]}]}

        assert deep_equal(left, right)

    def test_multiplicity_matters(self) -> None:
        assert not deep_equal([1, 1, 2], [1, 2, 2])

    def test_extra_key(self) -> None:
        assert not deep_equal({"a": 1}, {"a": 1, "b": 2})

    def test_scalars(self) -> None:
        assert deep_equal(1, 1)
        assert not deep_equal("1", 1)

    def test_booleans_do_not_equal_integers(self) -> None:
        assert not deep_equal({"a": True}, {"a": 1})
        assert not deep_equal([0], [False])
        assert not deep_equal(1.0, True)
        assert deep_equal(True, True)
        assert deep_equal({"ok": [False, True]}, {"ok": [True, False]})
