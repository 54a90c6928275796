"""Tests for normalize: index-shaped mapping detection and recursive restoration.

Covers:
- Index-shape detection: contiguous, gapped, empty, unordered, non-canonical keys
- Integer (not lexical) ordering once indices reach two digits
- Recursive application through mappings and sequences at any depth
- Scalar identity, input immutability, idempotence
- Deep nesting handled without native recursion
"""

from __future__ import annotations

import copy
import sys
from typing import Any

import pytest

from datafmt.tree.normalizer import index_of, is_index_shaped, normalize

# ---------------------------------------------------------------------------
# index_of
# ---------------------------------------------------------------------------


class TestIndexOf:
    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("0", 0),
            ("7", 7),
            ("10", 10),
            ("123456789012345678901", 123456789012345678901),
        ],
    )
    def test_canonical_keys(self, key: str, expected: int) -> None:
        assert index_of(key) == expected

    @pytest.mark.parametrize(
        "key",
        ["", "01", "00", "+2", "-1", " 1", "1 ", "1.0", "1e3", "one", "٣", "²"],
    )
    def test_non_canonical_keys(self, key: str) -> None:
        assert index_of(key) is None

    def test_non_string_keys_are_not_indices(self) -> None:
        assert index_of(0) is None
        assert index_of(True) is None

    @pytest.mark.skipif(
        sys.get_int_max_str_digits() == 0, reason="no int digit limit"
    )
    def test_key_beyond_int_digit_limit(self) -> None:
        assert index_of("1" * (sys.get_int_max_str_digits() + 1)) is None


# ---------------------------------------------------------------------------
# is_index_shaped
# ---------------------------------------------------------------------------


class TestIsIndexShaped:
    def test_contiguous_keys(self) -> None:
        assert is_index_shaped({"0": "a", "1": "b", "2": "c"})

    def test_single_zero_key(self) -> None:
        assert is_index_shaped({"0": "a"})

    def test_empty_mapping_is_not_index_shaped(self) -> None:
        assert not is_index_shaped({})

    def test_gap(self) -> None:
        assert not is_index_shaped({"0": "a", "2": "c"})

    def test_not_starting_at_zero(self) -> None:
        assert not is_index_shaped({"1": "a", "2": "b"})

    def test_mixed_keys(self) -> None:
        assert not is_index_shaped({"0": "a", "name": "b"})

    def test_leading_zero_key(self) -> None:
        assert not is_index_shaped({"0": "a", "01": "b"})


# ---------------------------------------------------------------------------
# Index-shape restoration
# ---------------------------------------------------------------------------


class TestIndexShapeDetection:
    def test_contiguous_mapping_becomes_list(self) -> None:
        assert normalize({"0": "a", "1": "b", "2": "c"}) == ["a", "b", "c"]

    def test_gap_stays_mapping(self) -> None:
        assert normalize({"0": "a", "2": "c"}) == {"0": "a", "2": "c"}

    def test_empty_mapping_stays_mapping(self) -> None:
        result = normalize({})
        assert result == {}
        assert isinstance(result, dict)

    def test_empty_list_stays_list(self) -> None:
        result = normalize([])
        assert result == []
        assert isinstance(result, list)

    def test_order_follows_integer_value_not_insertion(self) -> None:
        assert normalize({"1": "a", "0": "b"}) == ["b", "a"]

    def test_leading_zero_key_stays_mapping(self) -> None:
        assert normalize({"01": "a"}) == {"01": "a"}

    def test_signed_key_stays_mapping(self) -> None:
        assert normalize({"0": "a", "+1": "b"}) == {"0": "a", "+1": "b"}

    def test_numeric_not_lexical_order(self) -> None:
        """Keys "10" and "11" follow "2".."9" despite sorting first lexically."""
        mapping = {str(i): i for i in range(12)}
        # Insert in lexical order to make sure nothing relies on it
        lexical = {k: mapping[k] for k in sorted(mapping)}
        assert list(lexical)[:4] == ["0", "1", "10", "11"]
        assert normalize(lexical) == list(range(12))

    def test_non_string_keys_stay_mapping(self) -> None:
        value: Any = {0: "a", 1: "b"}
        assert normalize(value) == {0: "a", 1: "b"}

    def test_very_long_digit_key_stays_mapping(self) -> None:
        key = "1" * 5000
        assert not is_index_shaped({key: 1})
        assert normalize({key: 1, "0": 2}) == {key: 1, "0": 2}


# ---------------------------------------------------------------------------
# Recursion
# ---------------------------------------------------------------------------


class TestRecursiveApplication:
    def test_nested_in_mapping(self) -> None:
        assert normalize({"x": {"0": "a", "1": "b"}}) == {"x": ["a", "b"]}

    def test_nested_in_list(self) -> None:
        assert normalize([{"0": 1}, {"a": {"0": 2}}]) == [[1], {"a": [2]}]

    def test_nested_inside_restored_list(self) -> None:
        value = {"0": {"0": "a", "1": "b"}, "1": {"k": {"0": None}}}
        assert normalize(value) == [["a", "b"], {"k": [None]}]

    def test_non_index_mapping_children_are_normalized(self) -> None:
        value = {"0": {"0": "a"}, "2": "c"}
        assert normalize(value) == {"0": ["a"], "2": "c"}

    def test_tuple_becomes_list(self) -> None:
        assert normalize(("a", {"0": "b"})) == ["a", ["b"]]

    def test_mapping_key_order_preserved(self) -> None:
        value = {"z": 1, "a": 2, "m": 3}
        assert list(normalize(value)) == ["z", "a", "m"]  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Scalars, immutability, idempotence
# ---------------------------------------------------------------------------


class TestScalarsAndPurity:
    @pytest.mark.parametrize(
        "scalar", [None, True, False, 0, 1, -3, 2.5, "", "0", "text"]
    )
    def test_scalar_identity(self, scalar: Any) -> None:
        assert normalize(scalar) is scalar

    def test_bool_is_not_turned_into_number(self) -> None:
        result = normalize({"flag": True})
        assert result == {"flag": True}
        assert result["flag"] is True  # type: ignore[index]

    def test_int_float_distinction_preserved(self) -> None:
        result = normalize({"0": 1, "1": 1.0})
        assert result == [1, 1.0]
        assert type(result[0]) is int  # type: ignore[index]
        assert type(result[1]) is float  # type: ignore[index]

    def test_input_not_mutated(self) -> None:
        value = {"x": {"0": "a", "1": ["b", {"0": "c"}]}}
        snapshot = copy.deepcopy(value)
        normalize(value)
        assert value == snapshot

    def test_result_containers_are_new(self) -> None:
        inner = {"a": 1}
        value = {"x": inner}
        result = normalize(value)
        assert result is not value
        assert result["x"] is not inner  # type: ignore[index]

    @pytest.mark.parametrize(
        "value",
        [
            {"0": "a", "1": "b"},
            {"x": {"1": {"0": "a"}, "0": []}},
            [{"0": {}}, {"01": {"0": 1}}],
            {"0": "a", "2": {"0": "b"}},
            {},
            "scalar",
        ],
    )
    def test_idempotent(self, value: Any) -> None:
        once = normalize(value)
        assert normalize(once) == once

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(TypeError, match="Unsupported value type"):
            normalize({"x": {1, 2}})  # type: ignore[dict-item]

    def test_self_containing_list_raises(self) -> None:
        cyclic: list[Any] = []
        cyclic.append(cyclic)
        with pytest.raises(ValueError, match="recursive"):
            normalize(cyclic)

    def test_shared_subtree_is_not_a_cycle(self) -> None:
        shared = {"0": "a"}
        assert normalize([shared, shared]) == [["a"], ["a"]]


class TestDeepNesting:
    def test_depth_beyond_recursion_limit(self) -> None:
        depth = sys.getrecursionlimit() * 3
        value: Any = "leaf"
        for _ in range(depth):
            value = {"0": value}

        result = normalize(value)

        for _ in range(depth):
            assert isinstance(result, list)
            assert len(result) == 1
            result = result[0]
        assert result == "leaf"
