"""Tests for ignore-pattern matching against traced paths."""

from __future__ import annotations

import pytest

from recursive_assert.trace.matcher import matches, matches_any, matches_none
from recursive_assert.trace.path import FieldPath

# ---------------------------------------------------------------------------
# matches
# ---------------------------------------------------------------------------


class TestMatches:
    def test_identical_path(self) -> None:
        assert matches("Order.customer.name", FieldPath("Order.customer.name"))

    def test_different_segment(self) -> None:
        assert not matches("Order.customer.name", FieldPath("Order.customer.email"))

    def test_segment_count_must_be_equal(self) -> None:
        assert not matches("Order.customer", FieldPath("Order.customer.name"))
        assert not matches("Order.customer.name.first", FieldPath("Order.customer.name"))

    @pytest.mark.parametrize(
        "trace",
        [
            "Order.items[0].name",
            "Order.items[12].name",
            "Order.items[id=7].name",
            "Order.items[EUR].name",
        ],
    )
    def test_bare_segment_matches_any_suffix(self, trace: str) -> None:
        assert matches("Order.items.name", FieldPath(trace))

    def test_suffixed_pattern_matches_only_exact_text(self) -> None:
        assert matches("Order.items[0].name", FieldPath("Order.items[0].name"))
        assert not matches("Order.items[0].name", FieldPath("Order.items[1].name"))
        assert not matches("Order.items[0].name", FieldPath("Order.items.name"))

    def test_bare_segment_is_not_a_prefix_match(self) -> None:
        assert not matches("Order.item.name", FieldPath("Order.items[0].name"))

    def test_suffix_must_be_bracketed(self) -> None:
        assert not matches("Order.items.name", FieldPath("Order.items_x.name"))

    def test_nested_index_suffix(self) -> None:
        assert matches("grid.cells", FieldPath("grid.cells[0][1]"))

    def test_root_only(self) -> None:
        assert matches("list", FieldPath("list[3]"))
        assert not matches("list", FieldPath("list[3].x"))


# ---------------------------------------------------------------------------
# matches_any / matches_none
# ---------------------------------------------------------------------------


class TestMatchesAnyNone:
    def test_empty_patterns(self) -> None:
        path = FieldPath("Order.id")
        assert not matches_any([], path)
        assert matches_none([], path)

    def test_one_of_several(self) -> None:
        path = FieldPath("Order.id")
        patterns = frozenset({"Order.name", "Order.id"})
        assert matches_any(patterns, path)
        assert not matches_none(patterns, path)

    def test_no_match(self) -> None:
        assert matches_none({"Order.name"}, FieldPath("Order.id"))

    def test_keys_with_dots_are_split(self) -> None:
        # No escaping: the "." inside the key adds a segment.
        path = FieldPath("config").key("a.b")
        assert not matches("config", path)
        assert matches("config[a.b]", path)
