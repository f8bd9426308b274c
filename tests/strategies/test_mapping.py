"""Tests for MappingStrategy."""

from __future__ import annotations

from collections import OrderedDict
from types import MappingProxyType
from typing import Any

from recursive_assert.config import ComparisonConfig
from recursive_assert.context import AssertionContext
from recursive_assert.engine import ComparisonEngine, ComparisonUnit
from recursive_assert.result import Mismatch, MismatchKind
from recursive_assert.sinks import CollectingSink
from recursive_assert.strategies import MappingStrategy
from recursive_assert.trace.path import FieldPath


def _run(actual: Any, expected: Any, config: ComparisonConfig | None = None) -> CollectingSink:
    sink = CollectingSink()
    unit = ComparisonUnit(actual, expected, FieldPath.root("prices"))
    ComparisonEngine(AssertionContext()).compare(unit, config or ComparisonConfig(), sink)
    return sink


class TestMappingStrategy:
    def test_can_handle(self) -> None:
        strategy = MappingStrategy()
        assert strategy.can_handle(ComparisonUnit(None, {}, FieldPath.root("m")))
        assert strategy.can_handle(ComparisonUnit(None, MappingProxyType({}), FieldPath.root("m")))
        assert not strategy.can_handle(ComparisonUnit(None, [("a", 1)], FieldPath.root("m")))

    def test_equal(self) -> None:
        assert _run({"EUR": 1, "USD": 2}, {"USD": 2, "EUR": 1}).mismatches == ()

    def test_mapping_types_are_interchangeable(self) -> None:
        assert _run(OrderedDict(a=1), {"a": 1}).mismatches == ()

    def test_value_mismatch_path(self) -> None:
        sink = _run({"EUR": 1}, {"EUR": 2})
        assert sink.mismatches == (Mismatch("prices[EUR]", "expected <2> but was <1>"),)

    def test_missing_key(self) -> None:
        sink = _run({}, {"EUR": 1})
        assert sink.mismatches == (
            Mismatch("prices", "object with key <EUR> is missing", MismatchKind.MISSING_KEY),
        )

    def test_unexpected_key(self) -> None:
        sink = _run({"EUR": 1, "USD": 2}, {"EUR": 1})
        assert sink.mismatches == (
            Mismatch("prices", "unexpected object with key <USD>", MismatchKind.UNEXPECTED_KEY),
        )

    def test_key_differences_ignore_size_break(self) -> None:
        sink = _run({"a": 1, "b": 2}, {"a": 5})
        assert [m.kind for m in sink.mismatches] == [MismatchKind.VALUE, MismatchKind.UNEXPECTED_KEY]

    def test_nested_values(self) -> None:
        sink = _run({"a": {"b": [1, 2]}}, {"a": {"b": [1, 3]}})
        assert [m.path for m in sink.mismatches] == ["prices[a][b][1]"]

    def test_none_value_vs_missing_key(self) -> None:
        sink = _run({"a": None}, {"a": None, "b": None})
        assert [m.kind for m in sink.mismatches] == [MismatchKind.MISSING_KEY]

    def test_non_string_keys(self) -> None:
        sink = _run({1: "x", (2, 3): "y"}, {1: "x", (2, 3): "z"})
        assert [m.path for m in sink.mismatches] == ["prices[(2, 3)]"]

    def test_incompatible_actual_shape(self) -> None:
        sink = _run([("EUR", 1)], {"EUR": 1})
        assert [(m.path, m.kind) for m in sink.mismatches] == [("prices", MismatchKind.VALUE)]

    def test_ignored_expected_key(self) -> None:
        config = ComparisonConfig(ignored_path_patterns={"prices[EUR]"})
        assert _run({"EUR": 9}, {"EUR": 1}, config).mismatches == ()
        assert _run({}, {"EUR": 1}, config).mismatches == ()

    def test_ignored_unexpected_key(self) -> None:
        config = ComparisonConfig(ignored_path_patterns={"prices[USD]"})
        assert _run({"EUR": 1, "USD": 2}, {"EUR": 1}, config).mismatches == ()

    def test_bare_pattern_ignores_every_key(self) -> None:
        config = ComparisonConfig(ignored_path_patterns={"prices"})
        assert _run({"EUR": 1, "GBP": 3}, {"EUR": 2, "USD": 2}, config).mismatches == ()
