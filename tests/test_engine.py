"""Tests for ComparisonEngine dispatch."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from recursive_assert.config import ComparisonConfig
from recursive_assert.context import AssertionContext
from recursive_assert.engine import ComparisonEngine, ComparisonUnit
from recursive_assert.exceptions import StrategyChainError
from recursive_assert.sinks import CollectingSink
from recursive_assert.strategies import ScalarStrategy, StrategyChain
from recursive_assert.trace.path import FieldPath


class RecordingStrategy:
    """Accepts every node and records the paths it saw."""

    def __init__(self, name: str = "recording") -> None:
        self.name = name
        self.seen: list[str] = []

    def can_handle(self, unit: ComparisonUnit) -> bool:
        return True

    def compare(self, unit: ComparisonUnit, config: Any, sink: Any, engine: Any) -> None:
        self.seen.append(str(unit.path))


class CaseInsensitiveStrategy:
    name = "case-insensitive"

    def can_handle(self, unit: ComparisonUnit) -> bool:
        return isinstance(unit.expected, str)

    def compare(self, unit: ComparisonUnit, config: Any, sink: Any, engine: Any) -> None:
        if not isinstance(unit.actual, str) or unit.actual.lower() != unit.expected.lower():
            sink.report(str(unit.path), f"{unit.actual!r} != {unit.expected!r}")


def _unit(actual: Any, expected: Any) -> ComparisonUnit:
    return ComparisonUnit(actual, expected, FieldPath.root("root"))


class TestComparisonUnit:
    def test_child(self) -> None:
        unit = _unit(1, 2)
        child = unit.child(3, 4, unit.path.field("x"))
        assert (child.actual, child.expected, str(child.path)) == (3, 4, "root.x")
        assert unit.actual == 1


class TestDispatch:
    def test_first_matching_strategy_wins(self) -> None:
        first, second = RecordingStrategy("first"), RecordingStrategy("second")
        context = AssertionContext(strategies=StrategyChain((first, second)))
        ComparisonEngine(context).compare(_unit(1, 1), ComparisonConfig(), CollectingSink())
        assert first.seen == ["root"]
        assert second.seen == []

    def test_custom_strategy_before_scalar(self) -> None:
        context = AssertionContext()
        context = context.with_strategies(context.strategies.insert_before("scalar", CaseInsensitiveStrategy()))
        sink = CollectingSink()
        ComparisonEngine(context).compare(_unit({"a": "ABC"}, {"a": "abc"}), ComparisonConfig(), sink)
        assert sink.mismatches == ()

    def test_no_matching_strategy_raises(self, caplog: pytest.LogCaptureFixture) -> None:
        context = AssertionContext(strategies=StrategyChain((ScalarStrategy(),)))
        engine = ComparisonEngine(context)
        with caplog.at_level(logging.WARNING, logger="recursive_assert"):
            with pytest.raises(StrategyChainError, match="root"):
                engine.compare(_unit([1], [1]), ComparisonConfig(), CollectingSink())
        assert "Failed to find a strategy" in caplog.text

    def test_context_property(self) -> None:
        context = AssertionContext()
        assert ComparisonEngine(context).context is context

    def test_mismatches_follow_traversal_order(self) -> None:
        sink = CollectingSink()
        expected = {"b": [1, 2], "a": {"x": 1}}
        actual = {"b": [0, 0], "a": {"x": 2}}
        ComparisonEngine(AssertionContext()).compare(_unit(actual, expected), ComparisonConfig(), sink)
        assert [m.path for m in sink.mismatches] == ["root[b][0]", "root[b][1]", "root[a][x]"]

    def test_debug_logging_names_strategy(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="recursive_assert"):
            ComparisonEngine(AssertionContext()).compare(_unit(1, 1), ComparisonConfig(), CollectingSink())
        assert "Using 'scalar' strategy for 'root'" in caplog.text
