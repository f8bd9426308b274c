"""Structural interfaces for the two extension points of recursive-assert.

- ``ComparisonStrategy``: handles one value shape inside the engine's chain.
- ``ResultSink``: receives mismatch reports and decides how to surface them.

Neither requires inheritance; any class with conformant methods passes
``isinstance`` checks.

Example::

    from recursive_assert.protocols import ComparisonStrategy

    class DecimalPlacesStrategy:
        name = "decimal-places"

        def can_handle(self, unit):
            return isinstance(unit.expected, Decimal)

        def compare(self, unit, config, sink, engine):
            if round(unit.actual, 2) != round(unit.expected, 2):
                sink.report(str(unit.path), f"{unit.actual} != {unit.expected}")

    assert isinstance(DecimalPlacesStrategy(), ComparisonStrategy)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from recursive_assert.config import ComparisonConfig
    from recursive_assert.engine import ComparisonEngine, ComparisonUnit
    from recursive_assert.result import MismatchKind


@runtime_checkable
class ResultSink(Protocol):
    """Collector of mismatch reports.

    The engine never raises for data mismatches; it hands each one to the
    sink.  ``finish()`` is called at most once per top-level assertion, and
    only when the entry API created the sink itself.
    """

    def report(self, path: str, message: str, kind: MismatchKind = ...) -> None: ...

    def report_missing_key(self, path: str, key: Any) -> None: ...

    def report_unexpected_key(self, path: str, key: Any) -> None: ...

    def finish(self) -> None: ...


@runtime_checkable
class ComparisonStrategy(Protocol):
    """One comparator responsible for a single value shape.

    ``name`` identifies the strategy inside a ``StrategyChain`` (used by
    ``insert_before`` / ``insert_after``).
    """

    name: str

    def can_handle(self, unit: ComparisonUnit) -> bool: ...

    def compare(
        self,
        unit: ComparisonUnit,
        config: ComparisonConfig,
        sink: ResultSink,
        engine: ComparisonEngine,
    ) -> None: ...
