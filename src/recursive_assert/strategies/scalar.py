"""ScalarStrategy: direct equality for primitive-like leaves."""

from __future__ import annotations

from typing import TYPE_CHECKING

from recursive_assert.introspection import is_scalar
from recursive_assert.strategies._common import report_value_mismatch, values_equal

if TYPE_CHECKING:
    from recursive_assert.config import ComparisonConfig
    from recursive_assert.engine import ComparisonEngine, ComparisonUnit
    from recursive_assert.protocols import ResultSink

__all__ = ["ScalarStrategy"]


class ScalarStrategy:
    """Compares numbers, text, booleans, temporal values, enums and numpy scalars.

    Selection is based on the type of ``expected``; ``actual`` may be of any
    type and simply compares unequal when it does not match.
    """

    name = "scalar"

    def can_handle(self, unit: ComparisonUnit) -> bool:
        return is_scalar(unit.expected)

    def compare(
        self,
        unit: ComparisonUnit,
        config: ComparisonConfig,
        sink: ResultSink,
        engine: ComparisonEngine,
    ) -> None:
        if not values_equal(unit.actual, unit.expected):
            report_value_mismatch(sink, unit)
