"""Strategies for nodes where one side holds no value (``None``).

Both come first in the default chain so that every later strategy may assume
``actual`` and ``expected`` are present.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from recursive_assert.introspection import is_empty_collection
from recursive_assert.strategies._common import report_value_mismatch

if TYPE_CHECKING:
    from recursive_assert.config import ComparisonConfig
    from recursive_assert.engine import ComparisonEngine, ComparisonUnit
    from recursive_assert.protocols import ResultSink

__all__ = ["ActualAbsentStrategy", "ExpectedAbsentStrategy"]

logger = logging.getLogger(__name__)


class ActualAbsentStrategy:
    """Handles ``actual is None``.

    Passes when expected is None as well, or when expected is an empty
    collection and ``treat_empty_collection_as_null`` is set.
    """

    name = "actual-absent"

    def can_handle(self, unit: ComparisonUnit) -> bool:
        return unit.actual is None

    def compare(
        self,
        unit: ComparisonUnit,
        config: ComparisonConfig,
        sink: ResultSink,
        engine: ComparisonEngine,
    ) -> None:
        if unit.expected is None:
            return
        if config.treat_empty_collection_as_null and is_empty_collection(unit.expected):
            logger.debug("Expected value at '%s' is an empty collection, equal to None.", unit.path)
            return
        report_value_mismatch(sink, unit)


class ExpectedAbsentStrategy:
    """Handles ``expected is None`` (actual is known to be present).

    With ``skip_when_expected_null`` the node is not verified at all.
    """

    name = "expected-absent"

    def can_handle(self, unit: ComparisonUnit) -> bool:
        return unit.expected is None

    def compare(
        self,
        unit: ComparisonUnit,
        config: ComparisonConfig,
        sink: ResultSink,
        engine: ComparisonEngine,
    ) -> None:
        if config.skip_when_expected_null:
            logger.debug("Skipping verification of expected None at '%s'.", unit.path)
            return
        if config.treat_empty_collection_as_null and is_empty_collection(unit.actual):
            logger.debug("Actual value at '%s' is an empty collection, equal to None.", unit.path)
            return
        report_value_mismatch(sink, unit)
