"""MappingStrategy: key-by-key comparison of associative containers.

Keys already provide identity, so mappings are never sorted or paired by
identifier, and key-set differences are always reported in full (the
size-break policy only applies to sequences).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from recursive_assert.introspection import is_mapping
from recursive_assert.strategies._common import report_value_mismatch
from recursive_assert.trace.matcher import matches_any

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from recursive_assert.config import ComparisonConfig
    from recursive_assert.engine import ComparisonEngine, ComparisonUnit
    from recursive_assert.protocols import ResultSink

__all__ = ["MappingStrategy"]

logger = logging.getLogger(__name__)


class MappingStrategy:
    """Handles any ``collections.abc.Mapping`` expected value.

    - keys of expected are visited in expected's iteration order and compared
      at ``path[key]``;
    - keys missing from actual are reported through ``report_missing_key``;
    - keys only present in actual are reported through
      ``report_unexpected_key`` unless their key path is ignored.
    """

    name = "mapping"

    def can_handle(self, unit: ComparisonUnit) -> bool:
        return is_mapping(unit.expected)

    def compare(
        self,
        unit: ComparisonUnit,
        config: ComparisonConfig,
        sink: ResultSink,
        engine: ComparisonEngine,
    ) -> None:
        if not is_mapping(unit.actual):
            logger.debug("Actual value at '%s' is not a mapping.", unit.path)
            report_value_mismatch(sink, unit)
            return
        self._compare_expected_keys(unit, unit.actual, unit.expected, config, sink, engine)
        self._compare_actual_keys(unit, unit.actual, unit.expected, config, sink)

    def _compare_expected_keys(
        self,
        unit: ComparisonUnit,
        actual: Mapping[Any, Any],
        expected: Mapping[Any, Any],
        config: ComparisonConfig,
        sink: ResultSink,
        engine: ComparisonEngine,
    ) -> None:
        for key, expected_value in expected.items():
            key_path = unit.path.key(key)
            if matches_any(config.ignored_path_patterns, key_path):
                logger.debug("Skipping entry with '%s' field trace.", key_path)
                continue
            if key not in actual:
                sink.report_missing_key(str(unit.path), key)
                continue
            engine.compare(unit.child(actual[key], expected_value, key_path), config, sink)

    def _compare_actual_keys(
        self,
        unit: ComparisonUnit,
        actual: Mapping[Any, Any],
        expected: Mapping[Any, Any],
        config: ComparisonConfig,
        sink: ResultSink,
    ) -> None:
        for key in actual:
            if key in expected:
                continue
            key_path = unit.path.key(key)
            if matches_any(config.ignored_path_patterns, key_path):
                logger.debug("Skipping entry with '%s' field trace.", key_path)
                continue
            sink.report_unexpected_key(str(unit.path), key)
