"""Sequence strategies: arrays (indexed) and iterables (sequential only).

Both share the element pairing algorithm:

1. Report a size mismatch when element counts differ; stop there when
   ``break_on_size_mismatch`` is set.
2. When ``sort_before_compare`` is set, sort copies of both sides.  Actual is
   sorted with the comparator registered for its own common element type and
   expected with the comparator for expected's common element type.
3. Look up the identifier field of expected's common element type.
4. For each expected element build ``path[i]`` and skip it when ignored.  With
   an identifier field, switch to ``path[field=value]`` and check the ignore
   patterns again.  Differing identifiers are reported as identifier
   mismatches; with ``break_on_id_mismatch`` the element is not descended
   into, otherwise its remaining fields are compared.
5. Report expected-only tail elements as missing and actual-only tail
   elements as unexpected.

Compared collections are never mutated: sorting and materialisation always
work on new lists.  One-shot iterators (generators, ``iter(...)`` results,
``map`` objects) are the exception: reading their elements exhausts them, so
they can be compared only once.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from recursive_assert.introspection import (
    common_type,
    is_array_like,
    is_iterable,
    read_field,
)
from recursive_assert.registry.comparators import sort_values
from recursive_assert.result import MismatchKind
from recursive_assert.strategies._common import (
    mismatch_message,
    report_value_mismatch,
    values_equal,
)
from recursive_assert.trace.matcher import matches_any

if TYPE_CHECKING:
    from recursive_assert.config import ComparisonConfig
    from recursive_assert.engine import ComparisonEngine, ComparisonUnit
    from recursive_assert.protocols import ResultSink
    from recursive_assert.trace.path import FieldPath

__all__ = ["ArrayStrategy", "IterableStrategy"]

logger = logging.getLogger(__name__)


def _as_elements(value: Any) -> list[Any] | None:
    """Materialise a collection into a new list, or None if it is not one."""
    if is_array_like(value) or is_iterable(value):
        return list(value)
    return None


class _ElementSequenceStrategy:
    """Shared size check, sorting and element pairing."""

    name = "element-sequence"
    _noun = "sequences"

    def compare(
        self,
        unit: ComparisonUnit,
        config: ComparisonConfig,
        sink: ResultSink,
        engine: ComparisonEngine,
    ) -> None:
        actual_values = _as_elements(unit.actual)
        if actual_values is None:
            logger.debug("Actual value at '%s' is not a collection.", unit.path)
            report_value_mismatch(sink, unit)
            return
        expected_values = list(unit.expected)

        if len(actual_values) != len(expected_values):
            sink.report(
                str(unit.path),
                f"size of actual and expected {self._noun} differs: "
                f"expected <{len(expected_values)}> but was <{len(actual_values)}>",
                MismatchKind.SIZE,
            )
            if config.break_on_size_mismatch:
                logger.debug("Breaking verification of '%s' on size mismatch.", unit.path)
                return

        expected_type = common_type(expected_values)
        if config.sort_before_compare:
            logger.debug("Sorting %s at '%s'.", self._noun, unit.path)
            comparators = engine.context.comparators
            actual_values = sort_values(actual_values, comparators.lookup(common_type(actual_values)))
            expected_values = sort_values(expected_values, comparators.lookup(expected_type))
        id_field = engine.context.identifiers.lookup(expected_type)

        self._compare_elements(unit, actual_values, expected_values, id_field, config, sink, engine)

    def _compare_elements(
        self,
        unit: ComparisonUnit,
        actual_values: list[Any],
        expected_values: list[Any],
        id_field: str | None,
        config: ComparisonConfig,
        sink: ResultSink,
        engine: ComparisonEngine,
    ) -> None:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Element helpers
    # ------------------------------------------------------------------

    def _compare_element(
        self,
        unit: ComparisonUnit,
        actual: Any,
        expected: Any,
        index: int,
        id_field: str | None,
        config: ComparisonConfig,
        sink: ResultSink,
        engine: ComparisonEngine,
    ) -> None:
        patterns = config.ignored_path_patterns
        element_path = unit.path.index(index)
        if matches_any(patterns, element_path):
            logger.debug("Skipping element with '%s' field trace.", element_path)
            return
        if id_field is not None and expected is not None:
            expected_id = read_field(expected, id_field)
            element_path = unit.path.by_id(id_field, expected_id)
            if matches_any(patterns, element_path):
                logger.debug("Skipping element with '%s' field trace.", element_path)
                return
            if actual is not None:
                actual_id = read_field(actual, id_field)
                if not values_equal(actual_id, expected_id):
                    id_path = element_path.field(id_field)
                    sink.report(
                        str(id_path),
                        mismatch_message(actual_id, expected_id),
                        MismatchKind.IDENTIFIER,
                    )
                    if config.break_on_id_mismatch:
                        logger.debug("Breaking verification of '%s' on identifier mismatch.", element_path)
                        return
                    # Identifier already reported above.
                    config = replace(config, ignored_path_patterns=patterns | {str(id_path)})
        engine.compare(unit.child(actual, expected, element_path), config, sink)

    @staticmethod
    def _report_missing(sink: ResultSink, path: FieldPath, value: Any) -> None:
        sink.report(str(path), f"missing element {value!r}", MismatchKind.MISSING_ELEMENT)

    @staticmethod
    def _report_unexpected(sink: ResultSink, path: FieldPath, value: Any) -> None:
        sink.report(str(path), f"unexpected element {value!r}", MismatchKind.UNEXPECTED_ELEMENT)


class ArrayStrategy(_ElementSequenceStrategy):
    """Handles definite-length sequences: lists, tuples, ranges, deques, numpy arrays."""

    name = "array"
    _noun = "arrays"

    def can_handle(self, unit: ComparisonUnit) -> bool:
        return is_array_like(unit.expected)

    def _compare_elements(
        self,
        unit: ComparisonUnit,
        actual_values: list[Any],
        expected_values: list[Any],
        id_field: str | None,
        config: ComparisonConfig,
        sink: ResultSink,
        engine: ComparisonEngine,
    ) -> None:
        for index in range(len(expected_values)):
            if index >= len(actual_values):
                self._report_missing(sink, unit.path.index(index), expected_values[index])
                continue
            self._compare_element(
                unit, actual_values[index], expected_values[index], index, id_field, config, sink, engine
            )
        for index in range(len(expected_values), len(actual_values)):
            self._report_unexpected(sink, unit.path.index(index), actual_values[index])


class IterableStrategy(_ElementSequenceStrategy):
    """Handles sequential-only collections: sets, dict views, generators.

    Positions are tracked by iteration count, which for sets follows the
    set's own iteration order unless ``sort_before_compare`` is enabled.
    """

    name = "iterable"
    _noun = "iterables"

    def can_handle(self, unit: ComparisonUnit) -> bool:
        return is_iterable(unit.expected)

    def _compare_elements(
        self,
        unit: ComparisonUnit,
        actual_values: list[Any],
        expected_values: list[Any],
        id_field: str | None,
        config: ComparisonConfig,
        sink: ResultSink,
        engine: ComparisonEngine,
    ) -> None:
        actual_iterator = iter(actual_values)
        index = 0
        for expected in expected_values:
            try:
                actual = next(actual_iterator)
            except StopIteration:
                self._report_missing(sink, unit.path.index(index), expected)
            else:
                self._compare_element(unit, actual, expected, index, id_field, config, sink, engine)
            index += 1
        for actual in actual_iterator:
            self._report_unexpected(sink, unit.path.index(index), actual)
            index += 1
