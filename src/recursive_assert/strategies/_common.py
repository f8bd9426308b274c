"""Helpers shared by the comparison strategies."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import TYPE_CHECKING, Any

import numpy as np

from recursive_assert.result import MismatchKind

if TYPE_CHECKING:
    from recursive_assert.engine import ComparisonUnit
    from recursive_assert.protocols import ResultSink


def _is_nan(value: Any) -> bool:
    if isinstance(value, (float, np.floating)):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


def _is_bool(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def values_equal(actual: Any, expected: Any) -> bool:
    """Return True if two leaf values are equal (NaN equals NaN).

    Numbers follow Python's numeric tower (``1 == 1.0``), but a boolean never
    equals a number.  Values that cannot be compared at all (e.g. a
    multi-element array against a scalar) are unequal.
    """
    if actual is expected:
        return True
    if _is_bool(actual) != _is_bool(expected):
        return False
    try:
        outcome = actual == expected
        if isinstance(outcome, np.ndarray):
            equal = outcome.ndim == 0 and bool(outcome)
        else:
            equal = bool(outcome)
    except (TypeError, ValueError):
        equal = False
    return equal or (_is_nan(actual) and _is_nan(expected))


def mismatch_message(actual: Any, expected: Any) -> str:
    return f"expected <{expected!r}> but was <{actual!r}>"


def report_value_mismatch(
    sink: ResultSink,
    unit: ComparisonUnit,
    kind: MismatchKind = MismatchKind.VALUE,
) -> None:
    sink.report(str(unit.path), mismatch_message(unit.actual, unit.expected), kind)
