"""Public API functions for recursive-assert.

This module provides the three user-facing functions: assert_equal, compare
and is_equal.  Each call builds a fresh ``ComparisonEngine`` over one context
snapshot, so registry updates made while a comparison runs never affect it.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from recursive_assert.config import ComparisonConfig
from recursive_assert.context import AssertionContext, get_context
from recursive_assert.engine import ComparisonEngine, ComparisonUnit
from recursive_assert.protocols import ResultSink
from recursive_assert.result import ComparisonResult
from recursive_assert.sinks import CollectingSink
from recursive_assert.trace.path import FieldPath

__all__ = ["assert_equal", "compare", "is_equal"]

logger = logging.getLogger(__name__)


def _root_name(actual: Any, expected: Any, root_name: str | None) -> str:
    if root_name is not None:
        return root_name
    if expected is not None:
        return type(expected).__name__
    if actual is not None:
        return type(actual).__name__
    return "null"


def _run(
    actual: Any,
    expected: Any,
    config: ComparisonConfig,
    sink: ResultSink,
    root_name: str | None,
    context: AssertionContext | None,
) -> None:
    snapshot = context if context is not None else get_context()
    unit = ComparisonUnit(actual, expected, FieldPath.root(_root_name(actual, expected, root_name)))
    ComparisonEngine(snapshot).compare(unit, config, sink)


def assert_equal(
    actual: Any,
    expected: Any,
    config: ComparisonConfig | None = None,
    *,
    root_name: str | None = None,
    sink: ResultSink | None = None,
    context: AssertionContext | None = None,
) -> None:
    """Recursively compare ``actual`` with ``expected`` and fail on any difference.

    Args:
        actual:    The value produced by the code under test.
        expected:  The reference value.  Its shape drives the traversal.
        config:    Comparison policy.  Defaults to ``ComparisonConfig()``.
        root_name: Name of the root path segment.  Defaults to the type name
                   of ``expected`` (or of ``actual`` when expected is None).
        sink:      Where mismatches are reported.  When omitted, a
                   ``CollectingSink`` is created and finished here; a sink
                   supplied by the caller is left for the caller to finish.
        context:   Registry and strategy snapshot.  Defaults to the current
                   context of the process-wide session.

    Raises:
        RecursiveAssertionError: When the values differ and this call owns
            the sink (or the supplied sink fails fast).
    """
    config = config if config is not None else ComparisonConfig()
    if expected is None and config.skip_when_expected_null:
        logger.info("Expected value is None, verification is skipped.")
        return
    owned = sink is None
    target: ResultSink = CollectingSink() if sink is None else sink
    _run(actual, expected, config, target, root_name, context)
    if owned:
        target.finish()


def compare(
    actual: Any,
    expected: Any,
    config: ComparisonConfig | None = None,
    *,
    root_name: str | None = None,
    context: AssertionContext | None = None,
) -> ComparisonResult:
    """Compare two values and return every mismatch instead of raising.

    Args:
        actual:    The value produced by the code under test.
        expected:  The reference value.
        config:    Comparison policy.  Defaults to ``ComparisonConfig()``.
        root_name: Name of the root path segment.
        context:   Registry and strategy snapshot.

    Returns:
        A ``ComparisonResult`` with the mismatches in traversal order and the
        computation time.
    """
    config = config if config is not None else ComparisonConfig()
    sink = CollectingSink()
    start = time.perf_counter()
    _run(actual, expected, config, sink, root_name, context)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return ComparisonResult(mismatches=sink.mismatches, computation_time_ms=elapsed_ms)


def is_equal(
    actual: Any,
    expected: Any,
    config: ComparisonConfig | None = None,
    *,
    context: AssertionContext | None = None,
) -> bool:
    """Return True if ``compare(actual, expected, config)`` found no mismatch."""
    return compare(actual, expected, config, context=context).is_equal
