"""Recursive assert - deep structural equality assertions with full mismatch reports."""

from __future__ import annotations

from recursive_assert._logging import enable_debug_logging
from recursive_assert.api import assert_equal, compare, is_equal
from recursive_assert.config import ComparisonConfig, ComparisonConfigBuilder
from recursive_assert.context import (
    AssertionContext,
    AssertionSession,
    add_strategy_after,
    add_strategy_before,
    get_context,
    register_comparator,
    register_identifier_field,
    reset_context,
)
from recursive_assert.exceptions import RecursiveAssertionError, StrategyChainError
from recursive_assert.fluent import RecursiveAssertion, assert_that
from recursive_assert.result import ComparisonResult, Mismatch, MismatchKind
from recursive_assert.sinks import BaseSink, CollectingSink, FailFastSink
from recursive_assert.trace.path import FieldPath

__version__: str = "0.1.0"
__all__: list[str] = [
    "AssertionContext",
    "AssertionSession",
    "BaseSink",
    "CollectingSink",
    "ComparisonConfig",
    "ComparisonConfigBuilder",
    "ComparisonResult",
    "FailFastSink",
    "FieldPath",
    "Mismatch",
    "MismatchKind",
    "RecursiveAssertion",
    "RecursiveAssertionError",
    "StrategyChainError",
    "add_strategy_after",
    "add_strategy_before",
    "assert_equal",
    "assert_that",
    "compare",
    "enable_debug_logging",
    "get_context",
    "is_equal",
    "register_comparator",
    "register_identifier_field",
    "reset_context",
]
