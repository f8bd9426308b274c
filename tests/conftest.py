"""Shared fixtures for the recursive-assert test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from recursive_assert import (
    AssertionContext,
    CollectingSink,
    ComparisonConfig,
    reset_context,
)
from recursive_assert.engine import ComparisonEngine


@pytest.fixture(autouse=True)
def _fresh_default_context() -> Iterator[None]:
    """Every test starts and ends with an empty process-wide session."""
    reset_context()
    yield
    reset_context()


@pytest.fixture
def context() -> AssertionContext:
    return AssertionContext()


@pytest.fixture
def engine(context: AssertionContext) -> ComparisonEngine:
    return ComparisonEngine(context)


@pytest.fixture
def sink() -> CollectingSink:
    return CollectingSink()


@pytest.fixture
def config() -> ComparisonConfig:
    return ComparisonConfig()
