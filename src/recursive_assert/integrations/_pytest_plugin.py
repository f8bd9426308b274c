"""pytest plugin for recursive-assert.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from recursive_assert import CollectingSink, ComparisonConfig, assert_equal


@pytest.fixture(scope="session")
def assert_recursively_equal() -> Any:
    """Fixture that returns a callable recursive equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to assert_equal() which creates a fresh engine per call).

    Usage in tests::

        def test_order(assert_recursively_equal):
            assert_recursively_equal(actual_order, expected_order)

        def test_ignoring(assert_recursively_equal):
            config = ComparisonConfig(ignored_field_names={"created_at"})
            assert_recursively_equal(actual_order, expected_order, config=config)

    Returns:
        A callable ``_assert(actual, expected, config=None, root_name=None) -> None``
        that raises ``AssertionError`` listing every mismatching path.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: ComparisonConfig | None = None,
        root_name: str | None = None,
    ) -> None:
        assert_equal(actual, expected, config, root_name=root_name)

    return _assert


@pytest.fixture
def soft_assertions() -> Iterator[CollectingSink]:
    """Fixture yielding a sink shared by several comparisons in one test.

    Mismatches from every ``assert_equal(..., sink=soft_assertions)`` call are
    collected and reported together when the test tears down.

    Usage in tests::

        def test_both(soft_assertions):
            assert_equal(first, expected_first, sink=soft_assertions)
            assert_equal(second, expected_second, sink=soft_assertions)
    """
    sink = CollectingSink()
    yield sink
    sink.finish()
