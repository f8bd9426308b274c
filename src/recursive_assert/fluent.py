"""Fluent assertion builder.

Example::

    assert_that(order).as_("order").ignore_fields("created_at").is_equal_to(expected)
"""

from __future__ import annotations

from typing import Any

from recursive_assert.api import assert_equal
from recursive_assert.config import ComparisonConfigBuilder
from recursive_assert.context import AssertionContext
from recursive_assert.protocols import ResultSink

__all__ = ["RecursiveAssertion", "assert_that"]


class RecursiveAssertion:
    """Accumulates comparison settings for one ``actual`` value.

    Every setter returns ``self``; ``is_equal_to`` runs the comparison.
    """

    def __init__(self, actual: Any) -> None:
        self._actual = actual
        self._root_name: str | None = None
        self._config = ComparisonConfigBuilder()
        self._sink: ResultSink | None = None
        self._context: AssertionContext | None = None

    def as_(self, name: str) -> RecursiveAssertion:
        """Name the root path segment (``as`` is a keyword)."""
        self._root_name = name
        return self

    def break_on_size_mismatch(self, enabled: bool = True) -> RecursiveAssertion:
        self._config.break_on_size_mismatch(enabled)
        return self

    def break_on_id_mismatch(self, enabled: bool = True) -> RecursiveAssertion:
        self._config.break_on_id_mismatch(enabled)
        return self

    def treat_empty_collection_as_null(self, enabled: bool = True) -> RecursiveAssertion:
        self._config.treat_empty_collection_as_null(enabled)
        return self

    def skip_when_expected_null(self, enabled: bool = True) -> RecursiveAssertion:
        self._config.skip_when_expected_null(enabled)
        return self

    def sort_before_compare(self, enabled: bool = True) -> RecursiveAssertion:
        self._config.sort_before_compare(enabled)
        return self

    def ignore_fields(self, *names: str) -> RecursiveAssertion:
        self._config.ignore_fields_by_name(*names)
        return self

    def ignore_fields_by_path(self, *patterns: str) -> RecursiveAssertion:
        self._config.ignore_fields_by_path(*patterns)
        return self

    def using_sink(self, sink: ResultSink) -> RecursiveAssertion:
        """Report into ``sink``; the caller then owns ``sink.finish()``."""
        self._sink = sink
        return self

    def using_context(self, context: AssertionContext) -> RecursiveAssertion:
        self._context = context
        return self

    def is_equal_to(self, expected: Any) -> None:
        """Run the comparison.

        Raises:
            RecursiveAssertionError: When the values differ and no sink was
                supplied through ``using_sink``.
        """
        assert_equal(
            self._actual,
            expected,
            self._config.build(),
            root_name=self._root_name,
            sink=self._sink,
            context=self._context,
        )


def assert_that(actual: Any) -> RecursiveAssertion:
    return RecursiveAssertion(actual)
