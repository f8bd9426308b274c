"""CompositeStrategy: field-by-field comparison of records (the catch-all)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from recursive_assert.introspection import field_names, read_field
from recursive_assert.strategies._common import report_value_mismatch, values_equal
from recursive_assert.trace.matcher import matches_any

if TYPE_CHECKING:
    from recursive_assert.config import ComparisonConfig
    from recursive_assert.engine import ComparisonEngine, ComparisonUnit
    from recursive_assert.protocols import ResultSink

__all__ = ["CompositeStrategy"]

logger = logging.getLogger(__name__)


class CompositeStrategy:
    """Last strategy of the default chain; accepts every node.

    Fields of expected's type (see ``introspection.describe``) are compared
    one by one at ``path.field``.  A field is skipped when its name is in
    ``ignored_field_names`` (checked first) or when its path matches an
    ignore pattern.

    Objects exposing no field at all (e.g. ``object()`` or opaque extension
    types) fall back to ``==``.
    """

    name = "composite"

    def can_handle(self, unit: ComparisonUnit) -> bool:
        return True

    def compare(
        self,
        unit: ComparisonUnit,
        config: ComparisonConfig,
        sink: ResultSink,
        engine: ComparisonEngine,
    ) -> None:
        names = field_names(unit.expected)
        if not names:
            logger.debug("'%s' exposes no fields; comparing with ==.", unit.path)
            if not values_equal(unit.actual, unit.expected):
                report_value_mismatch(sink, unit)
            return
        for name in names:
            if name in config.ignored_field_names:
                logger.debug("Skipping '%s' field by name.", name)
                continue
            field_path = unit.path.field(name)
            if matches_any(config.ignored_path_patterns, field_path):
                logger.debug("Skipping '%s' field by trace '%s'.", name, field_path)
                continue
            child = unit.child(
                read_field(unit.actual, name),
                read_field(unit.expected, name),
                field_path,
            )
            engine.compare(child, config, sink)
