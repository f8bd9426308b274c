"""ComparisonEngine: dispatches each compared node to the first fitting strategy.

The engine walks the context's ``StrategyChain`` in registration order and
calls ``can_handle`` on each strategy.  The first strategy that accepts the
node handles it and the engine returns; strategies are never stacked on one
node.  Strategies recurse back into ``ComparisonEngine.compare`` for child
values, each call carrying a longer ``FieldPath`` and the same config and
sink.

Recursion is synchronous and single-threaded per top-level call, so the order
of reported mismatches follows the declaration/iteration order of the
compared structures.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from recursive_assert.exceptions import StrategyChainError
from recursive_assert.trace.path import FieldPath

if TYPE_CHECKING:
    from recursive_assert.config import ComparisonConfig
    from recursive_assert.context import AssertionContext
    from recursive_assert.protocols import ResultSink

__all__ = ["ComparisonEngine", "ComparisonUnit"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ComparisonUnit:
    """A single (actual, expected) pair and its location.

    Created fresh for every visited node and discarded once the handling
    strategy returns.
    """

    actual: Any
    expected: Any
    path: FieldPath

    def child(self, actual: Any, expected: Any, path: FieldPath) -> ComparisonUnit:
        return ComparisonUnit(actual=actual, expected=expected, path=path)


class ComparisonEngine:
    """Dispatcher over the strategy chain of an ``AssertionContext``.

    The engine keeps a reference to the context snapshot it was created with,
    so a concurrent registry update never changes an in-flight comparison.

    Example::

        from recursive_assert.context import get_context
        from recursive_assert.sinks import CollectingSink

        engine = ComparisonEngine(get_context())
        sink = CollectingSink()
        engine.compare(
            ComparisonUnit([1, 2], [1, 3], FieldPath.root("list")),
            ComparisonConfig(),
            sink,
        )
        sink.mismatches   # (Mismatch(path="list[1]", ...),)
    """

    def __init__(self, context: AssertionContext) -> None:
        self._context = context

    @property
    def context(self) -> AssertionContext:
        return self._context

    def compare(
        self,
        unit: ComparisonUnit,
        config: ComparisonConfig,
        sink: ResultSink,
    ) -> None:
        """Compare one node with the first strategy that can handle it.

        Raises:
            StrategyChainError: If no strategy of the chain accepts the node.
                The default chain always ends with a catch-all strategy, so
                this only happens with a malformed custom chain.
        """
        for strategy in self._context.strategies:
            if strategy.can_handle(unit):
                logger.debug("Using '%s' strategy for '%s'.", strategy.name, unit.path)
                strategy.compare(unit, config, sink, self)
                return
        logger.warning(
            "Failed to find a strategy for '%s', the node cannot be verified.",
            unit.path,
        )
        msg = f"No comparison strategy can handle '{unit.path}' (chain: {self._context.strategies.names()})"
        raise StrategyChainError(msg)
