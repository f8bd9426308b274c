"""AssertionContext snapshots and the sessions that publish them.

An ``AssertionContext`` bundles everything a comparison reads besides its
config: the comparator registry, the identifier registry and the strategy
chain.  A published context is treated as immutable.  Every change builds a
copy and publishes the copy.

``AssertionSession`` owns the current context of a long-lived test process:

- readers call ``session.context`` and keep that snapshot for a whole
  comparison; reading one attribute reference is atomic;
- writers (``register_comparator``, ``register_identifier_field``,
  ``add_strategy_before``/``after``, ``replace_strategies``, ``reset``)
  serialise on a lock, derive a new context and publish it in one assignment.

A comparison that is already running keeps the snapshot it started with and
never sees a concurrent update.

The module-level functions operate on a process-wide default session.
Callers that want isolation can create their own ``AssertionSession`` or
pass an ``AssertionContext`` straight to the entry API.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from recursive_assert.protocols import ComparisonStrategy
from recursive_assert.registry.comparators import Comparator, ComparatorRegistry
from recursive_assert.registry.identifiers import IdentifierRegistry
from recursive_assert.strategies.chain import StrategyChain, default_chain

__all__ = [
    "AssertionContext",
    "AssertionSession",
    "add_strategy_after",
    "add_strategy_before",
    "default_session",
    "get_context",
    "register_comparator",
    "register_identifier_field",
    "replace_strategies",
    "reset_context",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AssertionContext:
    """Immutable bundle of registries and strategy chain.

    Attributes:
        comparators: Ordering functions used by ``sort_before_compare``.
        identifiers: Identifier fields used to pair collection elements.
        strategies:  Ordered comparison strategies.
    """

    comparators: ComparatorRegistry = field(default_factory=ComparatorRegistry)
    identifiers: IdentifierRegistry = field(default_factory=IdentifierRegistry)
    strategies: StrategyChain = field(default_factory=default_chain)

    def with_comparator(self, cls: type | None, comparator: Comparator | None) -> AssertionContext:
        """Return a new context whose comparator registry also holds ``cls``."""
        comparators = self.comparators.copy()
        comparators.register(cls, comparator)
        return replace(self, comparators=comparators)

    def with_identifier_field(self, cls: type | None, field_name: str | None) -> AssertionContext:
        """Return a new context whose identifier registry also holds ``cls``."""
        identifiers = self.identifiers.copy()
        identifiers.register(cls, field_name)
        return replace(self, identifiers=identifiers)

    def with_strategies(self, strategies: StrategyChain) -> AssertionContext:
        return replace(self, strategies=strategies)


class AssertionSession:
    """Holder of the current ``AssertionContext`` with copy-on-write updates.

    Example::

        session = AssertionSession()
        session.register_identifier_field(Order, "id")
        assert_equal(actual, expected, context=session.context)
    """

    def __init__(self, context: AssertionContext | None = None) -> None:
        self._context = context if context is not None else AssertionContext()
        self._write_lock = threading.Lock()

    @property
    def context(self) -> AssertionContext:
        """The currently published snapshot."""
        return self._context

    def _publish(self, update: Callable[[AssertionContext], AssertionContext]) -> AssertionContext:
        with self._write_lock:
            updated = update(self._context)
            self._context = updated
        return updated

    # ------------------------------------------------------------------
    # Registry mutation
    # ------------------------------------------------------------------

    def register_comparator(self, cls: type | None, comparator: Comparator | None) -> None:
        """Register (or overwrite) the comparator used to sort ``cls`` elements."""
        self._publish(lambda context: context.with_comparator(cls, comparator))

    def register_identifier_field(self, cls: type | None, field_name: str | None) -> None:
        """Register (or overwrite) the identifier field of ``cls``."""
        self._publish(lambda context: context.with_identifier_field(cls, field_name))

    # ------------------------------------------------------------------
    # Strategy chain mutation
    # ------------------------------------------------------------------

    def add_strategy_before(self, target: str, strategy: ComparisonStrategy) -> None:
        self._publish(
            lambda context: context.with_strategies(context.strategies.insert_before(target, strategy))
        )

    def add_strategy_after(self, target: str, strategy: ComparisonStrategy) -> None:
        self._publish(
            lambda context: context.with_strategies(context.strategies.insert_after(target, strategy))
        )

    def replace_strategies(self, strategies: StrategyChain) -> None:
        logger.info("Replacing strategy chain by %s.", strategies.names())
        self._publish(lambda context: context.with_strategies(strategies))

    def reset(self) -> None:
        """Publish a fresh default context (empty registries, default chain)."""
        logger.info("Resetting assertion context to defaults.")
        self._publish(lambda _context: AssertionContext())


_default_session = AssertionSession()


def default_session() -> AssertionSession:
    """Return the process-wide session used when no context is passed."""
    return _default_session


def get_context() -> AssertionContext:
    """Return the current snapshot of the process-wide session."""
    return _default_session.context


def register_comparator(cls: type | None, comparator: Comparator | None) -> None:
    _default_session.register_comparator(cls, comparator)


def register_identifier_field(cls: type | None, field_name: str | None) -> None:
    _default_session.register_identifier_field(cls, field_name)


def add_strategy_before(target: str, strategy: ComparisonStrategy) -> None:
    _default_session.add_strategy_before(target, strategy)


def add_strategy_after(target: str, strategy: ComparisonStrategy) -> None:
    _default_session.add_strategy_after(target, strategy)


def replace_strategies(strategies: StrategyChain) -> None:
    _default_session.replace_strategies(strategies)


def reset_context() -> None:
    _default_session.reset()
