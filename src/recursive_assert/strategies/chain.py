"""StrategyChain: immutable, ordered list of named comparison strategies.

Order matters: the engine uses the first strategy whose ``can_handle``
accepts a node.  The default order is::

    actual-absent -> expected-absent -> scalar -> array -> iterable -> mapping -> composite

Chains are never edited in place.  ``append``, ``insert_before``,
``insert_after``, ``replace`` and ``remove`` all return a new chain, so a
chain held by an in-flight comparison never changes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from recursive_assert.protocols import ComparisonStrategy
from recursive_assert.strategies.absent import ActualAbsentStrategy, ExpectedAbsentStrategy
from recursive_assert.strategies.composite import CompositeStrategy
from recursive_assert.strategies.mapping import MappingStrategy
from recursive_assert.strategies.scalar import ScalarStrategy
from recursive_assert.strategies.sequence import ArrayStrategy, IterableStrategy

__all__ = ["StrategyChain", "default_chain"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StrategyChain:
    """Ordered, named comparison strategies.

    Attributes:
        strategies: Strategies in evaluation order.  Names must be unique.
    """

    strategies: tuple[ComparisonStrategy, ...] = ()

    def __post_init__(self) -> None:
        names = [strategy.name for strategy in self.strategies]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            msg = f"strategy names must be unique, got duplicates {duplicates}"
            raise ValueError(msg)

    def __iter__(self) -> Iterator[ComparisonStrategy]:
        return iter(self.strategies)

    def __len__(self) -> int:
        return len(self.strategies)

    def names(self) -> list[str]:
        return [strategy.name for strategy in self.strategies]

    def index_of(self, name: str) -> int:
        """Return the position of the strategy called ``name``, or -1."""
        for index, strategy in enumerate(self.strategies):
            if strategy.name == name:
                return index
        return -1

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def _insert(self, position: int, strategy: ComparisonStrategy | None) -> StrategyChain:
        if strategy is None:
            logger.info("Received strategy is None so it will not be added.")
            return self
        if self.index_of(strategy.name) != -1:
            logger.info("Strategy '%s' is already present in the chain so its copy will not be added.", strategy.name)
            return self
        logger.debug("Added '%s' strategy at position %d.", strategy.name, position)
        strategies = list(self.strategies)
        strategies.insert(position, strategy)
        return StrategyChain(tuple(strategies))

    def append(self, strategy: ComparisonStrategy | None) -> StrategyChain:
        return self._insert(len(self.strategies), strategy)

    def insert_before(self, target: str, strategy: ComparisonStrategy | None) -> StrategyChain:
        """Insert ``strategy`` right before the strategy named ``target``.

        An unknown ``target`` appends the strategy to the end of the chain.
        """
        position = self.index_of(target)
        if position == -1:
            logger.info("Target strategy '%s' is not present in the chain, adding to the end.", target)
            return self.append(strategy)
        return self._insert(position, strategy)

    def insert_after(self, target: str, strategy: ComparisonStrategy | None) -> StrategyChain:
        """Insert ``strategy`` right after the strategy named ``target``.

        An unknown ``target`` appends the strategy to the end of the chain.
        """
        position = self.index_of(target)
        if position == -1:
            logger.info("Target strategy '%s' is not present in the chain, adding to the end.", target)
            return self.append(strategy)
        return self._insert(position + 1, strategy)

    def replace(self, target: str, strategy: ComparisonStrategy) -> StrategyChain:
        """Swap the strategy named ``target`` for ``strategy``, keeping its position."""
        position = self.index_of(target)
        if position == -1:
            msg = f"no strategy named {target!r} in chain {self.names()}"
            raise KeyError(msg)
        strategies = list(self.strategies)
        strategies[position] = strategy
        return StrategyChain(tuple(strategies))

    def remove(self, target: str) -> StrategyChain:
        return StrategyChain(tuple(s for s in self.strategies if s.name != target))


def default_chain() -> StrategyChain:
    """Return the default seven-strategy chain."""
    return StrategyChain(
        (
            ActualAbsentStrategy(),
            ExpectedAbsentStrategy(),
            ScalarStrategy(),
            ArrayStrategy(),
            IterableStrategy(),
            MappingStrategy(),
            CompositeStrategy(),
        )
    )
