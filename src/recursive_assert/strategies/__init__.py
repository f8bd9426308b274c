"""Comparison strategies and the ordered chain the engine dispatches over.

Re-exports the seven default strategies, ``StrategyChain`` and
``default_chain``.
"""

from recursive_assert.strategies.absent import ActualAbsentStrategy, ExpectedAbsentStrategy
from recursive_assert.strategies.chain import StrategyChain, default_chain
from recursive_assert.strategies.composite import CompositeStrategy
from recursive_assert.strategies.mapping import MappingStrategy
from recursive_assert.strategies.scalar import ScalarStrategy
from recursive_assert.strategies.sequence import ArrayStrategy, IterableStrategy

__all__ = [
    "ActualAbsentStrategy",
    "ArrayStrategy",
    "CompositeStrategy",
    "ExpectedAbsentStrategy",
    "IterableStrategy",
    "MappingStrategy",
    "ScalarStrategy",
    "StrategyChain",
    "default_chain",
]
