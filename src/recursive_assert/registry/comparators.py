"""ComparatorRegistry: ordering functions used when sorting before compare.

A comparator is a classic two-argument ``cmp(a, b) -> int`` (negative, zero or
positive).  Sorting converts it with ``functools.cmp_to_key`` and always
places ``None`` elements last.

Types without a registered comparator fall back to ``hash_comparator``, which
orders by ``hash()`` (``id()`` for unhashable values).  Equal hashable values
always share a hash, and hash collisions between distinct values are broken
by natural ordering (or by ``repr``), so two collections holding the same
hashable elements sort into the same order.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterable
from typing import Any

from recursive_assert.registry._base import TypeRegistry

__all__ = ["Comparator", "ComparatorRegistry", "hash_comparator", "sort_values"]

logger = logging.getLogger(__name__)

Comparator = Callable[[Any, Any], int]


def _hash_of(value: Any) -> int:
    try:
        return hash(value)
    except TypeError:
        return id(value)


def _natural_order(left: Any, right: Any) -> int:
    try:
        return bool(left > right) - bool(left < right)
    except (TypeError, ValueError):
        left_repr, right_repr = repr(left), repr(right)
        return (left_repr > right_repr) - (left_repr < right_repr)


def hash_comparator(left: Any, right: Any) -> int:
    """Order values by hash; ``None`` sorts after everything else.

    Distinct values whose hashes collide (``hash(-1) == hash(-2)``) fall back
    to their natural ordering, or to their ``repr`` when they have none.
    """
    if left is None or right is None:
        return (left is None) - (right is None)
    left_hash, right_hash = _hash_of(left), _hash_of(right)
    if left_hash != right_hash:
        return (left_hash > right_hash) - (left_hash < right_hash)
    return _natural_order(left, right)


def _nulls_last(comparator: Comparator) -> Comparator:
    def _compare(left: Any, right: Any) -> int:
        if left is None or right is None:
            return (left is None) - (right is None)
        return comparator(left, right)

    return _compare


def sort_values(values: Iterable[Any], comparator: Comparator) -> list[Any]:
    """Return a new list of ``values`` sorted with ``comparator`` (nulls last)."""
    items = list(values)
    if len(items) < 2:
        return items
    return sorted(items, key=functools.cmp_to_key(_nulls_last(comparator)))


class ComparatorRegistry(TypeRegistry[Comparator]):
    """Maps element classes to comparators.

    Example::

        registry = ComparatorRegistry()
        registry.register(Order, lambda a, b: (a.id > b.id) - (a.id < b.id))
        registry.lookup(SpecialOrder)    # Order's comparator
        registry.lookup(int)             # hash_comparator
    """

    _kind = "comparator"

    def _fallback(self) -> Comparator:
        return hash_comparator

    def lookup(self, cls: type | None) -> Comparator:
        comparator = super().lookup(cls)
        return comparator if comparator is not None else hash_comparator
