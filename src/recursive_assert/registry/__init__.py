"""Registries keyed by runtime class.

- ComparatorRegistry: ordering used when sorting collections before compare
- IdentifierRegistry: identifier field used to pair collection elements
"""

from recursive_assert.registry.comparators import (
    Comparator,
    ComparatorRegistry,
    hash_comparator,
    sort_values,
)
from recursive_assert.registry.identifiers import IdentifierRegistry

__all__ = [
    "Comparator",
    "ComparatorRegistry",
    "IdentifierRegistry",
    "hash_comparator",
    "sort_values",
]
