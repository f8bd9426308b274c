"""Trace subpackage: path construction and ignore-pattern matching.

Re-exports:
- FieldPath: immutable dotted/indexed path to a compared value
- matches, matches_any, matches_none: ignore-pattern predicates
"""

from recursive_assert.trace.matcher import matches, matches_any, matches_none
from recursive_assert.trace.path import COLLECTION_MARKER, FieldPath

__all__ = ["COLLECTION_MARKER", "FieldPath", "matches", "matches_any", "matches_none"]
