"""Path-pattern matcher for ignore rules.

Patterns use the same language as ``FieldPath``.  Both the pattern and the
rendered path are split on ``.`` and compared segment by segment:

- identical segments always match;
- a bare pattern segment (no ``[``) also matches the same name followed by any
  ``[...]`` suffix, so ``Order.items.name`` covers every element of ``items``;
- a pattern segment carrying a suffix (``items[0]``, ``items[id=7]``,
  ``prices[EUR]``) only matches that exact text.

There is no escaping: a field name or mapping key containing ``.``, ``[`` or
``]`` cannot be addressed unambiguously.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from recursive_assert.trace.path import FieldPath

__all__ = ["matches", "matches_any", "matches_none"]

logger = logging.getLogger(__name__)


def _segment_matches(pattern_part: str, trace_part: str) -> bool:
    if pattern_part == trace_part:
        return True
    if "[" in pattern_part:
        return False
    suffix = trace_part[len(pattern_part) :]
    return (
        trace_part.startswith(pattern_part)
        and suffix.startswith("[")
        and suffix.endswith("]")
    )


def matches(pattern: str, path: FieldPath) -> bool:
    """Return True if ``pattern`` covers ``path``.

    Args:
        pattern: Ignore pattern, e.g. ``"Order.items[0].name"``.
        path:    Traced path of the node being considered.

    Returns:
        True when both have the same number of segments and every segment
        pair matches.
    """
    pattern_parts = pattern.split(".")
    trace_parts = path.trace.split(".")
    if len(pattern_parts) != len(trace_parts):
        return False
    for pattern_part, trace_part in zip(pattern_parts, trace_parts, strict=True):
        if not _segment_matches(pattern_part, trace_part):
            return False
    logger.debug("Field path '%s' matches '%s' pattern.", path, pattern)
    return True


def matches_any(patterns: Iterable[str], path: FieldPath) -> bool:
    return any(matches(pattern, path) for pattern in patterns)


def matches_none(patterns: Iterable[str], path: FieldPath) -> bool:
    return not matches_any(patterns, path)
