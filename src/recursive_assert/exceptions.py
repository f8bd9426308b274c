"""Exceptions raised by recursive-assert."""

from __future__ import annotations

from collections.abc import Iterable

from recursive_assert.result import Mismatch

__all__ = ["RecursiveAssertionError", "StrategyChainError"]


def _format_mismatches(mismatches: tuple[Mismatch, ...]) -> str:
    noun = "mismatch" if len(mismatches) == 1 else "mismatches"
    lines = [f"{len(mismatches)} {noun} found:"]
    lines.extend(f"  {mismatch}" for mismatch in mismatches)
    return "\n".join(lines)


class RecursiveAssertionError(AssertionError):
    """Raised by a result sink when the compared values differ.

    Attributes:
        mismatches: Every reported discrepancy, in traversal order.
    """

    def __init__(self, mismatches: Iterable[Mismatch]) -> None:
        self.mismatches: tuple[Mismatch, ...] = tuple(mismatches)
        super().__init__(_format_mismatches(self.mismatches))


class StrategyChainError(RuntimeError):
    """Raised when no strategy of a (custom) chain can handle a node."""
