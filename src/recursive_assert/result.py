"""Mismatch records and the ComparisonResult returned by compare()."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["ComparisonResult", "Mismatch", "MismatchKind"]


class MismatchKind(StrEnum):
    """Category of a reported discrepancy.

    - VALUE:              scalar values (or null vs non-null) differ
    - SIZE:               sequence lengths differ
    - MISSING_ELEMENT:    element only present in expected
    - UNEXPECTED_ELEMENT: element only present in actual
    - MISSING_KEY:        mapping key only present in expected
    - UNEXPECTED_KEY:     mapping key only present in actual
    - IDENTIFIER:         paired elements carry different identifiers
    """

    VALUE = auto()
    SIZE = auto()
    MISSING_ELEMENT = auto()
    UNEXPECTED_ELEMENT = auto()
    MISSING_KEY = auto()
    UNEXPECTED_KEY = auto()
    IDENTIFIER = auto()


@dataclass(frozen=True, slots=True)
class Mismatch:
    """One discrepancy found during comparison.

    Attributes:
        path:    Rendered trace of the node, e.g. ``"Order.items[0].name"``.
        message: Human-readable description including both values.
        kind:    Category of the discrepancy.
    """

    path: str
    message: str
    kind: MismatchKind = MismatchKind.VALUE

    def __str__(self) -> str:
        return f"[{self.path}] {self.message}"


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Result of a compare() call.

    Attributes:
        mismatches: Every discrepancy, in traversal order.
        computation_time_ms: Wall-clock duration of the comparison in milliseconds.
    """

    mismatches: tuple[Mismatch, ...]
    computation_time_ms: float

    @property
    def is_equal(self) -> bool:
        return not self.mismatches

    def paths(self) -> list[str]:
        """Return the path of every mismatch, in order."""
        return [mismatch.path for mismatch in self.mismatches]

    def of_kind(self, kind: MismatchKind) -> list[Mismatch]:
        return [mismatch for mismatch in self.mismatches if mismatch.kind == kind]
