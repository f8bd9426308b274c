"""ComparisonConfig and ComparisonConfigBuilder.

ComparisonConfig is a frozen (immutable) dataclass holding the policy flags
and ignore sets of one top-level comparison.  ComparisonConfigBuilder
accumulates settings fluently and produces a fresh config on every
``build()`` call.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = ["ComparisonConfig", "ComparisonConfigBuilder"]


@dataclass(frozen=True, slots=True)
class ComparisonConfig:
    """Immutable policy of one recursive comparison.

    Attributes:
        break_on_size_mismatch: When True, sequences of different length are
            reported once and their elements are not compared.  Default True.
        break_on_id_mismatch: When True, paired elements whose identifier
            fields differ report only the identifier and are not descended
            into.  Default True.
        treat_empty_collection_as_null: When True, ``None`` on one side equals
            an empty sequence, set or mapping on the other.  Default False.
        skip_when_expected_null: When True, any node whose expected value is
            ``None`` is not verified at all.  Default False.
        sort_before_compare: When True, sequences and sets are sorted with the
            registered comparators before element-wise comparison.
            Default False.
        ignored_field_names: Field names skipped wherever they occur.
        ignored_path_patterns: Path patterns (see ``trace.matcher``) of nodes
            to skip.
    """

    break_on_size_mismatch: bool = True
    break_on_id_mismatch: bool = True
    treat_empty_collection_as_null: bool = False
    skip_when_expected_null: bool = False
    sort_before_compare: bool = False
    ignored_field_names: frozenset[str] = field(default_factory=frozenset)
    ignored_path_patterns: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        for name in ("ignored_field_names", "ignored_path_patterns"):
            values = getattr(self, name)
            if isinstance(values, str):
                msg = f"{name} must be a collection of strings, got a single string {values!r}"
                raise TypeError(msg)
            if not isinstance(values, frozenset):
                object.__setattr__(self, name, frozenset(values))
            for value in getattr(self, name):
                if not isinstance(value, str):
                    msg = f"{name} must only contain strings, got {value!r}"
                    raise TypeError(msg)


class ComparisonConfigBuilder:
    """Fluent, accumulating builder for ``ComparisonConfig``.

    Example::

        config = (
            ComparisonConfigBuilder()
            .break_on_size_mismatch(False)
            .ignore_fields_by_name("created_at")
            .ignore_fields_by_path("Order.items.price")
            .build()
        )
    """

    def __init__(self) -> None:
        self._break_on_size_mismatch = True
        self._break_on_id_mismatch = True
        self._treat_empty_collection_as_null = False
        self._skip_when_expected_null = False
        self._sort_before_compare = False
        self._ignored_field_names: set[str] = set()
        self._ignored_path_patterns: set[str] = set()

    def break_on_size_mismatch(self, enabled: bool) -> ComparisonConfigBuilder:
        self._break_on_size_mismatch = enabled
        return self

    def break_on_id_mismatch(self, enabled: bool) -> ComparisonConfigBuilder:
        self._break_on_id_mismatch = enabled
        return self

    def treat_empty_collection_as_null(self, enabled: bool) -> ComparisonConfigBuilder:
        self._treat_empty_collection_as_null = enabled
        return self

    def skip_when_expected_null(self, enabled: bool) -> ComparisonConfigBuilder:
        self._skip_when_expected_null = enabled
        return self

    def sort_before_compare(self, enabled: bool) -> ComparisonConfigBuilder:
        self._sort_before_compare = enabled
        return self

    def ignore_fields_by_name(self, *names: str) -> ComparisonConfigBuilder:
        self._ignored_field_names.update(names)
        return self

    def ignore_fields_by_path(self, *patterns: str) -> ComparisonConfigBuilder:
        self._ignored_path_patterns.update(patterns)
        return self

    def extend(self, names: Iterable[str] = (), patterns: Iterable[str] = ()) -> ComparisonConfigBuilder:
        """Add several ignored names and path patterns at once."""
        self._ignored_field_names.update(names)
        self._ignored_path_patterns.update(patterns)
        return self

    def build(self) -> ComparisonConfig:
        """Return a new, independent ``ComparisonConfig``."""
        return ComparisonConfig(
            break_on_size_mismatch=self._break_on_size_mismatch,
            break_on_id_mismatch=self._break_on_id_mismatch,
            treat_empty_collection_as_null=self._treat_empty_collection_as_null,
            skip_when_expected_null=self._skip_when_expected_null,
            sort_before_compare=self._sort_before_compare,
            ignored_field_names=frozenset(self._ignored_field_names),
            ignored_path_patterns=frozenset(self._ignored_path_patterns),
        )
