"""FieldPath: immutable, append-only trace of a node inside a comparison tree.

The rendered form mirrors what a human reads in a failure message, e.g.
``Order.items[id=7].name``.  The same text is used for reporting and for
ignore-pattern matching, so there is exactly one path language.

Segment forms:
- ``Root``              root segment (usually the expected type name)
- ``.field``            attribute of a record
- ``[3]``               position inside a sequence
- ``[key]``             entry of a mapping
- ``[id=7]``            sequence element paired by its identifier field
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["COLLECTION_MARKER", "FieldPath"]

# Trailing marker for a segment that names a collection, e.g. "tags[]".
COLLECTION_MARKER = "[]"


def _strip_collection_marker(trace: str) -> str:
    if trace.endswith(COLLECTION_MARKER):
        return trace[: -len(COLLECTION_MARKER)]
    return trace


@dataclass(frozen=True, slots=True)
class FieldPath:
    """Immutable dotted path to a value in the compared structure.

    Every constructor returns a new ``FieldPath``; instances are never mutated.
    Appending an index, key or identifier to a path whose last segment ends with
    the ``[]`` collection marker drops the marker first, so ``tags[]`` becomes
    ``tags[3]`` and never ``tags[][3]``.

    Example::

        path = FieldPath.root("Order").field("items").by_id("id", 7).field("name")
        str(path)   # "Order.items[id=7].name"
    """

    trace: str

    @classmethod
    def root(cls, name: str) -> FieldPath:
        """Create the synthetic root segment."""
        return cls(name)

    def field(self, name: str) -> FieldPath:
        return FieldPath(f"{self.trace}.{name}")

    def index(self, index: int) -> FieldPath:
        return FieldPath(f"{_strip_collection_marker(self.trace)}[{index}]")

    def key(self, key: Any) -> FieldPath:
        return FieldPath(f"{_strip_collection_marker(self.trace)}[{key}]")

    def by_id(self, id_field: str, id_value: Any) -> FieldPath:
        """Path to a sequence element identified by its business key."""
        return FieldPath(
            f"{_strip_collection_marker(self.trace)}[{id_field}={id_value}]"
        )

    def __str__(self) -> str:
        return self.trace
