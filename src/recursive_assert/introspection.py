"""Runtime type introspection used by the comparison strategies.

Provides:
- shape predicates (``is_scalar``, ``is_array_like``, ``is_iterable``,
  ``is_mapping``) that classify a value into one of the strategy kinds;
- ``common_type`` to find the most specific shared class of a collection's
  elements (used for registry lookups);
- ``TypeDescriptor`` / ``describe`` which enumerate the instance fields of a
  record type once per class and cache the result;
- ``read_field`` which reads a field value and turns access failures into a
  missing value.

Field enumeration order for records:
1. dataclass fields (base classes first, ``ClassVar`` excluded);
2. named tuple ``_fields``;
3. ``__slots__`` declared anywhere in the MRO;
4. keys of the instance ``__dict__`` not already listed (per instance).
"""

from __future__ import annotations

import dataclasses
import datetime
import enum
import inspect
import logging
import numbers
import threading
import uuid
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from pathlib import PurePath
from typing import Any

import numpy as np
from cachetools import LRUCache, cached

__all__ = [
    "SCALAR_TYPES",
    "TypeDescriptor",
    "common_type",
    "describe",
    "field_names",
    "has_field",
    "is_array_like",
    "is_empty_collection",
    "is_iterable",
    "is_mapping",
    "is_scalar",
    "read_field",
]

logger = logging.getLogger(__name__)

# Leaf types compared with ``==``.  bool and numpy scalars are covered by
# numbers.Number / np.generic.
SCALAR_TYPES: tuple[type, ...] = (
    str,
    bytes,
    bytearray,
    numbers.Number,
    Decimal,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,
    enum.Enum,
    uuid.UUID,
    PurePath,
    np.generic,
)

_TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray, memoryview)

_SLOT_NAMES_TO_SKIP = frozenset({"__dict__", "__weakref__"})


# ---------------------------------------------------------------------------
# Shape predicates
# ---------------------------------------------------------------------------


def is_scalar(value: Any) -> bool:
    """Return True for primitive-like leaf values (0-d numpy arrays included)."""
    if isinstance(value, np.ndarray):
        return value.ndim == 0
    return isinstance(value, SCALAR_TYPES)


def _is_named_tuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def is_array_like(value: Any) -> bool:
    """Return True for definite-length, index-addressable sequences.

    Named tuples are records, not arrays, and text is a scalar.
    """
    if isinstance(value, np.ndarray):
        return value.ndim >= 1
    if isinstance(value, _TEXT_TYPES) or _is_named_tuple(value):
        return False
    return isinstance(value, Sequence)


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_iterable(value: Any) -> bool:
    """Return True for set-like or sequential-only collections.

    Excludes text, mappings, named tuples and anything ``is_array_like``
    already accepts.
    """
    if isinstance(value, _TEXT_TYPES) or isinstance(value, np.ndarray):
        return False
    if is_mapping(value) or _is_named_tuple(value):
        return False
    return isinstance(value, Iterable) and not isinstance(value, Sequence)


def is_empty_collection(value: Any) -> bool | None:
    """Return whether a collection is empty, or None if ``value`` is not one.

    Iterators without ``len`` are not consumed and count as non-empty.
    """
    if isinstance(value, np.ndarray):
        return value.size == 0 if value.ndim >= 1 else None
    if is_array_like(value) or is_mapping(value) or is_iterable(value):
        try:
            return len(value) == 0
        except TypeError:
            return False
    return None


# ---------------------------------------------------------------------------
# Common element type
# ---------------------------------------------------------------------------


def common_type(values: Iterable[Any]) -> type | None:
    """Return the most specific class shared by all non-None ``values``.

    Returns None when there are no non-None values.  Falls back to ``object``
    when the element classes share nothing more specific.
    """
    classes: list[type] = []
    for value in values:
        if value is None:
            continue
        cls = type(value)
        if cls not in classes:
            classes.append(cls)
    if not classes:
        return None
    if len(classes) == 1:
        return classes[0]
    for candidate in classes[0].__mro__:
        if all(issubclass(cls, candidate) for cls in classes):
            return candidate
    return object


# ---------------------------------------------------------------------------
# Type descriptors
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """Statically known instance fields of a record type.

    Attributes:
        cls:          The described class.
        field_names:  Field names in enumeration order.  Does not include
                      instance ``__dict__`` keys, which differ per object.
    """

    cls: type
    field_names: tuple[str, ...]

    def fields_of(self, instance: Any) -> tuple[str, ...]:
        """Return the static fields followed by extra ``__dict__`` keys of ``instance``."""
        instance_dict = getattr(instance, "__dict__", None)
        if not isinstance(instance_dict, dict):
            return self.field_names
        extra = tuple(name for name in instance_dict if name not in self.field_names)
        return self.field_names + extra


_descriptor_lock = threading.Lock()


@cached(cache=LRUCache(maxsize=1024), lock=_descriptor_lock)
def describe(cls: type) -> TypeDescriptor:
    """Build (once per class) the ``TypeDescriptor`` for ``cls``."""
    names: list[str] = []
    if dataclasses.is_dataclass(cls):
        names.extend(f.name for f in dataclasses.fields(cls))
    named_fields = getattr(cls, "_fields", None)
    if issubclass(cls, tuple) and isinstance(named_fields, tuple):
        names.extend(name for name in named_fields if name not in names)
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot not in _SLOT_NAMES_TO_SKIP and slot not in names:
                names.append(slot)
    logger.debug("Described '%s' with fields %s.", cls.__qualname__, names)
    return TypeDescriptor(cls=cls, field_names=tuple(names))


def field_names(instance: Any) -> tuple[str, ...]:
    """Return every field name to compare for ``instance``."""
    return describe(type(instance)).fields_of(instance)


def has_field(cls: type, name: str) -> bool:
    """Return True if ``name`` is declared on ``cls`` or inherited by it.

    Annotated class attributes, properties and ``__init__`` parameters count
    as declarations, in addition to the fields ``describe`` reports.
    """
    if name in describe(cls).field_names:
        return True
    for klass in cls.__mro__:
        if name in inspect.get_annotations(klass) or name in vars(klass):
            return True
    try:
        parameters = inspect.signature(cls.__init__).parameters
    except (TypeError, ValueError):
        return False
    return name in parameters and name != "self"


def read_field(instance: Any, name: str) -> Any:
    """Read ``instance.name``; any access failure yields None.

    A single unreadable field must not abort the traversal, so failures are
    logged and treated as a missing value.
    """
    try:
        return getattr(instance, name)
    except AttributeError:
        logger.debug(
            "'%s' has no field '%s'; treating it as missing.",
            type(instance).__qualname__,
            name,
        )
        return None
    except Exception:
        logger.warning(
            "Failed to read field '%s' of '%s'; treating it as missing.",
            name,
            type(instance).__qualname__,
            exc_info=True,
        )
        return None
