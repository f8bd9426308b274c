"""TypeRegistry: thread-safe type -> value map with supertype fallback.

Lookup rule shared by the comparator and identifier registries:

1. exact match on the queried class;
2. otherwise every registered class the queried class is a subclass of
   (including ABC virtual subclasses and runtime-checkable protocols) is a
   candidate, and the most specific one wins:
   - concrete classes beat interfaces (abstract classes, protocols, and ABCs
     that only appear through ``register``/``__subclasshook__``);
   - then the class closest to the queried class in its MRO wins;
   - interfaces outside the MRO rank by the depth of their own MRO;
3. otherwise the registry's fallback value.

Resolved lookups are memoised in a ``cachetools.LRUCache`` that is cleared on
every registration.
"""

from __future__ import annotations

import inspect
import logging
import threading
from collections.abc import Iterable
from typing import Generic, TypeVar

from cachetools import LRUCache

__all__ = ["TypeRegistry", "pick_most_specific"]

logger = logging.getLogger(__name__)

V = TypeVar("V")


def _is_interface(candidate: type, mro: tuple[type, ...]) -> bool:
    if candidate not in mro:
        return True
    return inspect.isabstract(candidate) or bool(getattr(candidate, "_is_protocol", False))


def _specificity(cls: type, candidate: type) -> tuple[bool, int]:
    mro = cls.__mro__
    interface = _is_interface(candidate, mro)
    if candidate in mro:
        distance = mro.index(candidate)
    else:
        # Deeper ABC hierarchies (Sequence vs Iterable) are more specific.
        distance = len(mro) + 1000 - len(candidate.__mro__)
    return interface, distance


def pick_most_specific(cls: type, candidates: Iterable[type]) -> type | None:
    """Return the registered supertype of ``cls`` that best describes it.

    Args:
        cls:        The queried runtime class.
        candidates: Registered classes to choose from.

    Returns:
        The best matching supertype, or None if no candidate is a supertype.
    """
    matching = []
    for candidate in candidates:
        try:
            if issubclass(cls, candidate):
                matching.append(candidate)
        except TypeError:
            # Protocols with non-method members refuse issubclass checks.
            continue
    if not matching:
        return None
    best = min(matching, key=lambda candidate: _specificity(cls, candidate))
    logger.debug(
        "Best matching superclass of '%s' is '%s'.",
        cls.__qualname__,
        best.__qualname__,
    )
    return best


class TypeRegistry(Generic[V]):
    """Base class for registries keyed by runtime class.

    Subclasses provide ``_fallback`` (value returned when nothing matches) and
    may override ``_accepts`` to validate a registration.

    Registration and lookup are safe to call from several threads: a single
    lock guards the entry map and the resolved-lookup cache.
    """

    _kind: str = "value"

    def __init__(self, max_cache_size: int = 256) -> None:
        self._entries: dict[type, V] = {}
        self._resolved: LRUCache[type, V | None] = LRUCache(maxsize=max_cache_size)
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def register(self, cls: type | None, value: V | None) -> None:
        """Register ``value`` for ``cls``; None for either is a logged no-op."""
        if cls is None or value is None:
            logger.info(
                "%s wasn't added to registry:%s%s",
                self._kind.capitalize(),
                " Received class is None." if cls is None else "",
                f" Received {self._kind} is None." if value is None else "",
            )
            return
        if not self._accepts(cls, value):
            return
        with self._lock:
            self._entries[cls] = value
            self._resolved.clear()
        logger.debug("Added %s for '%s' class.", self._kind, cls.__qualname__)

    def _accepts(self, cls: type, value: V) -> bool:
        return True

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(self, cls: type | None) -> V | None:
        """Return the value registered for ``cls`` or its best supertype."""
        if cls is None:
            logger.debug("Received class is None. Returning fallback %s.", self._kind)
            return self._fallback()
        with self._lock:
            if cls in self._resolved:
                resolved = self._resolved[cls]
            else:
                resolved = self._resolve(cls)
                self._resolved[cls] = resolved
        return resolved if resolved is not None else self._fallback()

    def _resolve(self, cls: type) -> V | None:
        exact = self._entries.get(cls)
        if exact is not None:
            logger.debug("Found exact matching %s for '%s'.", self._kind, cls.__qualname__)
            return exact
        best = pick_most_specific(cls, self._entries)
        if best is None:
            logger.debug("There is no matching %s for '%s'.", self._kind, cls.__qualname__)
            return None
        return self._entries[best]

    def _fallback(self) -> V | None:
        return None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def copy(self) -> TypeRegistry[V]:
        """Return an independent registry with the same entries."""
        clone = type(self)(max_cache_size=int(self._resolved.maxsize))
        with self._lock:
            clone._entries.update(self._entries)
        return clone

    def __contains__(self, cls: object) -> bool:
        with self._lock:
            return cls in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
