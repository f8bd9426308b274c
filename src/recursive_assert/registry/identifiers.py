"""IdentifierRegistry: natural business key of a record type.

Sequence elements whose class has an identifier field are paired and traced
by that field (``items[id=7]``) instead of only by position.
"""

from __future__ import annotations

import logging

from recursive_assert.introspection import has_field
from recursive_assert.registry._base import TypeRegistry

__all__ = ["IdentifierRegistry"]

logger = logging.getLogger(__name__)


class IdentifierRegistry(TypeRegistry[str]):
    """Maps record classes to the name of their identifier field.

    A field can only be registered for a class that declares or inherits it;
    other registrations are logged and ignored.  Lookups for unregistered
    classes return None.
    """

    _kind = "identifier field"

    def _accepts(self, cls: type, value: str) -> bool:
        if has_field(cls, value):
            return True
        logger.info(
            "Identifier field wasn't added to registry: field '%s' isn't related to '%s' class.",
            value,
            cls.__qualname__,
        )
        return False
