"""Logging setup for the recursive_assert package.

Library modules log through ``logging.getLogger(__name__)``; the package root
only carries a ``NullHandler``.  ``enable_debug_logging`` is a convenience for
tracing strategy decisions while debugging a failing assertion.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["PACKAGE_LOGGER_NAME", "enable_debug_logging", "package_logger"]

PACKAGE_LOGGER_NAME = "recursive_assert"

package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
package_logger.addHandler(logging.NullHandler())


def enable_debug_logging(level: int = logging.DEBUG) -> None:
    """Dump the package's log records to stdout.

    Args:
        level: Logging level (default: DEBUG)
    """
    # Remove existing handlers to avoid duplicates
    package_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("[recursive-assert] [%(levelname)s] %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
