"""Result sinks: turn mismatch reports into test failures.

- ``CollectingSink`` accumulates every report and raises one
  ``RecursiveAssertionError`` listing all of them on ``finish()``.  It can be
  shared by several comparisons before it is finished.
- ``FailFastSink`` raises on the very first report.

Both derive from ``BaseSink``, which renders the mapping-key reports into
regular ``report`` calls.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from recursive_assert.exceptions import RecursiveAssertionError
from recursive_assert.result import Mismatch, MismatchKind

__all__ = ["BaseSink", "CollectingSink", "FailFastSink"]

logger = logging.getLogger(__name__)


class BaseSink:
    """Base implementation of the ``ResultSink`` protocol.

    Subclasses implement ``report`` and ``finish``.
    """

    def report(self, path: str, message: str, kind: MismatchKind = MismatchKind.VALUE) -> None:
        raise NotImplementedError

    def report_missing_key(self, path: str, key: Any) -> None:
        self.report(path, f"object with key <{key}> is missing", MismatchKind.MISSING_KEY)

    def report_unexpected_key(self, path: str, key: Any) -> None:
        self.report(path, f"unexpected object with key <{key}>", MismatchKind.UNEXPECTED_KEY)

    def finish(self) -> None:
        raise NotImplementedError


class CollectingSink(BaseSink):
    """Accumulates mismatches and reports them all at once.

    Example::

        sink = CollectingSink()
        assert_equal(actual_a, expected_a, sink=sink)
        assert_equal(actual_b, expected_b, sink=sink)
        sink.finish()   # one AssertionError listing both comparisons' mismatches
    """

    def __init__(self) -> None:
        self._mismatches: list[Mismatch] = []
        self._lock = threading.Lock()

    @property
    def mismatches(self) -> tuple[Mismatch, ...]:
        with self._lock:
            return tuple(self._mismatches)

    def report(self, path: str, message: str, kind: MismatchKind = MismatchKind.VALUE) -> None:
        mismatch = Mismatch(path=path, message=message, kind=kind)
        logger.debug("Recorded mismatch %s", mismatch)
        with self._lock:
            self._mismatches.append(mismatch)

    def finish(self) -> None:
        """Raise ``RecursiveAssertionError`` if anything was reported."""
        mismatches = self.mismatches
        if mismatches:
            raise RecursiveAssertionError(mismatches)

    def clear(self) -> None:
        with self._lock:
            self._mismatches.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._mismatches)


class FailFastSink(BaseSink):
    """Raises ``RecursiveAssertionError`` on the first report."""

    def report(self, path: str, message: str, kind: MismatchKind = MismatchKind.VALUE) -> None:
        raise RecursiveAssertionError([Mismatch(path=path, message=message, kind=kind)])

    def finish(self) -> None:
        return None
