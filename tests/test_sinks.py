"""Tests for the collecting and fail-fast result sinks."""

from __future__ import annotations

import threading

import pytest

from recursive_assert.exceptions import RecursiveAssertionError
from recursive_assert.protocols import ResultSink
from recursive_assert.result import Mismatch, MismatchKind
from recursive_assert.sinks import BaseSink, CollectingSink, FailFastSink

# ---------------------------------------------------------------------------
# Protocol conformance
# ---------------------------------------------------------------------------


class TestProtocol:
    @pytest.mark.parametrize("sink_cls", [CollectingSink, FailFastSink])
    def test_implements_result_sink(self, sink_cls: type[BaseSink]) -> None:
        assert isinstance(sink_cls(), ResultSink)

    def test_base_sink_is_abstract_in_practice(self) -> None:
        with pytest.raises(NotImplementedError):
            BaseSink().report("a", "b")


# ---------------------------------------------------------------------------
# CollectingSink
# ---------------------------------------------------------------------------


class TestCollectingSink:
    def test_finish_without_reports_is_noop(self) -> None:
        CollectingSink().finish()

    def test_collects_in_order(self) -> None:
        sink = CollectingSink()
        sink.report("a", "first")
        sink.report("b", "second", MismatchKind.SIZE)
        assert sink.mismatches == (
            Mismatch("a", "first"),
            Mismatch("b", "second", MismatchKind.SIZE),
        )
        assert len(sink) == 2

    def test_finish_raises_with_every_mismatch(self) -> None:
        sink = CollectingSink()
        sink.report("a", "first")
        sink.report("b", "second")
        with pytest.raises(RecursiveAssertionError) as exc_info:
            sink.finish()
        assert [m.path for m in exc_info.value.mismatches] == ["a", "b"]
        assert "[a] first" in str(exc_info.value)
        assert "[b] second" in str(exc_info.value)

    def test_missing_key_message(self) -> None:
        sink = CollectingSink()
        sink.report_missing_key("Order.prices", "EUR")
        assert sink.mismatches == (
            Mismatch("Order.prices", "object with key <EUR> is missing", MismatchKind.MISSING_KEY),
        )

    def test_unexpected_key_message(self) -> None:
        sink = CollectingSink()
        sink.report_unexpected_key("Order.prices", "USD")
        assert sink.mismatches == (
            Mismatch("Order.prices", "unexpected object with key <USD>", MismatchKind.UNEXPECTED_KEY),
        )

    def test_clear(self) -> None:
        sink = CollectingSink()
        sink.report("a", "b")
        sink.clear()
        assert len(sink) == 0
        sink.finish()

    def test_concurrent_reports(self) -> None:
        sink = CollectingSink()

        def worker(prefix: str) -> None:
            for index in range(100):
                sink.report(f"{prefix}[{index}]", "x")

        threads = [threading.Thread(target=worker, args=(f"t{n}",)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len(sink) == 400


# ---------------------------------------------------------------------------
# FailFastSink
# ---------------------------------------------------------------------------


class TestFailFastSink:
    def test_raises_on_first_report(self) -> None:
        with pytest.raises(RecursiveAssertionError) as exc_info:
            FailFastSink().report("Order.id", "expected <1> but was <2>")
        assert exc_info.value.mismatches == (Mismatch("Order.id", "expected <1> but was <2>"),)

    def test_key_reports_raise(self) -> None:
        with pytest.raises(RecursiveAssertionError, match="is missing"):
            FailFastSink().report_missing_key("root", "k")

    def test_finish_is_noop(self) -> None:
        FailFastSink().finish()
