"""Integration tests for the recursive-assert pytest plugin.

These tests verify that the plugin fixtures are auto-discovered via the
pytest11 entry point and behave correctly.

NOTE: These tests require recursive-assert to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixtures.
"""

from __future__ import annotations

import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest

from recursive_assert import CollectingSink, ComparisonConfig, assert_equal


@dataclass
class Point:
    x: int
    y: int


def test_fixture_passes_equal_values(assert_recursively_equal: Any) -> None:
    assert_recursively_equal({"p": Point(1, 2)}, {"p": Point(1, 2)})


def test_fixture_fails_listing_every_path(assert_recursively_equal: Any) -> None:
    with pytest.raises(AssertionError) as exc_info:
        assert_recursively_equal(Point(0, 0), Point(1, 2))
    message = str(exc_info.value)
    assert "2 mismatches found:" in message
    assert "[Point.x]" in message
    assert "[Point.y]" in message


def test_fixture_custom_config(assert_recursively_equal: Any) -> None:
    config = ComparisonConfig(ignored_field_names={"y"})
    assert_recursively_equal(Point(1, 0), Point(1, 2), config=config)


def test_fixture_root_name(assert_recursively_equal: Any) -> None:
    with pytest.raises(AssertionError, match=r"\[origin\.x\]"):
        assert_recursively_equal(Point(5, 0), Point(0, 0), root_name="origin")


def test_fixture_returns_callable(assert_recursively_equal: Any) -> None:
    assert callable(assert_recursively_equal), (
        "assert_recursively_equal fixture must return a callable, not a direct value"
    )


def test_soft_assertions_collects_without_raising(soft_assertions: CollectingSink) -> None:
    assert isinstance(soft_assertions, CollectingSink)
    assert_equal(Point(1, 2), Point(1, 2), sink=soft_assertions)
    assert_equal([1, 2], [1, 2], sink=soft_assertions)
    assert len(soft_assertions) == 0


def test_soft_assertions_report_at_teardown(tmp_path: Path) -> None:
    """A test sharing the sink fails at teardown with every collected mismatch."""
    test_file = tmp_path / "test_soft.py"
    test_file.write_text(
        "from recursive_assert import assert_equal\n"
        "\n"
        "def test_soft(soft_assertions):\n"
        "    assert_equal(1, 2, sink=soft_assertions)\n"
        "    assert_equal('a', 'b', sink=soft_assertions)\n"
    )
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "-q", "-p", "no:cacheprovider", str(test_file)],
        capture_output=True,
        text=True,
        cwd=str(tmp_path),
    )
    assert result.returncode != 0
    assert "2 mismatches found:" in result.stdout
    assert "1 passed, 1 error" in result.stdout


def test_plugin_discovery() -> None:
    """Verify both fixtures appear in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    for fixture in ("assert_recursively_equal", "soft_assertions"):
        assert fixture in result.stdout, (
            f"{fixture} not found in pytest --fixtures output.\n"
            f"stdout:\n{result.stdout}\n"
            f"stderr:\n{result.stderr}"
        )
