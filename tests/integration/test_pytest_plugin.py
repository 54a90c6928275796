"""Integration tests for the datafmt pytest plugin.

These tests verify that the assert_round_trip fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require datafmt to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from datafmt import CodecConfig, EncodeError


def test_fixture_passes_round_trippable_value(assert_round_trip: Any) -> None:
    assert_round_trip({"servers": {"0": "a", "1": "b"}}, "toml")


def test_fixture_returns_decoded_value(assert_round_trip: Any) -> None:
    assert assert_round_trip({"x": {"1": "b", "0": "a"}}, "json") == {"x": ["a", "b"]}


def test_fixture_custom_config(assert_round_trip: Any) -> None:
    assert_round_trip({"b": 1, "a": "é"}, "yaml", config=CodecConfig(sort_keys=True))


def test_fixture_propagates_encode_error(assert_round_trip: Any) -> None:
    with pytest.raises(EncodeError):
        assert_round_trip({"x": None}, "toml")


def test_fixture_reports_lossy_round_trip(assert_round_trip: Any) -> None:
    """NaN survives encoding but never compares equal after decoding."""
    with pytest.raises(AssertionError, match="does not round-trip through yaml"):
        assert_round_trip({"x": float("nan")}, "yaml")


def test_fixture_returns_callable(assert_round_trip: Any) -> None:
    assert callable(assert_round_trip)


def test_plugin_discovery() -> None:
    """Verify assert_round_trip appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_round_trip" in result.stdout, (
        f"assert_round_trip not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
