"""pytest plugin for datafmt.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from datafmt import CodecConfig, DataFormat, marshal, unmarshal
from datafmt.tree import normalize, to_value


@pytest.fixture(scope="session")
def assert_round_trip() -> Any:
    """Fixture that returns a callable round-trip asserter.

    The fixture is session-scoped because the returned callable is stateless
    (marshal/unmarshal keep no state between calls).

    Usage in tests::

        def test_settings_survive_toml(assert_round_trip):
            assert_round_trip({"servers": {"0": "a", "1": "b"}}, "toml")

        def test_null_in_toml(assert_round_trip):
            with pytest.raises(EncodeError):
                assert_round_trip({"x": None}, "toml")

    Returns:
        A callable ``_assert(value, fmt, config=None) -> Any`` that encodes
        ``value`` in ``fmt``, decodes it again, and raises ``AssertionError``
        when the result differs from ``normalize(value)``.  On success the
        decoded value is returned.
    """

    def _assert(
        value: Any,
        fmt: DataFormat | str,
        config: CodecConfig | None = None,
    ) -> Any:
        """Assert that ``value`` survives an encode/decode cycle in ``fmt``.

        Args:
            value:  The Value tree to round-trip.
            fmt:    Format to round-trip through.
            config: Optional CodecConfig for the encoder.

        Raises:
            AssertionError: When the decoded tree differs from the normalized
                input, with a message including the format, both trees and the
                serialized text.
            EncodeError: When ``value`` cannot be represented in ``fmt``.
        """
        expected = normalize(to_value(value))
        data = marshal(value, fmt, config)
        actual = unmarshal(data, fmt)
        if actual != expected:
            raise AssertionError(
                f"value does not round-trip through {fmt}:\n"
                f"  expected: {expected!r}\n"
                f"  actual:   {actual!r}\n"
                f"  serialized:\n{data.decode('utf-8')}"
            )
        return actual

    return _assert
