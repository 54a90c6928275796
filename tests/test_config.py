"""Tests for CodecConfig frozen dataclass.

Covers:
- Default values (sort_keys=False, allow_unicode=True, yaml_width=80, yaml_indent=2)
- Immutability (FrozenInstanceError on assignment)
- Validation: yaml_width >= 20, yaml_indent in [2, 9]
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from datafmt.config import CodecConfig


class TestCodecConfigDefaults:
    def test_default_sort_keys(self) -> None:
        assert CodecConfig().sort_keys is False

    def test_default_allow_unicode(self) -> None:
        assert CodecConfig().allow_unicode is True

    def test_default_yaml_width(self) -> None:
        assert CodecConfig().yaml_width == 80

    def test_default_yaml_indent(self) -> None:
        assert CodecConfig().yaml_indent == 2

    def test_equal_instances(self) -> None:
        assert CodecConfig() == CodecConfig()


class TestCodecConfigImmutability:
    def test_assignment_raises(self) -> None:
        config = CodecConfig()
        with pytest.raises(FrozenInstanceError):
            config.sort_keys = True  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert hash(CodecConfig(sort_keys=True)) == hash(CodecConfig(sort_keys=True))


class TestCodecConfigValidation:
    @pytest.mark.parametrize("width", [20, 80, 4096])
    def test_valid_width(self, width: int) -> None:
        assert CodecConfig(yaml_width=width).yaml_width == width

    @pytest.mark.parametrize("width", [19, 0, -1])
    def test_invalid_width(self, width: int) -> None:
        with pytest.raises(ValueError, match="yaml_width must be >= 20"):
            CodecConfig(yaml_width=width)

    @pytest.mark.parametrize("indent", [2, 4, 9])
    def test_valid_indent(self, indent: int) -> None:
        assert CodecConfig(yaml_indent=indent).yaml_indent == indent

    @pytest.mark.parametrize("indent", [0, 1, 10])
    def test_invalid_indent(self, indent: int) -> None:
        with pytest.raises(ValueError, match=r"yaml_indent must be in \[2, 9\]"):
            CodecConfig(yaml_indent=indent)
