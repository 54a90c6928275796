"""YamlCodec: YAML via PyYAML's safe loader and dumper.

Only the safe subset is used, so documents cannot construct arbitrary Python
objects.  A document must contain at most one YAML document; an empty input
decodes to ``None``.  Output is block style with PyYAML's default layout,
tuned by ``CodecConfig`` (key sorting, unicode, width, indent).  Any Value may
be the root.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import yaml

from datafmt.errors import DecodeError, EncodeError
from datafmt.formats import DataFormat

if TYPE_CHECKING:
    from datafmt.config import CodecConfig
    from datafmt.tree.nodes import Value

__all__ = ["YamlCodec"]


class YamlCodec:
    """YAML codec backed by ``yaml.safe_load`` / ``yaml.safe_dump``."""

    format = DataFormat.YAML

    def decode(self, text: str) -> Any:
        try:
            return yaml.safe_load(text)
        except (yaml.YAMLError, ValueError, RecursionError) as exc:
            raise DecodeError(f"invalid YAML: {exc}", self.format) from exc

    def encode(self, value: Value, config: CodecConfig) -> str:
        try:
            text: str = yaml.safe_dump(
                value,
                default_flow_style=False,
                sort_keys=config.sort_keys,
                allow_unicode=config.allow_unicode,
                width=config.yaml_width,
                indent=config.yaml_indent,
            )
        except (yaml.YAMLError, ValueError, RecursionError) as exc:
            raise EncodeError(f"cannot encode as YAML: {exc}", self.format) from exc
        return text
