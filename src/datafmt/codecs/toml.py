"""TomlCodec: TOML via ``tomllib`` (read) and ``tomli-w`` (write).

TOML constrains the tree more than JSON or YAML:
- the root must be a mapping (a TOML document is a table)
- there is no null, so ``None`` cannot appear anywhere

Both raise ``EncodeError``; nothing is silently coerced.  TOML dates and
times decode to ``datetime`` objects, which the dispatch layer turns into
ISO-8601 strings.
"""

from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING, Any

import tomli_w

from datafmt.errors import DecodeError, EncodeError
from datafmt.formats import DataFormat
from datafmt.tree.nodes import kind_of

if TYPE_CHECKING:
    from datafmt.config import CodecConfig
    from datafmt.tree.nodes import Value

__all__ = ["TomlCodec"]


class TomlCodec:
    """TOML codec; tomli-w keeps insertion order and ignores ``sort_keys``."""

    format = DataFormat.TOML

    def decode(self, text: str) -> Any:
        try:
            return tomllib.loads(text)
        except (ValueError, RecursionError) as exc:
            # TOMLDecodeError, or an integer beyond the int() digit limit
            raise DecodeError(f"invalid TOML: {exc}", self.format) from exc

    def encode(self, value: Value, config: CodecConfig) -> str:
        if not isinstance(value, dict):
            msg = f"TOML requires a mapping at the root, got {kind_of(value)}"
            raise EncodeError(msg, self.format)
        try:
            return tomli_w.dumps(value)
        except (TypeError, ValueError, RecursionError) as exc:
            raise EncodeError(f"cannot encode as TOML: {exc}", self.format) from exc
