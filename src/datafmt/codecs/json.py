"""JsonCodec: JSON via the standard library ``json`` module.

Output is always indented with two spaces and ends with a newline.  The
non-standard constants ``NaN``, ``Infinity`` and ``-Infinity`` are rejected in
both directions, so every document this codec writes is strict JSON.  Any
Value may be the root.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, NoReturn

from datafmt.errors import DecodeError, EncodeError
from datafmt.formats import DataFormat

if TYPE_CHECKING:
    from datafmt.config import CodecConfig
    from datafmt.tree.nodes import Value

__all__ = ["INDENT", "JsonCodec"]

INDENT = 2


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"non-standard JSON constant {name!r} is not allowed")


class JsonCodec:
    """JSON codec with a fixed two-space indentation."""

    format = DataFormat.JSON

    def decode(self, text: str) -> Any:
        try:
            return json.loads(text, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as exc:
            raise DecodeError(f"invalid JSON: {exc}", self.format) from exc

    def encode(self, value: Value, config: CodecConfig) -> str:
        try:
            text = json.dumps(
                value,
                indent=INDENT,
                ensure_ascii=not config.allow_unicode,
                sort_keys=config.sort_keys,
                allow_nan=False,
            )
        except (TypeError, ValueError, RecursionError) as exc:
            raise EncodeError(f"cannot encode as JSON: {exc}", self.format) from exc
        return text + "\n"
