"""Codec Protocol for the per-format encode/decode delegates.

Defines the structural interface every format codec satisfies.  A codec
works on text, not bytes: UTF-8 handling, key/scalar coercion and
normalization all happen in the dispatch layer around it.

Example::

    from datafmt.protocols import Codec

    class IniCodec:
        format = "ini"

        def decode(self, text: str) -> Any: ...

        def encode(self, value: Value, config: CodecConfig) -> str: ...

    assert isinstance(IniCodec(), Codec)  # True — structural conformance
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datafmt.config import CodecConfig
    from datafmt.tree.nodes import Value


@runtime_checkable
class Codec(Protocol):
    """Structural protocol for format codecs.

    ``decode`` must:
    - Parse ``text`` with the format's library and return its native result
      (dicts, lists and scalars; non-string keys and dates are allowed, the
      dispatch layer coerces them).
    - Raise ``DecodeError`` carrying the library's diagnostic on bad input.

    ``encode`` must:
    - Serialize an already-coerced, already-normalized Value.
    - Return text that ends with a newline unless it is empty.
    - Raise ``EncodeError`` when the value cannot be represented, including
      root-shape restrictions of the format.
    """

    format: str

    def decode(self, text: str) -> Any: ...

    def encode(self, value: Value, config: CodecConfig) -> str: ...
