"""Codecs subpackage: encode/decode dispatch over the per-format codecs.

``decode`` and ``encode`` are the only places that touch raw bytes.  They
handle UTF-8, route to the registered ``Codec`` for the format, and run the
shared coercion pass (``to_value``) so that what comes out of ``decode`` and
what goes into a codec's ``encode`` is always a proper Value tree.

Normalization is *not* applied here; ``datafmt.api`` composes it on top.

Registered codecs::

    DataFormat.JSON -> JsonCodec   (json, two-space indent)
    DataFormat.YAML -> YamlCodec   (PyYAML safe_load / safe_dump)
    DataFormat.TOML -> TomlCodec   (tomllib / tomli-w, mapping root only)
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any

from datafmt.codecs.json import JsonCodec
from datafmt.codecs.toml import TomlCodec
from datafmt.codecs.yaml import YamlCodec
from datafmt.config import CodecConfig
from datafmt.errors import DecodeError, EncodeError
from datafmt.formats import DataFormat, resolve_format
from datafmt.protocols import Codec
from datafmt.tree.builder import to_value
from datafmt.tree.nodes import Value

__all__ = ["JsonCodec", "TomlCodec", "YamlCodec", "decode", "encode", "get_codec"]

logger = logging.getLogger(__name__)

# Codecs are stateless; one shared instance per format.
_CODECS: MappingProxyType[DataFormat, Codec] = MappingProxyType(
    {
        DataFormat.JSON: JsonCodec(),
        DataFormat.YAML: YamlCodec(),
        DataFormat.TOML: TomlCodec(),
    }
)


def get_codec(fmt: DataFormat | str) -> Codec:
    """Return the codec registered for ``fmt`` (a DataFormat or format name)."""
    return _CODECS[resolve_format(fmt)]


def decode(data: bytes | str, fmt: DataFormat | str) -> Value:
    """Decode ``data`` into a Value tree (not yet normalized).

    Args:
        data: Serialized document.  Bytes are read as UTF-8; a leading
            byte-order mark is skipped.
        fmt:  Source format, as a DataFormat or a format name.

    Returns:
        The decoded tree with string keys and only Value scalars.

    Raises:
        UnsupportedFormatError: If ``fmt`` is not a known format name.
        DecodeError: If ``data`` is not valid UTF-8, is malformed for the
            format, or holds something a Value cannot represent.
    """
    fmt = resolve_format(fmt)
    codec = _CODECS[fmt]

    if isinstance(data, (bytes, bytearray)):
        try:
            text = bytes(data).decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"input is not valid UTF-8: {exc}", fmt) from exc
    else:
        text = data.removeprefix("\ufeff")

    logger.debug("decoding %d characters as %s", len(text), fmt)
    raw: Any = codec.decode(text)
    try:
        return to_value(raw)
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"cannot represent {fmt} data: {exc}", fmt) from exc


def encode(
    value: Any,
    fmt: DataFormat | str,
    config: CodecConfig | None = None,
) -> bytes:
    """Encode ``value`` as UTF-8 bytes in ``fmt``.

    Args:
        value:  A Value tree.  Tuples, non-string keys and date/time objects
            are coerced the same way ``decode`` coerces them.
        fmt:    Target format, as a DataFormat or a format name.
        config: Encoder options.  Defaults to ``CodecConfig()`` when None.

    Returns:
        The serialized document.

    Raises:
        UnsupportedFormatError: If ``fmt`` is not a known format name.
        EncodeError: If ``value`` cannot be represented in ``fmt``.
    """
    fmt = resolve_format(fmt)
    config = config if config is not None else CodecConfig()
    codec = _CODECS[fmt]

    try:
        tree = to_value(value)
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"cannot encode as {fmt}: {exc}", fmt) from exc

    text = codec.encode(tree, config)
    logger.debug("encoded %d characters as %s", len(text), fmt)
    return text.encode("utf-8")
