"""datafmt - convert data between YAML, TOML and JSON via one normalized tree."""

from __future__ import annotations

from datafmt.api import (
    convert,
    load,
    load_into,
    marshal,
    print_value,
    to_text,
    unmarshal,
    unmarshal_into,
    write,
)
from datafmt.codecs import decode, encode
from datafmt.config import CodecConfig
from datafmt.errors import (
    DataFileNotFoundError,
    DataFormatError,
    DataIOError,
    DecodeError,
    EncodeError,
    UnsupportedFormatError,
)
from datafmt.formats import DataFormat, format_by_extension, format_by_name
from datafmt.tree import NodeKind, Value, normalize

__version__: str = "0.1.0"
__all__: list[str] = [
    "CodecConfig",
    "DataFileNotFoundError",
    "DataFormat",
    "DataFormatError",
    "DataIOError",
    "DecodeError",
    "EncodeError",
    "NodeKind",
    "UnsupportedFormatError",
    "Value",
    "convert",
    "decode",
    "encode",
    "format_by_extension",
    "format_by_name",
    "load",
    "load_into",
    "marshal",
    "normalize",
    "print_value",
    "to_text",
    "unmarshal",
    "unmarshal_into",
    "write",
]
