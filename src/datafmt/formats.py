"""DataFormat StrEnum and format resolution by name or file extension.

Resolution never returns a sentinel: an unrecognised name or extension raises
``UnsupportedFormatError``. Both lookups are case-insensitive, so ``"YAML"``,
``"Yaml"`` and ``"config.YML"`` all resolve to ``DataFormat.YAML``.

Extension table::

    .yaml, .yml  -> YAML
    .json        -> JSON
    .toml, .tml  -> TOML
"""

from __future__ import annotations

import os
from enum import StrEnum, auto
from pathlib import PurePath
from types import MappingProxyType

from datafmt.errors import UnsupportedFormatError

__all__ = [
    "EXTENSIONS",
    "DataFormat",
    "format_by_extension",
    "format_by_name",
    "resolve_format",
]


class DataFormat(StrEnum):
    """The three supported serialization formats.

    Values are the lowercased member names:
    - YAML -> "yaml"
    - TOML -> "toml"
    - JSON -> "json"
    """

    YAML = auto()
    TOML = auto()
    JSON = auto()


EXTENSIONS: MappingProxyType[str, DataFormat] = MappingProxyType(
    {
        ".yaml": DataFormat.YAML,
        ".yml": DataFormat.YAML,
        ".json": DataFormat.JSON,
        ".toml": DataFormat.TOML,
        ".tml": DataFormat.TOML,
    }
)


def format_by_name(name: str) -> DataFormat:
    """Resolve a format name such as ``"yaml"`` or ``"JSON"``.

    Args:
        name: Format name, matched case-insensitively. Whitespace is not
            stripped.

    Returns:
        The matching ``DataFormat``.

    Raises:
        UnsupportedFormatError: For any other value, including ``""``.
    """
    try:
        return DataFormat(name.lower())
    except ValueError:
        msg = f"unsupported data format: {name!r}"
        raise UnsupportedFormatError(msg) from None


def format_by_extension(path: str | os.PathLike[str]) -> DataFormat:
    """Resolve a format from the final extension of ``path``.

    Only the last suffix counts: ``"data.json.yaml"`` is YAML. A path with no
    suffix (``"cfg"``) or a dotfile with no suffix (``".toml"``) is rejected.

    Args:
        path: File name or path.

    Returns:
        The matching ``DataFormat``.

    Raises:
        UnsupportedFormatError: When the extension is missing or unknown.
    """
    suffix = PurePath(os.fspath(path)).suffix
    fmt = EXTENSIONS.get(suffix.lower())
    if fmt is None:
        msg = f"unsupported data format for file: {os.fspath(path)!r}"
        raise UnsupportedFormatError(msg)
    return fmt


def resolve_format(
    fmt: DataFormat | str | None,
    path: str | os.PathLike[str] | None = None,
) -> DataFormat:
    """Coerce the ``fmt`` argument accepted by the public API to a DataFormat.

    ``DataFormat`` members pass through, strings go through
    ``format_by_name``, and ``None`` falls back to the extension of ``path``.
    """
    if isinstance(fmt, DataFormat):
        return fmt
    if isinstance(fmt, str):
        return format_by_name(fmt)
    if path is None:
        msg = "no data format given and no path to infer it from"
        raise UnsupportedFormatError(msg)
    return format_by_extension(path)
