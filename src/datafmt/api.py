"""Public API functions for datafmt.

This module composes the codecs and the tree normalizer into the user-facing
operations:

- ``unmarshal`` / ``marshal``: bytes <-> normalized Value
- ``load`` / ``write``: the same, through a file
- ``to_text`` / ``print_value``: text conveniences over ``marshal``
- ``convert``: re-serialize a document in another format
- ``unmarshal_into`` / ``load_into``: decode straight into a caller type

Every call is independent: there is no module-level mutable state.  Wherever
a ``fmt`` is accepted it may be a ``DataFormat`` or a format name; for the
file operations it may also be omitted and is then inferred from the file
extension.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import IO, Any, TypeVar

from datafmt import codecs
from datafmt.config import CodecConfig
from datafmt.errors import (
    DataFileNotFoundError,
    DataIOError,
    DecodeError,
    EncodeError,
)
from datafmt.formats import DataFormat, resolve_format
from datafmt.tree.builder import to_value
from datafmt.tree.nodes import Value
from datafmt.tree.normalizer import normalize

__all__ = [
    "convert",
    "load",
    "load_into",
    "marshal",
    "print_value",
    "to_text",
    "unmarshal",
    "unmarshal_into",
    "write",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")

StrPath = str | os.PathLike[str]


def unmarshal(data: bytes | str, fmt: DataFormat | str) -> Value:
    """Decode ``data`` and normalize the resulting tree.

    Args:
        data: Serialized document (UTF-8 bytes or text).
        fmt:  Source format.

    Returns:
        A normalized Value: no index-shaped mapping remains at any depth.

    Raises:
        UnsupportedFormatError: If ``fmt`` is not a known format.
        DecodeError: If ``data`` is malformed for ``fmt``.
    """
    return normalize(codecs.decode(data, fmt))


def marshal(
    value: Any,
    fmt: DataFormat | str,
    config: CodecConfig | None = None,
) -> bytes:
    """Normalize ``value`` and encode it in ``fmt``.

    Normalizing first means an index-shaped mapping built by hand (e.g.
    ``{"0": "a", "1": "b"}``) is written as a real array.

    Args:
        value:  Value tree to serialize.
        fmt:    Target format.
        config: Encoder options.  Defaults to ``CodecConfig()`` when None.

    Returns:
        The serialized document as UTF-8 bytes.

    Raises:
        UnsupportedFormatError: If ``fmt`` is not a known format.
        EncodeError: If ``value`` cannot be represented in ``fmt``.
    """
    fmt = resolve_format(fmt)
    try:
        tree = normalize(to_value(value))
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"cannot encode as {fmt}: {exc}", fmt) from exc
    return codecs.encode(tree, fmt, config)


def load(path: StrPath, fmt: DataFormat | str | None = None) -> Value:
    """Read a whole file and unmarshal it.

    Args:
        path: File to read.
        fmt:  Source format.  Inferred from the extension of ``path`` when
              None.

    Returns:
        The normalized Value.

    Raises:
        UnsupportedFormatError: If the format is unknown or cannot be inferred.
        DataFileNotFoundError: If ``path`` does not exist.
        DataIOError: On any other read failure.
        DecodeError: If the content is malformed for the format.
    """
    fmt = resolve_format(fmt, path)
    logger.debug("loading %s as %s", path, fmt)
    return unmarshal(_read_file(path), fmt)


def write(
    path: StrPath,
    value: Any,
    fmt: DataFormat | str | None = None,
    config: CodecConfig | None = None,
) -> None:
    """Marshal ``value`` and write it to ``path``, replacing any content.

    The value is fully encoded before the file is opened, so an encode
    failure leaves an existing file untouched.

    Args:
        path:   File to create or truncate.
        value:  Value tree to serialize.
        fmt:    Target format.  Inferred from the extension of ``path`` when
                None.
        config: Encoder options.

    Raises:
        UnsupportedFormatError: If the format is unknown or cannot be inferred.
        EncodeError: If ``value`` cannot be represented in the format.
        DataIOError: If the file cannot be opened, written in full, or closed.
    """
    fmt = resolve_format(fmt, path)
    data = marshal(value, fmt, config)

    logger.debug("writing %d bytes to %s as %s", len(data), path, fmt)
    try:
        with open(path, "wb") as fh:
            written = fh.write(data)
    except OSError as exc:
        raise DataIOError(f"cannot write {path}: {exc}", path) from exc

    if written != len(data):
        msg = f"short write to {path}: {written} of {len(data)} bytes"
        raise DataIOError(msg, path)


def to_text(
    value: Any,
    fmt: DataFormat | str,
    config: CodecConfig | None = None,
) -> str:
    """Return ``value`` serialized in ``fmt`` as a string."""
    return marshal(value, fmt, config).decode("utf-8")


def print_value(
    value: Any,
    fmt: DataFormat | str,
    config: CodecConfig | None = None,
    file: IO[str] | None = None,
) -> None:
    """Write ``value`` serialized in ``fmt`` to ``file`` (stdout by default).

    The text is encoded in full before anything is written.  It is written
    unchanged: encoded documents already end with a newline, so no second
    one is appended.
    """
    text = to_text(value, fmt, config)
    stream = file if file is not None else sys.stdout
    stream.write(text)
    stream.flush()


def convert(
    data: bytes | str,
    src: DataFormat | str,
    dst: DataFormat | str,
    config: CodecConfig | None = None,
) -> bytes:
    """Re-serialize a ``src`` document as ``dst``.

    Example::

        convert(b'{"a": [1, 2]}', "json", "yaml")   # b"a:\\n- 1\\n- 2\\n"
    """
    return marshal(unmarshal(data, src), dst, config)


def unmarshal_into(
    data: bytes | str,
    fmt: DataFormat | str,
    target: Callable[..., T],
) -> T:
    """Unmarshal ``data`` and pass the result to ``target``.

    A mapping root is spread as keyword arguments (``target(**value)``), which
    suits dataclasses and pydantic-style models; any other root is passed as
    the single positional argument.  No field conversion happens here.

    Raises:
        DecodeError: If decoding fails, or ``target`` rejects the data with
            ``TypeError`` or ``ValueError``.
    """
    fmt = resolve_format(fmt)
    value = unmarshal(data, fmt)
    try:
        if isinstance(value, dict):
            return target(**value)
        return target(value)
    except (TypeError, ValueError) as exc:
        name = getattr(target, "__name__", repr(target))
        msg = f"cannot build {name} from {fmt} data: {exc}"
        raise DecodeError(msg, fmt) from exc


def load_into(
    path: StrPath,
    target: Callable[..., T],
    fmt: DataFormat | str | None = None,
) -> T:
    """Read ``path`` and build ``target`` from it, like ``unmarshal_into``."""
    fmt = resolve_format(fmt, path)
    return unmarshal_into(_read_file(path), fmt, target)


def _read_file(path: StrPath) -> bytes:
    """Read all of ``path``, mapping OS failures onto the datafmt errors."""
    file_path = Path(path)
    if not file_path.exists():
        raise DataFileNotFoundError(f"file doesn't exist: {path}", path)
    try:
        return file_path.read_bytes()
    except FileNotFoundError as exc:
        raise DataFileNotFoundError(f"file doesn't exist: {path}", path) from exc
    except OSError as exc:
        raise DataIOError(f"cannot read {path}: {exc}", path) from exc
