"""to_value: coerce decoder output (or caller-built data) into a Value tree.

Decoders hand back more than the six Value variants: YAML and TOML produce
``datetime`` objects, YAML allows non-string mapping keys, and callers may
build trees from tuples.  ``to_value`` is the single boundary where those are
brought into the closed variant set:

- mapping keys become strings: ``True`` -> ``"true"``, ``None`` -> ``"null"``,
  numbers -> ``str(number)``, dates and times -> ISO-8601
- ``date``, ``datetime`` and ``time`` values become ISO-8601 strings
- tuples become lists
- anything else raises ``TypeError``

The walk uses an explicit work list, so nesting depth is not limited by the
interpreter stack.  The input is never mutated.
"""

from __future__ import annotations

import datetime as dt
from typing import Any

from datafmt.tree.nodes import Value

__all__ = ["coerce_key", "to_value"]

# Work-list marker: leaving a container subtree
_LEAVE = object()


def coerce_key(key: Any) -> str:
    """Return the string form of a mapping key.

    Args:
        key: A key as produced by a decoder.

    Returns:
        ``key`` itself for strings, otherwise its canonical text form.

    Raises:
        TypeError: If the key has no sensible string form (e.g. a tuple).
    """
    if isinstance(key, str):
        return key
    # bool before int: bool subclasses int
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    if isinstance(key, (int, float)):
        return str(key)
    if isinstance(key, (dt.date, dt.time)):
        return key.isoformat()
    raise TypeError(f"Unsupported mapping key type: {type(key)!r}")


def _coerce_scalar(value: Any) -> Value:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (dt.date, dt.time)):
        return value.isoformat()
    raise TypeError(f"Unsupported value type: {type(value)!r}")


def to_value(obj: Any) -> Value:
    """Convert ``obj`` into a Value tree made only of the six variants.

    Args:
        obj: Decoder output or caller-built data.

    Returns:
        A new tree; containers are always fresh ``dict``/``list`` objects.

    Raises:
        TypeError: If a node or key cannot be represented.
        ValueError: If two keys of one mapping collapse to the same string
            (e.g. YAML ``{1: a, "1": b}``), or if a container contains
            itself (possible with YAML anchors).
    """
    root: list[Value] = [None]
    # Each item: (source object, destination container, slot in destination).
    # A ``_LEAVE`` item marks the end of a container's subtree.
    stack: list[tuple[Any, Any, Any]] = [(obj, root, 0)]
    active: set[int] = set()

    while stack:
        source, dest, slot = stack.pop()

        if source is _LEAVE:
            active.discard(slot)
            continue

        if isinstance(source, (dict, list, tuple)):
            if id(source) in active:
                msg = "recursive structure cannot be converted to a value tree"
                raise ValueError(msg)
            active.add(id(source))
            stack.append((_LEAVE, None, id(source)))

        if isinstance(source, dict):
            out: dict[str, Value] = {}
            for key, child in source.items():
                skey = coerce_key(key)
                if skey in out:
                    msg = f"duplicate mapping key {skey!r} after string coercion"
                    raise ValueError(msg)
                out[skey] = None
                stack.append((child, out, skey))
            dest[slot] = out
        elif isinstance(source, (list, tuple)):
            seq: list[Value] = [None] * len(source)
            stack.extend((child, seq, i) for i, child in enumerate(source))
            dest[slot] = seq
        else:
            dest[slot] = _coerce_scalar(source)

    return root[0]

