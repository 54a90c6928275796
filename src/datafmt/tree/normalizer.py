"""normalize: restore index-shaped mappings to sequences throughout a tree.

Some decoders, and some callers building trees by hand, represent a sequence
as a mapping keyed by the decimal strings ``"0"`` .. ``"n-1"``.  A mapping is
*index-shaped* when:

1. it is non-empty (``{}`` always stays a mapping: an empty mapping and an
   empty sequence cannot be told apart by keys, and the mapping wins), and
2. every key is a canonical decimal integer, i.e. ASCII digits with no sign,
   whitespace or leading zero (``"0"`` itself excepted), and
3. the integers are exactly ``{0, 1, ..., n-1}``.

Index-shaped mappings become lists ordered by the *integer* value of their
keys ("2" before "10"), never by key order or lexical order.  Every other
node keeps its shape, and children are normalized at every depth.

The traversal uses an explicit work list, so arbitrarily deep input cannot
exhaust the interpreter stack.  Because the index-shape decision depends only
on a node's own keys, each output container is allocated when its source node
is visited and filled in as the work list reaches its children.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, assert_never

from datafmt.tree.nodes import NodeKind, Value, kind_of

__all__ = ["index_of", "is_index_shaped", "normalize"]

_LEAVE = object()


def index_of(key: Any) -> int | None:
    """Return the array index encoded by ``key``, or None.

    Only canonical forms count: ``"7"`` -> 7, but ``"07"``, ``"+7"``,
    ``" 7"``, ``"-1"`` and non-ASCII digits are rejected.  Non-string keys
    are never indices, nor are digit strings too long for ``int()``.
    """
    if not isinstance(key, str) or not key.isascii() or not key.isdigit():
        return None
    if len(key) > 1 and key[0] == "0":
        return None
    try:
        return int(key)
    except ValueError:
        # Longer than sys.get_int_max_str_digits()
        return None


def is_index_shaped(mapping: Mapping[Any, Any]) -> bool:
    """Return True if ``mapping``'s keys are exactly ``"0"`` .. ``"n-1"``.

    Keys are unique and each canonical key names a distinct integer, so
    ``n`` canonical keys all below ``n`` cover ``0..n-1`` with no gap.
    """
    n = len(mapping)
    if n == 0:
        return False
    max_digits = len(str(n - 1))
    for key in mapping:
        if isinstance(key, str) and len(key) > max_digits:
            return False
        index = index_of(key)
        if index is None or index >= n:
            return False
    return True


def normalize(value: Value) -> Value:
    """Return a copy of ``value`` with every index-shaped mapping made a list.

    Scalars are returned as-is (same object).  Containers in the result are
    always new objects; the input is never mutated.  The function is
    idempotent: ``normalize(normalize(v)) == normalize(v)``.

    Args:
        value: A Value tree.  Tuples are accepted as sequences.

    Returns:
        The normalized tree.

    Raises:
        TypeError: If a node is not a Value variant.
        ValueError: If a container contains itself.

    Example::

        normalize({"x": {"1": "b", "0": "a"}})   # {"x": ["a", "b"]}
        normalize({"0": "a", "2": "c"})          # unchanged: gap at 1
    """
    root: list[Value] = [None]
    # Each item: (source node, destination container, slot in destination)
    stack: list[tuple[Any, Any, Any]] = [(value, root, 0)]
    active: set[int] = set()

    while stack:
        source, dest, slot = stack.pop()

        if source is _LEAVE:
            active.discard(slot)
            continue

        kind = kind_of(source)
        if kind in (NodeKind.MAPPING, NodeKind.SEQUENCE):
            if id(source) in active:
                msg = "recursive structure cannot be normalized"
                raise ValueError(msg)
            active.add(id(source))
            stack.append((_LEAVE, None, id(source)))

        match kind:
            case NodeKind.MAPPING:
                if is_index_shaped(source):
                    items: list[Value] = [None] * len(source)
                    for key, child in source.items():
                        stack.append((child, items, int(key)))
                    dest[slot] = items
                else:
                    out: dict[str, Value] = dict.fromkeys(source)
                    for key, child in source.items():
                        stack.append((child, out, key))
                    dest[slot] = out
            case NodeKind.SEQUENCE:
                seq: list[Value] = [None] * len(source)
                stack.extend((child, seq, i) for i, child in enumerate(source))
                dest[slot] = seq
            case NodeKind.NULL | NodeKind.BOOL | NodeKind.NUMBER | NodeKind.STRING:
                dest[slot] = source
            case _:
                assert_never(kind)

    return root[0]
