"""Value type alias and NodeKind StrEnum for the generic data tree.

A Value is built from plain Python objects rather than wrapper classes, so
decoded data can be used directly.  NodeKind names the six variants and
``kind_of`` classifies an object, rejecting anything outside the closed set.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Any, TypeAlias

__all__ = ["NodeKind", "Value", "kind_of"]

# Mapping keys are always str; sequences are lists (tuples are accepted
# wherever a Value is read and come back out as lists).
Value: TypeAlias = (
    dict[str, "Value"] | list["Value"] | str | int | float | bool | None
)


class NodeKind(StrEnum):
    """Enumeration of the six Value variants.

    - NULL     -> "null"     : None
    - BOOL     -> "bool"     : True / False
    - NUMBER   -> "number"   : int or float (the distinction is preserved)
    - STRING   -> "string"   : str
    - SEQUENCE -> "sequence" : list or tuple
    - MAPPING  -> "mapping"  : dict with str keys
    """

    NULL = auto()
    BOOL = auto()
    NUMBER = auto()
    STRING = auto()
    SEQUENCE = auto()
    MAPPING = auto()


def kind_of(value: Any) -> NodeKind:
    """Return the NodeKind of ``value``.

    Args:
        value: Any object.

    Returns:
        The variant ``value`` belongs to.

    Raises:
        TypeError: If ``value`` is not one of the six variants.
    """
    if value is None:
        return NodeKind.NULL
    # bool MUST be checked before int: bool subclasses int
    if isinstance(value, bool):
        return NodeKind.BOOL
    if isinstance(value, (int, float)):
        return NodeKind.NUMBER
    if isinstance(value, str):
        return NodeKind.STRING
    if isinstance(value, (list, tuple)):
        return NodeKind.SEQUENCE
    if isinstance(value, dict):
        return NodeKind.MAPPING
    raise TypeError(f"Unsupported value type: {type(value)!r}")
