"""Tree subpackage: the generic Value tree and its transformations.

Re-exports the public API for the tree module:
- Value: type alias for the six-variant data tree
- NodeKind: StrEnum of the variants (NULL, BOOL, NUMBER, STRING, SEQUENCE, MAPPING)
- kind_of: classifies an object as a NodeKind
- to_value: coerces decoder output into a Value tree
- normalize: restores index-shaped mappings to sequences
"""

from datafmt.tree.builder import coerce_key, to_value
from datafmt.tree.nodes import NodeKind, Value, kind_of
from datafmt.tree.normalizer import index_of, is_index_shaped, normalize

__all__ = [
    "NodeKind",
    "Value",
    "coerce_key",
    "index_of",
    "is_index_shaped",
    "kind_of",
    "normalize",
    "to_value",
]
