"""
Core Helpers - Container search, mutation and deep operations

This module contains the helpers that work on lists and dicts:
- Finding, removing, merging and replacing records by key
- Deep clone, merge, combine, compare and diff
- Largest and smallest values of homogeneous sequences

License: MIT
"""

from .arrays import (
    find_index,
    find_item,
    find_and_delete,
    find_and_merge,
    find_and_overwrite,
    shift_element,
    object_array_to_dict,
    join_fields,
    without,
)
from .deep import (
    is_mapping,
    is_numeric,
    is_empty,
    deep_clone,
    deep_merge,
    combine,
    structural_equal,
    diff,
)
from .ordering import SequenceKind, classify, max_value, min_value

__all__ = [
    "find_index",
    "find_item",
    "find_and_delete",
    "find_and_merge",
    "find_and_overwrite",
    "shift_element",
    "object_array_to_dict",
    "join_fields",
    "without",
    "is_mapping",
    "is_numeric",
    "is_empty",
    "deep_clone",
    "deep_merge",
    "combine",
    "structural_equal",
    "diff",
    "SequenceKind",
    "classify",
    "max_value",
    "min_value",
]
