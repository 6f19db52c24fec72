"""
Parsing Helpers - Strings and flat lists into nested structures

License: MIT
"""

from .query import SlotState, TokenShape, parse_query_string
from .tree import path_to_tree

__all__ = ["SlotState", "TokenShape", "parse_query_string", "path_to_tree"]
