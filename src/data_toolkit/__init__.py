"""
Data Toolkit - Small, independent helpers for everyday data manipulation

Helpers by area:
- Container search and mutation: find records by key, delete, merge,
  overwrite, shift list elements
- Deep operations: clone, merge, combine, compare and diff nested dicts
  and lists
- Formatting: byte sizes, phone numbers, coordinates, transliteration,
  word casing, UUID dashes
- Generation: random strings from named character sets
- Parsing: query strings and dotted paths into nested structures

License: MIT
"""

__version__ = "1.0.0"
__author__ = "Data Toolkit Developers"

# Core exports
from .core import (
    find_index,
    find_item,
    find_and_delete,
    find_and_merge,
    find_and_overwrite,
    shift_element,
    object_array_to_dict,
    join_fields,
    without,
    is_mapping,
    is_numeric,
    is_empty,
    deep_clone,
    deep_merge,
    combine,
    structural_equal,
    diff,
    max_value,
    min_value,
)

# Formatting exports
from .formatting import (
    bytes_to_human,
    format_phone,
    latitude_to_degrees,
    longitude_to_degrees,
    normalize,
    to_title_case_words,
    uuid_add_dashes,
    uuid_strip_dashes,
)

# Generation exports
from .generation import RANDOM_SETS, random_string

# Parsing exports
from .parsing import parse_query_string, path_to_tree

# Configuration exports
from .config import ToolkitConfig, ConfigManager, get_config, get_config_manager, get_section, reset_config

# Error exports
from .exceptions import DataToolkitError, InvalidArgumentError, ConfigurationError

__all__ = [
    # Core
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
    "max_value",
    "min_value",
    # Formatting
    "bytes_to_human",
    "format_phone",
    "latitude_to_degrees",
    "longitude_to_degrees",
    "normalize",
    "to_title_case_words",
    "uuid_add_dashes",
    "uuid_strip_dashes",
    # Generation
    "RANDOM_SETS",
    "random_string",
    # Parsing
    "parse_query_string",
    "path_to_tree",
    # Configuration
    "ToolkitConfig",
    "ConfigManager",
    "get_config",
    "get_config_manager",
    "get_section",
    "reset_config",
    # Errors
    "DataToolkitError",
    "InvalidArgumentError",
    "ConfigurationError",
]
