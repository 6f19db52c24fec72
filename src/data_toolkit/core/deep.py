"""
Deep Operations - Clone, merge, compare and diff nested containers

Containers are plain lists and dicts; every other value is treated as a leaf
and copied or compared as is. Cyclic structures are not supported.

License: MIT
"""

import re
from typing import Any, Dict

_NUMERIC_RE = re.compile(r"[0-9]+", re.ASCII)


def is_mapping(value: Any) -> bool:
    """Return True if the value is a plain dict."""
    return isinstance(value, dict)


def is_numeric(value: Any) -> bool:
    """
    Check if a value is a number, or a string made up only of digits.

    Args:
        value: Value to check

    Returns:
        True for ints and floats (bools excluded) and for strings of ASCII digits
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        return bool(_NUMERIC_RE.fullmatch(value))
    return False


def is_empty(value: Any) -> bool:
    """
    Check if a value is empty.

    None and empty strings, lists, tuples and dicts are empty. Any other value,
    including 0 and False, is not.

    Args:
        value: Value to check

    Returns:
        True if the value is empty
    """
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


def deep_clone(value: Any) -> Any:
    """
    Recursively copy lists and dicts.

    Args:
        value: Value to clone

    Returns:
        A copy sharing no list or dict with the original. Leaves are returned
        as is.
    """
    if isinstance(value, list):
        return [deep_clone(item) for item in value]

    if isinstance(value, dict):
        return {key: deep_clone(item) for key, item in value.items()}

    return value


def deep_merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    """
    Merge the keys of source into target, in place.

    When both sides hold a dict under the same key the merge recurses,
    otherwise the value from source overwrites the one in target.

    Args:
        target: Dictionary to update
        source: Dictionary whose values take precedence
    """
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            deep_merge(target[key], value)
        else:
            target[key] = value


def combine(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep merge two dictionaries into a new one.

    Args:
        a: First dictionary
        b: Second dictionary (takes precedence)

    Returns:
        Merged dictionary sharing no list or dict with either input
    """
    result = deep_clone(a)
    deep_merge(result, deep_clone(b))
    return result


def structural_equal(v1: Any, v2: Any) -> bool:
    """
    Compare two values of any type to see if they contain the same data.

    Lists (and tuples) are compared element by element, dicts by their set of
    keys followed by each value. Anything else is compared with ==, except that
    a bool never equals a non-bool.

    Args:
        v1: The first value
        v2: The second value

    Returns:
        True if both values hold the same data
    """
    if isinstance(v1, (list, tuple)) and isinstance(v2, (list, tuple)):
        if len(v1) != len(v2):
            return False
        return all(structural_equal(a, b) for a, b in zip(v1, v2))

    if isinstance(v1, dict) and isinstance(v2, dict):
        if set(v1.keys()) != set(v2.keys()):
            return False
        return all(structural_equal(v1[key], v2[key]) for key in v1)

    if isinstance(v1, (list, tuple, dict)) or isinstance(v2, (list, tuple, dict)):
        return False

    if isinstance(v1, bool) != isinstance(v2, bool):
        return False

    return v1 == v2


def diff(original: Dict[str, Any], updated: Dict[str, Any]) -> Dict[str, Any]:
    """
    Find what changed between two dictionaries.

    Every key of `updated` that is missing from `original`, or whose value is
    different, ends up in the result. Nested dicts are compared key by key and
    only the changed part is kept. Falsy values (False, None, 0, "") count as
    changes like any other value. Keys removed from `original` are not
    reported.

    Args:
        original: The dictionary before the change
        updated: The dictionary after the change

    Returns:
        Dictionary of changed and added keys
    """
    result: Dict[str, Any] = {}

    for key, value in updated.items():
        if key not in original:
            result[key] = deep_clone(value)
            continue

        before = original[key]
        if isinstance(before, dict) and isinstance(value, dict):
            nested = diff(before, value)
            if nested:
                result[key] = nested
        elif not structural_equal(before, value):
            result[key] = deep_clone(value)

    return result
