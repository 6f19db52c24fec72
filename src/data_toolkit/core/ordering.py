"""
Ordering - Largest and smallest values of homogeneous sequences

A sequence is either all numbers or all strings; strings are ordered by
their NFD normalized form so accented characters sort next to their base
letter. Anything else is rejected.

License: MIT
"""

import unicodedata
from enum import Enum
from typing import Any, Optional, Sequence, Union

from ..exceptions import InvalidArgumentError

Orderable = Union[int, float, str]


class SequenceKind(Enum):
    """Element type shared by every value of a sequence."""

    NUMERIC = "numeric"
    TEXTUAL = "textual"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def classify(values: Sequence[Any], name: str = "values") -> Optional[SequenceKind]:
    """
    Work out which kind of sequence values is.

    Args:
        values: List or tuple to inspect
        name: Name used in error messages

    Returns:
        The sequence kind, or None for an empty sequence

    Raises:
        InvalidArgumentError: If values is not a list or tuple, or its elements
            are not all numbers or all strings
    """
    if not isinstance(values, (list, tuple)):
        raise InvalidArgumentError(f"{name} must be a list or tuple, got {type(values).__name__}")

    if not values:
        return None

    if all(_is_number(v) for v in values):
        return SequenceKind.NUMERIC

    if all(isinstance(v, str) for v in values):
        return SequenceKind.TEXTUAL

    raise InvalidArgumentError(f"{name} must contain only numbers or only strings")


def _nfd(value: str) -> str:
    return unicodedata.normalize("NFD", value)


def max_value(values: Sequence[Orderable]) -> Optional[Orderable]:
    """
    Return the largest value in a sequence.

    Args:
        values: List or tuple of numbers, or of strings

    Returns:
        The largest value, or None if values is empty

    Raises:
        InvalidArgumentError: If values is not a homogeneous list or tuple
    """
    kind = classify(values, "max_value() argument")
    if kind is None:
        return None
    if kind is SequenceKind.NUMERIC:
        return max(values)
    return max(values, key=_nfd)


def min_value(values: Sequence[Orderable]) -> Optional[Orderable]:
    """
    Return the smallest value in a sequence.

    Args:
        values: List or tuple of numbers, or of strings

    Returns:
        The smallest value, or None if values is empty

    Raises:
        InvalidArgumentError: If values is not a homogeneous list or tuple
    """
    kind = classify(values, "min_value() argument")
    if kind is None:
        return None
    if kind is SequenceKind.NUMERIC:
        return min(values)
    return min(values, key=_nfd)
