"""
Number Formatting - Byte sizes, phone numbers and coordinates

License: MIT
"""

import re
from typing import Any, Optional, Sequence, Tuple, Union

from ..config import get_section
from ..exceptions import InvalidArgumentError

_PHONE_RE = re.compile(r"\+?1?(\d{3})(\d{3})(\d{4})", re.ASCII)

_BINARY_PREFIXES = ["", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi"]

Number = Union[int, float]


def bytes_to_human(num: Number) -> str:
    """
    Format a number of bytes using the closest binary prefix.

    Args:
        num: Size in bytes, may be negative

    Returns:
        Formatted size string, e.g. "1.0GiB"
    """
    for unit in _BINARY_PREFIXES:
        if abs(num) < 1024.0:
            return f"{num:.1f}{unit}B"
        num /= 1024.0
    return f"{num:.1f}YiB"


def format_phone(value: Any) -> Any:
    """
    Format a North American phone number.

    Args:
        value: Ten digits, optionally preceded by "1" or "+1"

    Returns:
        The number as "+1 (AAA) BBB-CCCC", or value unchanged if it does not
        look like a phone number
    """
    if not isinstance(value, str):
        return value

    match = _PHONE_RE.fullmatch(value)
    if not match:
        return value

    return f"+1 ({match.group(1)}) {match.group(2)}-{match.group(3)}"


def _check_labels(labels: Sequence[str]) -> Tuple[str, str]:
    if (
        isinstance(labels, str)
        or len(labels) != 2
        or not all(isinstance(label, str) for label in labels)
    ):
        raise InvalidArgumentError(f"labels must be a pair of strings, got {labels!r}")
    return labels[0], labels[1]


def _to_degrees(value: Number, labels: Sequence[str], precision: int) -> str:
    positive, negative = _check_labels(labels)
    label = negative if value < 0 else positive

    # Work in rounded seconds so a carry into minutes or degrees is exact
    scale = 10**precision
    total = round(abs(value) * 3600 * scale)
    degrees, remainder = divmod(total, 3600 * scale)
    minutes, seconds = divmod(remainder, 60 * scale)

    return f"{label} {degrees}° {minutes}' {seconds / scale:.{precision}f}\""


def latitude_to_degrees(value: Number, labels: Optional[Sequence[str]] = None) -> str:
    """
    Format a latitude in decimal degrees as degrees, minutes and seconds.

    Args:
        value: Latitude, positive north of the equator
        labels: Pair of prefixes for positive and negative values, defaults to
            the configured latitude labels ("N", "S")

    Returns:
        Text such as 'N 45° 30\' 15.00"'

    Raises:
        InvalidArgumentError: If labels is not a pair of strings
    """
    config = get_section("geo")
    return _to_degrees(
        value,
        config.latitude_labels if labels is None else labels,
        config.seconds_precision,
    )


def longitude_to_degrees(value: Number, labels: Optional[Sequence[str]] = None) -> str:
    """
    Format a longitude in decimal degrees as degrees, minutes and seconds.

    Same as latitude_to_degrees, with the configured longitude labels
    ("E", "W") as the default.
    """
    config = get_section("geo")
    return _to_degrees(
        value,
        config.longitude_labels if labels is None else labels,
        config.seconds_precision,
    )
