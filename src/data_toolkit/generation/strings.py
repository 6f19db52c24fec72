"""
Random Strings - Generate random strings from named or literal character sets

Sets marked with * leave out characters that are easily confused by people
(0 and O, 1 and l) or that break HTML and URLs (&, #, %).

License: MIT
"""

import secrets
from types import MappingProxyType
from typing import Optional, Sequence, Union

from ..config import get_section
from ..exceptions import InvalidArgumentError

RANDOM_SETS = MappingProxyType({
    "0x": "0123456789abcdef",
    "0": "01234567",
    "10": "0123456789",
    "10*": "123456789",
    "az": "abcdefghijklmnopqrstuvwxyz",
    "az*": "abcdefghijkmnopqrstuvwxyz",
    "AZ": "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "AZ*": "ABCDEFGHJKLMNPQRSTUVWXYZ",
    "aZ": "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "aZ*": "abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ",
    "!": "!@#$%^&*-_+.?",
    "!*": "!@$^*-_.",
})


def build_alphabet(sets: Union[str, Sequence[str]]) -> str:
    """
    Resolve the sets argument of random_string into a string of characters.

    Args:
        sets: A list of set names, or a string used as is

    Returns:
        The characters to draw from, repeats included

    Raises:
        InvalidArgumentError: If the list is empty, names an unknown set, or
            sets is neither a string nor a list
    """
    if isinstance(sets, str):
        return sets

    if not isinstance(sets, (list, tuple)):
        raise InvalidArgumentError(f"{sets!r} is not a valid value for sets")

    if not sets:
        raise InvalidArgumentError("sets must contain at least one set name")

    chars = []
    for name in sets:
        if not isinstance(name, str):
            raise InvalidArgumentError(f"{name!r} is not a string")
        if name not in RANDOM_SETS:
            raise InvalidArgumentError(f"{name} is not a valid set")
        chars.append(RANDOM_SETS[name])

    return "".join(chars)


def random_string(
    length: Optional[int] = None,
    sets: Optional[Union[str, Sequence[str]]] = None,
    allow_duplicates: Optional[bool] = None,
) -> str:
    """
    Generate a random string.

    Characters listed more than once in a literal set are proportionally more
    likely to be drawn, e.g. "AABC" doubles the chance of "A". That only holds
    while duplicates are allowed.

    Args:
        length: Length of the string, defaults to the configured length (8)
        sets: List of set names from RANDOM_SETS, or a string of characters to
            draw from. Defaults to the configured sets (["aZ"])
        allow_duplicates: If False, no character appears twice. Defaults to
            the configured value (True)

    Returns:
        The generated string

    Raises:
        InvalidArgumentError: If the sets are invalid, or duplicates are not
            allowed and there are fewer distinct characters than length
    """
    config = get_section("random")
    if length is None:
        length = config.length
    if sets is None:
        sets = config.sets
    if allow_duplicates is None:
        allow_duplicates = config.allow_duplicates

    if length < 0:
        raise InvalidArgumentError(f"length must not be negative, got {length}")

    chars = build_alphabet(sets)
    if length and not chars:
        raise InvalidArgumentError("Can not generate a random string from an empty set")

    if not allow_duplicates and len(set(chars)) < length:
        raise InvalidArgumentError(
            f'Can not generate random string with no duplicates from the given sets "{chars}"'
        )

    text = []
    used = set()
    while len(text) < length:
        found = secrets.choice(chars)

        # Draw again until we get a character not used yet
        if not allow_duplicates and found in used:
            continue

        text.append(found)
        used.add(found)

    return "".join(text)
