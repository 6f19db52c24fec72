"""
Query String Parser - Turn a URL query string into nested lists and dicts

Names may carry a bracket suffix:

    name=v       plain value, a later value replaces an earlier one
    name[]=v     append to a list
    name[3]=v    set index 3 of a list
                 (indexes above ARRAY_INDEX_LIMIT are treated as dict keys)
    name[key]=v  set a key of a dict

Each name moves through the states unset, scalar, list and map as tokens
arrive. When a token does not fit the current state the existing value is
converted rather than dropped, see _TRANSITIONS.

License: MIT
"""

import re
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple
from urllib.parse import unquote
import logging

from ..core.deep import is_numeric

logger = logging.getLogger(__name__)

_QUERY_PART_RE = re.compile(r"([^=&]+)=?([^&]*)")
_QUERY_NAME_RE = re.compile(r"([a-zA-Z_][0-9a-zA-Z_]*)(\[([0-9a-zA-Z_]*)\])?", re.ASCII)

# Larger numeric indexes are stored as dict keys instead of padding a list
ARRAY_INDEX_LIMIT = 1000


class SlotState(Enum):
    """What is currently stored under a name."""

    UNSET = "unset"
    SCALAR = "scalar"
    LIST = "list"
    MAP = "map"


class TokenShape(Enum):
    """How a name=value token addresses its name."""

    ASSIGN = "assign"
    APPEND = "append"
    INDEX = "index"
    KEY = "key"


def _state_of(result: Dict[str, Any], name: str) -> SlotState:
    if name not in result:
        return SlotState.UNSET
    current = result[name]
    if isinstance(current, list):
        return SlotState.LIST
    if isinstance(current, dict):
        return SlotState.MAP
    return SlotState.SCALAR


def _set_index(items: List[Any], index: int, value: str) -> List[Any]:
    # Gaps left by sparse indexes are filled with None
    if index >= len(items):
        items.extend([None] * (index + 1 - len(items)))
    items[index] = value
    return items


def _list_to_map(items: List[Any]) -> Dict[str, Any]:
    return {str(i): item for i, item in enumerate(items)}


# Each transition receives the current value, the bracket key (None for
# ASSIGN and APPEND) and the decoded value, and returns the new value.
Transition = Callable[[Any, Optional[str], str], Any]

_TRANSITIONS: Dict[Tuple[SlotState, TokenShape], Transition] = {
    # unset
    (SlotState.UNSET, TokenShape.APPEND): lambda cur, key, val: [val],
    (SlotState.UNSET, TokenShape.INDEX): lambda cur, key, val: _set_index([], int(key), val),
    (SlotState.UNSET, TokenShape.KEY): lambda cur, key, val: {key: val},
    # scalar, wrapped before the new value is added
    (SlotState.SCALAR, TokenShape.APPEND): lambda cur, key, val: [cur, val],
    (SlotState.SCALAR, TokenShape.INDEX): lambda cur, key, val: {"0": cur, key: val},
    (SlotState.SCALAR, TokenShape.KEY): lambda cur, key, val: {"0": cur, key: val},
    # list
    (SlotState.LIST, TokenShape.APPEND): lambda cur, key, val: cur + [val],
    (SlotState.LIST, TokenShape.INDEX): lambda cur, key, val: _set_index(cur, int(key), val),
    (SlotState.LIST, TokenShape.KEY): lambda cur, key, val: {**_list_to_map(cur), key: val},
    # map, appends go under the empty key
    (SlotState.MAP, TokenShape.APPEND): lambda cur, key, val: {**cur, "": val},
    (SlotState.MAP, TokenShape.INDEX): lambda cur, key, val: {**cur, key: val},
    (SlotState.MAP, TokenShape.KEY): lambda cur, key, val: {**cur, key: val},
}


def _shape_of(has_brackets: bool, key: str) -> TokenShape:
    if not has_brackets:
        return TokenShape.ASSIGN
    if not key:
        return TokenShape.APPEND
    if is_numeric(key) and len(key) <= len(str(ARRAY_INDEX_LIMIT)) and int(key) <= ARRAY_INDEX_LIMIT:
        return TokenShape.INDEX
    return TokenShape.KEY


def parse_query_string(query: str) -> Dict[str, Any]:
    """
    Parse a query string into name/value pairs.

    Values are percent decoded. Tokens whose name is not a valid identifier,
    optionally followed by one bracket suffix, are skipped.

    Args:
        query: The query string, with or without a leading "?"

    Returns:
        Dictionary of names to strings, lists or dicts

    Example:
        >>> parse_query_string("numbers[0]=one&numbers[1]=two&n[one]=1")
        {'numbers': ['one', 'two'], 'n': {'one': '1'}}
    """
    result: Dict[str, Any] = {}

    if query.startswith("?"):
        query = query[1:]

    if len(query) <= 1:
        return result

    for part in _QUERY_PART_RE.finditer(query):
        raw_name, raw_value = part.group(1), part.group(2)

        name_match = _QUERY_NAME_RE.fullmatch(raw_name)
        if not name_match:
            logger.debug(f"Skipping query token with invalid name: {raw_name!r}")
            continue

        name = name_match.group(1)
        key = name_match.group(3) or ""
        value = unquote(raw_value)

        shape = _shape_of(name_match.group(2) is not None, key)
        if shape is TokenShape.ASSIGN:
            result[name] = value
            continue

        state = _state_of(result, name)
        result[name] = _TRANSITIONS[(state, shape)](result.get(name), key, value)

    return result
