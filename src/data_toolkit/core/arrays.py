"""
List Helpers - Search and mutate lists of records by key

Records are dicts. A lookup matches the first record whose value under the
given key equals the value searched for; records without the key never match.

License: MIT
"""

from typing import List, Dict, Any, Optional, Union, Sequence
import logging

from .deep import deep_clone

logger = logging.getLogger(__name__)

_MISSING = object()

Records = List[Dict[str, Any]]


def _matches(record: Any, key: Any, value: Any) -> bool:
    try:
        found = record[key]
    except (KeyError, IndexError, TypeError):
        return False
    # bool and int compare equal in Python, keep them apart
    if isinstance(found, bool) != isinstance(value, bool):
        return False
    return found == value


def find_index(items: Sequence[Dict[str, Any]], key: Any, value: Any) -> int:
    """
    Find the index of the first record with the given value under key.

    Args:
        items: Records to look through
        key: Name of the key to check
        value: Value to check against

    Returns:
        Index of the record, or -1 if none matches
    """
    for i, record in enumerate(items):
        if _matches(record, key, value):
            return i
    return -1


def find_item(items: Sequence[Dict[str, Any]], key: Any, value: Any) -> Optional[Dict[str, Any]]:
    """
    Find the first record with the given value under key.

    Args:
        items: Records to look through
        key: Name of the key to check
        value: Value to check against

    Returns:
        The record found, or None
    """
    for record in items:
        if _matches(record, key, value):
            return record
    return None


def _find_and_apply(items: Records, key: Any, value: Any, apply, return_copy: bool) -> Union[bool, Records]:
    i = find_index(items, key, value)

    if i == -1:
        logger.debug(f"No record found with {key!r} == {value!r}")
        return items if return_copy else False

    if return_copy:
        copy = deep_clone(items)
        apply(copy, i)
        return copy

    apply(items, i)
    return True


def find_and_delete(items: Records, key: Any, value: Any, return_copy: bool = False) -> Union[bool, Records]:
    """
    Find a record by key and value and remove it from the list.

    Args:
        items: Records to look through
        key: Name of the key to check
        value: Value to check against
        return_copy: If True, remove the record from a deep copy of the list
            and return the copy, leaving `items` untouched

    Returns:
        With return_copy, the updated copy, or `items` itself when nothing was
        found. Otherwise True if a record was removed in place, else False.
    """

    def _delete(records: Records, i: int) -> None:
        del records[i]

    return _find_and_apply(items, key, value, _delete, return_copy)


def find_and_merge(
    items: Records, key: Any, value: Any, data: Dict[str, Any], return_copy: bool = False
) -> Union[bool, Records]:
    """
    Find a record by key and value and shallow merge data on top of it.

    The merged record is a new dict placed at the same index. See
    find_and_delete for the meaning of return_copy and the return value. With
    return_copy the copy holds its own copy of data as well.
    """

    def _merge(records: Records, i: int) -> None:
        records[i] = {**records[i], **(deep_clone(data) if return_copy else data)}

    return _find_and_apply(items, key, value, _merge, return_copy)


def find_and_overwrite(
    items: Records, key: Any, value: Any, data: Dict[str, Any], return_copy: bool = False
) -> Union[bool, Records]:
    """
    Find a record by key and value and replace it with data.

    With return_copy the copy holds its own copy of data rather than data
    itself.

    See find_and_delete for the meaning of return_copy and the return value.
    """

    def _overwrite(records: Records, i: int) -> None:
        records[i] = deep_clone(data) if return_copy else data

    return _find_and_apply(items, key, value, _overwrite, return_copy)


def shift_element(items: List[Any], from_index: int, to_index: int) -> None:
    """
    Move an element of a list from one index to another, in place.

    Nothing happens if from_index is out of range. An out of range to_index
    follows list.insert, so the element lands at the start or the end.

    Args:
        items: List to update
        from_index: Current location of the element
        to_index: New location of the element
    """
    if 0 <= from_index < len(items):
        item = items.pop(from_index)
        items.insert(to_index, item)


def object_array_to_dict(items: Sequence[Dict[str, Any]], key_key: str, value_key: str) -> Dict[str, Any]:
    """
    Build a dictionary from a list of records.

    Args:
        items: Records to step through
        key_key: Key of each record whose value becomes the key in the result
        value_key: Key of each record whose value becomes the value in the result

    Returns:
        Dictionary of str(record[key_key]) to record[value_key]
    """
    return {str(record[key_key]): record[value_key] for record in items}


def join_fields(mapping: Dict[str, Any], keys: Sequence[str], separator: str = " ") -> str:
    """
    Join the values of the listed keys that exist in mapping.

    Args:
        mapping: Dictionary to pull values from
        keys: Keys to look up, in order
        separator: String placed between values

    Returns:
        The joined string
    """
    found = [mapping.get(key, _MISSING) for key in keys]
    return separator.join("" if v is None else str(v) for v in found if v is not _MISSING)


def without(mapping: Dict[str, Any], keys: Union[str, Sequence[str]]) -> Dict[str, Any]:
    """
    Return a deep copy of mapping with one or more keys removed.

    Args:
        mapping: Dictionary to copy
        keys: A single key, or a list of keys, to leave out

    Returns:
        The copy without the keys
    """
    result = deep_clone(mapping)

    if isinstance(keys, str):
        keys = [keys]

    for key in keys:
        result.pop(key, None)

    return result
