"""
Path To Tree - Build a nested dict from dotted paths

Typically fed with the (field, message) pairs of a validation error so the
messages can be shown next to nested form fields:

    [["address.line_one", "missing"], ["title", "missing"]]

becomes

    {"address": {"line_one": "missing"}, "title": "missing"}

License: MIT
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..config import get_section


def path_to_tree(
    pairs: Sequence[Sequence[Any]], rewrites: Optional[Mapping[str, str]] = None
) -> Dict[str, Any]:
    """
    Convert a list of [path, value] pairs into a tree.

    Each path is split on its first "." and the rest of the pair is grouped
    under the head segment, recursively. Later pairs for the same leaf
    replace earlier ones.

    Args:
        pairs: Sequence of [dotted.path, value] pairs, not modified
        rewrites: Leaf values to replace, e.g. {"is not a string": "missing"}.
            Defaults to the configured tree value rewrites, pass {} to keep
            values as is

    Returns:
        The nested dictionary
    """
    if rewrites is None:
        rewrites = get_section("tree").value_rewrites
    return _build(pairs, rewrites)


def _build(pairs: Sequence[Sequence[Any]], rewrites: Mapping[str, str]) -> Dict[str, Any]:
    tree: Dict[str, Any] = {}
    children: Dict[str, List[List[Any]]] = {}

    for path, value in pairs:
        if "." in path:
            head, rest = path.split(".", 1)
            # A plain value stored under the same name is replaced
            if tree.get(head) is not children.get(head) or head not in tree:
                children[head] = []
                tree[head] = children[head]
            children[head].append([rest, value])
        else:
            if isinstance(value, str) and value in rewrites:
                value = rewrites[value]
            tree[path] = value

    for key, value in tree.items():
        if isinstance(value, list) and value is children.get(key):
            tree[key] = _build(value, rewrites)

    return tree
