"""
UUID Helpers - Add or remove the dashes of a UUID string

Positions follow the 8-4-4-4-12 hex digit grouping. The content is not
validated.

License: MIT
"""

# Group boundaries in the undashed form
_GROUPS = ((0, 8), (8, 12), (12, 16), (16, 20), (20, 32))


def uuid_add_dashes(value: str) -> str:
    """Turn a 32 character UUID into its 36 character dashed form."""
    return "-".join(value[start:end] for start, end in _GROUPS)


def uuid_strip_dashes(value: str) -> str:
    """Turn a 36 character dashed UUID into its 32 character form."""
    return value[0:8] + value[9:13] + value[14:18] + value[19:23] + value[24:36]
