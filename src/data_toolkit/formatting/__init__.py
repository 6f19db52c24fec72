"""
Formatting Helpers - Human readable values and text cleanup

License: MIT
"""

from .numbers import bytes_to_human, format_phone, latitude_to_degrees, longitude_to_degrees
from .text import normalize, to_title_case_words
from .transliteration import TRANSLITERATION_TABLE
from .uuids import uuid_add_dashes, uuid_strip_dashes

__all__ = [
    "bytes_to_human",
    "format_phone",
    "latitude_to_degrees",
    "longitude_to_degrees",
    "normalize",
    "to_title_case_words",
    "TRANSLITERATION_TABLE",
    "uuid_add_dashes",
    "uuid_strip_dashes",
]
