"""
Generation Helpers - Random strings

License: MIT
"""

from .strings import RANDOM_SETS, build_alphabet, random_string

__all__ = ["RANDOM_SETS", "build_alphabet", "random_string"]
