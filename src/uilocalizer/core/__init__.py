"""Core value types shared by the rule, loading and runtime layers.

Python 3.13+. Zero external dependencies.
"""

from .keys import normalize_key
from .unicode_ranges import UnicodeRange, UnicodeRangeSet, parse_unicode_ranges
from .vector import ZERO, Vector3

__all__ = [
    "ZERO",
    "UnicodeRange",
    "UnicodeRangeSet",
    "Vector3",
    "normalize_key",
    "parse_unicode_ranges",
]
