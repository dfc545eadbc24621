"""Translation key normalization.

Display text reaches the engine with arbitrary spacing, line breaks and
casing. Keys are compared in a canonical form so that "Beer 149 MK" and
"BEER\\n149 MK" resolve to the same translation entry.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = ["normalize_key"]

_STRIPPED = str.maketrans("", "", " \n\r")


def normalize_key(text: str | None) -> str | None:
    """Format text for use as a translation key.

    Trims surrounding whitespace, removes every space, newline and carriage
    return, and upper-cases the result. Empty or None input is returned
    unchanged.

    Args:
        text: Raw display text

    Returns:
        Normalized key

    Example:
        >>> normalize_key(" Beer 149 MK \\n")
        'BEER149MK'
        >>> normalize_key("")
        ''
    """
    if not text:
        return text
    return text.strip().translate(_STRIPPED).upper()
