"""Locale utilities for the configured target language.

Normalizes the ``LANGUAGE_CODE`` setting to POSIX form, validates it against
Babel's CLDR data, and derives a display name when the configuration does not
provide ``LANGUAGE_NAME``.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "is_known_locale",
    "locale_display_name",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "ko-KR", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "ko_KR", "pt_BR")

    Example:
        >>> normalize_locale("ko-KR")
        'ko_KR'
        >>> normalize_locale(" fi ")
        'fi'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=32)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def is_known_locale(locale_code: str) -> bool:
    """Check whether Babel recognizes the locale code.

    Args:
        locale_code: Locale code to validate

    Returns:
        True if Babel has CLDR data for the locale
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    if not locale_code or not locale_code.strip():
        return False
    try:
        get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError):
        return False
    return True


def locale_display_name(locale_code: str) -> str | None:
    """Return the locale's name in its own language.

    Args:
        locale_code: Locale code (e.g., "ko_KR")

    Returns:
        Display name such as "한국어 (대한민국)", or None if the locale is unknown

    Example:
        >>> locale_display_name("fi")
        'suomi'
    """
    if not is_known_locale(locale_code):
        logger.debug("No display name for unknown locale '%s'", locale_code)
        return None
    locale = get_babel_locale(locale_code)
    return locale.get_display_name(locale)


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()
