"""Layered translation table.

Translation packs use ``KEY = VALUE`` lines. Keys are normalized on
insertion and never overwritten, so the pack loaded first is authoritative:
load the target-language pack before the base pack it overrides.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from uilocalizer.core.keys import normalize_key
from uilocalizer.localization.types import TranslationKey

__all__ = ["TranslationStore", "parse_key_value"]

logger = logging.getLogger(__name__)


def parse_key_value(line: str) -> tuple[str, str] | None:
    """Split a ``KEY = VALUE`` line at the first ``=``.

    Args:
        line: Raw line

    Returns:
        Trimmed (key, value), or None for blank lines, ``#`` comments, lines
        without ``=``, and lines whose ``=`` is the first character
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None
    equals_index = line.find("=")
    if equals_index <= 0:
        return None
    return line[:equals_index].strip(), line[equals_index + 1 :].strip()


class TranslationStore:
    """Key to replacement text table with first-writer-wins insertion.

    Example:
        >>> store = TranslationStore()
        >>> store.load(["Beer 149 MK = Olut 149 MK"], is_override=True)
        1
        >>> store.load(["BEER 149 MK = Beer"])
        0
        >>> store.lookup("BEER149MK")
        'Olut 149 MK'
    """

    __slots__ = ("_entries", "_name")

    def __init__(self, name: str = "translations") -> None:
        """Initialize an empty store.

        Args:
            name: Label used in log messages
        """
        self._name = name
        self._entries: dict[TranslationKey, str] = {}

    def load(self, lines: Iterable[str], is_override: bool = False) -> int:
        """Insert entries from ``KEY = VALUE`` lines.

        Malformed lines are skipped. ``\\n`` in a value becomes a line break.
        Keys already present keep their existing value.

        Args:
            lines: Pack lines
            is_override: Pack layer, used only for logging

        Returns:
            Number of new entries inserted
        """
        added = 0
        for line in lines:
            parsed = parse_key_value(line)
            if parsed is None:
                continue
            raw_key, value = parsed
            key = normalize_key(raw_key)
            if not key or key in self._entries:
                continue
            self._entries[key] = value.replace("\\n", "\n")
            added += 1

        layer = "override" if is_override else "base"
        logger.info(
            "Loaded %d %s entries into %s (%d total)", added, layer, self._name, len(self._entries)
        )
        return added

    def lookup(self, key: TranslationKey | None) -> str | None:
        """Return the replacement for an already-normalized key."""
        if not key:
            return None
        return self._entries.get(key)

    def translate(self, text: str) -> str | None:
        """Normalize text and look it up."""
        return self.lookup(normalize_key(text))

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[TranslationKey]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"TranslationStore(name={self._name!r}, entries={len(self._entries)})"
