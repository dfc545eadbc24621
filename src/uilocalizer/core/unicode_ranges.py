"""Unicode range detection of already-localized text.

Legacy detector for non-Latin target languages (Korean, Japanese, Chinese):
text containing a code point from a configured range is treated as already
translated. Latin targets leave the range set empty and rely on the element
tracker instead.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from uilocalizer.constants import LATIN_RANGE_END, LATIN_RANGE_START
from uilocalizer.diagnostics import (
    ConfigurationError,
    Diagnostic,
    DiagnosticCode,
    UnsafeRangeError,
)

__all__ = ["UnicodeRange", "UnicodeRangeSet", "parse_unicode_ranges"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UnicodeRange:
    """Inclusive code point interval.

    Attributes:
        start: First code point
        end: Last code point
    """

    start: int
    end: int

    def __contains__(self, char: str) -> bool:
        return self.start <= ord(char) <= self.end

    def overlaps_latin(self) -> bool:
        """Check whether the interval touches the Latin band 0000-024F."""
        return self.start <= LATIN_RANGE_END and self.end >= LATIN_RANGE_START

    @classmethod
    def parse(cls, text: str) -> UnicodeRange:
        """Parse a ``HEXSTART-HEXEND`` range.

        Raises:
            ConfigurationError: If the range is not two hex numbers
            UnsafeRangeError: If the range overlaps Latin code points
        """
        trimmed = text.strip()
        parts = trimmed.split("-")
        if len(parts) != 2:
            diagnostic = Diagnostic(
                code=DiagnosticCode.INVALID_UNICODE_RANGE,
                message=f"Unicode range '{trimmed}' is not in START-END form",
                severity="warning",
            )
            raise ConfigurationError(diagnostic)
        try:
            start = int(parts[0].strip(), 16)
            end = int(parts[1].strip(), 16)
        except ValueError as e:
            diagnostic = Diagnostic(
                code=DiagnosticCode.INVALID_UNICODE_RANGE,
                message=f"Failed to parse Unicode range '{trimmed}': {e}",
                severity="warning",
            )
            raise ConfigurationError(diagnostic) from e

        result = cls(start, end)
        if result.overlaps_latin():
            diagnostic = Diagnostic(
                code=DiagnosticCode.UNSAFE_UNICODE_RANGE,
                message=f"Unicode range '{trimmed}' includes Latin characters (0000-024F)",
                hint=(
                    "Leave UNICODE_RANGES empty for Latin-based languages; ranges are "
                    "only for scripts such as Korean (AC00-D7AF,1100-11FF,3130-318F), "
                    "Japanese (3040-309F,30A0-30FF,4E00-9FFF) or Chinese (4E00-9FFF,3400-4DBF)"
                ),
            )
            raise UnsafeRangeError(diagnostic)
        return result


class UnicodeRangeSet:
    """Ordered collection of UnicodeRange with a localized-text test.

    An empty set never reports text as localized.
    """

    __slots__ = ("_ranges",)

    def __init__(self, ranges: tuple[UnicodeRange, ...] = ()) -> None:
        self._ranges = ranges

    def __len__(self) -> int:
        return len(self._ranges)

    def __iter__(self) -> Iterator[UnicodeRange]:
        return iter(self._ranges)

    def __repr__(self) -> str:
        spans = ",".join(f"{r.start:04X}-{r.end:04X}" for r in self._ranges)
        return f"UnicodeRangeSet({spans})"

    def contains_localized(self, text: str | None) -> bool:
        """Check if text contains a code point from any configured range.

        Args:
            text: Text to inspect

        Returns:
            False when no ranges are configured or text is empty
        """
        if not self._ranges or not text:
            return False
        return any(char in r for char in text for r in self._ranges)


def parse_unicode_ranges(
    value: str, diagnostics: list[Diagnostic] | None = None
) -> UnicodeRangeSet:
    """Parse a ``UNICODE_RANGES`` value (``START-END,START-END``).

    Unparseable ranges are skipped with a warning. A range overlapping the
    Latin band discards every range on the line, including those parsed
    before it, and stops parsing.

    Args:
        value: Comma-separated ranges
        diagnostics: Optional list that receives a Diagnostic per problem

    Returns:
        Parsed range set (empty after an unsafe range)
    """
    ranges: list[UnicodeRange] = []
    if not value:
        return UnicodeRangeSet()

    for chunk in value.split(","):
        if not chunk.strip():
            continue
        try:
            ranges.append(UnicodeRange.parse(chunk))
        except UnsafeRangeError as e:
            _report_unsafe_range(e)
            if diagnostics is not None and e.diagnostic is not None:
                diagnostics.append(e.diagnostic)
            return UnicodeRangeSet()
        except ConfigurationError as e:
            logger.warning("%s", e)
            if diagnostics is not None and e.diagnostic is not None:
                diagnostics.append(e.diagnostic)

    return UnicodeRangeSet(tuple(ranges))


def _report_unsafe_range(error: UnsafeRangeError) -> None:
    banner = "=" * 63
    logger.error(banner)
    logger.error("ERROR: %s", error.diagnostic.message if error.diagnostic else error)
    logger.error("This band contains English AND Finnish characters (Ä, Ö, Å, etc.)")
    logger.error("from the original text and would BREAK translation!")
    logger.error("All configured Unicode ranges have been cleared.")
    if error.diagnostic is not None and error.diagnostic.hint:
        logger.error("%s", error.diagnostic.hint)
    logger.error(banner)
