"""Pattern-specific rewrites that run before generic translation lookup.

Some texts are assembled by the host at runtime (magazine listings, the
cashier total) and never appear verbatim in a translation pack. Each handler
recognizes one such pattern and rewrites it from smaller translated pieces.

Handlers are tried in a fixed priority order; the first one whose
``can_handle`` accepts the element decides the outcome:

1. MagazineWordList      - three comma-separated words
2. PricePhoneLine        - ``h.<price>,- puh.<phone>``
3. AggregatePrice        - ``PRICE TOTAL: <price> MK`` on the interaction line
4. GenericMagazineLookup - whole-line lookup in the magazine table

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from uilocalizer.constants import (
    CURRENCY_SUFFIX,
    INTERACTION_PATH,
    MAGAZINE_PATH_MARKER,
    PHONE_KEY,
    PRICE_PHONE_PREFIX,
    PRICE_PHONE_SEPARATOR,
    PRICE_TOTAL_KEY,
    PRICE_TOTAL_MARKER,
    WORD_LIST_SEPARATOR,
)
from uilocalizer.enums import HandlerOutcome
from uilocalizer.localization.store import TranslationStore
from uilocalizer.localization.types import ElementPath

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Result and protocol
    "SpecialCaseResult",
    "SpecialCaseHandler",
    # Handlers
    "MagazineWordList",
    "PricePhoneLine",
    "AggregatePrice",
    "GenericMagazineLookup",
    # Dispatch
    "SpecialCaseDispatcher",
    "is_magazine_path",
]

logger = logging.getLogger(__name__)


def is_magazine_path(path: ElementPath) -> bool:
    """Check if path belongs to a magazine listing line."""
    return MAGAZINE_PATH_MARKER in path


@dataclass(frozen=True, slots=True)
class SpecialCaseResult:
    """Outcome of a special-case handler.

    Attributes:
        outcome: HANDLED, REWRITTEN or DECLINED
        text: Text to display (unchanged input when DECLINED)
    """

    outcome: HandlerOutcome
    text: str

    @property
    def handled(self) -> bool:
        """True if the element needs no standard translation."""
        return self.outcome is HandlerOutcome.HANDLED

    @property
    def changed(self) -> bool:
        """True if the handler produced new text."""
        return self.outcome is not HandlerOutcome.DECLINED


class SpecialCaseHandler(Protocol):
    """Predicate and rewrite for one text pattern."""

    name: str

    def can_handle(self, path: ElementPath, text: str) -> bool:
        """Check whether this handler owns the element."""
        ...

    def apply(self, text: str) -> SpecialCaseResult:
        """Rewrite the element text."""
        ...


class MagazineWordList:
    """Magazine line of exactly three comma-separated words.

    Each word is looked up in the magazine table on its own; words without
    an entry are kept as they are. Always handled.

    Example:
        ``"Beer, Sausage, Milk"`` -> ``"Olut, Makkara, Maito"``
    """

    name = "magazine-word-list"

    def __init__(self, magazine: TranslationStore) -> None:
        self._magazine = magazine

    def can_handle(self, path: ElementPath, text: str) -> bool:
        return is_magazine_path(path) and len(text.split(",")) == 3

    def apply(self, text: str) -> SpecialCaseResult:
        words = [word.strip() for word in text.split(",")]
        translated = [self._magazine.translate(word) or word for word in words]
        return SpecialCaseResult(HandlerOutcome.HANDLED, WORD_LIST_SEPARATOR.join(translated))


class PricePhoneLine:
    """Magazine ``h.<price>,- puh.<phone>`` line.

    Rewritten as ``"<price> MK, <phone label> - <phone>"`` where the label is
    the magazine table's ``PHONE`` entry.
    """

    name = "price-phone-line"

    def __init__(self, magazine: TranslationStore) -> None:
        self._magazine = magazine

    def can_handle(self, path: ElementPath, text: str) -> bool:
        return (
            is_magazine_path(path)
            and text.startswith(PRICE_PHONE_PREFIX)
            and PRICE_PHONE_SEPARATOR in text
        )

    def apply(self, text: str) -> SpecialCaseResult:
        try:
            price, phone = _split_price_phone(text)
        except ValueError as e:
            logger.warning("Failed to parse magazine price line %r: %s", text, e)
            return SpecialCaseResult(HandlerOutcome.DECLINED, text)

        label = self._magazine.lookup(PHONE_KEY) or PHONE_KEY
        return SpecialCaseResult(
            HandlerOutcome.HANDLED, f"{price} {CURRENCY_SUFFIX}, {label} - {phone}"
        )


def _split_price_phone(text: str) -> tuple[str, str]:
    parts = text[len(PRICE_PHONE_PREFIX) :].split(PRICE_PHONE_SEPARATOR)
    if len(parts) != 2:
        msg = f"expected 2 parts around {PRICE_PHONE_SEPARATOR!r}, got {len(parts)}"
        raise ValueError(msg)
    return parts[0].strip(), parts[1].strip()


class AggregatePrice:
    """Cashier ``PRICE TOTAL: <price> MK`` line on the interaction indicator.

    Requires exactly four space-separated tokens; the third is the price.
    The label comes from the main table's ``PRICETOTAL`` entry.
    """

    name = "aggregate-price"

    def __init__(self, translations: TranslationStore) -> None:
        self._translations = translations

    def can_handle(self, path: ElementPath, text: str) -> bool:
        return INTERACTION_PATH in path and PRICE_TOTAL_MARKER in text

    def apply(self, text: str) -> SpecialCaseResult:
        tokens = text.split(" ")
        if len(tokens) != 4:
            return SpecialCaseResult(HandlerOutcome.DECLINED, text)
        label = self._translations.lookup(PRICE_TOTAL_KEY) or PRICE_TOTAL_MARKER
        return SpecialCaseResult(
            HandlerOutcome.HANDLED, f"{label}: {tokens[2]} {CURRENCY_SUFFIX}"
        )


class GenericMagazineLookup:
    """Whole magazine line found in the magazine table.

    The text is replaced but the element is reported as not handled, so the
    caller still runs standard translation (and its font and position logic).
    """

    name = "generic-magazine-lookup"

    def __init__(self, magazine: TranslationStore) -> None:
        self._magazine = magazine

    def can_handle(self, path: ElementPath, text: str) -> bool:
        return is_magazine_path(path)

    def apply(self, text: str) -> SpecialCaseResult:
        translation = self._magazine.translate(text)
        if translation is None or translation == text:
            return SpecialCaseResult(HandlerOutcome.DECLINED, text)
        return SpecialCaseResult(HandlerOutcome.REWRITTEN, translation)


class SpecialCaseDispatcher:
    """Ordered special-case handlers; the first applicable one decides."""

    __slots__ = ("_handlers",)

    def __init__(self, handlers: Iterable[SpecialCaseHandler]) -> None:
        self._handlers: tuple[SpecialCaseHandler, ...] = tuple(handlers)

    @classmethod
    def default(
        cls, translations: TranslationStore, magazine: TranslationStore
    ) -> SpecialCaseDispatcher:
        """Build the standard handler chain.

        Args:
            translations: Main translation table (aggregate price label)
            magazine: Magazine translation table
        """
        return cls(
            (
                MagazineWordList(magazine),
                PricePhoneLine(magazine),
                AggregatePrice(translations),
                GenericMagazineLookup(magazine),
            )
        )

    @property
    def handlers(self) -> tuple[SpecialCaseHandler, ...]:
        """Handlers in priority order."""
        return self._handlers

    def dispatch(self, path: ElementPath, text: str) -> SpecialCaseResult | None:
        """Run the first handler that accepts the element.

        Args:
            path: Element path
            text: Current element text

        Returns:
            The handler's result, or None if no handler applies
        """
        for handler in self._handlers:
            if handler.can_handle(path, text):
                result = handler.apply(text)
                logger.debug("%s -> %s for %s", handler.name, result.outcome, path)
                return result
        return None
