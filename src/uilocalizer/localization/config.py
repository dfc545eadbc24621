"""Localization configuration file parser.

Format (UTF-8, ``#`` comments and blank lines ignored)::

    LANGUAGE_NAME = 한국어
    LANGUAGE_CODE = ko-KR
    UNICODE_RANGES = AC00-D7AF,1100-11FF,3130-318F

    [FONTS]
    FugazOne-Regular = NanumGothic

    [POSITION_ADJUSTMENTS]
    Contains(GUI/HUD/) & EndsWith(/HUDLabel) = 0,-0.05,0

Top-level keys are case-insensitive. A section header switches the
line-parsing mode until the next header or end of file. Every problem is
local to its line: the offending setting is skipped, logged, and recorded as
a Diagnostic on the resulting configuration.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from uilocalizer.constants import DEFAULT_LANGUAGE_CODE, DEFAULT_LANGUAGE_NAME
from uilocalizer.core.unicode_ranges import UnicodeRangeSet, parse_unicode_ranges
from uilocalizer.diagnostics import Diagnostic, DiagnosticCode
from uilocalizer.enums import ConfigSection
from uilocalizer.locale_utils import is_known_locale, locale_display_name, normalize_locale
from uilocalizer.localization.store import parse_key_value
from uilocalizer.localization.types import FontName
from uilocalizer.rules.positions import PositionRule, PositionRuleSet

__all__ = ["LocalizationConfig", "parse_config"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocalizationConfig:
    """Parsed configuration of one generation.

    Attributes:
        language_name: Display name of the target language
        language_code: Locale code of the target language, as configured
        font_mappings: Original font name to replacement font name
        unicode_ranges: Legacy already-localized detector ranges
        position_rules: Ordered position adjustment rules
        diagnostics: Problems found while parsing
    """

    language_name: str = DEFAULT_LANGUAGE_NAME
    language_code: str = DEFAULT_LANGUAGE_CODE
    font_mappings: Mapping[FontName, FontName] = field(
        default_factory=lambda: MappingProxyType({})
    )
    unicode_ranges: UnicodeRangeSet = field(default_factory=UnicodeRangeSet)
    position_rules: PositionRuleSet = field(default_factory=PositionRuleSet)
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def has_errors(self) -> bool:
        """Check if any error-severity diagnostic was recorded."""
        return any(d.severity == "error" for d in self.diagnostics)

    def contains_localized_characters(self, text: str | None) -> bool:
        """Check text against the configured Unicode ranges.

        Always False when no ranges are configured (Latin targets).
        """
        return self.unicode_ranges.contains_localized(text)

    @property
    def posix_locale(self) -> str:
        """language_code in the POSIX form Babel expects (e.g., "ko_KR")."""
        return normalize_locale(self.language_code)


def parse_config(lines: Iterable[str], source_path: str | None = None) -> LocalizationConfig:
    """Parse configuration lines.

    Args:
        lines: Raw configuration file lines
        source_path: File path recorded on diagnostics

    Returns:
        Parsed configuration; defaults for anything absent or invalid
    """
    diagnostics: list[Diagnostic] = []
    settings: dict[str, str] = {}
    font_mappings: dict[FontName, FontName] = {}
    position_rules: list[PositionRule] = []
    ranges = UnicodeRangeSet()
    ranges_cleared = False
    language_line: int | None = None
    section = ConfigSection.GLOBAL

    for line_no, line in enumerate(lines, start=1):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue

        if trimmed in (ConfigSection.FONTS, ConfigSection.POSITION_ADJUSTMENTS):
            section = ConfigSection(trimmed)
            continue

        before = len(diagnostics)
        match section:
            case ConfigSection.FONTS:
                parsed = parse_key_value(trimmed)
                if parsed is not None and parsed[0] and parsed[1]:
                    font_mappings[parsed[0]] = parsed[1]
            case ConfigSection.POSITION_ADJUSTMENTS:
                position_rules.extend(PositionRuleSet.from_lines((trimmed,), diagnostics))
            case _:
                parsed = parse_key_value(trimmed)
                if parsed is None:
                    continue
                key, value = parsed[0].upper(), parsed[1]
                if key == "UNICODE_RANGES":
                    parsed_ranges = parse_unicode_ranges(value, diagnostics)
                    if any(
                        d.code is DiagnosticCode.UNSAFE_UNICODE_RANGE
                        for d in diagnostics[before:]
                    ):
                        ranges = UnicodeRangeSet()
                        ranges_cleared = True
                    elif not ranges_cleared:
                        ranges = UnicodeRangeSet((*ranges, *parsed_ranges))
                elif key in ("LANGUAGE_NAME", "LANGUAGE_CODE"):
                    settings[key] = value
                    if key == "LANGUAGE_CODE":
                        language_line = line_no
        diagnostics[before:] = [replace(d, line=line_no) for d in diagnostics[before:]]

    before = len(diagnostics)
    language_code = _resolve_language_code(settings.get("LANGUAGE_CODE"), diagnostics)
    diagnostics[before:] = [replace(d, line=language_line) for d in diagnostics[before:]]
    language_name = settings.get("LANGUAGE_NAME")
    if not language_name and settings.get("LANGUAGE_CODE"):
        language_name = locale_display_name(language_code)
    language_name = language_name or DEFAULT_LANGUAGE_NAME

    if source_path is not None:
        diagnostics = [
            d if d.source_path is not None else replace(d, source_path=source_path)
            for d in diagnostics
        ]

    config = LocalizationConfig(
        language_name=language_name,
        language_code=language_code,
        font_mappings=MappingProxyType(font_mappings),
        unicode_ranges=ranges,
        position_rules=PositionRuleSet(position_rules),
        diagnostics=tuple(diagnostics),
    )
    logger.info("Configuration loaded: %s (%s)", config.language_name, config.language_code)
    logger.info("Font mappings: %d", len(config.font_mappings))
    logger.info("Unicode ranges: %d", len(config.unicode_ranges))
    logger.info("Position adjustments: %d", len(config.position_rules))
    return config


def _resolve_language_code(value: str | None, diagnostics: list[Diagnostic]) -> str:
    if not value:
        return DEFAULT_LANGUAGE_CODE
    code = value.strip()
    if not is_known_locale(code):
        logger.warning("Unknown LANGUAGE_CODE '%s'; keeping it as configured", value)
        diagnostics.append(
            Diagnostic(
                code=DiagnosticCode.UNKNOWN_LOCALE,
                message=f"LANGUAGE_CODE '{value}' is not a known locale",
                hint="Use a BCP-47 or POSIX code such as 'ko-KR' or 'pl_PL'",
                severity="warning",
            )
        )
    return code

