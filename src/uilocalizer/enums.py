"""Enumerations for uilocalizer type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ConditionKind(StrEnum):
    """Kind of path predicate in a condition expression.

    Values are the function names used in configuration files.
    """

    CONTAINS = "Contains"
    """Substring test: Contains(GUI/HUD/)"""

    ENDS_WITH = "EndsWith"
    """Suffix test: EndsWith(/HUDLabel)"""

    STARTS_WITH = "StartsWith"
    """Prefix test: StartsWith(GUI/)"""

    EQUALS = "Equals"
    """Exact path: Equals(GUI/HUD/Day/HUDValue)"""


class ConfigSection(StrEnum):
    """Line-parsing mode of the configuration file.

    StrEnum provides automatic string conversion: str(ConfigSection.FONTS) == "[FONTS]"
    """

    GLOBAL = ""
    """Top-level KEY = VALUE settings (before any section header)"""

    FONTS = "[FONTS]"
    """OriginalFontName = ReplacementFontName"""

    POSITION_ADJUSTMENTS = "[POSITION_ADJUSTMENTS]"
    """ConditionExpression = X,Y,Z"""


class LoadStatus(StrEnum):
    """Outcome of loading a single data file.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"


class HandlerOutcome(StrEnum):
    """Result of applying a special-case handler to element text."""

    HANDLED = "handled"
    """Text rewritten; element is finished"""

    REWRITTEN = "rewritten"
    """Text rewritten; caller continues with standard translation"""

    DECLINED = "declined"
    """Text left unmodified; caller continues with standard translation"""


__all__ = [
    "ConditionKind",
    "ConfigSection",
    "HandlerOutcome",
    "LoadStatus",
]
