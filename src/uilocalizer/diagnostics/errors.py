"""Localization exception hierarchy with structured diagnostics.

Parsers raise these exceptions for a single malformed input; the loading
layers catch them, log them, and keep the attached Diagnostic so that no
failure ever propagates past the engine boundary.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class LocalizationError(Exception):
    """Base exception for all localization errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocalizationError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(LocalizationError):
    """Invalid value in the configuration file.

    The offending setting is skipped; the rest of the file still loads.
    """


class UnsafeRangeError(ConfigurationError):
    """Configured Unicode range overlaps Latin code points (0000-024F).

    Loading clears the entire range set when this is raised, since a range
    covering Latin letters would mark untranslated source text as localized.
    """


class RuleSyntaxError(LocalizationError):
    """Position adjustment line that cannot be parsed.

    Examples:
    - Offset with other than three comma-separated fields
    - Non-numeric offset component

    The rule is omitted.
    """


class ResourceLoadError(LocalizationError):
    """Font bundle or asset could not be loaded.

    The engine continues without custom fonts.
    """
