"""Diagnostic system for localization data errors.

Provides structured diagnostics with codes, file locations and hints,
plus the exception hierarchy raised by parsers.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ConfigurationError,
    LocalizationError,
    ResourceLoadError,
    RuleSyntaxError,
    UnsafeRangeError,
)

__all__ = [
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "LocalizationError",
    "ResourceLoadError",
    "RuleSyntaxError",
    "UnsafeRangeError",
]
