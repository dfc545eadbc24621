"""uilocalizer - runtime localization rule engine for host UI text elements.

Replaces the text of on-screen elements with translations from layered
``KEY = VALUE`` packs, switches them to replacement fonts, and nudges their
positions with path-matched rules. A small special-case layer rewrites text
the host assembles at runtime (magazine listings, cashier totals).

Public API:
    LocalizationEngine - Per-element translation, font and position pipeline
    SceneDriver - Per-frame scheduling against a SceneHost
    TranslationStore - First-writer-wins translation table
    LocalizationConfig - Parsed config.txt
    normalize_key - Canonical lookup form of a text

Exceptions:
    LocalizationError - Base exception class
    ConfigurationError - Invalid configuration values
    UnsafeRangeError - Unicode range overlapping Latin text
    RuleSyntaxError - Malformed position adjustment rule
    ResourceLoadError - Font or data source failure

Submodules:
    uilocalizer.core - Key normalization, Unicode ranges, Vector3
    uilocalizer.rules - Path conditions and position rules
    uilocalizer.localization - Tables, configuration, fonts, engine
    uilocalizer.runtime - Frame driver and throttling
    uilocalizer.diagnostics - Diagnostic codes and exceptions
"""

from .core import Vector3, normalize_key
from .diagnostics import (
    ConfigurationError,
    LocalizationError,
    ResourceLoadError,
    RuleSyntaxError,
    UnsafeRangeError,
)
from .localization import LocalizationConfig, LocalizationEngine, TranslationStore
from .runtime import SceneDriver

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("uilocalizer")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# Data files are read as UTF-8 (a leading BOM is tolerated)
__recommended_encoding__ = "UTF-8"

__all__ = [
    "ConfigurationError",
    "LocalizationConfig",
    "LocalizationEngine",
    "LocalizationError",
    "ResourceLoadError",
    "RuleSyntaxError",
    "SceneDriver",
    "TranslationStore",
    "UnsafeRangeError",
    "Vector3",
    "__recommended_encoding__",
    "__version__",
    "normalize_key",
]
