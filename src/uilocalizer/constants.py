"""Shared constants for uilocalizer.

Placing constants here avoids circular imports between the rule, loading
and runtime packages.

Constants are grouped by domain:
- Asset layout: default data file names
- Latin guard: code point band that Unicode ranges must not touch
- Special-case markers: path fragments and literals for pattern rewrites
- Scheduling: throttle intervals and element classification paths

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Asset layout
    "DEFAULT_ASSET_DIR",
    "CONFIG_FILE",
    "PRIMARY_TRANSLATION_FILE",
    "BASE_TRANSLATION_FILE",
    "MAGAZINE_TRANSLATION_FILE",
    # Configuration defaults
    "DEFAULT_LANGUAGE_NAME",
    "DEFAULT_LANGUAGE_CODE",
    # Latin guard
    "LATIN_RANGE_START",
    "LATIN_RANGE_END",
    # Special-case markers
    "MAGAZINE_PATH_MARKER",
    "MAGAZINE_LINE_SUFFIX",
    "INTERACTION_PATH",
    "PRICE_TOTAL_MARKER",
    "PRICE_TOTAL_KEY",
    "PHONE_KEY",
    "PRICE_PHONE_PREFIX",
    "PRICE_PHONE_SEPARATOR",
    "CURRENCY_SUFFIX",
    "WORD_LIST_SEPARATOR",
    # Scheduling
    "MAINMENU_SCAN_INTERVAL",
    "DYNAMIC_UPDATE_INTERVAL",
    "PRIORITY_PATHS",
    "PRIORITY_PATH_MARKERS",
    "DYNAMIC_PATH_MARKERS",
    "GUI_PATH_MARKER",
    "DEBUG_PATH_MARKER",
    "MENU_SONG_PATH_MARKER",
    "SCENE_SPLASH",
    "SCENE_MAIN_MENU",
    "SCENE_GAME",
]

# ============================================================================
# ASSET LAYOUT
# ============================================================================

DEFAULT_ASSET_DIR: str = "l10n_assets"
CONFIG_FILE: str = "config.txt"

# Loaded first: first-writer-wins makes it authoritative over the base pack.
PRIMARY_TRANSLATION_FILE: str = "translate.txt"
BASE_TRANSLATION_FILE: str = "translate_msc.txt"
MAGAZINE_TRANSLATION_FILE: str = "translate_magazine.txt"

# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================

DEFAULT_LANGUAGE_NAME: str = "Unknown"
DEFAULT_LANGUAGE_CODE: str = "en-US"

# ============================================================================
# LATIN GUARD
# ============================================================================
#
# Basic Latin, Latin-1 Supplement, Latin Extended-A/B. Source text contains
# Finnish letters (Ä, Ö, Å) from this band, so a range touching it would mark
# untranslated text as already localized.

LATIN_RANGE_START: int = 0x0000
LATIN_RANGE_END: int = 0x024F

# ============================================================================
# SPECIAL-CASE MARKERS
# ============================================================================

MAGAZINE_PATH_MARKER: str = "Sheets/YellowPagesMagazine/"
MAGAZINE_LINE_SUFFIX: str = "/Lines/YellowLine"
INTERACTION_PATH: str = "GUI/Indicators/Interaction"

PRICE_TOTAL_MARKER: str = "PRICE TOTAL"
PRICE_TOTAL_KEY: str = "PRICETOTAL"
PHONE_KEY: str = "PHONE"
PRICE_PHONE_PREFIX: str = "h."
PRICE_PHONE_SEPARATOR: str = ",- puh."
CURRENCY_SUFFIX: str = "MK"
WORD_LIST_SEPARATOR: str = ", "

# ============================================================================
# SCHEDULING
# ============================================================================

MAINMENU_SCAN_INTERVAL: float = 2.0
DYNAMIC_UPDATE_INTERVAL: float = 0.1

# Checked on every late pass, resolved by exact path.
PRIORITY_PATHS: tuple[str, ...] = (
    "GUI/Indicators/Interaction",
    "GUI/Indicators/Interaction/Shadow",
    "GUI/Indicators/Partname",
    "GUI/Indicators/Partname/Shadow",
    "GUI/Indicators/Subtitles",
    "GUI/Indicators/Subtitles/Shadow",
    "GUI/HUD/Day/HUDValue",
)

# Any path containing one of these is a priority element.
PRIORITY_PATH_MARKERS: tuple[str, ...] = (
    "GUI/Indicators/Interaction",
    "GUI/Indicators/Partname",
    "GUI/Indicators/Subtitles",
    "GUI/HUD/Day/HUDValue",
)

DYNAMIC_PATH_MARKERS: tuple[str, ...] = ("GUI/HUD/", "GUI/Indicators/")
GUI_PATH_MARKER: str = "GUI/"
DEBUG_PATH_MARKER: str = "/Debug/"

# Main menu labels rewritten by the host after the first pass.
MENU_SONG_PATH_MARKER: str = "Interface/Songs/"

SCENE_SPLASH: str = "SplashScreen"
SCENE_MAIN_MENU: str = "MainMenu"
SCENE_GAME: str = "GAME"
