"""Translation tables, configuration, special cases, fonts and the engine.

Submodules:
    types         - Type aliases and host boundary protocols
    loading       - ResourceLoader, PathResourceLoader, AssetLayout, LoadSummary
    store         - TranslationStore (first-writer-wins table)
    config        - LocalizationConfig and the config.txt parser
    special_cases - Magazine and aggregate price handlers
    fonts         - FontResolver
    tracker       - ElementStateTracker
    engine        - EngineGeneration, LocalizationEngine

Python 3.13+.
"""

from .config import LocalizationConfig, parse_config
from .engine import EngineGeneration, LocalizationEngine, build_generation
from .fonts import FontResolver
from .loading import (
    AssetLayout,
    LoadSummary,
    PathResourceLoader,
    ResourceLoader,
    ResourceLoadResult,
    read_resource,
)
from .special_cases import SpecialCaseDispatcher, SpecialCaseResult, is_magazine_path
from .store import TranslationStore, parse_key_value
from .tracker import ElementRecord, ElementState, ElementStateTracker
from .types import (
    ElementPath,
    FontAsset,
    FontName,
    FontSource,
    ResourceId,
    TextElement,
    TranslationKey,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Engine
    "LocalizationEngine",
    "EngineGeneration",
    "build_generation",
    # Components
    "TranslationStore",
    "LocalizationConfig",
    "SpecialCaseDispatcher",
    "SpecialCaseResult",
    "FontResolver",
    "ElementStateTracker",
    "ElementState",
    "ElementRecord",
    # Loading
    "ResourceLoader",
    "PathResourceLoader",
    "AssetLayout",
    "ResourceLoadResult",
    "LoadSummary",
    "read_resource",
    # Parsing helpers
    "parse_config",
    "parse_key_value",
    "is_magazine_path",
    # Types
    "ElementPath",
    "FontAsset",
    "FontName",
    "FontSource",
    "ResourceId",
    "TextElement",
    "TranslationKey",
]
