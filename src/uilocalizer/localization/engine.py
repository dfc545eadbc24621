"""Localization engine: per-element translation, font and position pipeline.

An EngineGeneration bundles everything parsed from one set of data files
(configuration, translation tables, special-case handlers, loaded fonts,
load summary). Generations are immutable once built; reloading builds a
complete new generation and swaps it in with a single assignment, so an
element is never processed against half-updated tables.

Processing pipeline for one element (``process_element``):

1. Empty text: nothing to do (False)
2. Already processed and unchanged: done (True)
3. Legacy detector: text already contains target-script characters (True)
4. Special-case handlers: a handled element gets font and offset (True)
5. Translation lookup by normalized key: missing entry (False)
6. Write translation if it differs, apply font and offset (True)

Architecture:
    - Host objects are accessed only through the TextElement protocol
    - Per-element state lives in ElementStateTracker, keyed by identity
    - Errors in data files never propagate; they are logged and recorded as
      diagnostics on the generation

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from pathlib import Path

from uilocalizer.constants import DEFAULT_ASSET_DIR
from uilocalizer.diagnostics import Diagnostic
from uilocalizer.localization.config import LocalizationConfig, parse_config
from uilocalizer.localization.fonts import FontResolver
from uilocalizer.localization.loading import (
    AssetLayout,
    LoadSummary,
    PathResourceLoader,
    ResourceLoader,
    ResourceLoadResult,
    read_resource,
)
from uilocalizer.localization.special_cases import SpecialCaseDispatcher
from uilocalizer.localization.store import TranslationStore
from uilocalizer.localization.tracker import ElementStateTracker
from uilocalizer.localization.types import ElementPath, FontSource, TextElement

__all__ = ["EngineGeneration", "LocalizationEngine", "build_generation"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EngineGeneration:
    """One immutable set of parsed configuration and tables.

    Attributes:
        config: Parsed configuration
        translations: Main translation table
        magazine: Magazine translation table
        fonts: Loaded replacement fonts
        load_summary: Per-file load results
        diagnostics: File, configuration and font problems found while building
        special_cases: Handler chain bound to this generation's tables
    """

    config: LocalizationConfig = field(default_factory=LocalizationConfig)
    translations: TranslationStore = field(default_factory=TranslationStore)
    magazine: TranslationStore = field(
        default_factory=lambda: TranslationStore(name="magazine")
    )
    fonts: FontResolver = field(default_factory=FontResolver)
    load_summary: LoadSummary = field(default_factory=LoadSummary)
    diagnostics: tuple[Diagnostic, ...] = ()
    special_cases: SpecialCaseDispatcher = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Bind the handler chain to this generation's tables."""
        object.__setattr__(
            self, "special_cases", SpecialCaseDispatcher.default(self.translations, self.magazine)
        )

    @property
    def has_errors(self) -> bool:
        """Check if any error-severity diagnostic was recorded."""
        return any(d.severity == "error" for d in self.diagnostics)


def build_generation(
    loader: ResourceLoader,
    layout: AssetLayout | None = None,
    font_source: FontSource | None = None,
) -> EngineGeneration:
    """Read every data file of the layout and build a generation.

    Missing or unreadable files leave the corresponding part at its
    defaults; the reasons are in the returned generation's load_summary.

    Args:
        loader: Resource loader rooted at the asset directory
        layout: Data file names (default: standard layout)
        font_source: Provider of replacement font assets

    Returns:
        Fully built generation
    """
    layout = layout or AssetLayout()
    results: list[ResourceLoadResult] = []

    lines, result = read_resource(loader, layout.config)
    if result.is_success:
        config = parse_config(lines, source_path=result.source_path)
        result = replace(
            result,
            entry_count=len(config.font_mappings)
            + len(config.unicode_ranges)
            + len(config.position_rules),
        )
    else:
        config = LocalizationConfig()
        logger.warning("Using default configuration")
    results.append(result)

    translations = TranslationStore()
    for index, pack in enumerate(layout.translation_packs):
        lines, result = read_resource(loader, pack)
        if result.is_success:
            added = translations.load(lines, is_override=index == 0)
            result = replace(result, entry_count=added)
        results.append(result)

    magazine = TranslationStore(name="magazine")
    lines, result = read_resource(loader, layout.magazine_pack)
    if result.is_success:
        result = replace(result, entry_count=magazine.load(lines))
    results.append(result)

    diagnostics = [d for r in results if (d := r.to_diagnostic()) is not None]
    diagnostics.extend(config.diagnostics)
    fonts = FontResolver.load(config.font_mappings, font_source, diagnostics)

    summary = LoadSummary(tuple(results))
    logger.info("Built generation: %d translations, %s", len(translations), summary)
    return EngineGeneration(
        config=config,
        translations=translations,
        magazine=magazine,
        fonts=fonts,
        load_summary=summary,
        diagnostics=tuple(diagnostics),
    )


class LocalizationEngine:
    """Applies the current generation to host text elements.

    Example:
        >>> engine = LocalizationEngine.from_directory("BepInEx/plugins")
        >>> engine.process_element(element, "GUI/HUD/Day/HUDLabel")
        True
    """

    __slots__ = ("_font_source", "_generation", "_layout", "_loader", "_tracker")

    def __init__(
        self,
        generation: EngineGeneration | None = None,
        *,
        loader: ResourceLoader | None = None,
        layout: AssetLayout | None = None,
        font_source: FontSource | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            generation: Prebuilt generation; built from loader when None
            loader: Source of data files for the initial build and reloads
            layout: Data file names
            font_source: Provider of replacement font assets
        """
        self._loader = loader
        self._layout = layout or AssetLayout()
        self._font_source = font_source
        self._tracker = ElementStateTracker()
        if generation is None:
            generation = (
                build_generation(loader, self._layout, font_source)
                if loader is not None
                else EngineGeneration()
            )
        self._generation = generation

    @classmethod
    def from_directory(
        cls,
        plugin_dir: str | Path,
        font_source: FontSource | None = None,
        layout: AssetLayout | None = None,
    ) -> LocalizationEngine:
        """Create an engine reading data files from ``<plugin_dir>/l10n_assets``."""
        loader = PathResourceLoader(str(Path(plugin_dir) / DEFAULT_ASSET_DIR))
        return cls(loader=loader, layout=layout, font_source=font_source)

    @property
    def generation(self) -> EngineGeneration:
        """Generation currently in use."""
        return self._generation

    @property
    def config(self) -> LocalizationConfig:
        """Configuration of the current generation."""
        return self._generation.config

    @property
    def load_summary(self) -> LoadSummary:
        """Load results of the current generation."""
        return self._generation.load_summary

    @property
    def tracker(self) -> ElementStateTracker:
        """Per-element state."""
        return self._tracker

    def process_element(
        self, element: TextElement, path: ElementPath, *, force: bool = False
    ) -> bool:
        """Translate one element and apply its replacement font and offset.

        Args:
            element: Host text element
            path: Element's scene path
            force: Skip the processed check and rewrite even if unchanged

        Returns:
            True if the element is handled (translated, already translated,
            or intentionally left as is), False if no translation exists
        """
        text = element.text
        if not text:
            return False

        tracker = self._tracker
        if not force and not tracker.should_process(element, text):
            return True

        generation = self._generation
        source = tracker.record_for(element).source_for(text)
        if generation.config.contains_localized_characters(source):
            tracker.mark_processed(element, text)
            return True

        lookup_text = source
        result = generation.special_cases.dispatch(path, source)
        if result is not None and result.changed:
            self._write(element, source, result.text)
            if result.handled:
                self.apply_font(element, path)
                tracker.mark_processed(element, element.text)
                return True
            lookup_text = result.text

        translation = generation.translations.translate(lookup_text)
        if translation is None:
            return False

        if force or element.text != translation:
            self._write(element, source, translation)
            self.apply_font(element, path)
        tracker.mark_processed(element, element.text)
        return True

    def _write(self, element: TextElement, source: str, rendered: str) -> None:
        record = self._tracker.record_for(element)
        record.source_text = source
        record.rendered_text = rendered
        if element.text != rendered:
            element.text = rendered

    def apply_font(self, element: TextElement, path: ElementPath) -> bool:
        """Switch the element to its replacement font and apply the offset.

        The font's main texture is copied onto the element's material. The
        position offset is applied relative to the element's original
        position, so applying it again does not accumulate.

        Returns:
            True if a replacement font was applied
        """
        current = element.font
        font = self._generation.fonts.resolve(current.name if current is not None else None)
        if font is None:
            return False
        if current is not font:
            element.font = font
        if font.main_texture is not None:
            element.main_texture = font.main_texture
        self._apply_offset(element, path)
        return True

    def _apply_offset(self, element: TextElement, path: ElementPath) -> None:
        offset = self._generation.config.position_rules.resolve(path)
        record = self._tracker.record_for(element)
        if record.anchor is None:
            if not offset:
                return
            record.anchor = element.local_position
        target = record.anchor + offset
        if element.local_position != target:
            element.local_position = target
            logger.debug("Adjusted position for %s by %s", path, offset)

    def reload(self, generation: EngineGeneration | None = None) -> EngineGeneration:
        """Swap in a new generation and re-translate everything.

        Args:
            generation: Prebuilt generation; rebuilt from the engine's
                loader when None (the current one is kept without a loader)

        Returns:
            The generation now in use
        """
        if generation is None:
            if self._loader is None:
                logger.warning("Reload requested but no resource loader is configured")
                generation = self._generation
            else:
                generation = build_generation(self._loader, self._layout, self._font_source)
        self._generation = generation
        self._tracker.reset_all()
        logger.info(
            "Reloaded %d translations. Current scene will be re-translated.",
            len(generation.translations),
        )
        return generation

    def forget(self, element: object) -> None:
        """Drop all state for a destroyed element."""
        self._tracker.forget(element)

    def prune(self, is_alive: Callable[[TextElement], bool]) -> int:
        """Drop all state for elements the host reports as destroyed."""
        return self._tracker.prune(is_alive)

    def reset_elements(self) -> None:
        """Clear per-element translation state at a scene boundary."""
        self._tracker.reset_all()

    def invalidate(self) -> None:
        """Clear all per-element state, including cached paths and anchors."""
        self._tracker.invalidate()

    def __repr__(self) -> str:
        return (
            f"LocalizationEngine(language={self.config.language_name!r}, "
            f"translations={len(self._generation.translations)}, {self._tracker!r})"
        )
