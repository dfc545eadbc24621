"""Replacement font resolution.

Target scripts usually need glyphs the host's fonts lack. The [FONTS]
configuration section maps each original font name to a replacement asset,
which a FontSource (normally the font asset bundle) provides.

Resolution order for an element's current font name:

1. Direct mapping for the original name
2. A loaded replacement whose own name matches (the element was already
   switched by an earlier pass)
3. The first-loaded replacement, as a fallback
4. None

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from uilocalizer.diagnostics import Diagnostic, DiagnosticCode, ResourceLoadError
from uilocalizer.localization.types import FontAsset, FontName, FontSource

__all__ = ["FontResolver"]

logger = logging.getLogger(__name__)


class FontResolver:
    """Original font name to loaded replacement font.

    Example:
        >>> resolver = FontResolver({"FugazOne-Regular": nanum_gothic})
        >>> resolver.resolve("FugazOne-Regular") is nanum_gothic
        True
        >>> resolver.resolve("SomethingElse") is nanum_gothic  # fallback
        True
    """

    __slots__ = ("_by_replacement_name", "_fonts")

    def __init__(self, fonts: Mapping[FontName, FontAsset] | None = None) -> None:
        """Initialize with already-loaded fonts.

        Args:
            fonts: Original font name to replacement asset, in load order
        """
        self._fonts: dict[FontName, FontAsset] = dict(fonts or {})
        self._by_replacement_name: dict[FontName, FontAsset] = {}
        for font in self._fonts.values():
            self._by_replacement_name.setdefault(font.name, font)

    @classmethod
    def load(
        cls,
        mappings: Mapping[FontName, FontName],
        source: FontSource | None,
        diagnostics: list[Diagnostic] | None = None,
    ) -> FontResolver:
        """Load replacement fonts for every configured mapping.

        Mappings whose asset the source lacks are skipped. If the source
        itself fails, whatever it raises, the resolver is returned empty and
        the engine runs without font substitution.

        Args:
            mappings: [FONTS] section (original name to replacement name)
            source: Font source, or None when the host provides no fonts
            diagnostics: Optional list that receives a Diagnostic per problem
        """
        if not mappings:
            logger.info("No font mappings configured - using default fonts")
            return cls()
        if source is None:
            logger.warning("Font mappings configured but no font source available")
            return cls()

        fonts: dict[FontName, FontAsset] = {}
        try:
            for original, replacement in mappings.items():
                font = source.load_font(replacement)
                if font is None:
                    logger.warning("Font '%s' not found in font source", replacement)
                    if diagnostics is not None:
                        diagnostics.append(
                            Diagnostic(
                                code=DiagnosticCode.FONT_NOT_IN_SOURCE,
                                message=f"Font '{replacement}' for '{original}' not found",
                                severity="warning",
                            )
                        )
                    continue
                fonts[original] = font
                logger.info("Loaded %s for %s", replacement, original)
        except (ResourceLoadError, OSError) as e:
            logger.error("Failed to load font bundle: %s", e)
            if diagnostics is not None:
                diagnostics.append(
                    e.diagnostic
                    if isinstance(e, ResourceLoadError) and e.diagnostic is not None
                    else Diagnostic(
                        code=DiagnosticCode.FONT_SOURCE_FAILED,
                        message=f"Failed to load font bundle: {e}",
                    )
                )
            return cls()
        except Exception as e:  # pylint: disable=broad-exception-caught
            # Host font sources are third-party adapters; any failure there
            # only disables font substitution.
            logger.exception("Font source raised %s", type(e).__name__)
            if diagnostics is not None:
                diagnostics.append(
                    Diagnostic(
                        code=DiagnosticCode.FONT_SOURCE_FAILED,
                        message=f"Font source raised {type(e).__name__}: {e}",
                    )
                )
            return cls()

        if fonts:
            logger.info("Successfully loaded %d custom fonts", len(fonts))
        else:
            logger.warning("No fonts were loaded from the font source")
        return cls(fonts)

    def resolve(self, original_name: FontName | None) -> FontAsset | None:
        """Resolve the replacement for an element's current font.

        Args:
            original_name: Current font name (None if the element has no font)

        Returns:
            Replacement font, or None when no fonts are loaded
        """
        if original_name is not None:
            font = self._fonts.get(original_name)
            if font is not None:
                return font
            font = self._by_replacement_name.get(original_name)
            if font is not None:
                return font
        # TODO: the first-loaded fallback can pair a text with the wrong
        # replacement; make it configurable once a default-font key exists.
        return next(iter(self._fonts.values()), None)

    def __len__(self) -> int:
        return len(self._fonts)

    def __repr__(self) -> str:
        return f"FontResolver(fonts={sorted(self._fonts)!r})"
