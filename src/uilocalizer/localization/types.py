"""Type aliases and host boundary protocols for the localization domain.

The host UI framework owns every text element and font asset; the engine
only reads and writes the attributes declared here. Protocols (structural
typing) let any host object satisfy them without inheriting from engine
classes.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from uilocalizer.core.vector import Vector3

__all__ = [
    "ElementPath",
    "FontAsset",
    "FontName",
    "FontSource",
    "ResourceId",
    "TextElement",
    "TranslationKey",
]

type TranslationKey = str
"""Normalized lookup key (e.g., 'BEER149MK')."""

type ElementPath = str
"""Slash-delimited scene path (e.g., 'GUI/HUD/Day/HUDLabel')."""

type FontName = str
"""Font asset name as reported by the host (e.g., 'FugazOne-Regular')."""

type ResourceId = str
"""Data file identifier relative to the asset directory (e.g., 'translate.txt')."""


class FontAsset(Protocol):
    """Font object supplied by the host or a font source."""

    @property
    def name(self) -> FontName:
        """Font identity used for mapping lookups."""
        ...

    @property
    def main_texture(self) -> object | None:
        """Glyph atlas texture, copied onto the element's material."""
        ...


class TextElement(Protocol):
    """Text-bearing scene element.

    Attributes:
        text: Displayed text (read/write)
        font: Current font (read/write, None if unset)
        local_position: Position relative to the parent (read/write)
        main_texture: Texture of the element's rendering material (read/write)
    """

    text: str
    font: FontAsset | None
    local_position: Vector3
    main_texture: object | None


class FontSource(Protocol):
    """Source of replacement fonts keyed by asset name.

    Typically backed by a font asset bundle. Implementations raise
    ResourceLoadError or OSError when the bundle itself cannot be opened.
    """

    def load_font(self, name: FontName) -> FontAsset | None:
        """Load a font asset by name.

        Args:
            name: Replacement font name from the [FONTS] section

        Returns:
            Font asset, or None if the source has no asset with that name
        """
        ...
