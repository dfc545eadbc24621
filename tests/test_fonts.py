"""Tests for replacement font resolution.

Python 3.13+.
"""

import pytest

from tests.helpers.fakes import FakeFont, FakeFontSource
from uilocalizer.diagnostics import Diagnostic, DiagnosticCode
from uilocalizer.localization.fonts import FontResolver

NANUM = FakeFont("NanumGothic", main_texture="nanum-atlas")
NANUM_BOLD = FakeFont("NanumGothicBold", main_texture="nanum-bold-atlas")


class TestFontResolverResolve:
    """Test FontResolver.resolve order."""

    @pytest.fixture
    def resolver(self) -> FontResolver:
        return FontResolver({"FugazOne-Regular": NANUM, "Heebo-Black": NANUM_BOLD})

    def test_direct_mapping(self, resolver: FontResolver) -> None:
        """Original font names map to their replacement."""
        assert resolver.resolve("Heebo-Black") is NANUM_BOLD

    def test_already_replaced_font(self, resolver: FontResolver) -> None:
        """An element already using a replacement keeps that replacement."""
        assert resolver.resolve("NanumGothicBold") is NANUM_BOLD

    def test_fallback_to_first_loaded(self, resolver: FontResolver) -> None:
        """Unmapped names fall back to the first loaded replacement."""
        assert resolver.resolve("Arial") is NANUM
        assert resolver.resolve(None) is NANUM

    def test_empty_resolver(self) -> None:
        """No loaded fonts means no replacement."""
        resolver = FontResolver()
        assert resolver.resolve("FugazOne-Regular") is None
        assert len(resolver) == 0


class TestFontResolverLoad:
    """Test FontResolver.load from a font source."""

    def test_loads_configured_fonts(self) -> None:
        """Every mapping is loaded from the source by replacement name."""
        source = FakeFontSource({"NanumGothic": NANUM})
        resolver = FontResolver.load({"FugazOne-Regular": "NanumGothic"}, source)
        assert resolver.resolve("FugazOne-Regular") is NANUM
        assert source.requests == ["NanumGothic"]

    def test_missing_asset_skipped(self) -> None:
        """Assets absent from the source are skipped and reported."""
        diagnostics: list[Diagnostic] = []
        source = FakeFontSource({"NanumGothic": NANUM})
        resolver = FontResolver.load(
            {"FugazOne-Regular": "NanumGothic", "Heebo-Black": "Missing"}, source, diagnostics
        )
        assert len(resolver) == 1
        assert diagnostics[0].code is DiagnosticCode.FONT_NOT_IN_SOURCE
        assert diagnostics[0].severity == "warning"

    def test_broken_source_gives_empty_resolver(self, caplog: pytest.LogCaptureFixture) -> None:
        """A failing source is logged as an error and loading continues empty."""
        diagnostics: list[Diagnostic] = []
        resolver = FontResolver.load(
            {"FugazOne-Regular": "NanumGothic"}, FakeFontSource(broken=True), diagnostics
        )
        assert len(resolver) == 0
        assert "Failed to load font bundle" in caplog.text
        assert diagnostics[0].code is DiagnosticCode.FONT_SOURCE_FAILED

    def test_os_error_from_source(self) -> None:
        """OSError from the source is handled like a load failure."""

        class UnreadableSource:
            def load_font(self, name: str) -> FakeFont | None:
                raise OSError("bundle unreadable")

        diagnostics: list[Diagnostic] = []
        resolver = FontResolver.load({"A": "B"}, UnreadableSource(), diagnostics)
        assert len(resolver) == 0
        assert diagnostics[0].code is DiagnosticCode.FONT_SOURCE_FAILED

    @pytest.mark.parametrize("error", [RuntimeError("adapter crashed"), KeyError("NanumGothic")])
    def test_unexpected_error_from_source(
        self, error: Exception, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Any exception from the host source leaves the resolver empty."""
        diagnostics: list[Diagnostic] = []
        resolver = FontResolver.load(
            {"FugazOne-Regular": "NanumGothic"}, FakeFontSource(error=error), diagnostics
        )
        assert len(resolver) == 0
        assert [d.code for d in diagnostics] == [DiagnosticCode.FONT_SOURCE_FAILED]
        assert type(error).__name__ in diagnostics[0].message
        assert caplog.records[-1].exc_info is not None

    def test_no_mappings(self) -> None:
        """Without mappings the source is never consulted."""
        source = FakeFontSource({"NanumGothic": NANUM})
        assert len(FontResolver.load({}, source)) == 0
        assert source.requests == []

    def test_no_source(self) -> None:
        """Mappings without a source give an empty resolver."""
        assert len(FontResolver.load({"A": "B"}, None)) == 0
