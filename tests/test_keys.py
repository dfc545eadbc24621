"""Tests for translation key normalization.

Python 3.13+.
"""

from hypothesis import event, given
from hypothesis import strategies as st

from tests.strategies import display_texts
from uilocalizer.core.keys import normalize_key


class TestNormalizeKey:
    """Test normalize_key function."""

    def test_strips_spaces_newlines_and_uppercases(self) -> None:
        """Surrounding and inner whitespace removed, result upper-cased."""
        assert normalize_key(" Beer 149 MK \n") == "BEER149MK"

    def test_carriage_return_removed(self) -> None:
        """Windows line endings inside text do not affect the key."""
        assert normalize_key("Open\r\nDoor") == "OPENDOOR"

    def test_empty_string_unchanged(self) -> None:
        """Empty input is returned as is."""
        assert normalize_key("") == ""

    def test_none_unchanged(self) -> None:
        """None input is returned as is."""
        assert normalize_key(None) is None

    def test_tabs_are_kept(self) -> None:
        """Only spaces, newlines and carriage returns are removed inside text."""
        assert normalize_key("a\tb") == "A\tB"

    def test_non_ascii_uppercased(self) -> None:
        """Finnish letters are upper-cased like ASCII."""
        assert normalize_key("olut ja äes") == "OLUTJAÄES"


class TestNormalizeKeyProperties:
    """Property-based tests for normalize_key."""

    @given(text=display_texts())
    def test_idempotent(self, text: str) -> None:
        """Normalizing twice equals normalizing once."""
        once = normalize_key(text)
        assert normalize_key(once) == once

    @given(text=display_texts())
    def test_no_spaces_or_line_breaks(self, text: str) -> None:
        """Normalized keys contain no space, newline or carriage return."""
        key = normalize_key(text)
        assert key is not None
        assert not set(key) & {" ", "\n", "\r"}

    @given(text=st.text(max_size=40))
    def test_spacing_variants_share_key(self, text: str) -> None:
        """Re-spacing text never changes its key."""
        respaced = " " + text.replace(" ", "\n ") + " "
        event(f"has_space={' ' in text}")
        assert normalize_key(respaced) == normalize_key(text)
