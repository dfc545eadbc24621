"""Tests for the layered translation table.

Python 3.13+.
"""

import pytest
from hypothesis import given

from tests.strategies import display_texts
from uilocalizer.core.keys import normalize_key
from uilocalizer.localization.store import TranslationStore, parse_key_value


class TestParseKeyValue:
    """Test parse_key_value function."""

    def test_splits_at_first_equals(self) -> None:
        """Values may contain '='."""
        assert parse_key_value("A = B = C") == ("A", "B = C")

    @pytest.mark.parametrize("line", ["", "   ", "# comment = x", "no separator", "=value"])
    def test_ignored_lines(self, line: str) -> None:
        """Blank, comment, separator-less and key-less lines give None."""
        assert parse_key_value(line) is None

    def test_empty_value_allowed(self) -> None:
        """A key with an empty value still parses."""
        assert parse_key_value("KEY =") == ("KEY", "")


class TestTranslationStore:
    """Test TranslationStore loading and lookup."""

    def test_lookup_by_normalized_key(self) -> None:
        """Keys are normalized on insertion and on translate()."""
        store = TranslationStore()
        store.load(["Beer 149 MK = Olut 149 MK"])
        assert store.lookup("BEER149MK") == "Olut 149 MK"
        assert store.translate(" beer 149 mk\n") == "Olut 149 MK"

    def test_first_loaded_pack_wins(self) -> None:
        """Later packs never overwrite an existing key."""
        store = TranslationStore()
        assert store.load(["Beer = Kalja"], is_override=True) == 1
        assert store.load(["BEER = Olut", "Milk = Maito"]) == 1
        assert store.translate("Beer") == "Kalja"
        assert store.translate("Milk") == "Maito"

    def test_duplicate_within_pack_keeps_first(self) -> None:
        """The first occurrence inside one pack wins as well."""
        store = TranslationStore()
        store.load(["Beer = Kalja", "beer = Olut"])
        assert store.translate("Beer") == "Kalja"

    def test_escaped_newline_decoded(self) -> None:
        """Literal backslash-n in a value becomes a line break."""
        store = TranslationStore()
        store.load(["Press key = Paina\\nnäppäintä"])
        assert store.translate("Press key") == "Paina\nnäppäintä"

    def test_missing_key(self) -> None:
        """Unknown and empty keys give None."""
        store = TranslationStore()
        assert store.lookup("NOPE") is None
        assert store.lookup("") is None
        assert store.lookup(None) is None

    def test_container_protocol(self) -> None:
        """len, in and iteration reflect normalized keys."""
        store = TranslationStore(name="magazine")
        store.load(["Beer = Olut", "# note", "", "Milk = Maito"])
        assert len(store) == 2
        assert "BEER" in store
        assert list(store) == ["BEER", "MILK"]
        assert "magazine" in repr(store)

    def test_clear(self) -> None:
        """clear() empties the table."""
        store = TranslationStore()
        store.load(["Beer = Olut"])
        store.clear()
        assert len(store) == 0

    def test_load_logs_layer(self, uilocalizer_logs: pytest.LogCaptureFixture) -> None:
        """Each load logs its layer and counts."""
        TranslationStore().load(["Beer = Olut"], is_override=True)
        assert "1 override entries" in uilocalizer_logs.text


class TestTranslationStoreProperties:
    """Property-based tests for TranslationStore."""

    @given(text=display_texts())
    def test_any_spacing_variant_resolves(self, text: str) -> None:
        """An entry is found through any text with the same key."""
        key = normalize_key(text)
        store = TranslationStore()
        store.load([f"{key} = translated"])
        assert store.translate(text) == "translated"
