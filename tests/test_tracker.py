"""Tests for per-element processing state.

Python 3.13+.
"""

import gc

from tests.helpers.fakes import FakeTextElement
from uilocalizer.core.vector import Vector3
from uilocalizer.localization.tracker import ElementRecord, ElementStateTracker


class TestElementStateTracker:
    """Test ElementStateTracker state transitions."""

    def test_new_element_needs_processing(self) -> None:
        """Unknown elements are always processed."""
        tracker = ElementStateTracker()
        assert tracker.should_process(FakeTextElement("Beer"), "Beer")

    def test_processed_and_unchanged_skipped(self) -> None:
        """Marked elements with unchanged text are skipped."""
        tracker = ElementStateTracker()
        element = FakeTextElement("Olut")
        tracker.mark_processed(element, "Olut")
        assert not tracker.should_process(element, "Olut")
        assert tracker.is_processed(element)

    def test_text_drift_clears_processed(self) -> None:
        """Changed text clears the processed flag."""
        tracker = ElementStateTracker()
        element = FakeTextElement("Olut")
        tracker.mark_processed(element, "Olut")
        assert tracker.should_process(element, "Milk")
        assert not tracker.is_processed(element)
        assert tracker.last_text(element) == "Olut"

    def test_identity_not_equality(self) -> None:
        """Elements with identical content are tracked separately."""
        tracker = ElementStateTracker()
        first, second = FakeTextElement("Beer"), FakeTextElement("Beer")
        tracker.mark_processed(first, "Beer")
        assert tracker.should_process(second, "Beer")

    def test_reset_all_keeps_records(self) -> None:
        """Scene resets clear state but keep cached paths."""
        tracker = ElementStateTracker()
        element = FakeTextElement("Beer", path="GUI/HUD/Label")
        tracker.path_for(element, lambda e: e.path)
        tracker.mark_processed(element, "Beer")
        tracker.reset_all()
        assert tracker.should_process(element, "Beer")
        assert tracker.tracked_count == 0
        assert tracker.record_count == 1

    def test_invalidate_clears_records(self) -> None:
        """invalidate() also drops cached paths."""
        tracker = ElementStateTracker()
        element = FakeTextElement("Beer", path="GUI/HUD/Label")
        tracker.path_for(element, lambda e: e.path)
        tracker.invalidate()
        assert tracker.record_count == 0

    def test_forget_drops_both_tables(self) -> None:
        """Destroyed elements leave no state behind."""
        tracker = ElementStateTracker()
        element = FakeTextElement("Beer")
        tracker.record_for(element)
        tracker.mark_processed(element, "Beer")
        tracker.forget(element)
        assert (tracker.tracked_count, tracker.record_count) == (0, 0)
        tracker.forget(element)

    def test_path_resolved_once(self) -> None:
        """The resolver runs only on the first lookup."""
        tracker = ElementStateTracker()
        element = FakeTextElement("Beer", path="GUI/HUD/Label")
        calls: list[object] = []

        def resolve(e: FakeTextElement) -> str:
            calls.append(e)
            return e.path

        assert tracker.path_for(element, resolve) == "GUI/HUD/Label"
        assert tracker.path_for(element, resolve) == "GUI/HUD/Label"
        assert len(calls) == 1


class SlottedElement:
    """Host object without weak reference support."""

    __slots__ = ("alive", "text")

    def __init__(self, text: str) -> None:
        self.text = text
        self.alive = True


class TestElementLifetime:
    """Test that entries never outlive or get confused with their element."""

    def test_freed_element_leaves_no_entries(self) -> None:
        """Entries disappear once the element is garbage collected."""
        tracker = ElementStateTracker()
        element = FakeTextElement("Beer", path="GUI/HUD/Label")
        tracker.path_for(element, lambda e: e.path)
        tracker.mark_processed(element, "Beer")
        del element
        gc.collect()
        assert (tracker.tracked_count, tracker.record_count) == (0, 0)

    def test_replacement_element_starts_clean(self) -> None:
        """An element allocated after another was freed gets a fresh record."""
        tracker = ElementStateTracker()
        old = FakeTextElement("Beer", path="Systems/Options/Label")
        tracker.path_for(old, lambda e: e.path)
        tracker.record_for(old).anchor = Vector3(0.0, 1.0, 0.0)
        del old
        gc.collect()
        new = FakeTextElement("Money", path="GUI/HUD/Money/HUDLabel")
        assert tracker.path_for(new, lambda e: e.path) == "GUI/HUD/Money/HUDLabel"
        assert tracker.record_for(new).anchor is None

    def test_unreferenceable_element_kept_until_forget(self) -> None:
        """Objects without weak reference support are held until forgotten."""
        tracker = ElementStateTracker()
        element = SlottedElement("Beer")
        record = tracker.record_for(element)
        tracker.mark_processed(element, "Beer")
        assert tracker.record_for(element) is record
        assert not tracker.should_process(element, "Beer")
        tracker.forget(element)
        assert (tracker.tracked_count, tracker.record_count) == (0, 0)

    def test_prune_drops_destroyed_elements(self) -> None:
        """prune() forgets elements the host reports as destroyed."""
        tracker = ElementStateTracker()
        live, dead = SlottedElement("Beer"), SlottedElement("Milk")
        destroyed = FakeTextElement("Bread", alive=False)
        for element in (live, dead, destroyed):
            tracker.record_for(element)
            tracker.mark_processed(element, element.text)
        dead.alive = False
        assert tracker.prune(lambda e: e.alive) == 2
        assert (tracker.tracked_count, tracker.record_count) == (1, 1)
        assert tracker.is_processed(live)


class TestElementRecord:
    """Test ElementRecord source text memory."""

    def test_source_used_while_rendered_text_shown(self) -> None:
        """The remembered source is used while the element shows the engine's text."""
        record = ElementRecord(source_text="Beer", rendered_text="Olut")
        assert record.source_for("Olut") == "Beer"

    def test_current_text_used_after_host_change(self) -> None:
        """New host text replaces the remembered source."""
        record = ElementRecord(source_text="Beer", rendered_text="Olut", anchor=Vector3())
        assert record.source_for("Milk") == "Milk"

    def test_empty_record(self) -> None:
        """Without history the current text is the source."""
        assert ElementRecord().source_for("Beer") == "Beer"
