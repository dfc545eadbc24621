"""Per-element processing state.

Thousands of text elements are revisited every few frames, so the engine
remembers what it already did to each one. Two tables with different
lifetimes are kept, both keyed by element identity rather than by path,
since paths can collide:

- ElementState: last text seen after processing and the processed flag.
  Cleared on every scene boundary and reload (``reset_all``).
- ElementRecord: resolved path, pre-offset anchor position, and the source
  text behind the engine's last rewrite. These are stable for the element's
  lifetime and only cleared by ``invalidate`` or ``forget``.

Identity:
    Entries hold a weak reference to their element, so they disappear when
    the host frees it, before its ``id`` can be handed to a new object.
    Every lookup also checks that the referenced object is the element asked
    about. Objects that cannot be weakly referenced are held strongly until
    ``forget``, ``prune`` or ``invalidate``; SceneDriver prunes destroyed
    elements at every scene change.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import weakref
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from uilocalizer.core.vector import Vector3
from uilocalizer.localization.types import ElementPath

__all__ = ["ElementRecord", "ElementState", "ElementStateTracker"]

logger = logging.getLogger(__name__)

type _Reference = Callable[[], object | None]


@dataclass(slots=True)
class ElementState:
    """Translation state of one element within the current scene.

    Attributes:
        last_text: Element text right after the last successful processing
        processed: Whether last_text is fully handled
    """

    last_text: str | None = None
    processed: bool = False


@dataclass(slots=True)
class ElementRecord:
    """Long-lived facts about one element.

    Attributes:
        path: Cached scene path
        anchor: Local position before any offset was applied
        source_text: Text the engine last translated from
        rendered_text: Text the engine last wrote for source_text
    """

    path: ElementPath | None = None
    anchor: Vector3 | None = None
    source_text: str | None = None
    rendered_text: str | None = None

    def source_for(self, current_text: str) -> str:
        """Return the text to translate from.

        While the element still shows what the engine wrote, translation
        restarts from the remembered source so that a reloaded pack can
        replace an earlier translation.
        """
        if self.source_text and current_text == self.rendered_text:
            return self.source_text
        return current_text


class _IdentityTable[V]:
    """Element to value map that never confuses two elements."""

    __slots__ = ("__weakref__", "_entries")

    def __init__(self) -> None:
        self._entries: dict[int, tuple[_Reference, V]] = {}

    def get(self, element: object) -> V | None:
        key = id(element)
        entry = self._entries.get(key)
        if entry is None:
            return None
        ref, value = entry
        if ref() is not element:
            # Stale entry of a freed object whose id was reused.
            del self._entries[key]
            return None
        return value

    def set(self, element: object, value: V) -> None:
        key = id(element)
        self._entries[key] = (self._reference(element, key), value)

    def _reference(self, element: object, key: int) -> _Reference:
        table = weakref.ref(self)

        def collected(ref: weakref.ref[object]) -> None:
            owner = table()
            if owner is not None:
                entry = owner._entries.get(key)
                if entry is not None and entry[0] is ref:
                    del owner._entries[key]

        try:
            return weakref.ref(element, collected)
        except TypeError:
            # Not weak-referenceable: pinned until pop(), prune() or clear().
            return lambda: element

    def prune(self, is_alive: Callable[[Any], bool]) -> int:
        stale = [
            key
            for key, (ref, _) in list(self._entries.items())
            if (element := ref()) is None or not is_alive(element)
        ]
        for key in stale:
            self._entries.pop(key, None)
        return len(stale)

    def pop(self, element: object) -> None:
        self._entries.pop(id(element), None)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class ElementStateTracker:
    """Identity-keyed caches that make repeated passes cheap and idempotent."""

    __slots__ = ("_records", "_states")

    def __init__(self) -> None:
        self._states: _IdentityTable[ElementState] = _IdentityTable()
        self._records: _IdentityTable[ElementRecord] = _IdentityTable()

    def should_process(self, element: object, current_text: str) -> bool:
        """Check whether the element needs processing.

        Text that drifted since the last successful processing clears the
        processed flag; the record (path cache) is kept.

        Args:
            element: Host text element
            current_text: Its current text

        Returns:
            True unless the element is processed and its text is unchanged
        """
        state = self._states.get(element)
        if state is None:
            return True
        if state.last_text != current_text:
            state.processed = False
        return not state.processed

    def mark_processed(self, element: object, text: str) -> None:
        """Record successful processing with the element's resulting text."""
        state = self._states.get(element)
        if state is None:
            state = ElementState()
            self._states.set(element, state)
        state.last_text = text
        state.processed = True

    def is_processed(self, element: object) -> bool:
        """Check the processed flag without comparing text."""
        state = self._states.get(element)
        return state is not None and state.processed

    def last_text(self, element: object) -> str | None:
        """Text recorded at the last successful processing, if any."""
        state = self._states.get(element)
        return state.last_text if state is not None else None

    def record_for(self, element: object) -> ElementRecord:
        """Get the element's long-lived record, creating it lazily."""
        record = self._records.get(element)
        if record is None:
            record = ElementRecord()
            self._records.set(element, record)
        return record

    def path_for[E](self, element: E, resolve: Callable[[E], ElementPath]) -> ElementPath:
        """Get the element's path, resolving it once per element lifetime.

        Args:
            element: Host text element
            resolve: Builds the path from the host scene graph on a cache miss
        """
        record = self.record_for(element)
        if record.path is None:
            record.path = resolve(element)
        return record.path

    def forget(self, element: object) -> None:
        """Drop every entry for a destroyed element."""
        self._states.pop(element)
        self._records.pop(element)

    def prune(self, is_alive: Callable[[Any], bool]) -> int:
        """Forget every element the host reports as destroyed.

        Args:
            is_alive: Host liveness check

        Returns:
            Number of records dropped
        """
        self._states.prune(is_alive)
        dropped = self._records.prune(is_alive)
        if dropped:
            logger.debug("Pruned %d destroyed elements", dropped)
        return dropped

    def reset_all(self) -> None:
        """Clear processing state (scene boundary, reload); keep records."""
        logger.debug("Resetting state of %d elements", len(self._states))
        self._states.clear()

    def invalidate(self) -> None:
        """Clear processing state and the long-lived records."""
        self._states.clear()
        self._records.clear()

    @property
    def tracked_count(self) -> int:
        """Number of elements with processing state."""
        return len(self._states)

    @property
    def record_count(self) -> int:
        """Number of elements with a long-lived record."""
        return len(self._records)

    def __repr__(self) -> str:
        return (
            f"ElementStateTracker(tracked={len(self._states)}, records={len(self._records)})"
        )
