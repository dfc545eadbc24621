"""Per-frame driver connecting the host scene graph to the engine.

The host calls ``early_tick`` and ``late_tick`` once per frame:

- early_tick: honours a manual reload request, resets per-element state on
  scene transitions, and runs one full pass over every text element the
  first time a recognized scene is seen.
- late_tick: keeps late-changing text translated. In the game scene priority
  elements (interaction prompts, part names, subtitles, weekday) are checked
  every frame and dynamic elements every DYNAMIC_UPDATE_INTERVAL. In the main
  menu new elements are picked up every MAINMENU_SCAN_INTERVAL.

Elements are classified by path when first seen. Destroyed elements are
dropped from monitoring and forgotten by the engine, at the latest on the
next scene change. Translated elements whose text stays stable leave
monitoring, except magazine lines and main menu song labels, which the host
regenerates.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol

from uilocalizer.constants import (
    DEBUG_PATH_MARKER,
    DYNAMIC_PATH_MARKERS,
    DYNAMIC_UPDATE_INTERVAL,
    GUI_PATH_MARKER,
    MAGAZINE_LINE_SUFFIX,
    MAGAZINE_PATH_MARKER,
    MAINMENU_SCAN_INTERVAL,
    MENU_SONG_PATH_MARKER,
    PRIORITY_PATH_MARKERS,
    PRIORITY_PATHS,
    SCENE_GAME,
    SCENE_MAIN_MENU,
    SCENE_SPLASH,
)
from uilocalizer.localization.engine import LocalizationEngine
from uilocalizer.localization.special_cases import is_magazine_path
from uilocalizer.localization.types import ElementPath, TextElement
from uilocalizer.runtime.throttle import IntervalGate

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "SceneHost",
    "SceneDriver",
    "is_priority_path",
    "is_dynamic_path",
    "RECOGNIZED_SCENES",
]

logger = logging.getLogger(__name__)

RECOGNIZED_SCENES: frozenset[str] = frozenset({SCENE_SPLASH, SCENE_MAIN_MENU, SCENE_GAME})


def _is_regenerated(path: ElementPath) -> bool:
    return is_magazine_path(path) or MENU_SONG_PATH_MARKER in path


def is_priority_path(path: ElementPath) -> bool:
    """Check if path belongs to an element that must update every frame."""
    return any(marker in path for marker in PRIORITY_PATH_MARKERS)


def is_dynamic_path(path: ElementPath) -> bool:
    """Check if path belongs to an element whose text the host keeps changing."""
    if any(marker in path for marker in DYNAMIC_PATH_MARKERS):
        return True
    if MAGAZINE_PATH_MARKER in path and path.endswith(MAGAZINE_LINE_SUFFIX):
        return True
    return GUI_PATH_MARKER in path and DEBUG_PATH_MARKER not in path


class SceneHost(Protocol):
    """Host scene graph as seen by the driver."""

    @property
    def scene_name(self) -> str:
        """Name of the active scene."""
        ...

    @property
    def time(self) -> float:
        """Host clock in seconds."""
        ...

    def text_elements(self) -> Iterable[TextElement]:
        """All live text elements, including inactive ones."""
        ...

    def find_element(self, path: ElementPath) -> TextElement | None:
        """Text element at an exact path, if present."""
        ...

    def element_path(self, element: TextElement) -> ElementPath:
        """Build the slash-delimited path of an element."""
        ...

    def is_alive(self, element: TextElement) -> bool:
        """Check whether the element still exists."""
        ...

    def consume_reload_request(self) -> bool:
        """Return True once per manual reload request (e.g. a hotkey press)."""
        ...


class SceneDriver:
    """Schedules scene passes and monitoring for one engine and host."""

    __slots__ = (
        "_current_scene",
        "_dynamic",
        "_dynamic_gate",
        "_engine",
        "_host",
        "_priority",
        "_scan_gate",
        "_scanned_scenes",
        "_translated_paths",
    )

    def __init__(
        self,
        engine: LocalizationEngine,
        host: SceneHost,
        *,
        dynamic_interval: float = DYNAMIC_UPDATE_INTERVAL,
        scan_interval: float = MAINMENU_SCAN_INTERVAL,
    ) -> None:
        self._engine = engine
        self._host = host
        self._current_scene: str | None = None
        self._scanned_scenes: set[str] = set()
        self._priority: dict[ElementPath, TextElement] = {}
        self._dynamic: dict[int, TextElement] = {}
        self._translated_paths: set[ElementPath] = set()
        self._dynamic_gate = IntervalGate(dynamic_interval)
        self._scan_gate = IntervalGate(scan_interval)

    @property
    def engine(self) -> LocalizationEngine:
        return self._engine

    @property
    def current_scene(self) -> str | None:
        return self._current_scene

    @property
    def dynamic_elements(self) -> tuple[TextElement, ...]:
        """Elements currently under dynamic monitoring."""
        return tuple(self._dynamic.values())

    @property
    def priority_elements(self) -> dict[ElementPath, TextElement]:
        """Priority elements by path (a copy)."""
        return dict(self._priority)

    def early_tick(self) -> None:
        """Reload on request, handle scene transitions, run first scene passes."""
        if self._host.consume_reload_request():
            logger.info("Reloading translations...")
            self._engine.reload()
            self._clear_monitoring()
            self._scanned_scenes.clear()
            return

        scene = self._host.scene_name
        if scene != self._current_scene:
            self._enter_scene(scene)

        if scene in RECOGNIZED_SCENES and scene not in self._scanned_scenes:
            logger.info("Translating %s scene...", scene)
            self.translate_scene()
            self._scanned_scenes.add(scene)

    def late_tick(self) -> None:
        """Update priority and dynamic elements, rescan the main menu."""
        scene = self._current_scene
        if scene not in self._scanned_scenes:
            return
        now = self._host.time
        if scene == SCENE_GAME:
            self.update_priority()
            if self._dynamic_gate.ready(now):
                self.update_dynamic()
        elif scene == SCENE_MAIN_MENU:
            if self._scan_gate.ready(now):
                self.scan_main_menu()
            if self._dynamic_gate.ready(now):
                self.update_dynamic()

    def translate_scene(self) -> int:
        """Classify and process every text element of the scene.

        Returns:
            Number of elements handled
        """
        count = 0
        for element in self._host.text_elements():
            if not element.text:
                continue
            path = self._path_of(element)
            if is_priority_path(path):
                self._priority.setdefault(path, element)
            elif is_dynamic_path(path):
                self._dynamic.setdefault(id(element), element)

            if self._engine.process_element(element, path):
                count += 1
                self._translated_paths.add(path)

        logger.info("Scene translation complete: %d strings translated", count)
        return count

    def update_priority(self) -> None:
        """Process priority elements, re-resolving destroyed ones by path."""
        for path in dict.fromkeys((*PRIORITY_PATHS, *self._priority)):
            element = self._priority.get(path)
            if element is not None and not self._host.is_alive(element):
                self._engine.forget(element)
                element = None
            if element is None:
                element = self._host.find_element(path)
                if element is None:
                    self._priority.pop(path, None)
                    continue
                self._priority[path] = element
            if element.text:
                self._engine.process_element(element, path)

    def update_dynamic(self) -> None:
        """Process monitored elements whose text changed; prune the rest."""
        tracker = self._engine.tracker
        for key, element in list(self._dynamic.items()):
            if not self._host.is_alive(element):
                del self._dynamic[key]
                self._engine.forget(element)
                continue

            text = element.text
            if not text:
                continue

            path = self._path_of(element)
            if (
                not _is_regenerated(path)
                and tracker.is_processed(element)
                and tracker.last_text(element) == text
            ):
                del self._dynamic[key]
                continue

            self._engine.process_element(element, path)

    def scan_main_menu(self) -> None:
        """Process main menu elements that appeared after the first pass."""
        for element in self._host.text_elements():
            if not element.text:
                continue
            path = self._path_of(element)
            if path in self._translated_paths:
                continue
            if self._engine.process_element(element, path):
                if MENU_SONG_PATH_MARKER in path:
                    self._dynamic.setdefault(id(element), element)
                self._translated_paths.add(path)

    def _path_of(self, element: TextElement) -> ElementPath:
        return self._engine.tracker.path_for(element, self._host.element_path)

    def _enter_scene(self, scene: str) -> None:
        logger.info("Scene changed: %s -> %s", self._current_scene, scene)
        self._current_scene = scene
        self._engine.prune(self._host.is_alive)
        self._engine.reset_elements()
        self._clear_monitoring()
        self._scanned_scenes.clear()

    def _clear_monitoring(self) -> None:
        self._priority.clear()
        self._dynamic.clear()
        self._translated_paths.clear()
        self._dynamic_gate.reset()
        self._scan_gate.reset()
