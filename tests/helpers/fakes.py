"""Host-side test doubles for the element boundary protocols.

FakeFont, FakeTextElement, FakeFontSource, MemoryLoader and FakeSceneHost
satisfy the FontAsset, TextElement, FontSource, ResourceLoader and SceneHost
protocols structurally, the way a real host adapter would.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from uilocalizer.core.vector import Vector3
from uilocalizer.diagnostics import ResourceLoadError


@dataclass(eq=False)
class FakeFont:
    """Font asset with a name and glyph texture."""

    name: str
    main_texture: object | None = None


@dataclass(eq=False)
class FakeTextElement:
    """Text element with an assignment log per attribute.

    eq=False keeps identity semantics, as for real host objects.
    """

    text: str
    font: FakeFont | None = None
    local_position: Vector3 = field(default_factory=Vector3)
    main_texture: object | None = None
    path: str = ""
    alive: bool = True
    text_writes: int = 0

    def __setattr__(self, name: str, value: object) -> None:
        if name == "text" and "text" in self.__dict__:
            object.__setattr__(self, "text_writes", self.text_writes + 1)
        object.__setattr__(self, name, value)


class FakeFontSource:
    """Font source backed by a dict; optionally fails like a broken bundle.

    broken raises ResourceLoadError; error is raised as given, the way a
    misbehaving host adapter would.
    """

    def __init__(
        self,
        fonts: dict[str, FakeFont] | None = None,
        *,
        broken: bool = False,
        error: Exception | None = None,
    ) -> None:
        self.fonts = dict(fonts or {})
        self.broken = broken
        self.error = error
        self.requests: list[str] = []

    def load_font(self, name: str) -> FakeFont | None:
        self.requests.append(name)
        if self.error is not None:
            raise self.error
        if self.broken:
            msg = "font bundle is corrupt"
            raise ResourceLoadError(msg)
        return self.fonts.get(name)


class MemoryLoader:
    """ResourceLoader over in-memory file contents."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files = dict(files or {})
        self.unreadable: set[str] = set()

    def read_lines(self, resource_id: str) -> list[str]:
        if resource_id in self.unreadable:
            msg = f"permission denied: {resource_id}"
            raise PermissionError(msg)
        if resource_id not in self.files:
            raise FileNotFoundError(resource_id)
        return self.files[resource_id].splitlines()

    def describe_path(self, resource_id: str) -> str:
        return f"memory:{resource_id}"


class FakeSceneHost:
    """Scene graph with a settable scene name, clock and reload flag."""

    def __init__(self, elements: list[FakeTextElement] | None = None, scene: str = "") -> None:
        self.elements = list(elements or [])
        self.scene_name = scene
        self.time = 0.0
        self.reload_requested = False
        self.path_lookups = 0

    def add(self, text: str, path: str, **kwargs: object) -> FakeTextElement:
        element = FakeTextElement(text=text, path=path, **kwargs)  # type: ignore[arg-type]
        self.elements.append(element)
        return element

    def destroy(self, element: FakeTextElement) -> None:
        element.alive = False
        self.elements.remove(element)

    def text_elements(self) -> list[FakeTextElement]:
        return list(self.elements)

    def find_element(self, path: str) -> FakeTextElement | None:
        for element in self.elements:
            if element.path == path:
                return element
        return None

    def element_path(self, element: FakeTextElement) -> str:
        self.path_lookups += 1
        return element.path

    def is_alive(self, element: FakeTextElement) -> bool:
        return element.alive

    def consume_reload_request(self) -> bool:
        requested, self.reload_requested = self.reload_requested, False
        return requested
