"""Scene management: a single application object that runs one scene at a time."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar


class Scene(ABC):
    """A screen of the application, preloaded once and then updated every frame."""

    @abstractmethod
    def preload(self) -> None:
        """Prepare the scene; called once when it becomes current."""

    @abstractmethod
    def update(self) -> None:
        """Advance the scene by one frame."""


class App:
    """Holds the current scene and switches to a requested one between frames."""

    _instance: ClassVar[App | None] = None

    def __init__(self) -> None:
        self._current: Scene | None = None
        self._next: Scene | None = None

    @classmethod
    def get(cls) -> App:
        """The shared application instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def update(self) -> None:
        """Switch to a pending scene if there is one, then update the current scene."""
        self._switch_pending()
        if self._current is not None:
            self._current.update()

    def set_scene(self, scene: Scene) -> None:
        """Request a scene; it takes over at the start of the next update."""
        if scene is None:
            raise ValueError("scene must not be None")
        self._next = scene

    @property
    def scene(self) -> Scene | None:
        """The scene currently running, or None before the first switch."""
        return self._current

    def _switch_pending(self) -> None:
        # A scene may request another one while it is preloading; keep going
        # until no request is left.
        while self._next is not None:
            self._current = self._next
            self._next = None
            self._current.preload()