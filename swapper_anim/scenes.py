"""Scene base class, scene manager and shared game-state types."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from swapper_anim.geometry import Vec2

APP_NAME = "kojin"
APP_VERSION = "v0.0.0"
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
SCREEN_FPS = 60


class Scene(ABC):
    """A screen of the game: it updates its state and draws itself."""

    def __init__(self, old_scene: Scene | None = None) -> None:
        self.old_scene = old_scene
        self.initialized = False

    def initialize(self) -> None:
        """Prepare the scene; marks it as already started."""
        self.initialized = True

    def finalize(self) -> None:
        """Release what the scene holds when it is left."""

    @abstractmethod
    def update(self) -> Scene | None:
        """Advance one frame and return the scene to run next, or None to stop."""

    @abstractmethod
    def draw(self) -> None:
        """Render the scene."""


class SceneManager(Scene):
    """Runs one scene at a time and switches to whatever it returns."""

    def __init__(self, scene: Scene) -> None:
        super().__init__()
        self.current: Scene | None = scene

    def initialize(self) -> None:
        super().initialize()
        if self.current is not None:
            self.current.initialize()

    def update(self) -> Scene | None:
        if self.current is None:
            raise RuntimeError("no scene is running")
        next_scene = self.current.update()
        if next_scene is not self.current:
            self.current.finalize()
            self.current = next_scene
        return next_scene

    def draw(self) -> None:
        if self.current is None:
            raise RuntimeError("no scene is running")
        self.current.draw()

    def finalize(self) -> None:
        if self.current is not None:
            self.current.finalize()
            self.current = None


class GameMainState(Enum):
    """Sub-states of the main game scene."""

    NULL = 0
    S_GAME_MAIN = 1
    PAUSE = 2
    OPTION = 3
    GAME_OVER = 4
    CHECK = 5
    GAME_CLEAR = 6


@dataclass
class BackGroundImage:
    """One animated background tile."""

    visible: bool = False
    location: Vec2 = field(default_factory=Vec2)
    area: Vec2 = field(default_factory=Vec2)
    moving: bool = False
    move_goal: Vec2 = field(default_factory=Vec2)
    move_speed: float = 0.0
    color: int = 0
    move_rad: float = 0.0
    anim_size: int = 0