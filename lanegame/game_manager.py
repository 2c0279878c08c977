"""The game loop: window, scene, entity lifetimes and collisions."""

from __future__ import annotations

import os
from itertools import combinations
from typing import Any, ClassVar, List, Optional, Type

import pygame

from lanegame.debug import Debug
from lanegame.entity import Entity
from lanegame.scene import Scene

FONT_FILE = "Hack-Regular.ttf"
FONT_SIZE = 20


class GameManager:
    """Owns the window and the entities, and runs the active scene."""

    _instance: ClassVar[Optional["GameManager"]] = None

    def __init__(self) -> None:
        self.entities: List[Entity] = []
        self.entities_to_destroy: List[Entity] = []
        self.entities_to_add: List[Entity] = []
        self.window: Optional[pygame.Surface] = None
        self.font: Optional[pygame.font.Font] = None
        self.scene: Optional[Scene] = None
        self.delta_time = 0.0
        self.window_width = -1
        self.window_height = -1
        self.clear_color: Any = (0, 0, 0)
        self.fps_limit = 60
        self._running = False

    @classmethod
    def get(cls) -> "GameManager":
        """The shared instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def add_entity(self, entity: Entity) -> None:
        """Queue an entity to join the world at the end of the next update."""
        self.entities_to_add.append(entity)

    def create_window(
        self,
        width: int,
        height: int,
        title: str,
        fps_limit: int = 60,
        clear_color: Any = (0, 0, 0),
    ) -> None:
        """Open the display window."""
        if self.window is not None:
            raise RuntimeError("window already created")
        pygame.init()
        self.window = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.fps_limit = fps_limit
        self.window_width = width
        self.window_height = height
        self.clear_color = clear_color

    def start_scene(self, scene_cls: Type[Scene]) -> Scene:
        """Create the scene and initialise it without starting the loop."""
        if not (isinstance(scene_cls, type) and issubclass(scene_cls, Scene)):
            raise TypeError(f"{scene_cls!r} is not a Scene subclass")
        if self.scene is not None:
            raise RuntimeError("a scene is already running")
        scene = scene_cls(self)
        self.scene = scene
        scene.on_initialize()
        return scene

    def launch_scene(self, scene_cls: Type[Scene]) -> None:
        """Create the scene and run the game loop until the window closes."""
        self.start_scene(scene_cls)
        self.run()

    def _load_font(self) -> pygame.font.Font:
        pygame.font.init()
        path = FONT_FILE if os.path.exists(FONT_FILE) else None
        return pygame.font.Font(path, FONT_SIZE)

    def run(self) -> None:
        """Run frames until the window is closed."""
        if self.scene is None:
            raise RuntimeError("no scene to run")
        if self.window is None:
            print("Window not created, creating default window")
            self.create_window(1280, 720, "Default window")

        self.font = self._load_font()

        clock = pygame.time.Clock()
        self._running = True
        while self._running:
            self.delta_time = clock.tick(self.fps_limit) / 1000.0
            self.handle_input()
            self.update()
            self.draw()
        pygame.quit()

    def handle_input(self) -> None:
        """Pass pending events to the scene; a quit event ends the loop."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            if self.scene is not None:
                self.scene.on_event(event)

    def update(self) -> None:
        """Advance the scene and entities by one frame."""
        if self.scene is not None:
            self.scene.on_update()

        survivors: List[Entity] = []
        for entity in self.entities:
            entity.update(self.delta_time)
            if entity.to_destroy:
                self.entities_to_destroy.append(entity)
            else:
                survivors.append(entity)
        self.entities = survivors

        for entity, other in combinations(self.entities, 2):
            if entity.is_colliding(other):
                if entity.rigid_body and other.rigid_body:
                    entity.repulse(other)
                entity.on_collision(other)
                other.on_collision(entity)

        self.entities_to_destroy.clear()
        self.entities.extend(self.entities_to_add)
        self.entities_to_add.clear()

    def draw(self) -> None:
        """Render the entities and queued debug shapes."""
        if self.window is None:
            raise RuntimeError("no window to draw on")
        self.window.fill(self.clear_color)
        for entity in self.entities:
            pygame.draw.circle(self.window, entity.color, entity.get_position(), entity.radius)
        Debug.get().draw(self.window, self.font)
        if pygame.display.get_init() and pygame.display.get_surface() is self.window:
            pygame.display.flip()