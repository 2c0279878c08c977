"""A sandbox scene: two solid circles, select one and send it somewhere."""

from __future__ import annotations

from typing import Any, Optional

import pygame

from lanegame.debug import Debug
from lanegame.entity import Entity
from lanegame.scene import Scene

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)

MOVE_SPEED = 100.0
MARKER_RADIUS = 10


class DummyEntity(Entity):
    """An entity that reports every collision it takes part in."""

    def on_collision(self, other: Entity) -> None:
        print("DummyEntity.on_collision")


class SampleScene(Scene):
    """Right click selects an entity, left click moves the selection."""

    def __init__(self, game_manager: Any = None) -> None:
        super().__init__(game_manager)
        self.entity1: Optional[DummyEntity] = None
        self.entity2: Optional[DummyEntity] = None
        self.selected: Optional[DummyEntity] = None

    def on_initialize(self) -> None:
        self.entity1 = self.create_entity(DummyEntity, 100, RED)
        self.entity1.set_position(100, 100)
        self.entity1.rigid_body = True

        self.entity2 = self.create_entity(DummyEntity, 50, GREEN)
        self.entity2.set_position(500, 500)
        self.entity2.rigid_body = True

        self.selected = None

    def on_event(self, event: Any) -> None:
        if event.type != pygame.MOUSEBUTTONDOWN:
            return

        x, y = event.pos
        if event.button == pygame.BUTTON_RIGHT:
            for entity in (self.entity1, self.entity2):
                if entity is not None:
                    self.try_set_selected_entity(entity, x, y)

        if event.button == pygame.BUTTON_LEFT and self.selected is not None:
            self.selected.go_to_position(x, y, MOVE_SPEED)

    def try_set_selected_entity(self, entity: DummyEntity, x: float, y: float) -> None:
        """Select ``entity`` when (x, y) lies inside it."""
        if entity.is_inside(x, y):
            self.selected = entity

    def on_update(self) -> None:
        if self.selected is not None:
            x, y = self.selected.get_position()
            Debug.draw_circle(x, y, MARKER_RADIUS, BLUE)