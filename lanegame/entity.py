"""Circular entities that move, steer towards targets and collide."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from lanegame.debug import Debug
from lanegame.utils import get_distance, normalize

DEBUG_TARGET = False

Vector = Tuple[float, float]


@dataclass
class Target:
    position: Vector = (0.0, 0.0)
    distance: float = 0.0
    is_set: bool = False


class Entity:
    """A circle with a position, a direction of travel and an optional target.

    The stored position is the top-left corner of the circle's bounding box;
    ratios passed to the position methods pick a point inside that box.
    """

    def __init__(self, scene: Any = None) -> None:
        self.scene = scene
        self.radius = 0.0
        self.color: Any = (255, 255, 255)
        self.direction: Vector = (0.0, 0.0)
        self.target = Target()
        self.speed = 0.0
        self.to_destroy = False
        self.tag = -1
        self.rigid_body = False
        self._corner: Vector = (0.0, 0.0)

    def initialize(self, radius: float, color: Any) -> None:
        """Set up the shape and run the ``on_initialize`` hook."""
        self.direction = (0.0, 0.0)
        self.radius = radius
        self.color = color
        self.target.is_set = False
        self.on_initialize()

    def repulse(self, other: "Entity") -> None:
        """Push two overlapping entities apart until their circles touch."""
        cx1, cy1 = self.get_position()
        cx2, cy2 = other.get_position()
        dx, dy = cx1 - cx2, cy1 - cy2
        length = math.hypot(dx, dy)
        if length == 0:
            return
        overlap = (length - (self.radius + other.radius)) * 0.5
        tx, ty = overlap * dx / length, overlap * dy / length
        self.set_position(cx1 - tx, cy1 - ty)
        other.set_position(cx2 + tx, cy2 + ty)

    def is_colliding(self, other: "Entity") -> bool:
        cx1, cy1 = self.get_position()
        cx2, cy2 = other.get_position()
        reach = self.radius + other.radius
        return (cx1 - cx2) ** 2 + (cy1 - cy2) ** 2 < reach * reach

    def is_inside(self, x: float, y: float) -> bool:
        cx, cy = self.get_position()
        return (x - cx) ** 2 + (y - cy) ** 2 < self.radius * self.radius

    def is_tag(self, tag: int) -> bool:
        return self.tag == tag

    def destroy(self) -> None:
        """Mark the entity for removal and run the ``on_destroy`` hook."""
        self.to_destroy = True
        self.on_destroy()

    def set_position(self, x: float, y: float, ratio_x: float = 0.5, ratio_y: float = 0.5) -> None:
        """Place the point at (ratio_x, ratio_y) of the bounding box on (x, y)."""
        size = self.radius * 2
        self._corner = (x - size * ratio_x, y - size * ratio_y)

        if self.target.is_set:
            cx, cy = self.get_position()
            tx, ty = self.target.position
            self.target.distance = get_distance(cx, cy, tx, ty)
            self.go_to_direction(tx, ty)
            self.target.is_set = True

    def get_position(self, ratio_x: float = 0.5, ratio_y: float = 0.5) -> Vector:
        size = self.radius * 2
        x, y = self._corner
        return x + size * ratio_x, y + size * ratio_y

    def set_target(self, target: Vector) -> None:
        """Record a target point without changing the direction of travel."""
        x, y = self.get_position()
        self.target.position = (target[0], target[1])
        self.target.distance = get_distance(target[0], x, target[1], y)
        self.target.is_set = True

    def go_to_direction(self, x: float, y: float, speed: Optional[float] = None) -> bool:
        """Head towards the point (x, y); False when already on it."""
        cx, cy = self.get_position()
        unit = normalize(int(x) - cx, int(y) - cy)
        if unit is None:
            return False
        self.set_direction(unit[0], unit[1], speed)
        return True

    def go_to_position(self, x: float, y: float, speed: Optional[float] = None) -> bool:
        """Head towards (x, y) and stop on arrival; False when already on it."""
        if not self.go_to_direction(x, y, speed):
            return False
        cx, cy = self.get_position()
        tx, ty = float(int(x)), float(int(y))
        self.target.position = (tx, ty)
        self.target.distance = get_distance(cx, cy, tx, ty)
        self.target.is_set = True
        return True

    def set_direction(self, x: float, y: float, speed: Optional[float] = None) -> None:
        """Set the direction of travel, dropping any target; positive speeds are applied."""
        if speed is not None and speed > 0:
            self.speed = speed
        self.direction = (x, y)
        self.target.is_set = False

    def update(self, dt: float) -> None:
        """Advance by ``dt`` seconds and run the ``on_update`` hook."""
        distance = dt * self.speed
        dx, dy = self.direction
        x, y = self._corner
        self._corner = (x + dx * distance, y + dy * distance)

        if self.target.is_set:
            if DEBUG_TARGET:
                x1, y1 = self.get_position()
                x2 = x1 + dx * self.target.distance
                y2 = y1 + dy * self.target.distance
                Debug.draw_line(x1, y1, x2, y2, (0, 255, 255))
                tx, ty = self.target.position
                Debug.draw_circle(tx, ty, 5.0, (255, 0, 255))

            self.target.distance -= distance
            if self.target.distance <= 0.0:
                tx, ty = self.target.position
                self.set_position(tx, ty)
                self.direction = (0.0, 0.0)
                self.target.is_set = False

        self.on_update()

    def create_entity(self, entity_cls: type, radius: float, color: Any) -> "Entity":
        """Create another entity in this entity's scene."""
        if self.scene is None:
            raise RuntimeError("entity is not attached to a scene")
        return self.scene.create_entity(entity_cls, radius, color)

    def on_update(self) -> None:
        """Called at the end of every update."""

    def on_collision(self, other: "Entity") -> None:
        """Called when this entity overlaps ``other``."""

    def on_initialize(self) -> None:
        """Called once the shape has been set up."""

    def on_destroy(self) -> None:
        """Called when the entity is marked for removal."""