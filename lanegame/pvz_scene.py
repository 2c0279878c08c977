"""Lane defence: plants shoot projectiles at zombies walking down lanes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, List, Optional

import pygame

from lanegame.debug import Debug
from lanegame.entity import Entity
from lanegame.fsm import Action, Condition, StateMachine
from lanegame.scene import Scene

PLANT_COUNT = 5

GREEN = (0, 255, 0)
RED = (255, 0, 0)
BLUE = (0, 0, 255)


class Tag(IntEnum):
    PLANT = 0
    ZOMBIE = 1
    PROJECTILE = 2


@dataclass
class AABB:
    x_min: int
    y_min: int
    x_max: int
    y_max: int

    def contains(self, x: float, y: float) -> bool:
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max


class PlantState(IntEnum):
    IDLE = 0
    SHOOTING = 1
    RELOADING = 2


_STATE_NAMES = {
    PlantState.IDLE: "Idle",
    PlantState.SHOOTING: "Shooting",
    PlantState.RELOADING: "Reloading",
}


class PVZScene(Scene):
    """One plant per lane; clicking a lane spawns a zombie in it."""

    def __init__(self, game_manager: Any = None) -> None:
        super().__init__(game_manager)
        self.lane_zombie_count: List[int] = [0] * PLANT_COUNT
        self.areas: List[AABB] = []
        self.plants: List[Plant] = []

    def on_initialize(self) -> None:
        width = self.window_width
        height = self.window_height

        plant_radius = height * 0.075
        plant_y = height / (PLANT_COUNT * 2.0)
        gap_y = height / float(PLANT_COUNT)
        plant_x = width * 0.05

        self.areas = []
        self.plants = []
        for index in range(PLANT_COUNT):
            plant = self.create_entity(Plant, plant_radius, GREEN)
            plant.set_position(plant_x, plant_y, 0.0, 0.5)
            plant.area_index = index
            self.plants.append(plant)

            self.areas.append(
                AABB(
                    int(plant_x + plant_radius * 3.0),
                    int(plant_y - plant_radius),
                    width,
                    int(plant_y + plant_radius),
                )
            )
            plant_y += gap_y

    def on_update(self) -> None:
        for area in self.areas:
            Debug.draw_rectangle(
                area.x_min, area.y_min, area.x_max - area.x_min, area.y_max - area.y_min, RED
            )

    def get_clicked_area(self, x: float, y: float) -> Optional[int]:
        """Index of the lane containing (x, y), or None."""
        return next((i for i, area in enumerate(self.areas) if area.contains(x, y)), None)

    def on_event(self, event: Any) -> None:
        if event.type != pygame.MOUSEBUTTONDOWN:
            return
        x, y = event.pos
        self.spawn_zombie(x, y)

    def spawn_zombie(self, x: float, y: float) -> Optional["Zombie"]:
        """Spawn a zombie centred in the lane under (x, y); None outside every lane."""
        index = self.get_clicked_area(x, y)
        if index is None:
            return None
        area = self.areas[index]
        lane_y = area.y_min + (area.y_max - area.y_min) // 2

        zombie = self.create_entity(Zombie, 25, RED)
        zombie.set_position(x, lane_y, 0.5, 0.5)
        zombie.lane = index

        self.lane_zombie_count[index] += 1
        return zombie

    def _check_lane(self, lane: int) -> None:
        if not 0 <= lane < PLANT_COUNT:
            raise IndexError(f"lane {lane} out of range")

    def is_zombie_in_area(self, index: int) -> bool:
        self._check_lane(index)
        return self.lane_zombie_count[index] > 0

    def on_destroy_zombie(self, lane: int) -> None:
        self._check_lane(lane)
        if self.lane_zombie_count[lane] <= 0:
            return
        self.lane_zombie_count[lane] -= 1


class PlantIdle(Action):
    """Waits for a zombie or for a chance to reload."""


class PlantShooting(Action):
    """Fires once per cadence while active."""

    def __init__(self) -> None:
        super().__init__()
        self.shoot_timer = 0.0

    def on_start(self, owner: "Plant") -> None:
        self.shoot_timer = owner.shoot_cadence

    def on_update(self, owner: "Plant") -> None:
        self.shoot_timer += owner.scene.delta_time
        if self.shoot_timer < owner.shoot_cadence:
            return
        self.shoot_timer -= owner.shoot_cadence
        owner.shoot()


class PlantReloading(Action):
    """Refills the ammunition after the reload duration, then goes idle."""

    def __init__(self) -> None:
        super().__init__()
        self.reload_timer = 0.0

    def on_start(self, owner: "Plant") -> None:
        self.reload_timer = 0.0

    def on_update(self, owner: "Plant") -> None:
        self.reload_timer += owner.scene.delta_time
        if self.reload_timer < owner.reload_duration:
            return
        owner.reload()
        owner.state_machine.set_state(PlantState.IDLE)


class ZombieOnLane(Condition):
    def on_test(self, owner: "Plant") -> bool:
        return owner.scene.is_zombie_in_area(owner.area_index)


class NoAmmo(Condition):
    def on_test(self, owner: "Plant") -> bool:
        return owner.ammo == 0


class FullAmmo(Condition):
    def on_test(self, owner: "Plant") -> bool:
        return owner.ammo == owner.max_ammo


class Plant(Entity):
    """Shoots along its lane while a zombie is in it, reloading when empty."""

    def __init__(self, scene: Any = None) -> None:
        super().__init__(scene)
        self.max_ammo = 6
        self.ammo = self.max_ammo
        self.shoot_cadence = 1.0
        self.reload_duration = 2.0
        self.area_index = -1
        self.state_machine = StateMachine(self, len(PlantState))

    def on_initialize(self) -> None:
        self.state_machine = StateMachine(self, len(PlantState))
        self.area_index = -1
        self.ammo = self.max_ammo
        self.tag = Tag.PLANT

        idle = self.state_machine.create_action(PlantIdle, PlantState.IDLE)
        idle.create_transition(PlantState.SHOOTING).add_condition(ZombieOnLane)
        to_reload = idle.create_transition(PlantState.RELOADING)
        to_reload.add_condition(FullAmmo, False)
        to_reload.add_condition(ZombieOnLane, False)

        shooting = self.state_machine.create_action(PlantShooting, PlantState.SHOOTING)
        shooting.create_transition(PlantState.IDLE).add_condition(ZombieOnLane, False)
        shooting.create_transition(PlantState.RELOADING).add_condition(NoAmmo)

        self.state_machine.create_action(PlantReloading, PlantState.RELOADING)

        self.state_machine.set_state(PlantState.IDLE)

    def get_state_name(self, state: Optional[int]) -> str:
        try:
            return _STATE_NAMES[PlantState(state)]
        except ValueError:
            return "Unknown"

    def shoot(self) -> None:
        """Fire a projectile from the plant's centre if any ammunition is left."""
        if self.ammo <= 0:
            return
        x, y = self.get_position()
        projectile = self.create_entity(Projectile, 5.0, RED)
        projectile.set_position(x, y)
        self.ammo -= 1

    def reload(self) -> None:
        self.ammo = self.max_ammo

    def on_update(self) -> None:
        x, y = self.get_position()
        state_name = self.get_state_name(self.state_machine.current_state)
        Debug.draw_text(x, y - 50, state_name, RED, 0.5, 0.5)
        Debug.draw_text(x, y, f"{self.ammo}/{self.max_ammo}", BLUE, 0.5, 0.5)
        self.state_machine.update()


class Projectile(Entity):
    """Flies right until it leaves the window or hits a zombie."""

    def on_initialize(self) -> None:
        self.tag = Tag.PROJECTILE
        self.set_direction(1.0, 0.0, 100.0)

    def on_update(self) -> None:
        x, _ = self.get_position(0.0, 0.0)
        if x > self.scene.window_width:
            self.destroy()

    def on_collision(self, other: Entity) -> None:
        if other.is_tag(Tag.ZOMBIE):
            self.destroy()


class Zombie(Entity):
    """Walks left along its lane until hit by a projectile or a plant."""

    def __init__(self, scene: Any = None) -> None:
        super().__init__(scene)
        self.lane = -1

    def on_initialize(self) -> None:
        self.tag = Tag.ZOMBIE
        self.set_direction(-1.0, 0.0, 50.0)

    def on_collision(self, other: Entity) -> None:
        if other.is_tag(Tag.PROJECTILE) or other.is_tag(Tag.PLANT):
            self.scene.on_destroy_zombie(self.lane)
            self.destroy()