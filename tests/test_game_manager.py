import pygame
import pytest

from lanegame.debug import Debug
from lanegame.entity import Entity
from lanegame.game_manager import GameManager
from lanegame.scene import Scene


class CountingScene(Scene):
    def __init__(self, game_manager=None):
        super().__init__(game_manager)
        self.updates = 0
        self.initialized = False

    def on_initialize(self):
        self.initialized = True

    def on_event(self, event):
        pass

    def on_update(self):
        self.updates += 1


class Recorder(Entity):
    def __init__(self, scene=None):
        super().__init__(scene)
        self.hits = []

    def on_collision(self, other):
        self.hits.append(other)


@pytest.fixture(autouse=True)
def clean_debug():
    Debug.get().clear()
    yield
    Debug.get().clear()


def make_entity(manager, x, y, radius, cls=Entity):
    entity = cls()
    entity.initialize(radius, (255, 0, 0))
    entity.set_position(x, y)
    manager.add_entity(entity)
    return entity


def test_get_returns_shared_instance():
    first = GameManager.get()
    saved = first.delta_time
    try:
        first.delta_time = 0.125
        assert GameManager.get().delta_time == 0.125
    finally:
        first.delta_time = saved


def test_start_scene_initializes_and_links():
    manager = GameManager()
    scene = manager.start_scene(CountingScene)
    assert manager.scene is scene
    assert scene.initialized is True
    assert scene.game_manager is manager


def test_start_scene_twice_raises():
    manager = GameManager()
    manager.start_scene(CountingScene)
    with pytest.raises(RuntimeError):
        manager.start_scene(CountingScene)


def test_start_scene_rejects_non_scene():
    with pytest.raises(TypeError):
        GameManager().start_scene(Entity)


def test_run_without_scene_raises():
    with pytest.raises(RuntimeError):
        GameManager().run()


def test_create_window_twice_raises():
    manager = GameManager()
    manager.window = pygame.Surface((10, 10))
    with pytest.raises(RuntimeError):
        manager.create_window(100, 100, "again")


def test_added_entities_join_after_update():
    manager = GameManager()
    scene = manager.start_scene(CountingScene)
    entity = make_entity(manager, 10, 10, 5)
    assert manager.entities == []
    manager.update()
    assert manager.entities == [entity]
    assert manager.entities_to_add == []
    assert scene.updates == 1


def test_update_moves_entities_by_speed_and_delta():
    manager = GameManager()
    entity = make_entity(manager, 0, 0, 5)
    speed, dt = 10.0, 0.5
    entity.set_direction(1.0, 0.0, speed)
    manager.update()
    start_x, start_y = entity.get_position()
    manager.delta_time = dt
    manager.update()
    x, y = entity.get_position()
    assert x == pytest.approx(start_x + speed * dt)
    assert y == pytest.approx(start_y)


def test_destroyed_entities_are_removed():
    manager = GameManager()
    keep = make_entity(manager, 0, 0, 5)
    gone = make_entity(manager, 500, 500, 5)
    manager.update()
    gone.destroy()
    manager.update()
    assert manager.entities == [keep]
    assert manager.entities_to_destroy == []


def test_collisions_notify_both_sides():
    manager = GameManager()
    a = make_entity(manager, 0, 0, 10, Recorder)
    b = make_entity(manager, 5, 0, 10, Recorder)
    far = make_entity(manager, 500, 500, 10, Recorder)
    manager.update()
    manager.update()
    assert a.hits == [b]
    assert b.hits == [a]
    assert far.hits == []


def test_rigid_bodies_are_pushed_apart():
    manager = GameManager()
    a = make_entity(manager, 0, 0, 10)
    b = make_entity(manager, 6, 8, 10)
    a.rigid_body = True
    b.rigid_body = True
    manager.update()
    manager.update()
    ax, ay = a.get_position()
    bx, by = b.get_position()
    distance = ((ax - bx) ** 2 + (ay - by) ** 2) ** 0.5
    assert distance == pytest.approx(a.radius + b.radius)


def test_non_rigid_bodies_stay_overlapping():
    manager = GameManager()
    a = make_entity(manager, 0, 0, 10)
    b = make_entity(manager, 6, 8, 10)
    manager.update()
    manager.update()
    assert a.is_colliding(b)


def test_draw_paints_entities_and_clears_debug():
    manager = GameManager()
    manager.window = pygame.Surface((100, 100))
    manager.clear_color = (0, 0, 0)
    entity = make_entity(manager, 50, 50, 10)
    manager.update()
    Debug.draw_line(0, 0, 5, 5, (0, 0, 255))
    manager.draw()
    assert tuple(manager.window.get_at((50, 50)))[:3] == tuple(entity.color)
    assert tuple(manager.window.get_at((95, 5)))[:3] == (0, 0, 0)
    assert Debug.get().lines == []


def test_draw_without_window_raises():
    with pytest.raises(RuntimeError):
        GameManager().draw()