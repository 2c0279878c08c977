import pygame
import pytest

from lanegame.debug import Debug
from lanegame.game_manager import GameManager
from lanegame.sample_scene import DummyEntity, SampleScene


@pytest.fixture
def manager():
    Debug.get().clear()
    yield GameManager()
    Debug.get().clear()


@pytest.fixture
def scene(manager):
    return manager.start_scene(SampleScene)


def click(button, pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos)


def test_initialize_creates_two_rigid_entities(manager, scene):
    assert manager.entities_to_add == [scene.entity1, scene.entity2]
    assert all(e.rigid_body for e in manager.entities_to_add)
    assert scene.entity1.radius == 100
    assert scene.entity2.radius == 50
    assert scene.selected is None


def test_initial_positions(scene):
    assert scene.entity1.get_position() == pytest.approx((100, 100))
    assert scene.entity2.get_position() == pytest.approx((500, 500))


def test_try_set_selected_entity_inside(scene):
    scene.try_set_selected_entity(scene.entity2, 510, 490)
    assert scene.selected is scene.entity2


def test_try_set_selected_entity_outside_keeps_selection(scene):
    scene.try_set_selected_entity(scene.entity1, 100, 100)
    scene.try_set_selected_entity(scene.entity2, 100, 100)
    assert scene.selected is scene.entity1


def test_right_click_selects_entity(scene):
    scene.on_event(click(pygame.BUTTON_RIGHT, (500, 500)))
    assert scene.selected is scene.entity2


def test_right_click_on_empty_space_selects_nothing(scene):
    scene.on_event(click(pygame.BUTTON_RIGHT, (900, 50)))
    assert scene.selected is None


def test_left_click_moves_selected_entity(scene):
    scene.on_event(click(pygame.BUTTON_RIGHT, (100, 100)))
    scene.on_event(click(pygame.BUTTON_LEFT, (400, 100)))
    entity = scene.entity1
    assert entity.target.is_set
    assert entity.target.position == (400.0, 100.0)
    assert entity.speed == 100.0
    assert entity.direction == pytest.approx((1.0, 0.0))


def test_left_click_without_selection_does_nothing(scene):
    scene.on_event(click(pygame.BUTTON_LEFT, (400, 100)))
    assert not scene.entity1.target.is_set
    assert not scene.entity2.target.is_set
    assert scene.entity1.speed == 0.0


def test_non_mouse_events_are_ignored(scene):
    scene.on_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    assert scene.selected is None


def test_update_marks_selected_entity(scene):
    scene.on_update()
    assert Debug.get().circles == []
    scene.on_event(click(pygame.BUTTON_RIGHT, (500, 500)))
    scene.on_update()
    circles = Debug.get().circles
    assert len(circles) == 1
    assert (circles[0].x, circles[0].y) == pytest.approx((500, 500))


def test_selected_entity_travels_towards_click(manager, scene):
    scene.on_event(click(pygame.BUTTON_RIGHT, (100, 100)))
    scene.on_event(click(pygame.BUTTON_LEFT, (400, 100)))
    manager.delta_time = 1.0
    manager.update()
    manager.update()
    x, y = scene.entity1.get_position()
    assert x == pytest.approx(200.0)
    assert y == pytest.approx(100.0)


def test_dummy_entity_reports_collision(manager, capsys):
    scene = manager.start_scene(SampleScene)
    scene.entity1.on_collision(scene.entity2)
    assert "DummyEntity.on_collision" in capsys.readouterr().out


def test_overlapping_dummies_collide_and_separate(manager, scene, capsys):
    scene.entity2.set_position(150, 100)
    manager.update()
    capsys.readouterr()
    manager.update()
    out = capsys.readouterr().out
    assert out.count("DummyEntity.on_collision") == 2
    assert not scene.entity1.is_colliding(scene.entity2) or (
        scene.entity1.get_position()[0] < 100
    )
    assert isinstance(scene.entity1, DummyEntity)