import pygame
import pytest

from lanegame import app
from lanegame.game_manager import GameManager
from lanegame.pvz_scene import PVZScene
from lanegame.sample_scene import SampleScene


def test_parse_args_defaults():
    args = app.parse_args([])
    assert args.scene == "pvz"
    assert args.width == app.WINDOW_WIDTH
    assert args.height == app.WINDOW_HEIGHT
    assert args.fps == app.FPS_LIMIT


def test_default_window_size_matches_source():
    args = app.parse_args([])
    assert (args.width, args.height) == (1280, 720)


def test_parse_args_options():
    args = app.parse_args(["--scene", "sample", "--width", "640", "--height", "480", "--fps", "30"])
    assert args.scene == "sample"
    assert (args.width, args.height, args.fps) == (640, 480, 30)


def test_parse_args_rejects_unknown_scene():
    with pytest.raises(SystemExit):
        app.parse_args(["--scene", "chess"])


@pytest.mark.parametrize("value", ["0", "-5", "wide"])
def test_parse_args_rejects_bad_width(value):
    with pytest.raises(SystemExit):
        app.parse_args(["--width", value])


@pytest.mark.parametrize("name, scene_cls", [("pvz", PVZScene), ("sample", SampleScene)])
def test_scene_names_resolve_to_scenes(name, scene_cls):
    args = app.parse_args(["--scene", name])
    assert app.SCENES[args.scene] is scene_cls


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.setattr(
        pygame.event, "get", lambda *args, **kwargs: [pygame.event.Event(pygame.QUIT)]
    )


def test_main_runs_pvz_scene_until_quit(headless):
    assert app.main([]) == 0
    manager = GameManager.get()
    assert isinstance(manager.scene, PVZScene)
    assert manager.window_width == app.WINDOW_WIDTH
    assert manager.window_height == app.WINDOW_HEIGHT
    assert len(manager.entities) == 5


def test_sample_scene_from_arguments_runs(headless):
    args = app.parse_args(["--scene", "sample", "--width", "800", "--height", "600"])
    manager = GameManager()
    manager.create_window(args.width, args.height, "sample", args.fps)
    manager.launch_scene(app.SCENES[args.scene])
    assert isinstance(manager.scene, SampleScene)
    assert (manager.window_width, manager.window_height) == (800, 600)
    assert len(manager.entities) == 2