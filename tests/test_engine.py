import math
from unittest import mock

import pygame
import pytest

from threed.camera import Camera
from threed.config import update_config
from threed.engine import Engine, demo_scene, main
from threed.scene import Scene
from threed.vector import Vec3


@pytest.fixture(autouse=True)
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    update_config(800, 600, 90.0)


def test_demo_scene_contents():
    scene = demo_scene()
    assert len(scene.objects) == 1
    assert len(scene.objects[0].mesh.triangles) == 12
    assert scene.objects[0].position == Vec3(0.0, 0.0, 5.0)
    assert len(scene.lights) == 1
    light = scene.lights[0]
    assert light.direction == Vec3(1.0, -1.0, 1.0).normalize()
    assert light.color == Vec3(1.0, 1.0, 1.0)
    assert light.intensity == 1.0


def test_demo_scene_spins_cube():
    scene = demo_scene()
    scene.update(0.5)
    scene.update(0.5)
    assert scene.objects[0].rotation == Vec3(1.0, 0.5, 0.0)


def test_engine_keeps_scene_and_camera():
    scene, camera = Scene(), Camera()
    engine = Engine(scene, camera)
    assert engine.scene is scene and engine.camera is camera


def test_engine_run_advances_scene():
    scene = demo_scene()
    events = [[], [pygame.event.Event(pygame.QUIT)]]
    with mock.patch("pygame.event.get", side_effect=events):
        Engine(scene, Camera()).run()
    rotation = scene.objects[0].rotation
    assert rotation.x > 0.0
    assert math.isclose(rotation.y, rotation.x * 0.5)


def test_main_returns_zero_on_close():
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        assert main([]) == 0


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as exc:
        main(["--bogus"])
    assert exc.value.code == 2