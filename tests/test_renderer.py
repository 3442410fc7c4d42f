import math
from unittest import mock

import pygame
import pytest

from threed.camera import Camera
from threed.config import update_config
from threed.light import DirectionalLight
from threed.mesh import Mesh
from threed.renderer import Renderer, frame_vertices, light_data
from threed.scene import Scene
from threed.sceneobject import SceneObject
from threed.triangle import Triangle
from threed.vector import Vec3

FACING = (Vec3(0.0, 0.0, 5.0), Vec3(0.0, 1.0, 5.0), Vec3(1.0, 0.0, 5.0))
LARGE_FACING = (Vec3(-3.0, -3.0, 5.0), Vec3(-3.0, 3.0, 5.0), Vec3(6.0, -3.0, 5.0))


@pytest.fixture(autouse=True)
def default_config():
    update_config(800, 600, 90.0)
    yield
    update_config(800, 600, 90.0)


def scene_with(*triangles, position=Vec3()):
    obj = SceneObject(Mesh([Triangle(t) for t in triangles]), position=position)
    scene = Scene()
    scene.add_object(obj)
    return scene, obj


def test_light_data_without_lights_is_none():
    assert light_data(Scene()) is None


def test_light_data_packs_first_light():
    scene = Scene()
    light = DirectionalLight(Vec3(0.0, 0.0, 2.0))
    light.color = Vec3(0.5, 0.25, 1.0)
    light.intensity = 2.0
    scene.add_light(light)
    scene.add_light(DirectionalLight(Vec3(1.0, 0.0, 0.0)))
    assert light_data(scene) == (0.0, 0.0, 1.0, 0.0, 0.5, 0.25, 1.0, 2.0)


def test_frame_vertices_empty_scene():
    assert frame_vertices(Scene(), Camera()) == []


def test_frame_vertices_keeps_facing_triangle():
    scene, _ = scene_with(FACING)
    camera = Camera()
    result = frame_vertices(scene, camera)
    projected = camera.project_triangle(Triangle(FACING)).vertices
    normal = Triangle(FACING).normal
    assert [r[:3] for r in result] == [tuple(v) for v in projected]
    assert all(r[3:] == tuple(normal) for r in result)


def test_frame_vertices_culls_back_facing_triangle():
    scene, _ = scene_with(tuple(reversed(FACING)))
    assert frame_vertices(scene, Camera()) == []


def test_frame_vertices_applies_object_transform():
    offset = Vec3(0.5, -0.5, 1.0)
    scene, obj = scene_with(FACING, position=offset)
    camera = Camera()
    world = obj.transformed_triangle(Triangle(FACING))
    expected = camera.project_triangle(world).vertices
    assert [r[:3] for r in frame_vertices(scene, camera)] == [tuple(v) for v in expected]


def test_frame_vertices_normals_face_camera():
    scene, obj = scene_with(FACING, LARGE_FACING, tuple(reversed(LARGE_FACING)))
    obj.rotation = Vec3(0.3, 0.2, 0.1)
    result = frame_vertices(scene, Camera())
    assert len(result) % 3 == 0
    for r in result:
        assert math.isclose(Vec3(*r[3:]).length(), 1.0, rel_tol=1e-9)


def test_advance_updates_scene_and_light():
    scene, obj = scene_with(FACING)
    calls = []
    obj.set_update(lambda o, dt: calls.append(dt))
    scene.add_light(DirectionalLight(Vec3(0.0, 0.0, 1.0)))
    renderer = Renderer(scene, Camera())
    result = renderer.advance(0.25)
    assert calls == [0.25]
    assert len(result) == 3
    assert renderer.light == light_data(scene)


def test_resize_ignores_zero_size():
    renderer = Renderer(Scene(), Camera())
    renderer.resize(0, 300)
    assert (renderer.width, renderer.height) == (800, 600)
    renderer.resize(320, 240)
    assert (renderer.width, renderer.height) == (320, 240)


def test_render_draws_lit_triangle_on_black():
    scene, _ = scene_with(LARGE_FACING)
    scene.add_light(DirectionalLight(Vec3(0.0, 0.0, 1.0)))
    surface = pygame.Surface((80, 60))
    renderer = Renderer(scene, Camera(), surface=surface)
    result = renderer.render()
    assert len(result) == 3
    centre = surface.get_at((40, 30))
    assert centre.r > 0 and centre.g > 0 and centre.b > 0
    assert surface.get_at((0, 0)) == (0, 0, 0, 255)


def test_render_without_light_stays_dark():
    scene, _ = scene_with(LARGE_FACING)
    surface = pygame.Surface((80, 60))
    Renderer(scene, Camera(), surface=surface).render()
    assert surface.get_at((40, 30)) == (0, 0, 0, 255)


def test_render_without_surface_still_updates():
    scene, obj = scene_with(FACING)
    calls = []
    obj.set_update(lambda o, dt: calls.append(dt))
    result = Renderer(scene, Camera()).render()
    assert len(calls) == 1 and calls[0] >= 0.0
    assert len(result) == 3


def test_run_renders_until_quit(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    scene, obj = scene_with(FACING)
    calls = []
    obj.set_update(lambda o, dt: calls.append(dt))
    renderer = Renderer(scene, Camera())
    events = [[], [pygame.event.Event(pygame.QUIT)]]
    with mock.patch("pygame.event.get", side_effect=events):
        renderer.run()
    assert len(calls) == 1
    assert renderer.surface is None


def test_run_handles_resize(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    renderer = Renderer(Scene(), Camera())
    events = [
        [pygame.event.Event(pygame.VIDEORESIZE, w=320, h=240, size=(320, 240))],
        [pygame.event.Event(pygame.QUIT)],
    ]
    with mock.patch("pygame.event.get", side_effect=events):
        renderer.run()
    assert (renderer.width, renderer.height) == (320, 240)