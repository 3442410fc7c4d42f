"""Entry point tying a scene and camera to a window."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .camera import Camera
from .light import DirectionalLight
from .primitives import cube
from .renderer import Renderer
from .scene import Scene
from .sceneobject import SceneObject
from .vector import Vec3


class Engine:
    """Owns a scene and a camera and shows them in a window."""

    def __init__(self, scene: Scene, camera: Camera) -> None:
        self.scene = scene
        self.camera = camera

    def run(self) -> None:
        """Render the scene until the window is closed."""
        Renderer(self.scene, self.camera).run()


def _spin(obj: SceneObject, delta_time: float) -> None:
    r = obj.rotation
    obj.rotation = Vec3(r.x + delta_time, r.y + delta_time * 0.5, r.z)


def demo_scene() -> Scene:
    """A white directional light and a spinning unit cube in front of the camera."""
    scene = Scene()

    light = DirectionalLight(Vec3(1.0, -1.0, 1.0))
    light.color = Vec3(1.0, 1.0, 1.0)
    light.intensity = 1.0
    scene.add_light(light)

    box = cube(1.0)
    box.position = Vec3(0.0, 0.0, 5.0)
    box.set_update(_spin)
    scene.add_object(box)
    return scene


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="threed", description="Show a rotating cube in a window."
    )
    parser.parse_args(argv)
    Engine(demo_scene(), Camera()).run()
    return 0