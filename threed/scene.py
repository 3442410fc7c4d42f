"""A collection of objects and lights."""

from __future__ import annotations

from dataclasses import dataclass, field

from .light import Light
from .sceneobject import SceneObject


@dataclass
class Scene:
    """Objects and lights to render, in insertion order."""

    objects: list[SceneObject] = field(default_factory=list)
    lights: list[Light] = field(default_factory=list)

    def add_object(self, obj: SceneObject) -> None:
        self.objects.append(obj)

    def add_light(self, light: Light) -> None:
        if not isinstance(light, Light):
            raise TypeError(f"expected a Light, got {type(light).__name__}")
        self.lights.append(light)

    def update(self, delta_time: float) -> None:
        """Advance every object by ``delta_time`` seconds."""
        for obj in self.objects:
            obj.update(delta_time)