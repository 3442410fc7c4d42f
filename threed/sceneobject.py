"""Positioned, rotated meshes with an optional per-frame update callback."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from .mesh import Mesh
from .triangle import Triangle
from .vector import Vec3, rotation_x, rotation_y, rotation_z

UpdateFn = Callable[["SceneObject", float], None]


@dataclass(eq=False)
class SceneObject:
    """A mesh placed in the world by a position and Euler rotation (radians)."""

    mesh: Mesh
    position: Vec3 = Vec3()
    rotation: Vec3 = Vec3()
    _update: Optional[UpdateFn] = field(default=None, init=False, repr=False)

    def set_update(self, func: UpdateFn) -> None:
        """Install the callback run by :meth:`update` as ``func(obj, delta_time)``."""
        self._update = func

    def update(self, delta_time: float) -> None:
        """Run the update callback, if any, with the elapsed time in seconds."""
        func, self._update = self._update, None
        if func is None:
            return
        try:
            func(self, delta_time)
        finally:
            self._update = func

    def transformed_triangle(self, triangle: Triangle) -> Triangle:
        """Rotate (x, then y, then z) and translate a triangle into world space."""
        rotation = (
            rotation_z(self.rotation.z)
            @ rotation_y(self.rotation.y)
            @ rotation_x(self.rotation.x)
        )
        return Triangle(rotation @ v + self.position for v in triangle.vertices)