"""Software rasteriser that draws a scene's visible triangles with pygame."""

from __future__ import annotations

import math
import time
from typing import Optional

import pygame

from .camera import Camera
from .scene import Scene
from .vector import Vec3

Vertex = tuple[float, float, float, float, float, float]
LightData = tuple[float, float, float, float, float, float, float, float]

_NO_LIGHT: LightData = (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
_CLEAR_COLOR = (0, 0, 0)


def light_data(scene: Scene) -> Optional[LightData]:
    """Pack the first light as direction, padding, colour and intensity.

    Returns ``None`` when the scene has no lights.
    """
    if not scene.lights:
        return None
    light = scene.lights[0]
    d, c = light.direction, light.color
    return (d.x, d.y, d.z, 0.0, c.x, c.y, c.z, float(light.intensity))


def frame_vertices(scene: Scene, camera: Camera) -> list[Vertex]:
    """Project every camera-facing triangle of the scene.

    Each triangle yields three ``(x, y, z, nx, ny, nz)`` entries: the projected
    position of a vertex and the world-space face normal.
    """
    vertices: list[Vertex] = []
    for obj in scene.objects:
        for triangle in obj.mesh.triangles:
            world = obj.transformed_triangle(triangle)
            normal = world.normal
            if normal.dot(world.vertices[0] - camera.position) >= 0.0:
                continue
            projected = camera.project_triangle(world)
            vertices.extend(
                (v.x, v.y, v.z, normal.x, normal.y, normal.z) for v in projected.vertices
            )
    return vertices


def _shade(normal: Vec3, light: LightData) -> tuple[int, int, int]:
    """Diffuse colour of a face lit by a directional light."""
    dx, dy, dz, _, r, g, b, intensity = light
    lambert = -(normal.x * dx + normal.y * dy + normal.z * dz)
    if math.isnan(lambert):
        lambert = 0.0
    lambert = max(0.0, lambert) * intensity

    def channel(value: float) -> int:
        return int(round(min(1.0, max(0.0, value * lambert)) * 255))

    return channel(r), channel(g), channel(b)


def _visible(corner: Vertex) -> bool:
    x, y, z = corner[:3]
    return all(math.isfinite(c) for c in (x, y, z)) and 0.0 <= z <= 1.0


class Renderer:
    """Draws a scene through a camera onto a pygame surface, frame by frame."""

    def __init__(
        self,
        scene: Scene,
        camera: Camera,
        width: int = 800,
        height: int = 600,
        surface: Optional[pygame.Surface] = None,
        title: str = "3D Engine",
    ) -> None:
        self.scene = scene
        self.camera = camera
        self.width = width
        self.height = height
        self.surface = surface
        self.title = title
        self.light: LightData = _NO_LIGHT
        self._windowed = False
        self._last_frame = time.perf_counter()

    def advance(self, delta_time: float) -> list[Vertex]:
        """Update the scene by ``delta_time`` seconds and return the frame's vertices."""
        self.scene.update(delta_time)
        packed = light_data(self.scene)
        if packed is not None:
            self.light = packed
        return frame_vertices(self.scene, self.camera)

    def resize(self, width: int, height: int) -> None:
        """Adopt a new window size; zero-sized requests are ignored."""
        if width > 0 and height > 0:
            self.width = width
            self.height = height
            if self._windowed:
                self.surface = pygame.display.set_mode((width, height), pygame.RESIZABLE)

    def render(self) -> list[Vertex]:
        """Advance by the time since the last frame and draw it.

        Returns the vertices of the frame. Nothing is drawn without a surface.
        """
        now = time.perf_counter()
        delta_time = now - self._last_frame
        self._last_frame = now
        vertices = self.advance(delta_time)
        if self.surface is None:
            return vertices

        self.surface.fill(_CLEAR_COLOR)
        width, height = self.surface.get_size()
        corners = iter(vertices)
        for triangle in zip(corners, corners, corners):
            if not all(_visible(corner) for corner in triangle):
                continue
            points = [
                ((c[0] + 1.0) * 0.5 * width, (1.0 - c[1]) * 0.5 * height)
                for c in triangle
            ]
            normal = Vec3(*triangle[0][3:])
            pygame.draw.polygon(self.surface, _shade(normal, self.light), points)
        return vertices

    def run(self) -> None:
        """Open a window and render until it is closed."""
        pygame.init()
        try:
            self.surface = pygame.display.set_mode(
                (self.width, self.height), pygame.RESIZABLE
            )
            self._windowed = True
            pygame.display.set_caption(self.title)
            clock = pygame.time.Clock()
            self._last_frame = time.perf_counter()
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return
                    if event.type == pygame.VIDEORESIZE:
                        self.resize(event.w, event.h)
                self.render()
                pygame.display.flip()
                clock.tick(60)
        finally:
            self._windowed = False
            self.surface = None
            pygame.quit()