"""Perspective camera."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .config import get_config
from .triangle import Triangle
from .vector import Vec3


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division that yields inf or NaN instead of raising."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass
class Camera:
    """A camera looking down +z with near and far clipping distances."""

    position: Vec3 = Vec3()
    near: float = 1.0
    far: float = 10.0

    def project_point(self, point: Vec3) -> Vec3:
        """Project a view-space point to normalised device coordinates."""
        config = get_config()
        aspect = config.width / config.height
        focal = 1.0 / math.tan(math.radians(config.fov * 0.5))
        q = self.far / (self.far - self.near)
        w = point.z
        return Vec3(
            _divide(focal / aspect * point.x, w),
            _divide(focal * point.y, w),
            _divide(q * point.z - self.near * q, w),
        )

    def project_triangle(self, triangle: Triangle) -> Triangle:
        return Triangle(self.project_point(v) for v in triangle.vertices)