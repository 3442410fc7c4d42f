"""Factories for simple solid shapes, each returned as a scene object."""

from __future__ import annotations

import math
from typing import Sequence

from .mesh import Mesh
from .sceneobject import SceneObject

_Row = Sequence[float]


def _object(rows: list[_Row]) -> SceneObject:
    return SceneObject(Mesh.from_raw_coordinates(rows))


def _check_segments(segments: int) -> int:
    segments = int(segments)
    if segments < 0:
        raise ValueError(f"segment count must not be negative: {segments}")
    return segments


def _box_rows(hx: float, hy: float, hz: float) -> list[_Row]:
    """Twelve outward-facing triangles of an axis-aligned box centred at the origin."""
    return [
        # front (z = +hz)
        [-hx, -hy, hz, hx, -hy, hz, hx, hy, hz],
        [-hx, -hy, hz, hx, hy, hz, -hx, hy, hz],
        # back (z = -hz)
        [-hx, -hy, -hz, -hx, hy, -hz, hx, hy, -hz],
        [-hx, -hy, -hz, hx, hy, -hz, hx, -hy, -hz],
        # left (x = -hx)
        [-hx, -hy, -hz, -hx, -hy, hz, -hx, hy, hz],
        [-hx, -hy, -hz, -hx, hy, hz, -hx, hy, -hz],
        # right (x = +hx)
        [hx, -hy, -hz, hx, hy, -hz, hx, hy, hz],
        [hx, -hy, -hz, hx, hy, hz, hx, -hy, hz],
        # top (y = +hy)
        [-hx, hy, -hz, -hx, hy, hz, hx, hy, hz],
        [-hx, hy, -hz, hx, hy, hz, hx, hy, -hz],
        # bottom (y = -hy)
        [-hx, -hy, -hz, hx, -hy, -hz, hx, -hy, hz],
        [-hx, -hy, -hz, hx, -hy, hz, -hx, -hy, hz],
    ]


def cube(size: float) -> SceneObject:
    """A cube of edge ``size`` centred at the origin."""
    half = size * 0.5
    return _object(_box_rows(half, half, half))


def rectangular_prism(width: float, height: float, depth: float) -> SceneObject:
    """A box of the given extents along x, y and z, centred at the origin."""
    return _object(_box_rows(width * 0.5, height * 0.5, depth * 0.5))


def cylinder(radius: float, height: float, segments: int) -> SceneObject:
    """A cylinder standing on the y=0 plane, split into ``segments`` wedges."""
    segments = _check_segments(segments)
    rows: list[_Row] = []
    if segments == 0:
        return _object(rows)
    step = 2.0 * math.pi / segments
    for i in range(segments):
        a1, a2 = i * step, (i + 1) * step
        x1, z1 = radius * math.cos(a1), radius * math.sin(a1)
        x2, z2 = radius * math.cos(a2), radius * math.sin(a2)
        rows.append([0.0, height, 0.0, x1, height, z1, x2, height, z2])
        rows.append([0.0, 0.0, 0.0, x2, 0.0, z2, x1, 0.0, z1])
        rows.append([x1, height, z1, x1, 0.0, z1, x2, 0.0, z2])
        rows.append([x1, height, z1, x2, 0.0, z2, x2, height, z2])
    return _object(rows)


def pyramid(base_size: float, height: float) -> SceneObject:
    """A square pyramid with its base on y=0 and apex at (0, height, 0)."""
    b = base_size * 0.5
    return _object(
        [
            [-b, 0.0, -b, b, 0.0, -b, b, 0.0, b],
            [-b, 0.0, -b, b, 0.0, b, -b, 0.0, b],
            [0.0, height, 0.0, -b, 0.0, b, b, 0.0, b],
            [0.0, height, 0.0, b, 0.0, -b, -b, 0.0, -b],
            [0.0, height, 0.0, -b, 0.0, -b, -b, 0.0, b],
            [0.0, height, 0.0, b, 0.0, b, b, 0.0, -b],
        ]
    )


def sphere(radius: float, segments: int) -> SceneObject:
    """A UV sphere centred at the origin with ``segments`` rings and slices."""
    segments = _check_segments(segments)
    rows: list[_Row] = []
    if segments == 0:
        return _object(rows)
    angle_step = 2.0 * math.pi / segments
    height_step = math.pi / segments

    def point(phi: float, theta: float) -> list[float]:
        return [
            radius * math.sin(phi) * math.cos(theta),
            radius * math.cos(phi),
            radius * math.sin(phi) * math.sin(theta),
        ]

    for i in range(segments):
        phi1, phi2 = i * height_step, (i + 1) * height_step
        for j in range(segments):
            theta1, theta2 = j * angle_step, (j + 1) * angle_step
            v1 = point(phi1, theta1)
            v2 = point(phi1, theta2)
            v3 = point(phi2, theta1)
            v4 = point(phi2, theta2)
            rows.append(v1 + v2 + v3)
            rows.append(v2 + v4 + v3)
    return _object(rows)


def triangular_prism(base_width: float, height: float, depth: float) -> SceneObject:
    """A prism whose triangular cross-section lies in the xy plane, extruded along z."""
    w = base_width * 0.5
    d = depth * 0.5
    return _object(
        [
            # front
            [-w, 0.0, d, w, 0.0, d, 0.0, height, d],
            # back
            [-w, 0.0, -d, 0.0, height, -d, w, 0.0, -d],
            # bottom
            [-w, 0.0, -d, w, 0.0, -d, w, 0.0, d],
            [-w, 0.0, -d, w, 0.0, d, -w, 0.0, d],
            # left
            [-w, 0.0, -d, -w, 0.0, d, 0.0, height, d],
            [0.0, height, d, 0.0, height, -d, -w, 0.0, -d],
            # right
            [w, 0.0, -d, 0.0, height, -d, 0.0, height, d],
            [0.0, height, d, w, 0.0, d, w, 0.0, -d],
        ]
    )