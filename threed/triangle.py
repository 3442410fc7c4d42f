"""A triangle with a cached unit normal."""

from __future__ import annotations

from typing import Iterable

from .vector import Vec3


class Triangle:
    """Three vertices in counter-clockwise order and their face normal."""

    __slots__ = ("_vertices", "_normal")
    __hash__ = None  # mutable

    def __init__(self, vertices: Iterable[Vec3]) -> None:
        self.set_vertices(vertices)

    @property
    def vertices(self) -> tuple[Vec3, Vec3, Vec3]:
        return self._vertices

    @property
    def normal(self) -> Vec3:
        return self._normal

    def set_vertices(self, vertices: Iterable[Vec3]) -> None:
        """Replace the vertices and recompute the normal."""
        verts = tuple(vertices)
        if len(verts) != 3:
            raise ValueError(f"a triangle needs 3 vertices, got {len(verts)}")
        if not all(isinstance(v, Vec3) for v in verts):
            raise TypeError("triangle vertices must be Vec3")
        v0, v1, v2 = verts
        self._vertices = verts
        self._normal = (v1 - v0).cross(v2 - v0).normalize()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Triangle):
            return NotImplemented
        return self._vertices == other._vertices

    def __repr__(self) -> str:
        return f"Triangle({self._vertices!r})"