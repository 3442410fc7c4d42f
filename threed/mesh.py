"""Triangle meshes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .triangle import Triangle
from .vector import Vec3


@dataclass
class Mesh:
    """An ordered list of triangles."""

    triangles: list[Triangle] = field(default_factory=list)

    @classmethod
    def from_raw_coordinates(cls, triangles: Iterable[Sequence[float]]) -> Mesh:
        """Build a mesh from rows of nine floats: x, y, z for each of three vertices."""
        built = []
        for coords in triangles:
            values = tuple(float(c) for c in coords)
            if len(values) != 9:
                raise ValueError(f"a triangle needs 9 coordinates, got {len(values)}")
            built.append(
                Triangle((Vec3(*values[0:3]), Vec3(*values[3:6]), Vec3(*values[6:9])))
            )
        return cls(built)

    def edge_vertices(self) -> list[Vec3]:
        """Return vertex pairs tracing every triangle edge: v0-v1, v1-v2, v2-v0."""
        edges = []
        for triangle in self.triangles:
            v0, v1, v2 = triangle.vertices
            edges.extend((v0, v1, v1, v2, v2, v0))
        return edges