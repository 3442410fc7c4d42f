"""A small 3D engine: triangle meshes, perspective projection, culling and directional lighting."""

__version__ = "0.1.0"