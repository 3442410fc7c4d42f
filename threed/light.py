"""Light sources."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .mesh import Mesh
from .sceneobject import SceneObject
from .vector import Vec3


class Light(ABC):
    """Interface every light source provides."""

    @property
    @abstractmethod
    def color(self) -> Vec3: ...

    @property
    @abstractmethod
    def intensity(self) -> float: ...

    @property
    @abstractmethod
    def position(self) -> Vec3: ...

    @property
    @abstractmethod
    def rotation(self) -> Vec3: ...

    @property
    @abstractmethod
    def direction(self) -> Vec3: ...


class BaseLight(Light):
    """A white light of unit intensity shining straight down."""

    def __init__(self) -> None:
        self._object = SceneObject(Mesh())
        self._color = Vec3(1.0, 1.0, 1.0)
        self._intensity = 1.0

    @property
    def color(self) -> Vec3:
        return self._color

    @color.setter
    def color(self, value: Vec3) -> None:
        self._color = value

    @property
    def intensity(self) -> float:
        return self._intensity

    @intensity.setter
    def intensity(self, value: float) -> None:
        self._intensity = float(value)

    @property
    def position(self) -> Vec3:
        return self._object.position

    @position.setter
    def position(self, value: Vec3) -> None:
        self._object.position = value

    @property
    def rotation(self) -> Vec3:
        return self._object.rotation

    @rotation.setter
    def rotation(self, value: Vec3) -> None:
        self._object.rotation = value

    @property
    def direction(self) -> Vec3:
        return Vec3(0.0, -1.0, 0.0)


class DirectionalLight(BaseLight):
    """A light shining along a fixed, always normalised direction."""

    def __init__(self, direction: Vec3) -> None:
        super().__init__()
        self._direction = direction.normalize()

    @property
    def direction(self) -> Vec3:
        return self._direction

    @direction.setter
    def direction(self, value: Vec3) -> None:
        self._direction = value.normalize()