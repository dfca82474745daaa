"""Points, dimensions and rectangles in two and three dimensions."""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real


def _check_arithmetic(*values: object) -> None:
    for value in values:
        if not isinstance(value, Real):
            raise TypeError(f"expected an arithmetic value, got {type(value).__name__}")


@dataclass
class Point2D:
    x: Real = 0
    y: Real = 0

    def __post_init__(self) -> None:
        _check_arithmetic(self.x, self.y)


@dataclass
class Point3D:
    x: Real = 0
    y: Real = 0
    z: Real = 0

    def __post_init__(self) -> None:
        _check_arithmetic(self.x, self.y, self.z)


@dataclass
class Dimension2D:
    width: Real = 0
    height: Real = 0

    def __post_init__(self) -> None:
        _check_arithmetic(self.width, self.height)


@dataclass
class Dimension3D:
    width: Real = 0
    height: Real = 0
    depth: Real = 0

    def __post_init__(self) -> None:
        _check_arithmetic(self.width, self.height, self.depth)


@dataclass
class Rect2D:
    position: Point2D = field(default_factory=Point2D)
    size: Dimension2D = field(default_factory=Dimension2D)

    @classmethod
    def from_coords(cls, x: Real, y: Real, width: Real, height: Real) -> "Rect2D":
        return cls(Point2D(x, y), Dimension2D(width, height))

    @property
    def x(self) -> Real:
        return self.position.x

    @property
    def y(self) -> Real:
        return self.position.y

    @property
    def width(self) -> Real:
        return self.size.width

    @property
    def height(self) -> Real:
        return self.size.height


@dataclass
class Rect3D:
    position: Point3D = field(default_factory=Point3D)
    size: Dimension3D = field(default_factory=Dimension3D)

    @classmethod
    def from_coords(
        cls, x: Real, y: Real, z: Real, width: Real, height: Real, depth: Real
    ) -> "Rect3D":
        return cls(Point3D(x, y, z), Dimension3D(width, height, depth))

    @property
    def x(self) -> Real:
        return self.position.x

    @property
    def y(self) -> Real:
        return self.position.y

    @property
    def z(self) -> Real:
        return self.position.z

    @property
    def width(self) -> Real:
        return self.size.width

    @property
    def height(self) -> Real:
        return self.size.height

    @property
    def depth(self) -> Real:
        return self.size.depth