"""Simple bounding volumes and planes used by culling and collision."""

from __future__ import annotations

from dataclasses import dataclass

Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class Sphere:
    """A sphere given by its centre and radius."""

    center: Vec3
    radius: float


@dataclass(frozen=True)
class AABB:
    """An axis-aligned box given by its centre and half-size along each axis."""

    center: Vec3
    extent: Vec3

    def min_corner(self) -> Vec3:
        """The corner with the smallest coordinates."""
        return (
            self.center[0] - self.extent[0],
            self.center[1] - self.extent[1],
            self.center[2] - self.extent[2],
        )

    def max_corner(self) -> Vec3:
        """The corner with the largest coordinates."""
        return (
            self.center[0] + self.extent[0],
            self.center[1] + self.extent[1],
            self.center[2] + self.extent[2],
        )


@dataclass(frozen=True)
class Plane:
    """A plane of points p with dot(normal, p) == point."""

    normal: Vec3
    point: float