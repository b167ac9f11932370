"""A directional light source."""

from __future__ import annotations

from dataclasses import dataclass

Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]


@dataclass
class DirectionalLight:
    """Light that shines uniformly along one direction with one colour."""

    direction: Vec3 = (0.0, -1.0, 0.0)
    color: Vec4 = (1.0, 1.0, 1.0, 1.0)