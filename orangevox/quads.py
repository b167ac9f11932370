"""Screen-space crosshair quads and the indicator outlining the selected block."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class QuadNDCVertex:
    """A vertex of a quad drawn in normalised device coordinates."""

    position: Vec2
    uv: Vec2
    offset: Vec2
    aspect_and_scale: Vec2


_CROSSHAIR_CORNERS: tuple[tuple[Vec2, Vec2], ...] = (
    ((-0.1, 0.1), (0.0, 0.0)),    # top left
    ((0.1, 0.1), (1.0, 0.0)),     # top right
    ((-0.1, -0.1), (0.0, 1.0)),   # bottom left
    ((0.1, 0.1), (1.0, 0.0)),     # top right
    ((0.1, -0.1), (1.0, 1.0)),    # bottom right
    ((-0.1, -0.1), (0.0, 1.0)),   # bottom left
)


@dataclass
class Crosshair:
    """The crosshair in the middle of the screen, drawn as two triangles."""

    scale: float = 0.5

    def vertices(self, aspect_ratio: float) -> list[QuadNDCVertex]:
        """The six vertices of the crosshair quad for a window of the given aspect ratio."""
        return [
            QuadNDCVertex(position, uv, (0.0, 0.0), (aspect_ratio, self.scale))
            for position, uv in _CROSSHAIR_CORNERS
        ]


def _translation(x: float, y: float, z: float) -> np.ndarray:
    m = np.identity(4)
    m[3, :3] = (x, y, z)
    return m


def _rotation_x(degrees: float) -> np.ndarray:
    c, s = math.cos(math.radians(degrees)), math.sin(math.radians(degrees))
    return np.array(
        [[1.0, 0.0, 0.0, 0.0], [0.0, c, s, 0.0], [0.0, -s, c, 0.0], [0.0, 0.0, 0.0, 1.0]]
    )


def _rotation_y(degrees: float) -> np.ndarray:
    c, s = math.cos(math.radians(degrees)), math.sin(math.radians(degrees))
    return np.array(
        [[c, 0.0, -s, 0.0], [0.0, 1.0, 0.0, 0.0], [s, 0.0, c, 0.0], [0.0, 0.0, 0.0, 1.0]]
    )


def quad_transforms(pos: Vec3) -> list[np.ndarray]:
    """Row-vector transforms of the six unit quads around a block centred at pos.

    Order: front, left, back, right, top, bottom.
    """
    x, y, z = pos
    return [
        np.identity(4) @ _translation(x, y, z - 0.5),
        _rotation_y(90.0) @ _translation(x - 0.5, y, z),
        _rotation_y(-180.0) @ _translation(x, y, z + 0.5),
        _rotation_y(-90.0) @ _translation(x + 0.5, y, z),
        _rotation_x(90.0) @ _translation(x, y + 0.5, z),
        _rotation_x(-90.0) @ _translation(x, y - 0.5, z),
    ]


@dataclass
class BlockSelectionIndicator:
    """Tracks the block the player is looking at and where its outline is drawn."""

    transition_damping: float = 10.0
    current_indicator_pos: Vec3 = (0.0, 0.0, 0.0)  # block midpoint
    target_indicator_pos: Vec3 = (0.0, 0.0, 0.0)   # block midpoint
    selected_block_pos: Vec3 = (0.0, 0.0, 0.0)     # integer block corner

    def select(self, ray_hit: Vec3, ray_dir: Vec3) -> Vec3:
        """Select the block struck at ray_hit by a ray along ray_dir; return the indicator position.

        When the hit lies exactly on a block face crossed while travelling in the
        negative direction, the block on the far side of that face is selected.
        """
        new_block: Vec3 = tuple(float(math.floor(c)) for c in ray_hit)  # type: ignore[assignment]
        if new_block != self.selected_block_pos:
            target = [c + 0.5 for c in new_block]
            selected = list(new_block)
            for axis in range(3):
                if ray_hit[axis] == new_block[axis]:
                    if ray_dir[axis] < 0:
                        target[axis] -= 1.0
                        selected[axis] -= 1.0
                    break
            self.target_indicator_pos = (target[0], target[1], target[2])
            self.selected_block_pos = (selected[0], selected[1], selected[2])

        if self.target_indicator_pos != self.current_indicator_pos:
            self.current_indicator_pos = self.target_indicator_pos
        return self.current_indicator_pos

    def quads(self) -> list[np.ndarray]:
        """Transforms of the six outline quads at the current indicator position."""
        return quad_transforms(self.current_indicator_pos)