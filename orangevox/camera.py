"""Cameras that build left-handed view matrices from a position and Euler angles."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

Vec3 = tuple[float, float, float]

_ROTATION_WRAP_THRESHOLD = 300.0


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b by t."""
    return a + (b - a) * t


def clamp(value: float, low: float, high: float) -> float:
    """Limit value to the closed range [low, high]."""
    return min(max(value, low), high)


def wrap(value: float, low: float, high: float) -> float:
    """Wrap value into the half-open range [low, high)."""
    return low + (value - low) % (high - low)


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def _normalize(v: np.ndarray) -> np.ndarray:
    length = np.linalg.norm(v)
    return v / length if length else v


def _roll_pitch_yaw(pitch: float, yaw: float, roll: float) -> np.ndarray:
    """Row-vector rotation: roll about Z, then pitch about X, then yaw about Y."""
    cr, sr = math.cos(roll), math.sin(roll)
    cp, sp = math.cos(pitch), math.sin(pitch)
    cy, sy = math.cos(yaw), math.sin(yaw)
    rz = np.array([[cr, sr, 0.0], [-sr, cr, 0.0], [0.0, 0.0, 1.0]])
    rx = np.array([[1.0, 0.0, 0.0], [0.0, cp, sp], [0.0, -sp, cp]])
    ry = np.array([[cy, 0.0, -sy], [0.0, 1.0, 0.0], [sy, 0.0, cy]])
    return rz @ rx @ ry


def _look_at_lh(eye: np.ndarray, focus: np.ndarray, up: np.ndarray) -> np.ndarray:
    z_axis = _normalize(focus - eye)
    x_axis = _normalize(np.cross(up, z_axis))
    y_axis = np.cross(z_axis, x_axis)
    view = np.identity(4)
    view[:3, 0] = x_axis
    view[:3, 1] = y_axis
    view[:3, 2] = z_axis
    view[3, :3] = (-x_axis @ eye, -y_axis @ eye, -z_axis @ eye)
    return view


@dataclass(eq=False)
class Camera:
    """Camera that smoothly turns towards a target rotation (degrees) each update."""

    rotation_speed: float = 1.0
    smoothing_factor: float = 1.0
    view_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))
    position: Vec3 = (0.0, 0.0, 0.0)
    current_rotation: Vec3 = (0.0, 0.0, 0.0)
    target_rotation: Vec3 = (0.0, 0.0, 0.0)

    @property
    def world_matrix(self) -> np.ndarray:
        """The camera's transform in the world: the inverse of the view matrix."""
        return np.linalg.inv(self.view_matrix)

    @world_matrix.setter
    def world_matrix(self, matrix: np.ndarray) -> None:
        self.view_matrix = np.linalg.inv(np.asarray(matrix, dtype=float))

    def update(self, dt: float) -> None:
        """Move the pitch and yaw towards the target and rebuild the view matrix."""
        final = list(self.target_rotation)
        current = list(self.current_rotation)

        for axis in range(2):
            delta = self.target_rotation[axis] - current[axis]
            if abs(delta) > _ROTATION_WRAP_THRESHOLD:
                # Unwrap across the 0/360 seam so interpolation takes the short way.
                sign = _sign(delta)
                if sign == -1:
                    final[axis] = 360.0 + self.target_rotation[axis]
                elif sign == 1:
                    final[axis] = self.target_rotation[axis] - 360.0

        ratio = clamp(self.smoothing_factor * dt, 0.0, 1.0)
        for axis in range(2):
            current[axis] = lerp(current[axis], final[axis], ratio)
        current[1] = wrap(current[1], 0.0, 360.0)

        self.current_rotation = (current[0], current[1], current[2])
        self.construct_matrix(self.position, self.current_rotation)

    def construct_matrix(self, pos: Vec3, rot: Vec3) -> None:
        """Build the view matrix for a camera at pos rotated by rot (pitch, yaw, roll in degrees)."""
        rotation = _roll_pitch_yaw(*(math.radians(angle) for angle in rot))
        look_at = np.array([0.0, 0.0, 1.0]) @ rotation
        up = np.array([0.0, 1.0, 0.0]) @ rotation
        eye = np.asarray(pos, dtype=float)
        self.view_matrix = _look_at_lh(eye, look_at + eye, up)

    def set_camera_parameters(self, position: Vec3, rotation: Vec3) -> None:
        """Set the position and the rotation the camera should turn towards."""
        self.position = tuple(position)
        self.target_rotation = tuple(rotation)


@dataclass(eq=False)
class FrustumCamera(Camera):
    """Stationary debug camera used to visualise the culling frustum."""

    movement_speed: float = 4.0
    turn_speed: float = 5.0

    def update(self, dt: float) -> None:
        """The debug camera stays where it was placed; its view matrix is left as it is."""