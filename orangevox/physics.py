"""Kinematics helpers and collision tests against the loaded blocks of a world."""

from __future__ import annotations

import math

from orangevox.block import BlockType
from orangevox.geometry import AABB
from orangevox.world import ChunkManager, chunk_to_world_space, world_to_chunk_space

Vec3 = tuple[float, float, float]

GRAVITY: Vec3 = (0.0, -9.8, 0.0)


def _add_scaled(a: Vec3, b: Vec3, scale: float) -> Vec3:
    return (a[0] + b[0] * scale, a[1] + b[1] * scale, a[2] + b[2] * scale)


def _divide(v: Vec3, dt: float) -> Vec3:
    return (v[0] / dt, v[1] / dt, v[2] / dt)


def apply_velocity(pos: Vec3, vel: Vec3, dt: float) -> Vec3:
    """Position after moving at vel for dt seconds."""
    return _add_scaled(pos, vel, dt)


def apply_acceleration(vel: Vec3, accel: Vec3, dt: float) -> Vec3:
    """Velocity after accelerating at accel for dt seconds."""
    return _add_scaled(vel, accel, dt)


def apply_gravity(vel: Vec3, dt: float) -> Vec3:
    """Velocity after falling under gravity for dt seconds."""
    return _add_scaled(vel, GRAVITY, dt)


def position_to_velocity(pos: Vec3, dt: float) -> Vec3:
    """Velocity that covers the displacement pos in dt seconds."""
    return _divide(pos, dt)


def velocity_to_acceleration(vel: Vec3, dt: float) -> Vec3:
    """Acceleration that reaches the velocity vel in dt seconds."""
    return _divide(vel, dt)


def position_to_acceleration(pos: Vec3, dt: float) -> Vec3:
    """Acceleration for a displacement; the displacement is divided by dt once."""
    return velocity_to_acceleration(pos, dt)


def _block_type_at(world: ChunkManager, pos: Vec3) -> BlockType:
    pos_cs = world_to_chunk_space(pos)
    chunk = world.get_chunk_at_pos(pos_cs)
    if chunk is None:
        raise LookupError(f"no chunk is loaded at world position {pos}")
    origin = chunk_to_world_space(pos_cs)
    x, y, z = (int(pos[axis] - origin[axis]) for axis in range(3))
    return chunk.get_block(x, y, z).type


def detect_collision(world: ChunkManager, pos: Vec3) -> bool:
    """True when the world-space point pos lies inside a solid block."""
    return _block_type_at(world, pos) is not BlockType.AIR


def detect_aabb_collision(world: ChunkManager, aabb: AABB) -> list[Vec3]:
    """World positions of every solid block the box overlaps; empty when there is no collision."""
    low = [math.floor(c) for c in aabb.min_corner()]
    high = [math.floor(c) for c in aabb.max_corner()]
    ranges = [abs(h - l) + 1 for l, h in zip(low, high)]

    hits: list[Vec3] = []
    for dx in range(ranges[0]):
        for dy in range(ranges[1]):
            for dz in range(ranges[2]):
                block_pos: Vec3 = (
                    float(low[0] + dx),
                    float(low[1] + dy),
                    float(low[2] + dz),
                )
                if _block_type_at(world, block_pos) is not BlockType.AIR:
                    hits.append(block_pos)
    return hits