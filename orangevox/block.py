"""Block types, face flags and the unit-cube geometry used to draw blocks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import NamedTuple

Vec3 = tuple[float, float, float]


class BlockFace(IntFlag):
    """Bit flags naming the faces of a block that are exposed and must be drawn."""

    TOP = 1 << 0
    BOTTOM = 1 << 1
    LEFT = 1 << 2
    RIGHT = 1 << 3
    FRONT = 1 << 4
    BACK = 1 << 5


class BlockType(IntEnum):
    """Material of a block; AIR marks an empty, inactive cell."""

    AIR = 0
    DIRT = 1
    STONE = 2
    GRASS = 3
    WOOD = 4


@dataclass(slots=True)
class Block:
    """A single voxel. Only its type is stored; the position is implied by where it lives."""

    type: BlockType = BlockType.AIR


class BlockVertexData(NamedTuple):
    """One corner of the unit cube together with its index in the vertex list."""

    pos: Vec3
    vertex_index: int


@dataclass(slots=True)
class BlockInstanceData:
    """Per-instance data sent to the renderer for one visible block."""

    world_pos: Vec3
    block_type: int
    block_faces: int


def _vertices() -> tuple[BlockVertexData, ...]:
    trb, trf, tlf, tlb = (1.0, 1.0, 1.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0), (0.0, 1.0, 1.0)
    brb, brf, blf, blb = (1.0, 0.0, 1.0), (1.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 1.0)
    corners = (
        trb, trf, tlf, tlf, tlb, trb,  # top
        brb, brf, blf, blf, blb, brb,  # bottom
        tlf, blf, blb, blb, tlb, tlf,  # left
        brb, brf, trf, trf, trb, brb,  # right
        trf, brf, blf, tlf, trf, blf,  # front
        blb, brb, trb, blb, trb, tlb,  # back
    )
    return tuple(BlockVertexData(pos, index) for index, pos in enumerate(corners))


VERTS: tuple[BlockVertexData, ...] = _vertices()

INDICES: tuple[int, ...] = (
    3, 1, 0, 2, 1, 3,        # top
    4, 5, 6, 4, 6, 7,        # bottom
    11, 9, 8, 10, 9, 11,     # left
    14, 12, 13, 15, 12, 14,  # right
    19, 17, 16, 18, 17, 19,  # front
    22, 20, 21, 23, 20, 22,  # back
)