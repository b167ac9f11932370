"""A cubic chunk of blocks and the instance data it contributes to the block renderer."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Optional

from orangevox.block import Block, BlockFace, BlockInstanceData, BlockType

Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]
Line = tuple[Vec3, Vec3, Vec4, Vec4]

CHUNK_SIZE = 16
DOUBLE_CHUNK_SIZE = CHUNK_SIZE << 1

TERRAIN_STARTING_HEIGHT = 80
TERRAIN_HEIGHT_RANGE = 50
LOW_CHUNK_LIMIT = -256
HIGH_CHUNK_LIMIT = -LOW_CHUNK_LIMIT

BORDER_COLOR: Vec4 = (1.0, 0.0, 0.0, 1.0)

HeightFunction = Callable[[float, float], float]
NeighborLookup = Callable[[Vec3], Optional["Chunk"]]


class Chunk:
    """A CHUNK_SIZE cube of blocks positioned in chunk space."""

    def __init__(self, pos: Vec3 = (0.0, 0.0, 0.0)) -> None:
        self.pos: Vec3 = (float(pos[0]), float(pos[1]), float(pos[2]))
        self.vertex_buffer_start_index = 0
        self.block_count = 0
        self._blocks = [
            [[Block() for _ in range(CHUNK_SIZE)] for _ in range(CHUNK_SIZE)]
            for _ in range(CHUNK_SIZE)
        ]

    @property
    def world_pos(self) -> Vec3:
        """The chunk's minimum corner in world space."""
        return (
            self.pos[0] * CHUNK_SIZE,
            self.pos[1] * CHUNK_SIZE,
            self.pos[2] * CHUNK_SIZE,
        )

    def get_block(self, x: int, y: int, z: int) -> Block:
        """The block at local coordinates (x, y, z)."""
        return self._blocks[x][y][z]

    def face_count(self) -> int:
        """Number of faces drawn for this chunk's visible blocks."""
        return self.block_count * 6

    def init(self, height_at: HeightFunction) -> None:
        """Fill the chunk: grass up to the terrain height at each world column, air above."""
        wx, wy, wz = self.world_pos
        for x, plane in enumerate(self._blocks):
            for z in range(CHUNK_SIZE):
                top = int(height_at(x + wx, z + wz))
                for y, row in enumerate(plane):
                    row[z] = Block(BlockType.GRASS if wy + y <= top else BlockType.AIR)

    def _neighbors(self, neighbor_at: NeighborLookup) -> dict[BlockFace, Optional[Chunk]]:
        px, py, pz = self.pos
        return {
            BlockFace.LEFT: neighbor_at((px - 1, py, pz)),
            BlockFace.RIGHT: neighbor_at((px + 1, py, pz)),
            BlockFace.TOP: neighbor_at((px, py + 1, pz)),
            BlockFace.BOTTOM: neighbor_at((px, py - 1, pz)),
            BlockFace.FRONT: neighbor_at((px, py, pz - 1)),
            BlockFace.BACK: neighbor_at((px, py, pz + 1)),
        }

    def initialize_vertex_buffer(
        self,
        vertex_array: list[BlockInstanceData],
        neighbor_at: NeighborLookup,
        chunks: Iterable[Chunk],
    ) -> None:
        """Append one instance per solid block with an exposed face to vertex_array.

        Any instances this chunk already owns are removed first. A face on the chunk's
        border is exposed only when the neighbouring chunk exists and holds air there.
        """
        self.shutdown_vertex_buffer(vertex_array, chunks)

        wx, wy, wz = self.world_pos
        initial_size = len(vertex_array)
        neighbors = self._neighbors(neighbor_at)
        last = CHUNK_SIZE - 1
        blocks = self._blocks
        count = 0

        for x in range(CHUNK_SIZE):
            for y in reversed(range(CHUNK_SIZE)):
                for z in range(CHUNK_SIZE):
                    block_type = blocks[x][y][z].type
                    if block_type is BlockType.AIR:
                        continue

                    checks = (
                        (BlockFace.LEFT, x == 0, (last, y, z), (x - 1, y, z)),
                        (BlockFace.RIGHT, x == last, (0, y, z), (x + 1, y, z)),
                        (BlockFace.TOP, y == last, (x, 0, z), (x, y + 1, z)),
                        (BlockFace.BOTTOM, y == 0, (x, last, z), (x, y - 1, z)),
                        (BlockFace.FRONT, z == 0, (x, y, last), (x, y, z - 1)),
                        (BlockFace.BACK, z == last, (x, y, 0), (x, y, z + 1)),
                    )
                    faces = BlockFace(0)
                    for face, at_edge, outside, inside in checks:
                        source = neighbors[face] if at_edge else self
                        if source is None:
                            continue
                        coords = outside if at_edge else inside
                        if source.get_block(*coords).type is BlockType.AIR:
                            faces |= face

                    if faces:
                        vertex_array.append(
                            BlockInstanceData(
                                (float(x) + wx, float(y) + wy, float(z) + wz),
                                int(block_type),
                                int(faces),
                            )
                        )
                        count += 1

        self.block_count = count
        if count > 0:
            self.vertex_buffer_start_index = initial_size

    def shutdown_vertex_buffer(
        self, vertex_array: list[BlockInstanceData], chunks: Iterable[Chunk]
    ) -> None:
        """Remove this chunk's instances and shift the start index of chunks stored after it."""
        if self.block_count > 0:
            start, count = self.vertex_buffer_start_index, self.block_count
            if start + count > len(vertex_array):
                raise ValueError(
                    f"chunk instances {start}..{start + count} lie outside "
                    f"a vertex array of {len(vertex_array)} entries"
                )
            del vertex_array[start:start + count]
            for chunk in chunks:
                if (
                    chunk is self
                    or chunk.block_count == 0
                    or chunk.vertex_buffer_start_index < start
                ):
                    continue
                chunk.vertex_buffer_start_index -= count

        self.vertex_buffer_start_index = 0
        self.block_count = 0

    def border_lines(self) -> list[Line]:
        """Debug line segments outlining the chunk."""
        x, y, z = self.world_pos
        s = float(CHUNK_SIZE)
        tlf = (x, y, z)
        trf = (x + s, y, z)
        blf = (x, y - s, z)
        brf = (x + s, y - s, z)
        tln = (x, y, z + s)
        trn = (x + s, y, z + s)
        bln = (x, y - s, z + s)
        brn = (x + s, y - s, z + s)
        pairs = (
            (tln, trn), (trn, brn), (brn, bln), (bln, tln),  # back
            (tlf, trf), (trf, brf), (brf, blf), (blf, tlf),  # front
            (tln, tlf), (blf, bln),  # left side
            (trn, trf), (brf, brn),  # right side
        )
        return [(start, end, BORDER_COLOR, BORDER_COLOR) for start, end in pairs]