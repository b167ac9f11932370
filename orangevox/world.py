"""The set of chunks loaded around the player, kept in step as the player moves."""

from __future__ import annotations

import logging
import math
import threading
from collections.abc import Callable
from typing import Optional

from orangevox.block import BlockInstanceData, BlockType
from orangevox.chunk import CHUNK_SIZE, TERRAIN_HEIGHT_RANGE, TERRAIN_STARTING_HEIGHT, Chunk

Vec3 = tuple[float, float, float]
_Key = tuple[int, int, int]

RENDER_DIST = 8

_logger = logging.getLogger(__name__)

# Neighbours refreshed when a chunk is loaded: left, right, top, bottom, front, back.
_NEIGHBOR_OFFSETS: tuple[Vec3, ...] = (
    (-1.0, 0.0, 0.0),
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, -1.0, 0.0),
    (0.0, 0.0, -1.0),
    (0.0, 0.0, 1.0),
)


def world_to_chunk_space(pos: Vec3) -> Vec3:
    """Chunk-space coordinates of the chunk containing the world-space point pos."""
    return tuple(float(math.floor(c / CHUNK_SIZE)) for c in pos)  # type: ignore[return-value]


def chunk_to_world_space(pos_cs: Vec3) -> Vec3:
    """World-space minimum corner of the chunk at chunk-space pos_cs."""
    return tuple(float(c) * CHUNK_SIZE for c in pos_cs)  # type: ignore[return-value]


def _key(pos: Vec3) -> _Key:
    return (int(pos[0]), int(pos[1]), int(pos[2]))


def _flat_height(x: float, z: float) -> float:
    return TERRAIN_STARTING_HEIGHT + TERRAIN_HEIGHT_RANGE / 2.0


class ChunkManager:
    """Keeps a cube of chunks, render_dist chunks in every direction, centred on the player."""

    def __init__(
        self,
        render_dist: int = RENDER_DIST,
        height_at: Optional[Callable[[float, float], float]] = None,
    ) -> None:
        if render_dist < 1:
            raise ValueError(f"render distance must be at least 1, got {render_dist}")
        self.render_dist = render_dist
        self.height_at = height_at if height_at is not None else _flat_height
        self.vertex_array: list[BlockInstanceData] = []
        self.player_pos: Vec3 = (0.0, 0.0, 0.0)
        self._pool: list[Chunk] = []
        self._chunk_map: dict[_Key, Chunk] = {}
        self._pool_index: dict[_Key, int] = {}
        self._prev_cs: Optional[Vec3] = None
        self._shutting_down = False
        self._lock = threading.RLock()

    @property
    def capacity(self) -> int:
        """Number of chunks in a fully loaded cube."""
        side = 2 * self.render_dist + 1
        return side * side * side

    @property
    def is_shutting_down(self) -> bool:
        return self._shutting_down

    @property
    def chunks(self) -> tuple[Chunk, ...]:
        """The active chunks in pool order."""
        return tuple(self._pool)

    def initialize(self, player_pos_ws: Vec3) -> None:
        """Load every chunk around the player and build their block instances."""
        with self._lock:
            self._shutting_down = False
            self.player_pos = tuple(float(c) for c in player_pos_ws)  # type: ignore[assignment]
            px, py, pz = world_to_chunk_space(self.player_pos)
            self._prev_cs = (px, py, pz)
            span = range(-self.render_dist, self.render_dist + 1)
            for x in span:
                for y in span:
                    for z in span:
                        self.load_chunk((px + x, py + y, pz + z))
            for chunk in list(self._pool):
                chunk.initialize_vertex_buffer(self.vertex_array, self.get_chunk_at_pos, self._pool)

    def shutdown(self) -> None:
        """Drop every chunk and all block instances."""
        with self._lock:
            self._shutting_down = True
            self._chunk_map.clear()
            self._pool_index.clear()
            self._pool.clear()
            self.vertex_array.clear()

    def update(self) -> None:
        """Unload chunks that fell out of range and load those that came into it."""
        with self._lock:
            current = world_to_chunk_space(self.player_pos)
            if self._prev_cs is None:
                self._prev_cs = current
            previous = self._prev_cs

            deleted = self.chunks_to_load_or_unload(current, previous, False)
            created = self.chunks_to_load_or_unload(current, previous, True)

            for pos in deleted:
                index = self._pool_index.get(_key(pos))
                if index is not None:
                    self._remove_at(index)

            for pos in created:
                chunk = self.load_chunk(pos)
                if chunk is None:
                    _logger.warning("Potential new chunk skipped at %s", pos)
                    continue
                cx, cy, cz = chunk.pos
                for dx, dy, dz in _NEIGHBOR_OFFSETS:
                    neighbor = self.get_chunk_at_pos((cx + dx, cy + dy, cz + dz))
                    if neighbor is not None:
                        neighbor.initialize_vertex_buffer(
                            self.vertex_array, self.get_chunk_at_pos, self._pool
                        )
                chunk.initialize_vertex_buffer(self.vertex_array, self.get_chunk_at_pos, self._pool)

            if len(self._pool) != self.capacity:
                _logger.warning(
                    "%d chunks active where %d were expected", len(self._pool), self.capacity
                )
            self._prev_cs = current

    def load_chunk(self, chunk_cs: Vec3) -> Optional[Chunk]:
        """Create and fill the chunk at chunk_cs; None when the pool is already full."""
        with self._lock:
            if len(self._pool) >= self.capacity:
                return None
            key = _key(chunk_cs)
            if key in self._chunk_map:
                raise ValueError(f"a chunk is already loaded at {chunk_cs}")
            chunk = Chunk(chunk_cs)
            chunk.init(self.height_at)
            self._pool_index[key] = len(self._pool)
            self._pool.append(chunk)
            self._chunk_map[key] = chunk
            return chunk

    def unload_chunk(self, chunk: Chunk) -> None:
        """Remove chunk and its block instances if it is active."""
        with self._lock:
            for index, candidate in enumerate(self._pool):
                if candidate is chunk:
                    self._remove_at(index)
                    return

    def _remove_at(self, index: int) -> None:
        chunk = self._pool[index]
        if not self._shutting_down:
            chunk.shutdown_vertex_buffer(self.vertex_array, self._pool)
        key = _key(chunk.pos)
        del self._chunk_map[key]
        del self._pool_index[key]
        last = self._pool.pop()
        if index < len(self._pool):
            # The last chunk fills the gap left by the removed one.
            self._pool[index] = last
            self._pool_index[_key(last.pos)] = index

    def num_active_chunks(self) -> int:
        return len(self._pool)

    def get_chunk_at_index(self, index: int) -> Optional[Chunk]:
        """The chunk at a pool index, or None when the index is out of range."""
        if 0 <= index < len(self._pool):
            return self._pool[index]
        return None

    def get_chunk_at_pos(self, pos_cs: Vec3) -> Optional[Chunk]:
        """The chunk at chunk-space pos_cs, or None when it is not loaded."""
        return self._chunk_map.get(_key(pos_cs))

    def set_player_pos(self, player_pos: Vec3) -> None:
        """Record the player's world position for the next update."""
        self.player_pos = tuple(float(c) for c in player_pos)  # type: ignore[assignment]

    def chunks_to_load_or_unload(
        self, current_cs: Vec3, previous_cs: Vec3, loading: bool
    ) -> list[Vec3]:
        """Chunk positions entering (loading) or leaving range as the player moves.

        For each axis on which the player changed chunk, one slice of chunks
        perpendicular to that axis is reported. Positions are reported once each;
        when unloading only chunks that are actually loaded are reported.
        """
        dist = self.render_dist
        seen: set[_Key] = set()
        positions: list[Vec3] = []
        span = range(-dist, dist + 1)

        for axis in range(3):
            if previous_cs[axis] == current_cs[axis]:
                continue
            difference = int(previous_cs[axis] - current_cs[axis])
            sign = 1 if difference > 0 else -1
            magnitude = min(abs(difference), dist)
            if loading:
                sign = -sign
            base = current_cs if loading else previous_cs
            slice_coord = base[axis] + sign * (dist + (magnitude - 1))
            first, second = (a for a in range(3) if a != axis)

            for u in span:
                for v in span:
                    pos = [0.0, 0.0, 0.0]
                    pos[axis] = float(slice_coord)
                    pos[first] = float(current_cs[first] + u)
                    pos[second] = float(current_cs[second] + v)
                    chunk_pos: Vec3 = (pos[0], pos[1], pos[2])
                    key = _key(chunk_pos)
                    if key in seen:
                        continue
                    if loading:
                        seen.add(key)
                        positions.append(chunk_pos)
                    else:
                        chunk = self._chunk_map.get(key)
                        if chunk is not None:
                            seen.add(key)
                            positions.append(chunk.pos)

        side = 2 * dist + 1
        if len(positions) % (side * side) != 0:
            _logger.warning("Did not update a uniform number of chunks (%d)", len(positions))
        return positions

    def check_block_raycast(self, pos: Vec3) -> bool:
        """True when the world-space point pos lies inside a loaded, non-air block."""
        pos_cs = world_to_chunk_space(pos)
        chunk = self.get_chunk_at_pos(pos_cs)
        if chunk is None:
            return False
        origin = chunk_to_world_space(pos_cs)
        local = (int(pos[i] - origin[i]) for i in range(3))
        return chunk.get_block(*local).type is not BlockType.AIR