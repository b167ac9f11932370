# orangevox

The game logic of a voxel world, written as plain Python objects: blocks,
16×16×16 chunks, a world that streams chunks in and out around the player,
simple physics, cameras, frustum culling, a day/night cycle, screen overlays
and the layout of editor panels. It computes data; it does not draw anything.

## Modules

- `orangevox.block`: `BlockType` (`AIR`, `DIRT`, `STONE`, `GRASS`, `WOOD`),
  the `BlockFace` bit flags, the `Block` record, `BlockVertexData` and
  `BlockInstanceData`, and the unit-cube geometry `VERTS` and `INDICES`.
- `orangevox.chunk`: `Chunk`, a cube of `CHUNK_SIZE` (16) blocks placed in
  chunk space.
  - `init(height_at)` fills each column with grass up to
    `int(height_at(x, z))` (world coordinates) and air above it.
  - `initialize_vertex_buffer(vertex_array, neighbor_at, chunks)` appends one
    `BlockInstanceData` for every solid block that has at least one face open
    to air. A face on the chunk border counts as open only when the
    neighbouring chunk is loaded and holds air there.
  - `shutdown_vertex_buffer(vertex_array, chunks)` removes the chunk's
    instances and moves back the start index of the chunks stored after them.
  - `border_lines()` gives debug line segments around the chunk.
- `orangevox.world`: `ChunkManager` keeps a cube of chunks that reaches
  `render_dist` chunks (8 by default) in every direction from the player.
  - `initialize(pos)` loads every chunk in the cube and builds the shared
    `vertex_array`.
  - `set_player_pos(pos)` followed by `update()` unloads the slices that fell
    out of range and loads the ones that came into range. When a chunk is
    loaded, its six neighbours are rebuilt.
  - `get_chunk_at_pos`, `get_chunk_at_index`, `num_active_chunks`,
    `load_chunk`, `unload_chunk`, `chunks_to_load_or_unload`,
    `check_block_raycast` and `shutdown` are also provided, together with
    `world_to_chunk_space` and `chunk_to_world_space`.
  - Without a `height_at` function the terrain is flat: grass up to y = 105.
- `orangevox.physics`:
  - `apply_velocity`, `apply_acceleration` and `apply_gravity` (gravity is
    -9.8 on y). Each returns a new vector.
  - `position_to_velocity`, `velocity_to_acceleration` and
    `position_to_acceleration`.
  - `detect_collision(world, pos)` tests one point.
  - `detect_aabb_collision(world, aabb)` returns the world positions of every
    solid block the box overlaps.
  - Both raise `LookupError` when a point lies in a chunk that is not loaded.
- `orangevox.geometry`: `Sphere`, `AABB` (with `min_corner` and `max_corner`)
  and `Plane`.
- `orangevox.frustum`:
  - `FrustumCulling.calculate_frustum(fov, aspect_ratio, near, far, matrix,
    cam_pos)` builds the six planes and eight corners of a frustum. The rows
    of `matrix` must be the camera's right, up and forward axes.
  - `chunk_visible(chunk_pos_ws)` is true unless the chunk lies entirely
    behind one of the planes. Chunks that straddle a plane pass.
  - Helpers: `chunk_pos_to_aabb`, `test_aabb_against_plane`,
    `test_sphere_against_plane`, `plane_from_points`, `aabb_lines` and
    `FrustumCulling.frustum_lines`.
- `orangevox.camera`:
  - `Camera` moves its pitch and yaw (in degrees) toward a target rotation
    with each `update(dt)`. When the angle crosses 0/360 it turns the short
    way, and it builds a left-handed view matrix. `world_matrix` is the
    inverse of the view matrix.
  - `FrustumCamera` is a debug camera. It stays where it is placed, and its
    `update` leaves it unchanged.
  - Helpers: `lerp`, `clamp` and `wrap`.
- `orangevox.light`: `DirectionalLight`, which holds a direction and a colour.
- `orangevox.day_night`: `DayNightCycle` runs a 30-second day followed by a
  30-second night.
  - `update(dt, paused_time=None)` sets the sun and moon directions,
    positions and colours, the sky colour, the current `Cycle` and the
    current `TimeOfDay`.
  - `paused_time`, a value from 0 to 2, fixes the time of day. A value
    outside that range raises `ValueError`.
- `orangevox.quads`:
  - `Crosshair.vertices(aspect_ratio)` gives the six `QuadNDCVertex` values
    of the crosshair.
  - `BlockSelectionIndicator.select(ray_hit, ray_dir)` snaps to the block
    that was hit and returns the indicator position.
  - `quad_transforms(pos)` gives the six face transforms around a block.
- `orangevox.panel` and `orangevox.editor_layout`:
  - `Panel`, `PanelFlags`, `PanelComponent`, `PanelComponentType` and
    `MainViewportPanel`.
  - `EditorLayer.initialize(window_size, window_pos)` divides a window into
    left, right, bottom and centre panels, which you reach with
    `get_panel(PanelLocation.X)`.

## Installing

```
pip install .
pip install ".[test]"   # with the test requirements
```

## Examples

```python
from orangevox.world import ChunkManager, world_to_chunk_space
from orangevox.physics import detect_collision

world = ChunkManager(render_dist=1)          # 3×3×3 chunks
world.initialize((0.0, 100.0, 0.0))
print(world.num_active_chunks())             # 27
print(world_to_chunk_space((17.5, -3.0, 40.0)))  # (1.0, -1.0, 2.0)

print(detect_collision(world, (0.5, 90.0, 0.5)))   # True: below the flat ground
print(detect_collision(world, (0.5, 110.0, 0.5)))  # False: air

world.set_player_pos((20.0, 100.0, 0.0))     # cross into the next chunk along x
world.update()
print(world.num_active_chunks())             # still 27
world.shutdown()
```

```python
from orangevox.day_night import DayNightCycle, CelestialBody

cycle = DayNightCycle()
cycle.update(1.0 / 60.0)
print(cycle.cycle, cycle.time_of_day)
print(cycle.light_direction(CelestialBody.SUN))
print(cycle.light_color(CelestialBody.MOON))
```

```python
from orangevox.editor_layout import EditorLayer, PanelLocation

layer = EditorLayer()
layer.initialize((1600, 900), (0, 0))
print(layer.get_panel(PanelLocation.CENTER).dimensions)  # (1200.0, 720.0)
```

## What it does not do

- There is no rendering, window, input handling or command-line program.
  Lines, quads and instance data are returned for some other code to draw.
- Terrain is not generated from noise. The height of the ground comes from
  the `height_at` function you pass in, or is flat by default.
- `ChunkManager` runs no background thread. Call `update()` yourself each
  time the player moves.

## Running the tests

```
pytest
```