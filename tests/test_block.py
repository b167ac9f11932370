from functools import reduce
from operator import or_

from orangevox.block import (
    INDICES,
    VERTS,
    Block,
    BlockFace,
    BlockInstanceData,
    BlockType,
)


def test_default_block_is_air():
    assert Block().type is BlockType.AIR


def test_block_type_can_be_changed():
    block = Block(BlockType.STONE)
    block.type = BlockType.WOOD
    assert block.type is BlockType.WOOD


def test_air_is_zero():
    assert BlockType(0) is BlockType.AIR


def test_faces_are_distinct_single_bits():
    faces = list(BlockFace)
    assert len(faces) == 6
    for face in faces:
        assert face.value & (face.value - 1) == 0
        assert BlockFace(face.value) is face
    combined = reduce(or_, faces)
    data = BlockInstanceData((0.0, 0.0, 0.0), int(BlockType.DIRT), int(combined))
    assert data.block_faces == sum(face.value for face in faces)


def test_face_membership():
    mask = BlockFace.TOP | BlockFace.BACK
    data = BlockInstanceData((0.0, 0.0, 0.0), int(BlockType.STONE), int(mask))
    stored = BlockFace(data.block_faces)
    assert BlockFace.TOP in stored
    assert BlockFace.BACK in stored
    assert BlockFace.LEFT not in stored


def test_vertices_describe_unit_cube():
    assert len(VERTS) == 36
    for position, vertex in enumerate(VERTS):
        assert vertex.vertex_index == position
        assert all(coord in (0.0, 1.0) for coord in vertex.pos)
        data = BlockInstanceData(vertex.pos, int(BlockType.AIR), 0)
        assert data.world_pos == vertex.pos


def test_indices_refer_to_vertices():
    assert len(INDICES) == 36
    assert all(0 <= index < len(VERTS) for index in INDICES)
    groups = [BlockFace(1 << (position // 6)) for position in range(len(INDICES))]
    assert set(groups) == set(BlockFace)


def test_instance_data_holds_values():
    data = BlockInstanceData((1.0, 2.0, 3.0), int(BlockType.GRASS), int(BlockFace.TOP))
    assert data.world_pos == (1.0, 2.0, 3.0)
    assert data.block_type == BlockType.GRASS
    assert data.block_faces == BlockFace.TOP