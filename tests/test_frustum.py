import math

import numpy as np
import pytest

from orangevox import frustum as fr
from orangevox.geometry import AABB, Plane, Sphere

IDENTITY = np.identity(4)
FOV = math.pi / 4
NEAR = 0.1
FAR = 100.0


@pytest.fixture
def culling():
    c = fr.FrustumCulling()
    c.calculate_frustum(FOV, 16 / 9, NEAR, FAR, IDENTITY, (0.0, 0.0, 0.0))
    return c


def test_chunk_pos_to_aabb_origin():
    box = fr.chunk_pos_to_aabb((0.0, 0.0, 0.0))
    assert box.center == pytest.approx((8.0, 8.0, 8.0))
    assert box.extent == pytest.approx((8.0, 8.0, 8.0))


def test_chunk_aabb_spans_one_chunk():
    box = fr.chunk_pos_to_aabb((32.0, -16.0, 48.0))
    assert box.min_corner() == pytest.approx((32.0, -16.0, 48.0))
    assert box.max_corner() == pytest.approx((48.0, 0.0, 64.0))


@pytest.mark.parametrize(
    "center, expected",
    [((0.0, 5.0, 0.0), 1), ((0.0, -5.0, 0.0), -1), ((0.0, 0.5, 0.0), 0)],
)
def test_sphere_against_plane(center, expected):
    plane = Plane((0.0, 1.0, 0.0), 0.0)
    assert fr.test_sphere_against_plane(Sphere(center, 1.0), plane) == expected


def test_aabb_against_plane_classifies():
    plane = Plane((0.0, 1.0, 0.0), 0.0)
    above = AABB((0.0, 10.0, 0.0), (1.0, 1.0, 1.0))
    below = AABB((0.0, -10.0, 0.0), (1.0, 1.0, 1.0))
    straddling = AABB((0.0, 0.5, 0.0), (1.0, 1.0, 1.0))
    assert fr.test_aabb_against_plane(above, plane) == 1
    assert fr.test_aabb_against_plane(below, plane) == -1
    assert fr.test_aabb_against_plane(straddling, plane) == 0


def test_plane_from_points_contains_points():
    a, b, c = (1.0, 0.0, 2.0), (0.0, 1.0, 3.0), (2.0, 2.0, -1.0)
    plane = fr.plane_from_points(a, b, c)
    n = np.asarray(plane.normal)
    for p in (a, b, c):
        assert float(n @ np.asarray(p)) == pytest.approx(plane.point)
    assert float(n @ (np.asarray(a) - np.asarray(b))) == pytest.approx(0.0)
    assert float(n @ (np.asarray(c) - np.asarray(b))) == pytest.approx(0.0)


def test_frustum_near_and_far_vertices(culling):
    v = culling.frustum.vertices
    V = fr.FrustumVertex
    for key in (V.TLN, V.TRN, V.BLN, V.BRN):
        assert v[key][2] == pytest.approx(NEAR)
    for key in (V.TLF, V.TRF, V.BLF, V.BRF):
        assert v[key][2] == pytest.approx(FAR)
    assert v[V.TRF][0] == pytest.approx(-v[V.TLF][0])
    assert v[V.TLF][1] == pytest.approx(-v[V.BLF][1])


def test_planes_face_inward(culling):
    inside = np.array([0.0, 0.0, 50.0])
    for plane in culling.frustum.planes.values():
        assert float(np.asarray(plane.normal) @ inside) - plane.point > 0


def test_chunk_in_front_is_visible(culling):
    assert culling.chunk_visible((-8.0, -8.0, 20.0)) is True


def test_chunk_straddling_near_plane_is_visible(culling):
    assert culling.chunk_visible((-8.0, -8.0, -8.0)) is True


@pytest.mark.parametrize(
    "pos",
    [(-8.0, -8.0, -40.0), (-8.0, -8.0, 200.0), (-500.0, -8.0, 20.0), (-8.0, 300.0, 20.0)],
)
def test_chunk_outside_is_culled(culling, pos):
    assert culling.chunk_visible(pos) is False


def test_frustum_follows_camera_position():
    c = fr.FrustumCulling()
    c.calculate_frustum(FOV, 1.0, NEAR, FAR, IDENTITY, (1000.0, 0.0, 0.0))
    assert c.chunk_visible((-8.0, -8.0, 20.0)) is False
    assert c.chunk_visible((992.0, -8.0, 20.0)) is True


def test_frustum_lines_count_and_colors(culling):
    lines = culling.frustum_lines()
    assert len(lines) == 18
    assert all(line[2] == (0.0, 1.0, 0.0, 1.0) for line in lines[:12])
    assert all(line[2] == (1.0, 0.0, 0.0, 1.0) and line[3] == (0.0, 0.0, 1.0, 1.0) for line in lines[12:])


def test_frustum_normal_lines_match_plane_normals(culling):
    lines = culling.frustum_lines()[12:]
    order = [fr.FrustumPlane.TOP, fr.FrustumPlane.BOTTOM, fr.FrustumPlane.LEFT,
             fr.FrustumPlane.RIGHT, fr.FrustumPlane.FRONT, fr.FrustumPlane.BACK]
    for (start, end, _, _), plane_id in zip(lines, order):
        diff = np.asarray(end) - np.asarray(start)
        assert diff == pytest.approx(np.asarray(culling.frustum.planes[plane_id].normal))


def test_aabb_lines_use_corners():
    box = AABB((1.0, 2.0, 3.0), (0.5, 1.0, 2.0))
    lines = fr.aabb_lines(box)
    assert len(lines) == 16
    lo, hi = box.min_corner(), box.max_corner()
    for start, end, color, _ in lines:
        assert color == (1.0, 0.0, 0.0, 1.0)
        for point in (start, end):
            for axis in range(3):
                assert point[axis] == pytest.approx(lo[axis]) or point[axis] == pytest.approx(hi[axis])
    corners = {p for line in lines for p in line[:2]}
    assert len(corners) == 8


def test_frustum_enum_sizes():
    assert len(fr.Frustum().planes) == len(fr.FrustumPlane) == 6
    assert len(fr.Frustum().vertices) == len(fr.FrustumVertex) == 8