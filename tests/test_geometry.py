import dataclasses

import pytest

from orangevox.geometry import AABB, Plane, Sphere


def test_aabb_corners_pinned_example():
    box = AABB((1.0, 2.0, 3.0), (0.5, 1.0, 2.0))
    assert box.min_corner() == pytest.approx((0.5, 1.0, 1.0))
    assert box.max_corner() == pytest.approx((1.5, 3.0, 5.0))


@pytest.mark.parametrize(
    "center, extent",
    [
        ((0.0, 0.0, 0.0), (8.0, 8.0, 8.0)),
        ((-3.5, 10.0, 7.25), (0.25, 4.0, 1.5)),
        ((100.0, -50.0, 0.0), (0.0, 0.0, 0.0)),
    ],
)
def test_aabb_corners_recover_center_and_extent(center, extent):
    box = AABB(center, extent)
    lo, hi = box.min_corner(), box.max_corner()
    for axis in range(3):
        assert (lo[axis] + hi[axis]) / 2 == pytest.approx(center[axis])
        assert (hi[axis] - lo[axis]) / 2 == pytest.approx(extent[axis])
        assert lo[axis] <= hi[axis]


def test_aabb_is_immutable():
    box = AABB((0.0, 0.0, 0.0), (1.0, 1.0, 1.0))
    with pytest.raises(dataclasses.FrozenInstanceError):
        box.center = (1.0, 1.0, 1.0)
    assert box.center == (0.0, 0.0, 0.0)
    assert box.min_corner() == pytest.approx((-1.0, -1.0, -1.0))


def test_sphere_is_immutable():
    sphere = Sphere((0.0, 0.0, 0.0), 1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        sphere.radius = 2.0
    assert sphere.radius == 1.0


def test_plane_equality_by_value():
    assert Plane((0.0, 1.0, 0.0), 2.0) == Plane((0.0, 1.0, 0.0), 2.0)
    assert not Plane((0.0, 1.0, 0.0), 2.0) == Plane((0.0, 1.0, 0.0), 3.0)