import pytest

from orangevox.geometry import AABB
from orangevox.physics import (
    apply_acceleration,
    apply_gravity,
    apply_velocity,
    detect_aabb_collision,
    detect_collision,
    position_to_acceleration,
    position_to_velocity,
    velocity_to_acceleration,
)
from orangevox.world import ChunkManager


@pytest.fixture(scope="module")
def world():
    manager = ChunkManager(render_dist=1, height_at=lambda x, z: 5.0)
    manager.initialize((0.0, 0.0, 0.0))
    return manager


def test_apply_velocity_round_trip():
    pos = (1.0, 2.0, 3.0)
    vel = (2.0, 0.0, -2.0)
    moved = apply_velocity(pos, vel, 0.5)
    back = apply_velocity(moved, tuple(-c for c in vel), 0.5)
    assert back == pytest.approx(pos)
    assert moved[1] == pytest.approx(pos[1])


def test_apply_acceleration_zero_dt_keeps_velocity():
    vel = (1.0, -1.0, 4.0)
    assert apply_acceleration(vel, (10.0, 10.0, 10.0), 0.0) == pytest.approx(vel)


def test_apply_gravity_pulls_down():
    assert apply_gravity((0.0, 0.0, 0.0), 1.0) == pytest.approx((0.0, -9.8, 0.0))
    vel = apply_gravity((3.0, 1.0, -2.0), 0.25)
    assert vel[0] == pytest.approx(3.0)
    assert vel[2] == pytest.approx(-2.0)
    assert vel[1] < 1.0


def test_position_to_velocity_round_trip():
    displacement = (4.0, -2.0, 1.0)
    dt = 0.2
    vel = position_to_velocity(displacement, dt)
    assert apply_velocity((0.0, 0.0, 0.0), vel, dt) == pytest.approx(displacement)


def test_velocity_to_acceleration_round_trip():
    target = (1.0, 2.0, -3.0)
    accel = velocity_to_acceleration(target, 0.5)
    assert apply_acceleration((0.0, 0.0, 0.0), accel, 0.5) == pytest.approx(target)


def test_position_to_acceleration_matches_single_division():
    pos = (6.0, 3.0, -9.0)
    assert position_to_acceleration(pos, 3.0) == pytest.approx(position_to_velocity(pos, 3.0))


def test_detect_collision_inside_ground(world):
    assert detect_collision(world, (0.5, 3.0, 0.5)) is True
    assert detect_collision(world, (0.5, 5.5, 0.5)) is True


def test_detect_collision_in_air(world):
    assert detect_collision(world, (0.5, 10.0, 0.5)) is False


def test_detect_collision_below_zero(world):
    assert detect_collision(world, (-3.5, -4.0, -7.5)) is True


def test_detect_collision_outside_loaded_world(world):
    with pytest.raises(LookupError):
        detect_collision(world, (0.5, 100.0, 0.5))


def test_aabb_in_air_has_no_hits(world):
    assert detect_aabb_collision(world, AABB((0.5, 6.5, 0.5), (0.4, 0.4, 0.4))) == []


def test_aabb_touching_ground_reports_block(world):
    hits = detect_aabb_collision(world, AABB((0.5, 6.0, 0.5), (0.4, 0.4, 0.4)))
    assert hits == [(0.0, 5.0, 0.0)]


def test_aabb_hits_are_all_solid(world):
    hits = detect_aabb_collision(world, AABB((1.0, 5.0, 1.0), (1.0, 1.0, 1.0)))
    assert hits
    assert all(detect_collision(world, hit) for hit in hits)
    assert all(hit[1] <= 5.0 for hit in hits)