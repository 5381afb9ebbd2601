"""Tests for placement geometry.

Critical Invariants:
- Euler construction matches the host convention (pitch X, yaw Y, roll Z)
- Forward is -Z, right is +X
- Direction vectors of a rotation stay orthonormal
"""

import math

import pytest

from spawnecs.core.geometry import (
    IDENTITY,
    Color,
    Quat,
    Vec3,
    from_pitch_yaw_roll_degrees,
    get_front,
    get_right,
    get_up,
    quat_multiply,
    to_local,
    to_world,
    vec_multiply,
    vec_sum,
)


def test_vector_arithmetic():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(0.5, -1.0, 2.0)

    assert a + b == Vec3(1.5, 1.0, 5.0)
    assert a - b == Vec3(0.5, 3.0, 1.0)
    assert 2 * a == a * 2 == Vec3(2.0, 4.0, 6.0)
    assert vec_sum(a, b) == a + b
    assert vec_multiply(0.5, a) == Vec3(0.5, 1.0, 1.5)
    assert Vec3(3.0, 4.0, 0.0).length() == 5.0


def test_identity_leaves_vectors_unchanged():
    v = Vec3(0.3, -1.2, 4.0)
    assert IDENTITY.rotate(v).is_close(v)
    assert from_pitch_yaw_roll_degrees(0, 0, 0).is_close(IDENTITY)


def test_identity_axes():
    assert get_right(IDENTITY).is_close(Vec3(1, 0, 0))
    assert get_up(IDENTITY).is_close(Vec3(0, 1, 0))
    assert get_front(IDENTITY).is_close(Vec3(0, 0, -1))


def test_yaw_turns_about_up_axis():
    """Yaw 90 degrees turns left: front becomes -X, right becomes -Z."""
    q = from_pitch_yaw_roll_degrees(0, 90, 0)

    assert get_front(q).is_close(Vec3(-1, 0, 0))
    assert get_right(q).is_close(Vec3(0, 0, -1))
    assert get_up(q).is_close(Vec3(0, 1, 0))


def test_pitch_tilts_front_upward():
    q = from_pitch_yaw_roll_degrees(90, 0, 0)

    assert get_front(q).is_close(Vec3(0, 1, 0))
    assert get_right(q).is_close(Vec3(1, 0, 0))


def test_single_axis_components():
    half = math.radians(30.0) / 2
    q = from_pitch_yaw_roll_degrees(30, 0, 0)
    assert q.is_close(Quat(math.sin(half), 0.0, 0.0, math.cos(half)))


@pytest.mark.parametrize("angles", [(10, 0, 0), (0, 45, 0), (20, -135, 5), (-80, 200, 33)])
def test_direction_vectors_are_orthonormal(angles):
    q = from_pitch_yaw_roll_degrees(*angles)
    right, up, front = get_right(q), get_up(q), get_front(q)

    for v in (right, up, front):
        assert math.isclose(v.length(), 1.0, abs_tol=1e-9)
    assert math.isclose(right.dot(up), 0.0, abs_tol=1e-9)
    assert math.isclose(right.dot(front), 0.0, abs_tol=1e-9)
    assert math.isclose(up.dot(front), 0.0, abs_tol=1e-9)


def test_multiply_composes_rotations():
    a = from_pitch_yaw_roll_degrees(0, 90, 0)
    b = from_pitch_yaw_roll_degrees(10, 0, 0)
    v = Vec3(0.2, 0.7, -1.1)

    assert quat_multiply(a, b).rotate(v).is_close(a.rotate(b.rotate(v)))


def test_inverse_undoes_rotation():
    q = from_pitch_yaw_roll_degrees(25, 70, -15)
    v = Vec3(1.0, 2.0, 3.0)

    assert q.inverse().rotate(q.rotate(v)).is_close(v)
    assert (q * q.inverse()).is_close(IDENTITY)


def test_is_close_treats_negated_quaternion_as_equal():
    q = from_pitch_yaw_roll_degrees(15, 30, 45)
    assert q.is_close(Quat(-q.x, -q.y, -q.z, -q.w))


def test_zero_quaternion_cannot_be_normalized():
    with pytest.raises(ValueError, match="zero quaternion"):
        Quat(0, 0, 0, 0).normalized()


def test_local_world_conversion_inverts():
    parent_pos = Vec3(1.0, 0.5, -2.0)
    parent_rot = from_pitch_yaw_roll_degrees(0, 60, 0)
    pos = Vec3(1.6, 0.63, -2.0)
    rot = from_pitch_yaw_roll_degrees(10, 60, 0)

    local_pos, local_rot = to_local(parent_pos, parent_rot, pos, rot)
    world_pos, world_rot = to_world(parent_pos, parent_rot, local_pos, local_rot)

    assert world_pos.is_close(pos)
    assert world_rot.is_close(rot)


def test_from_any_accepts_mappings_and_sequences():
    assert Vec3.from_any({"x": 1, "y": 2, "z": 3}) == Vec3(1.0, 2.0, 3.0)
    assert Vec3.from_any((1, 2, 3)) == Vec3(1.0, 2.0, 3.0)
    assert Quat.from_any({"x": 0, "y": 0, "z": 0, "w": 1}) == IDENTITY


def test_color_range_is_checked():
    assert Color(200, 10, 200).as_dict() == {"red": 200, "green": 10, "blue": 200}
    with pytest.raises(ValueError, match="out of range"):
        Color(256, 0, 0)
