"""Pure vector and quaternion helpers used for placing content.

Axis conventions follow the host world: +X right, +Y up, -Z forward.
"""

from __future__ import annotations

import math

from spawnecs.core.geometry.models import Quat, Vec3

UNIT_X = Vec3(1.0, 0.0, 0.0)
UNIT_Y = Vec3(0.0, 1.0, 0.0)
FORWARD = Vec3(0.0, 0.0, -1.0)


def from_pitch_yaw_roll_degrees(pitch: float, yaw: float, roll: float) -> Quat:
    """Build a rotation from Euler angles in degrees.

    Pitch turns about X, yaw about Y and roll about Z. The composition matches
    GLM's ``quat(vec3 eulerAngles)`` constructor, which the host uses.

    Args:
        pitch: Rotation about the X axis in degrees.
        yaw: Rotation about the Y axis in degrees.
        roll: Rotation about the Z axis in degrees.

    Returns:
        Unit quaternion for the combined rotation.
    """
    hx, hy, hz = (math.radians(a) * 0.5 for a in (pitch, yaw, roll))
    cx, cy, cz = math.cos(hx), math.cos(hy), math.cos(hz)
    sx, sy, sz = math.sin(hx), math.sin(hy), math.sin(hz)
    return Quat(
        x=sx * cy * cz - cx * sy * sz,
        y=cx * sy * cz + sx * cy * sz,
        z=cx * cy * sz - sx * sy * cz,
        w=cx * cy * cz + sx * sy * sz,
    )


def get_right(orientation: Quat) -> Vec3:
    """Right-hand direction of an orientation."""
    return orientation.rotate(UNIT_X)


def get_up(orientation: Quat) -> Vec3:
    """Up direction of an orientation."""
    return orientation.rotate(UNIT_Y)


def get_front(orientation: Quat) -> Vec3:
    """Front (forward) direction of an orientation."""
    return orientation.rotate(FORWARD)


def vec_sum(a: Vec3, b: Vec3) -> Vec3:
    return a + b


def vec_multiply(scalar: float, v: Vec3) -> Vec3:
    return v.scale(scalar)


def quat_multiply(a: Quat, b: Quat) -> Quat:
    return a * b


def to_local(
    parent_position: Vec3, parent_rotation: Quat, position: Vec3, rotation: Quat
) -> tuple[Vec3, Quat]:
    """Express a world transform relative to a parent frame."""
    inverse = parent_rotation.inverse()
    return inverse.rotate(position - parent_position), inverse * rotation


def to_world(
    parent_position: Vec3, parent_rotation: Quat, local_position: Vec3, local_rotation: Quat
) -> tuple[Vec3, Quat]:
    """Inverse of :func:`to_local`."""
    position = parent_position + parent_rotation.rotate(local_position)
    return position, parent_rotation * local_rotation
