"""Geometry: vector/quaternion value types and placement math."""

from spawnecs.core.geometry.models import IDENTITY, Color, Quat, Vec3
from spawnecs.core.geometry.operations import (
    FORWARD,
    UNIT_X,
    UNIT_Y,
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

__all__ = [
    "Vec3",
    "Quat",
    "Color",
    "IDENTITY",
    "UNIT_X",
    "UNIT_Y",
    "FORWARD",
    "from_pitch_yaw_roll_degrees",
    "get_right",
    "get_up",
    "get_front",
    "vec_sum",
    "vec_multiply",
    "quat_multiply",
    "to_local",
    "to_world",
]
