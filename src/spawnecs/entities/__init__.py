"""Entity components and typed metadata."""

from spawnecs.entities.components import (
    Appearance,
    Dimensions,
    EntityType,
    Name,
    Parent,
    PhysicsBody,
    Script,
    Transform,
    Viewpoint,
)
from spawnecs.entities.properties import host_properties
from spawnecs.entities.user_data import HomeKey, JointPose, UserData, Wearable

__all__ = [
    "EntityType",
    "Name",
    "Transform",
    "Dimensions",
    "Appearance",
    "Script",
    "PhysicsBody",
    "Parent",
    "Viewpoint",
    "UserData",
    "HomeKey",
    "JointPose",
    "Wearable",
    "host_properties",
]
