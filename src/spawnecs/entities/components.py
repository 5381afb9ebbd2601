"""Entity components understood by the world.

Each component corresponds to a group of host entity properties. A spawn call
passes whichever of them the entity needs; absent components mean host
defaults (no script, no physics, not parented...).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from spawnecs.core.component import component
from spawnecs.core.geometry import IDENTITY, Color, Quat, Vec3
from spawnecs.core.identity import EntityId


class EntityType(Enum):
    """Kind of entity the host renders."""

    MODEL = "Model"
    BOX = "Box"


@component
@dataclass(slots=True, frozen=True)
class Name:
    value: str


@component
@dataclass(slots=True, frozen=True)
class Transform:
    """World-space placement."""

    position: Vec3
    rotation: Quat = IDENTITY


@component
@dataclass(slots=True, frozen=True)
class Dimensions:
    size: Vec3


@component
@dataclass(slots=True, frozen=True)
class Appearance:
    """How the host draws the entity.

    Attributes:
        entity_type: Model (loaded from ``model_url``) or a primitive box.
        model_url: Asset path of the model, for MODEL entities.
        shape_type: Collision hull override, e.g. ``"box"``.
        color: Tint for primitive shapes.
        visible: Invisible entities still exist and can carry children.
    """

    entity_type: EntityType = EntityType.MODEL
    model_url: str | None = None
    shape_type: str | None = None
    color: Color | None = None
    visible: bool = True


@component
@dataclass(slots=True, frozen=True)
class Script:
    """Reference to an entity behavior script run by the host."""

    url: str


@component
@dataclass(slots=True, frozen=True)
class PhysicsBody:
    """Initial physical state; simulation itself belongs to the host."""

    dynamic: bool = False
    gravity: Vec3 = field(default_factory=Vec3)
    velocity: Vec3 = field(default_factory=Vec3)
    angular_damping: float = 0.39
    collision_sound_url: str | None = None


@component
@dataclass(slots=True, frozen=True)
class Parent:
    """Parent link.

    Pass ``Parent(entity)`` at spawn time; the world fills in the local
    offsets from the child's world Transform.
    """

    entity: EntityId
    local_position: Vec3 | None = None
    local_rotation: Quat | None = None


@component
@dataclass(slots=True, frozen=True)
class Viewpoint:
    """Current camera orientation, kept as a singleton on the WORLD entity."""

    orientation: Quat = IDENTITY
    position: Vec3 | None = None
