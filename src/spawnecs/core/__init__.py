"""Core functionalities: stateless primitives.

Architecture Note:
    core/ contains pure, stateless building blocks: entity identity, the
    component registry and placement geometry. For stateful services, see
    world/ and storage/.
"""

from spawnecs.core.component import ComponentRegistry, ComponentTypeMeta, component, get_registry
from spawnecs.core.geometry import (
    IDENTITY,
    Color,
    Quat,
    Vec3,
    from_pitch_yaw_roll_degrees,
    get_front,
    get_right,
    get_up,
)
from spawnecs.core.identity import EntityId, SystemEntity
from spawnecs.core.types import Copy

__all__ = [
    # Types
    "Copy",
    # Identity
    "EntityId",
    "SystemEntity",
    # Component
    "component",
    "get_registry",
    "ComponentTypeMeta",
    "ComponentRegistry",
    # Geometry
    "Vec3",
    "Quat",
    "Color",
    "IDENTITY",
    "from_pitch_yaw_roll_degrees",
    "get_right",
    "get_up",
    "get_front",
]
