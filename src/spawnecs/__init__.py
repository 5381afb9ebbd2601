"""spawnecs: an entity world and scripted content spawners.

Usage:
    from spawnecs import Plant, Vec3, World

    world = World()
    plant = Plant(world, Vec3(0, 0, -2), rotation=Vec3(0, 90, 0))

    assert len(plant.entities) == 4
    plant.cleanup()
"""

__version__ = "0.1.0"

# Core primitives
from spawnecs.core import (
    IDENTITY,
    Color,
    EntityId,
    Quat,
    SystemEntity,
    Vec3,
    component,
    from_pitch_yaw_roll_degrees,
    get_front,
    get_right,
    get_up,
)

# Configuration
from spawnecs.config import SpawnerSettings

# Content
from spawnecs.content import Plant, SpawnGroup, clear_resettable, find_resettable

# Components
from spawnecs.entities import (
    Appearance,
    Dimensions,
    EntityType,
    Name,
    Parent,
    PhysicsBody,
    Script,
    Transform,
    UserData,
    Viewpoint,
)

# Storage
from spawnecs.storage import LocalStorage, Storage

# World
from spawnecs.world import World

__all__ = [
    # Version
    "__version__",
    # Core
    "EntityId",
    "SystemEntity",
    "component",
    "Vec3",
    "Quat",
    "Color",
    "IDENTITY",
    "from_pitch_yaw_roll_degrees",
    "get_right",
    "get_up",
    "get_front",
    # Components
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
    # World
    "World",
    # Storage
    "Storage",
    "LocalStorage",
    # Config
    "SpawnerSettings",
    # Content
    "Plant",
    "SpawnGroup",
    "find_resettable",
    "clear_resettable",
]
