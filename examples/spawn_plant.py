"""Growable plant example.

Demonstrates:
- Recording the camera pose on the world
- Spawning a plant set facing the camera and one with explicit rotation
- Moving a bowl (the parented plant follows)
- Cleanup and world reset
"""

import logging

from spawnecs import (
    Name,
    Plant,
    SpawnerSettings,
    Transform,
    Vec3,
    World,
    clear_resettable,
    from_pitch_yaw_roll_degrees,
)
from spawnecs.logging_config import setup_logging


def print_world(world: World) -> None:
    print("=== World State ===")
    for entity, name, transform in world.query_copies(Name, Transform):
        p = transform.position
        print(f"  {entity} {name.value:<22} ({p.x:+.3f}, {p.y:+.3f}, {p.z:+.3f})")


def main() -> None:
    setup_logging(logging.DEBUG)
    world = World()
    settings = SpawnerSettings(cache_bust=False)

    # Camera looking left; the first plant takes its orientation from it
    world.set_viewpoint(from_pitch_yaw_roll_degrees(0, 90, 0), Vec3(0, 1.7, 0))
    facing_camera = Plant(world, Vec3(-2, 0, 0), settings=settings)
    explicit = Plant(world, Vec3(0, 0, -2), rotation=Vec3(0, 180, 0), settings=settings)
    print_world(world)

    world.set_transform(facing_camera.bowl, Vec3(-2, 0.8, 0))
    print("\nAfter lifting the first bowl:")
    print_world(world)

    facing_camera.cleanup()
    print(f"\nAfter cleanup: {len(list(world.entities()))} entities left")

    removed = clear_resettable(world)
    print(f"Reset removed {removed} entities (second plant: {explicit.plant})")


if __name__ == "__main__":
    main()
