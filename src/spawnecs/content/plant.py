"""Growable plant: a bowl with a plant in it and a watering can beside it.

Watering the plant is handled by two host-side behavior scripts, one on the
plant and one on the can. This module only places the four entities:

    bowl          at the spawn position
    plant         on top of the bowl, parented to it
    water can     to the right of the plant, free-standing and dynamic
    water spout   invisible marker at the can's nozzle, parented to the can

Usage:
    world = World()
    plant = Plant(world, Vec3(0, 0, -2), rotation=Vec3(0, 90, 0))
    ...
    plant.cleanup()
"""

from __future__ import annotations

import logging
import random

from spawnecs.config import SpawnerSettings
from spawnecs.content.group import SpawnGroup
from spawnecs.content.scripts import script_url
from spawnecs.core.geometry import (
    Color,
    Quat,
    Vec3,
    from_pitch_yaw_roll_degrees,
    get_front,
    get_right,
)
from spawnecs.core.identity import EntityId
from spawnecs.entities import (
    Appearance,
    Dimensions,
    EntityType,
    JointPose,
    Name,
    Parent,
    PhysicsBody,
    Script,
    Transform,
    UserData,
    Wearable,
)
from spawnecs.world import World

logger = logging.getLogger(__name__)

BOWL_NAME = "plant bowl"
PLANT_NAME = "hifi-growable-plant"
WATER_CAN_NAME = "hifi-water-can"
WATER_SPOUT_NAME = "hifi-water-spout"

BOWL_DIMENSIONS = Vec3(0.518, 0.1938, 0.5518)
PLANT_DIMENSIONS = Vec3(0.52, 0.26, 0.52)
WATER_CAN_DIMENSIONS = Vec3(0.1859, 0.2762, 0.4115)
WATER_SPOUT_DIMENSIONS = Vec3(0.02, 0.02, 0.07)
WATER_SPOUT_COLOR = Color(200, 10, 200)

WATER_CAN_OFFSET = 0.6  # along the orientation's right
WATER_SPOUT_OFFSET = 0.2  # along the orientation's front
WATER_SPOUT_PITCH = 10.0  # degrees, tilts the spout down toward the plant

WATER_CAN_GRAVITY = Vec3(0.0, -2.0, 0.0)
WATER_CAN_VELOCITY = Vec3(0.0, -0.2, 0.0)

WATER_CAN_GRIP = Wearable(
    joints={
        "RightHand": JointPose(
            position=Vec3(0.024, 0.173, 0.152),
            rotation=Quat(0.374, 0.636, -0.638, -0.215),
        ),
        "LeftHand": JointPose(
            position=Vec3(-0.0348, 0.201, 0.166),
            rotation=Quat(0.4095, -0.625, 0.616, -0.247),
        ),
    }
)


class Plant:
    """Spawns the plant set into a world and removes it again on cleanup.

    Args:
        world: World to create the entities in.
        position: Base position; the bowl sits here.
        rotation: Optional pitch/yaw/roll in degrees.
        viewpoint: Orientation to use when ``rotation`` is omitted. Defaults
            to the world's current viewpoint, read at construction time.
        settings: Asset and script locations.
        rng: Random source for script cache busting.

    Raises:
        Exception: Whatever the world raises while creating an entity. The
            entities created before the failure are deleted first.
    """

    def __init__(
        self,
        world: World,
        position: Vec3,
        rotation: Vec3 | None = None,
        *,
        viewpoint: Quat | None = None,
        settings: SpawnerSettings | None = None,
        rng: random.Random | None = None,
    ):
        self._world = world
        self._settings = settings or SpawnerSettings()
        self._group = SpawnGroup(world)
        self.position = position
        self.orientation = self._resolve_orientation(world, rotation, viewpoint)
        logger.debug("Plant orientation %s", self.orientation)

        plant_script = script_url(self._settings.plant_script, self._settings, rng)
        water_can_script = script_url(self._settings.water_can_script, self._settings, rng)

        with self._group.rollback_on_error():
            self.bowl = self._spawn_bowl()
            self.plant = self._spawn_plant(plant_script)
            self.water_can = self._spawn_water_can(water_can_script)
            self.water_spout = self._spawn_water_spout()

        logger.info("Created plant %s", self.plant)

    @staticmethod
    def _resolve_orientation(
        world: World, rotation: Vec3 | None, viewpoint: Quat | None
    ) -> Quat:
        if rotation is not None:
            return from_pitch_yaw_roll_degrees(rotation.x, rotation.y, rotation.z)
        if viewpoint is not None:
            return viewpoint
        return world.viewpoint_orientation()

    @property
    def plant_position(self) -> Vec3:
        return self.position + Vec3(0.0, PLANT_DIMENSIONS.y / 2, 0.0)

    @property
    def water_can_position(self) -> Vec3:
        return self.plant_position + WATER_CAN_OFFSET * get_right(self.orientation)

    @property
    def water_spout_position(self) -> Vec3:
        return self.water_can_position + WATER_SPOUT_OFFSET * get_front(self.orientation)

    @property
    def water_spout_rotation(self) -> Quat:
        return self.orientation * from_pitch_yaw_roll_degrees(WATER_SPOUT_PITCH, 0.0, 0.0)

    @property
    def entities(self) -> tuple[EntityId, ...]:
        """Handles in creation order: bowl, plant, water can, water spout."""
        return self._group.entities

    def _spawn_bowl(self) -> EntityId:
        return self._group.spawn(
            Name(BOWL_NAME),
            Appearance(EntityType.MODEL, model_url=self._settings.bowl_model),
            Dimensions(BOWL_DIMENSIONS),
            Transform(self.position),
            UserData.resettable(),
        )

    def _spawn_plant(self, script: str) -> EntityId:
        return self._group.spawn(
            Name(PLANT_NAME),
            Appearance(EntityType.MODEL, model_url=self._settings.plant_model),
            Dimensions(PLANT_DIMENSIONS),
            Transform(self.plant_position),
            Script(script),
            Parent(self.bowl),
            UserData.resettable(),
        )

    def _spawn_water_can(self, script: str) -> EntityId:
        return self._group.spawn(
            Name(WATER_CAN_NAME),
            Appearance(
                EntityType.MODEL,
                model_url=self._settings.water_can_model,
                shape_type="box",
            ),
            Dimensions(WATER_CAN_DIMENSIONS),
            Transform(self.water_can_position, self.orientation),
            Script(script),
            PhysicsBody(
                dynamic=True,
                gravity=WATER_CAN_GRAVITY,
                velocity=WATER_CAN_VELOCITY,
                angular_damping=1.0,
                collision_sound_url=self._settings.water_can_drop_sound,
            ),
            UserData.resettable(wearable=WATER_CAN_GRIP),
        )

    def _spawn_water_spout(self) -> EntityId:
        return self._group.spawn(
            Name(WATER_SPOUT_NAME),
            Appearance(EntityType.BOX, color=WATER_SPOUT_COLOR, visible=False),
            Dimensions(WATER_SPOUT_DIMENSIONS),
            Transform(self.water_spout_position, self.water_spout_rotation),
            Parent(self.water_can),
            UserData.resettable(),
        )

    def cleanup(self) -> None:
        """Delete the four entities created by this plant. Safe to call twice."""
        logger.info("Plant cleanup %s", self.plant)
        self._group.cleanup(order=[self.plant, self.bowl, self.water_can, self.water_spout])
