"""World reset: remove every entity flagged ``hifiHomeKey.reset``."""

from __future__ import annotations

import logging

from spawnecs.core.identity import EntityId
from spawnecs.entities import UserData
from spawnecs.world import World

logger = logging.getLogger(__name__)


def find_resettable(world: World) -> list[EntityId]:
    return [entity for entity, data in world.query_copies(UserData) if data.reset]


def clear_resettable(world: World) -> int:
    """Delete all resettable entities.

    Returns:
        Number of entities deleted.
    """
    removed = sum(1 for entity in find_resettable(world) if world.destroy(entity))
    logger.info("Reset removed %d entities", removed)
    return removed
