"""Spawn groups: entities created and deleted as one unit."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from spawnecs.core.identity import EntityId
from spawnecs.world import World

logger = logging.getLogger(__name__)


class SpawnGroup:
    """Tracks the handles created through it so they can be removed together.

    Cleanup deletes exactly these handles, never anything else in the world,
    so independent groups cannot interfere with each other.
    """

    def __init__(self, world: World):
        self._world = world
        self._entities: list[EntityId] = []

    @property
    def entities(self) -> tuple[EntityId, ...]:
        return tuple(self._entities)

    def spawn(self, *components: Any) -> EntityId:
        entity = self._world.spawn(*components)
        self._entities.append(entity)
        return entity

    def cleanup(self, order: list[EntityId] | None = None) -> int:
        """Delete the group's entities.

        Args:
            order: Deletion order; defaults to creation order. Handles not
                created by this group are ignored.

        Returns:
            Number of entities that were still alive and got deleted.
        """
        owned = set(self._entities)
        targets = [e for e in (order or self._entities) if e in owned]
        return sum(1 for entity in targets if self._world.destroy(entity))

    @contextmanager
    def rollback_on_error(self) -> Iterator[SpawnGroup]:
        """Delete everything spawned so far if the block raises, then re-raise."""
        try:
            yield self
        except Exception:
            removed = self.cleanup()
            logger.warning("Spawn failed; rolled back %d entities", removed)
            raise
