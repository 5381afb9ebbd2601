"""Entity handle allocation.

EntityAllocator owns the handle lifecycle: fresh indices start after the
reserved singleton range, freed indices are reused with a bumped generation.
"""

from __future__ import annotations

from spawnecs.core.identity import EntityId, SystemEntity


class EntityAllocator:
    """Hands out entity handles and tracks which ones are still live.

    Args:
        shard: Shard number stamped on every handle (default 0 for local).
    """

    def __init__(self, shard: int = 0):
        self._shard = shard
        self._next_index = SystemEntity._RESERVED_COUNT
        self._free_list: list[tuple[int, int]] = []  # (index, next generation)
        self._generations: dict[int, int] = {}

    def allocate(self) -> EntityId:
        """Return a live handle, preferring a recycled index.

        Returns:
            Newly allocated EntityId.
        """
        if self._free_list:
            index, gen = self._free_list.pop()
            self._generations[index] = gen
            return EntityId(shard=self._shard, index=index, generation=gen)

        index = self._next_index
        self._next_index += 1
        self._generations[index] = 0
        return EntityId(shard=self._shard, index=index, generation=0)

    def deallocate(self, entity: EntityId) -> bool:
        """Retire a handle so its index can be reused.

        Retiring a stale handle is a no-op, which keeps repeated deletes from
        queueing the same index twice.

        Args:
            entity: Handle to retire.

        Returns:
            True if the handle was live and is now retired.

        Raises:
            ValueError: If entity is from a different shard.
        """
        if entity.shard != self._shard:
            raise ValueError(
                f"Cannot deallocate entity from shard {entity.shard} on shard {self._shard}"
            )
        if not self.is_alive(entity):
            return False

        new_gen = entity.generation + 1
        self._generations[entity.index] = -1
        self._free_list.append((entity.index, new_gen))
        return True

    def is_alive(self, entity: EntityId) -> bool:
        """Check whether a handle still refers to a live entity.

        Args:
            entity: Handle to check.

        Returns:
            True if live, False if retired, recycled or from another shard.
        """
        if entity.shard != self._shard:
            return False
        return self._generations.get(entity.index, -1) == entity.generation
