"""Entity identity models.

Usage:
    entity = EntityId(shard=0, index=1042, generation=1)
    singleton = SystemEntity.WORLD
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EntityId:
    """Opaque entity handle handed out by the world.

    The generation makes stale handles detectable after an index is recycled,
    so deleting an already deleted entity can never hit its successor.
    """

    shard: int = 0  # 0 = local
    index: int = 0
    generation: int = 0

    def __hash__(self) -> int:
        return hash((self.shard, self.index, self.generation))

    def __str__(self) -> str:
        return f"{self.shard}:{self.index}v{self.generation}"

    def is_local(self) -> bool:
        """Check if this entity belongs to the local shard."""
        return self.shard == 0


class SystemEntity:
    """Reserved entity IDs for world-wide singletons. Always on shard 0."""

    WORLD = EntityId(shard=0, index=0, generation=0)

    _RESERVED_COUNT = 1000  # First 1000 indices reserved
