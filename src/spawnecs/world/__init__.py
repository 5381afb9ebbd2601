"""World state and entity management.

Architecture Note:
    world/ is the stateful service layer. Unlike core/ (stateless
    functionalities), it owns storage and enforces parenting rules.
"""

from spawnecs.world.world import World

__all__ = [
    "World",
]
