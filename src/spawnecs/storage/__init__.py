"""Storage backends."""

from spawnecs.storage.allocator import EntityAllocator
from spawnecs.storage.local import LocalStorage
from spawnecs.storage.protocol import Storage

__all__ = [
    "Storage",
    "LocalStorage",
    "EntityAllocator",
]
