"""Content spawners: scripted placement of related entities."""

from spawnecs.content.group import SpawnGroup
from spawnecs.content.plant import Plant
from spawnecs.content.reset import clear_resettable, find_resettable
from spawnecs.content.scripts import cache_busted, resolve_path, script_url

__all__ = [
    "Plant",
    "SpawnGroup",
    "clear_resettable",
    "find_resettable",
    "resolve_path",
    "cache_busted",
    "script_url",
]
