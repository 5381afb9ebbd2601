"""Configuration module using Pydantic Settings.

Usage:
    from spawnecs.config import SpawnerSettings

    settings = SpawnerSettings(cache_bust=False)
"""

from spawnecs.config.settings import SpawnerSettings

__all__ = [
    "SpawnerSettings",
]
