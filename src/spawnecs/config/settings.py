"""Configuration settings using Pydantic Settings.

Asset and script locations for spawned content, overridable from the
environment so the same content can be pointed at another asset server.

Usage:
    from spawnecs.config import SpawnerSettings

    # Load from environment variables (SPAWNER_*)
    settings = SpawnerSettings()

    # Or override with explicit values
    settings = SpawnerSettings(script_base="http://localhost:8000/scripts/")
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install spawnecs"
    ) from e


class SpawnerSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for content spawners.

    Attributes:
        script_base: Base URL that relative script paths resolve against.
        plant_script: Behavior script for the growable plant.
        water_can_script: Behavior script for the watering can.
        cache_bust: Append a random query to script URLs so the host
            reloads them instead of reusing a cached copy.
        bowl_model: Model of the plant bowl.
        plant_model: Model of the plant.
        water_can_model: Model of the watering can.
        water_can_drop_sound: Collision sound of the watering can.

    Environment Variables:
        SPAWNER_SCRIPT_BASE
        SPAWNER_PLANT_SCRIPT
        SPAWNER_WATER_CAN_SCRIPT
        SPAWNER_CACHE_BUST
        SPAWNER_BOWL_MODEL
        SPAWNER_PLANT_MODEL
        SPAWNER_WATER_CAN_MODEL
        SPAWNER_WATER_CAN_DROP_SOUND
    """

    model_config = SettingsConfigDict(
        env_prefix="SPAWNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    script_base: str | None = None
    plant_script: str = "atp:/scripts/growingPlantEntityScript.js"
    water_can_script: str = "atp:/scripts/waterCanEntityScript.js"
    cache_bust: bool = True

    bowl_model: str = "atp:/models/Flowers-Bowl.fbx"
    plant_model: str = "atp:/models/Flowers-Rock.fbx"
    water_can_model: str = "atp:/models/waterCan.fbx"
    water_can_drop_sound: str = "atp:/sounds/watering_can_drop.L.wav"
