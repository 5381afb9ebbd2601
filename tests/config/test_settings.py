"""Tests for SpawnerSettings."""

from spawnecs.config import SpawnerSettings


def test_defaults_point_at_asset_server():
    settings = SpawnerSettings(_env_file=None)

    assert settings.plant_script == "atp:/scripts/growingPlantEntityScript.js"
    assert settings.water_can_script == "atp:/scripts/waterCanEntityScript.js"
    assert settings.bowl_model == "atp:/models/Flowers-Bowl.fbx"
    assert settings.cache_bust is True
    assert settings.script_base is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SPAWNER_CACHE_BUST", "false")
    monkeypatch.setenv("SPAWNER_SCRIPT_BASE", "http://localhost:8000/scripts/")
    monkeypatch.setenv("SPAWNER_PLANT_MODEL", "file:///tmp/plant.fbx")

    settings = SpawnerSettings(_env_file=None)

    assert settings.cache_bust is False
    assert settings.script_base == "http://localhost:8000/scripts/"
    assert settings.plant_model == "file:///tmp/plant.fbx"


def test_explicit_values_win_over_environment(monkeypatch):
    monkeypatch.setenv("SPAWNER_CACHE_BUST", "false")

    assert SpawnerSettings(_env_file=None, cache_bust=True).cache_bust is True
