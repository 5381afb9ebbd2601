"""Shared test fixtures."""

import random
import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from spawnecs import SpawnerSettings, World


@pytest.fixture
def world():
    """Fresh World instance."""
    return World()


@pytest.fixture
def settings():
    """Default settings, isolated from SPAWNER_* variables and .env files."""
    return SpawnerSettings(_env_file=None)


@pytest.fixture
def rng():
    """Seeded random source for deterministic script URLs."""
    return random.Random(1234)
