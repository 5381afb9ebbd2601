"""Behavior script references.

Scripts are executed by the host; content only needs their URL. Relative
paths resolve against a base URL, and a random query value can be appended
so the host fetches a fresh copy instead of a cached one.
"""

from __future__ import annotations

import random
from urllib.parse import urljoin, urlsplit

from spawnecs.config import SpawnerSettings


def resolve_path(path: str, base: str | None = None) -> str:
    """Resolve a script path to a URL.

    Paths that already carry a scheme (``atp:``, ``http:``, ``file:``) are
    returned unchanged; relative paths are joined onto ``base``.
    """
    if urlsplit(path).scheme or base is None:
        return path
    return urljoin(base, path)


def cache_busted(url: str, rng: random.Random | None = None) -> str:
    """Append a ``v1<random>`` query value to ``url``."""
    value = (rng or random).random()
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}v1{value}"


def script_url(
    path: str, settings: SpawnerSettings, rng: random.Random | None = None
) -> str:
    """Resolve ``path`` and apply cache busting as configured."""
    url = resolve_path(path, settings.script_base)
    return cache_busted(url, rng) if settings.cache_bust else url
