"""Entity identity: opaque handles and reserved singleton entities."""

from spawnecs.core.identity.models import EntityId, SystemEntity

__all__ = [
    "EntityId",
    "SystemEntity",
]
