"""Storage protocol for swappable backends.

The world talks to storage only through this interface, so a backend that
mirrors entities into a remote host can replace the in-memory default.

Usage:
    storage = LocalStorage()
    world = World(storage=storage)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol, TypeVar

from spawnecs.core.identity import EntityId

T = TypeVar("T")


class Storage(Protocol):
    """Abstract storage interface. Implementations handle actual data."""

    def create_entity(self) -> EntityId:
        """Allocate new entity."""
        ...

    def ensure_entity(self, entity: EntityId) -> None:
        """Make a reserved entity (outside the allocator) addressable."""
        ...

    def destroy_entity(self, entity: EntityId) -> bool:
        """Remove entity and all its components. Returns True if it existed."""
        ...

    def entity_exists(self, entity: EntityId) -> bool:
        """Check if entity is alive."""
        ...

    def all_entities(self) -> Iterator[EntityId]:
        """Iterate all living entities."""
        ...

    def get_component(
        self, entity: EntityId, component_type: type[T], copy: bool = True
    ) -> T | None:
        """Get component from entity."""
        ...

    def set_component(self, entity: EntityId, component: Any) -> None:
        """Set/update component on entity."""
        ...

    def remove_component(self, entity: EntityId, component_type: type) -> bool:
        """Remove component from entity. Returns True if existed."""
        ...

    def has_component(self, entity: EntityId, component_type: type) -> bool:
        """Check if entity has component."""
        ...

    def get_component_types(self, entity: EntityId) -> frozenset[type]:
        """Get all component types on entity."""
        ...

    def query(
        self,
        *component_types: type,
        copy: bool = True,
    ) -> Iterator[tuple[EntityId, tuple[Any, ...]]]:
        """Find entities with all specified components."""
        ...

    def query_single(
        self, component_type: type[T], copy: bool = True
    ) -> Iterator[tuple[EntityId, T]]:
        """Optimized single-component query."""
        ...
