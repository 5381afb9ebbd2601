"""Local in-memory storage implementation.

Simple dict-based storage suitable for single-process use and testing.

Usage:
    storage = LocalStorage()
    world = World(storage=storage)
"""

from __future__ import annotations

import copy as cp
from collections.abc import Iterator
from typing import Any, TypeVar

from spawnecs.core.identity import EntityId, SystemEntity
from spawnecs.core.types import Copy
from spawnecs.storage.allocator import EntityAllocator

T = TypeVar("T")


class LocalStorage:
    """In-memory storage using nested dicts.

    Structure:
        _components[entity][component_type] = component_instance

    Args:
        shard: Shard number for this storage instance (default 0 for local).
    """

    def __init__(self, shard: int = 0):
        self._shard = shard
        self._allocator = EntityAllocator(shard=shard)
        self._components: dict[EntityId, dict[type, Any]] = {}
        self._reserved: set[EntityId] = set()

    def _is_live(self, entity: EntityId) -> bool:
        return entity in self._reserved or self._allocator.is_alive(entity)

    def create_entity(self) -> EntityId:
        """Create a new entity and return its ID."""
        entity = self._allocator.allocate()
        self._components[entity] = {}
        return entity

    def ensure_entity(self, entity: EntityId) -> None:
        """Register a reserved singleton entity, bypassing the allocator.

        Raises:
            ValueError: If the ID is outside the reserved range.
        """
        if entity.index >= SystemEntity._RESERVED_COUNT:
            raise ValueError(f"Entity {entity} is not in the reserved range")
        self._reserved.add(entity)
        self._components.setdefault(entity, {})

    def destroy_entity(self, entity: EntityId) -> bool:
        """Destroy an entity and remove all its components.

        Unknown and already destroyed handles are ignored.

        Args:
            entity: Entity to destroy.

        Returns:
            True if a live entity was removed.
        """
        if entity not in self._components or entity in self._reserved:
            return False
        del self._components[entity]
        return self._allocator.deallocate(entity)

    def entity_exists(self, entity: EntityId) -> bool:
        """Check if an entity exists and is alive."""
        return entity in self._components and self._is_live(entity)

    def all_entities(self) -> Iterator[EntityId]:
        """Iterate over all alive allocated entities (reserved singletons excluded)."""
        for entity in list(self._components):
            if entity not in self._reserved and self._allocator.is_alive(entity):
                yield entity

    def get_component(
        self, entity: EntityId, component_type: type[T], copy: bool = True
    ) -> Copy[T] | T | None:
        """Get a component from an entity.

        Args:
            entity: Entity to query.
            component_type: Type of component to retrieve.
            copy: Whether to return a deep copy of the component (default True).

        Returns:
            Component instance or None if not present.
        """
        component = self._components.get(entity, {}).get(component_type)
        if component is None:
            return None
        return cp.deepcopy(component) if copy else component

    def set_component(self, entity: EntityId, component: Any) -> None:
        """Set or update a component on an entity.

        Raises:
            ValueError: If the entity does not exist.
        """
        if not self.entity_exists(entity):
            raise ValueError(f"Entity {entity} does not exist")
        self._components[entity][type(component)] = component

    def remove_component(self, entity: EntityId, component_type: type) -> bool:
        """Remove a component from an entity. Returns True if it was present."""
        components = self._components.get(entity)
        if components is None or component_type not in components:
            return False
        del components[component_type]
        return True

    def has_component(self, entity: EntityId, component_type: type) -> bool:
        """Check if an entity has a specific component type."""
        return component_type in self._components.get(entity, {})

    def get_component_types(self, entity: EntityId) -> frozenset[type]:
        """Get all component types present on an entity."""
        return frozenset(self._components.get(entity, {}))

    def query(
        self,
        *component_types: type,
        copy: bool = True,
    ) -> Iterator[tuple[EntityId, tuple[Any, ...]]]:
        """Find entities with all specified components.

        O(n) scan over every entity, reserved singletons included.

        Args:
            *component_types: Component types to query for.
            copy: Whether to return copies of components (default True).

        Yields:
            Tuples of (entity, (component1, component2, ...)) for each match.
        """
        for entity, components in list(self._components.items()):
            if not self._is_live(entity):
                continue
            if not all(t in components for t in component_types):
                continue
            found = tuple(components[t] for t in component_types)
            yield entity, (cp.deepcopy(found) if copy else found)

    def query_single(
        self, component_type: type[T], copy: bool = True
    ) -> Iterator[tuple[EntityId, T]]:
        """Single-component query."""
        for entity, components in self.query(component_type, copy=copy):
            yield entity, components[0]
