"""World: the entity-management API content scripts build against.

Usage:
    world = World()

    # Create and parent entities
    table = world.spawn(Name("table"), Transform(Vec3(0, 0, -2)))
    cup = world.spawn(Name("cup"), Transform(Vec3(0, 1, -2)), Parent(table))

    # Children follow their parent
    world.set_transform(table, Vec3(1, 0, -2))

    # Delete by handle; unknown handles are ignored
    world.destroy(cup)
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Iterator
from typing import Any, TypeVar

from spawnecs.core.geometry import IDENTITY, Quat, Vec3, to_local, to_world
from spawnecs.core.identity import EntityId, SystemEntity
from spawnecs.core.types import Copy
from spawnecs.entities.components import Name, Parent, Transform, Viewpoint
from spawnecs.entities.properties import host_properties
from spawnecs.storage.local import LocalStorage
from spawnecs.storage.protocol import Storage

logger = logging.getLogger(__name__)

ComponentT = TypeVar("ComponentT")


class World:
    """Shared world state: entity creation, deletion, lookup and parenting.

    Owns the storage backend. Component values handed out are deep copies;
    write changes back with :meth:`set` or :meth:`set_transform`.
    """

    def __init__(self, storage: Storage | None = None):
        self._storage = storage or LocalStorage()
        self._storage.ensure_entity(SystemEntity.WORLD)

    def spawn(self, *components: Any) -> EntityId:
        """Create an entity from components.

        A ``Parent`` component links the new entity to an existing one; its
        Transform is taken as world space and stored relative to the parent.

        Raises:
            ValueError: If the referenced parent does not exist.
        """
        by_type: dict[type, Any] = {}
        for comp in components:
            comp_type = type(comp)
            if comp_type in by_type:
                warnings.warn(
                    f"spawn() received multiple components of type {comp_type.__name__}. "
                    f"Only the last one will be kept.",
                    stacklevel=2,
                )
            by_type[comp_type] = comp

        parent = by_type.get(Parent)
        if parent is not None:
            if not self.exists(parent.entity):
                raise ValueError(f"Parent entity {parent.entity} does not exist")
            transform = by_type.get(Transform)
            by_type[Parent], by_type[Transform] = self._link(parent.entity, transform)

        entity = self._storage.create_entity()
        for comp in by_type.values():
            self._storage.set_component(entity, comp)
        logger.debug(
            "Spawned %s (%s)", entity, ", ".join(t.__name__ for t in by_type)
        )
        return entity

    def destroy(self, entity: EntityId) -> bool:
        """Delete one entity.

        Children are detached and keep their last world transform. Deleting an
        unknown or already deleted handle does nothing.

        Returns:
            True if a live entity was deleted.
        """
        if not self.exists(entity):
            logger.debug("Ignoring delete of missing entity %s", entity)
            return False
        for child in self.children(entity):
            self._storage.remove_component(child, Parent)
        return self._storage.destroy_entity(entity)

    def exists(self, entity: EntityId) -> bool:
        return self._storage.entity_exists(entity)

    def entities(self) -> Iterator[EntityId]:
        """Iterate live entities (reserved singletons excluded)."""
        return self._storage.all_entities()

    def get_copy(
        self, entity: EntityId, component_type: type[ComponentT]
    ) -> Copy[ComponentT] | None:
        """Get component copy.

        Modifications must be written back via world.set().
        """
        return self._storage.get_component(entity, component_type, copy=True)

    def set(self, entity: EntityId, component: Any) -> None:
        """Set a component. Use :meth:`set_transform` to move parented entities."""
        self._storage.set_component(entity, component)

    def singleton_copy(self, component_type: type[ComponentT]) -> Copy[ComponentT] | None:
        """Get singleton component from WORLD entity."""
        return self.get_copy(SystemEntity.WORLD, component_type)

    def set_singleton(self, component: Any) -> None:
        """Set singleton component on WORLD entity."""
        self.set(SystemEntity.WORLD, component)

    def query_copies(self, *component_types: type) -> Iterator[tuple[Any, ...]]:
        """Query entities with specified component types.

        Returns iterator of tuples: (entity, component1, component2, ...)
        where components are deep copies.
        """
        for entity, components in self._storage.query(*component_types, copy=True):
            yield (entity, *components)

    def properties(self, entity: EntityId) -> dict[str, Any]:
        """Host property dictionary for an entity (see ``host_properties``).

        Raises:
            ValueError: If the entity does not exist.
        """
        if not self.exists(entity):
            raise ValueError(f"Entity {entity} does not exist")
        components = {
            t: self._storage.get_component(entity, t, copy=False)
            for t in self._storage.get_component_types(entity)
        }
        return host_properties(components)

    def find_by_name(self, name: str) -> list[EntityId]:
        """All entities whose Name equals ``name``."""
        return [
            entity
            for entity, comp in self._storage.query_single(Name, copy=False)
            if comp.value == name
        ]

    def children(self, entity: EntityId) -> list[EntityId]:
        """Entities directly parented to ``entity``."""
        return [
            child
            for child, link in self._storage.query_single(Parent, copy=False)
            if link.entity == entity
        ]

    def set_transform(
        self, entity: EntityId, position: Vec3, rotation: Quat | None = None
    ) -> None:
        """Move an entity in world space; descendants move with it.

        Raises:
            ValueError: If the entity does not exist.
        """
        if not self.exists(entity):
            raise ValueError(f"Entity {entity} does not exist")
        if rotation is None:
            current = self._storage.get_component(entity, Transform, copy=False)
            rotation = current.rotation if current is not None else IDENTITY
        transform = Transform(position, rotation)

        link = self._storage.get_component(entity, Parent, copy=False)
        if link is not None:
            link, transform = self._link(link.entity, transform)
            self._storage.set_component(entity, link)
        self._storage.set_component(entity, transform)
        self._propagate(entity, transform)

    def set_viewpoint(self, orientation: Quat, position: Vec3 | None = None) -> None:
        """Record the current camera pose."""
        self.set_singleton(Viewpoint(orientation=orientation, position=position))

    def viewpoint_orientation(self) -> Quat:
        """Current camera orientation, identity if none was recorded."""
        viewpoint = self.singleton_copy(Viewpoint)
        return viewpoint.orientation if viewpoint is not None else IDENTITY

    def _world_transform(self, entity: EntityId) -> Transform:
        transform = self._storage.get_component(entity, Transform, copy=False)
        return transform if transform is not None else Transform(Vec3())

    def _link(
        self, parent: EntityId, transform: Transform | None
    ) -> tuple[Parent, Transform]:
        """Compute the parent link for a child placed at ``transform``.

        A child without a Transform sits at the parent's origin.
        """
        parent_tf = self._world_transform(parent)
        if transform is None:
            transform = parent_tf
        local_position, local_rotation = to_local(
            parent_tf.position, parent_tf.rotation, transform.position, transform.rotation
        )
        return Parent(parent, local_position, local_rotation), transform

    def _propagate(self, entity: EntityId, transform: Transform) -> None:
        for child in self.children(entity):
            link = self._storage.get_component(child, Parent, copy=False)
            position, rotation = to_world(
                transform.position,
                transform.rotation,
                link.local_position or Vec3(),
                link.local_rotation or IDENTITY,
            )
            child_tf = Transform(position, rotation)
            self._storage.set_component(child, child_tf)
            self._propagate(child, child_tf)
