"""Unit tests for LocalStorage."""

from dataclasses import dataclass

import pytest

from spawnecs import component
from spawnecs.core.identity import EntityId, SystemEntity
from spawnecs.storage.local import LocalStorage


@component
@dataclass(slots=True)
class Task:
    name: str


@component
@dataclass(slots=True)
class Priority:
    level: int


@pytest.fixture
def storage() -> LocalStorage:
    return LocalStorage()


def test_create_and_destroy(storage: LocalStorage) -> None:
    entity = storage.create_entity()
    assert storage.entity_exists(entity)

    assert storage.destroy_entity(entity) is True
    assert not storage.entity_exists(entity)


def test_destroy_unknown_or_repeated_handle_is_noop(storage: LocalStorage) -> None:
    """Deleting a deleted or never-created handle changes nothing."""
    entity = storage.create_entity()
    other = storage.create_entity()
    storage.destroy_entity(entity)

    assert storage.destroy_entity(entity) is False
    assert storage.destroy_entity(EntityId(index=99_999)) is False
    assert list(storage.all_entities()) == [other]


def test_stale_handle_does_not_alias_recycled_entity(storage: LocalStorage) -> None:
    old = storage.create_entity()
    storage.destroy_entity(old)
    new = storage.create_entity()

    assert new.index == old.index
    assert storage.entity_exists(new)
    assert not storage.entity_exists(old)
    assert storage.destroy_entity(old) is False
    assert storage.entity_exists(new)


def test_get_component_copy_flag_controls_copy_vs_reference(storage: LocalStorage) -> None:
    entity = storage.create_entity()
    storage.set_component(entity, Task(name="water"))

    copy_value = storage.get_component(entity, Task, copy=True)
    ref_value = storage.get_component(entity, Task, copy=False)
    assert copy_value is not ref_value

    copy_value.name = "changed"
    assert storage.get_component(entity, Task).name == "water"


def test_set_component_on_missing_entity_raises(storage: LocalStorage) -> None:
    with pytest.raises(ValueError, match="does not exist"):
        storage.set_component(EntityId(index=5000), Task(name="x"))


def test_remove_and_has_component(storage: LocalStorage) -> None:
    entity = storage.create_entity()
    storage.set_component(entity, Task(name="a"))
    storage.set_component(entity, Priority(level=1))

    assert storage.get_component_types(entity) == frozenset({Task, Priority})
    assert storage.remove_component(entity, Task) is True
    assert storage.remove_component(entity, Task) is False
    assert not storage.has_component(entity, Task)
    assert storage.has_component(entity, Priority)


def test_query_matches_all_requested_types(storage: LocalStorage) -> None:
    both = storage.create_entity()
    only_task = storage.create_entity()
    storage.set_component(both, Task(name="both"))
    storage.set_component(both, Priority(level=2))
    storage.set_component(only_task, Task(name="single"))

    matched = list(storage.query(Task, Priority))
    assert [entity for entity, _ in matched] == [both]
    assert matched[0][1][1].level == 2

    names = {task.name for _, task in storage.query_single(Task)}
    assert names == {"both", "single"}


def test_reserved_entity_is_queryable_but_not_listed(storage: LocalStorage) -> None:
    storage.ensure_entity(SystemEntity.WORLD)
    storage.set_component(SystemEntity.WORLD, Priority(level=9))

    assert storage.entity_exists(SystemEntity.WORLD)
    assert list(storage.all_entities()) == []
    assert [entity for entity, _ in storage.query(Priority)] == [SystemEntity.WORLD]
    assert storage.destroy_entity(SystemEntity.WORLD) is False


def test_ensure_entity_rejects_allocatable_range(storage: LocalStorage) -> None:
    with pytest.raises(ValueError, match="reserved range"):
        storage.ensure_entity(EntityId(index=SystemEntity._RESERVED_COUNT))
