"""Tests for SpawnGroup bookkeeping and rollback."""

import pytest

from spawnecs import Name, SpawnGroup, World


def test_cleanup_deletes_only_group_members(world: World):
    outsider = world.spawn(Name("outsider"))
    group = SpawnGroup(world)
    a = group.spawn(Name("a"))
    b = group.spawn(Name("b"))

    assert group.entities == (a, b)
    assert group.cleanup() == 2
    assert list(world.entities()) == [outsider]


def test_cleanup_order_ignores_foreign_handles(world: World):
    outsider = world.spawn(Name("outsider"))
    group = SpawnGroup(world)
    a = group.spawn(Name("a"))

    assert group.cleanup(order=[outsider, a]) == 1
    assert world.exists(outsider)


def test_cleanup_counts_only_live_entities(world: World):
    group = SpawnGroup(world)
    a = group.spawn(Name("a"))
    group.spawn(Name("b"))
    world.destroy(a)

    assert group.cleanup() == 1
    assert group.cleanup() == 0


def test_rollback_on_error_reraises_and_clears(world: World):
    group = SpawnGroup(world)

    with pytest.raises(KeyError):
        with group.rollback_on_error():
            group.spawn(Name("a"))
            group.spawn(Name("b"))
            raise KeyError("boom")

    assert list(world.entities()) == []


def test_rollback_keeps_entities_on_success(world: World):
    group = SpawnGroup(world)

    with group.rollback_on_error():
        group.spawn(Name("a"))

    assert len(list(world.entities())) == 1
