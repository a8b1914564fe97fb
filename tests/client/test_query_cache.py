"""Query Cache — key normalization, fetch-once, and tag invalidation."""

import pytest

from taskflow.client.query_cache import QueryCache, QueryKey


def test_key_ignores_param_order_and_none():
    a = QueryKey.of("/api/tasks", {"priority": "high", "category": "Pessoal"})
    b = QueryKey.of(
        "/api/tasks", {"category": "Pessoal", "priority": "high", "dateTo": None},
    )
    assert a == b
    assert hash(a) == hash(b)


def test_key_flattens_lists_and_normalizes_bools():
    key = QueryKey.of("/api/tasks", {"tags": ["b", "a"], "completed": True})
    assert key.params == (("completed", "true"), ("tags", "a"), ("tags", "b"))


def test_different_paths_are_different_keys():
    assert QueryKey.of("/api/tasks") != QueryKey.of("/api/appointments")


async def test_fetch_loads_once():
    cache = QueryCache()
    calls = []

    async def loader():
        calls.append(1)
        return ["row"]

    key = QueryKey.of("/api/tasks")
    assert await cache.fetch(key, loader, tags=["/api/tasks"]) == ["row"]
    assert await cache.fetch(key, loader, tags=["/api/tasks"]) == ["row"]
    assert len(calls) == 1


async def test_fetch_does_not_cache_none():
    cache = QueryCache()

    async def loader():
        return None

    key = QueryKey.of("/api/tasks/1")
    assert await cache.fetch(key, loader) is None
    assert key not in cache


async def test_fetch_does_not_cache_failures():
    cache = QueryCache()

    async def loader():
        raise RuntimeError("boom")

    key = QueryKey.of("/api/tasks")
    with pytest.raises(RuntimeError):
        await cache.fetch(key, loader)
    assert len(cache) == 0


def test_invalidate_drops_only_tagged_entries():
    cache = QueryCache()
    tasks = QueryKey.of("/api/tasks")
    task = QueryKey.of("/api/tasks/1")
    appointments = QueryKey.of("/api/appointments")
    cache.set(tasks, [], tags=["/api/tasks"])
    cache.set(task, "t1", tags=["/api/tasks/1"])
    cache.set(appointments, [], tags=["/api/appointments"])

    assert cache.invalidate("/api/tasks") == 1
    assert tasks not in cache
    assert cache.get(task) == "t1"
    assert appointments in cache

    assert cache.invalidate("/api/tasks/1", "/api/appointments") == 2
    assert len(cache) == 0


def test_invalidate_unknown_tag_is_noop():
    cache = QueryCache()
    cache.set(QueryKey.of("/api/tasks"), [], tags=["/api/tasks"])
    assert cache.invalidate("/api/nothing") == 0
    assert len(cache) == 1


def test_get_default_and_clear():
    cache = QueryCache()
    key = QueryKey.of("/api/tasks")
    assert cache.get(key, "missing") == "missing"
    cache.set(key, [1])
    cache.clear()
    assert key not in cache
