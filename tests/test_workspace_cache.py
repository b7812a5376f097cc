from __future__ import annotations

import asyncio

import pytest

from conftest import FakeRemote, make_workspace
from gardenplan.client.workspace_cache import WorkspaceCache
from gardenplan.domain.errors import WorkspaceNotFound


def test_get_or_fetch_hits_remote_once():
    remote = FakeRemote([make_workspace("grdn_1")])
    cache = WorkspaceCache(remote)

    first = asyncio.run(cache.get_or_fetch("grdn_1"))
    second = asyncio.run(cache.get_or_fetch("grdn_1"))

    assert first == second
    assert remote.find_by_id_calls == ["grdn_1"]


def test_get_or_fetch_unknown_id():
    cache = WorkspaceCache(FakeRemote())

    with pytest.raises(WorkspaceNotFound) as exc_info:
        asyncio.run(cache.get_or_fetch("grdn_x"))

    assert exc_info.value.workspace_id == "grdn_x"
    assert len(cache) == 0


def test_populate_all_does_not_evict():
    remote = FakeRemote([make_workspace("grdn_1"), make_workspace("grdn_2")])
    cache = WorkspaceCache(remote)
    local_only = make_workspace("grdn_local")
    cache.put(local_only)

    result = asyncio.run(cache.populate_all())

    assert [w.id for w in result] == ["grdn_1", "grdn_2"]
    assert "grdn_1" in cache and "grdn_2" in cache
    assert cache.get("grdn_local") is local_only
    assert remote.find_by_id_calls == []


def test_put_overwrites_entry():
    cache = WorkspaceCache(FakeRemote())
    cache.put(make_workspace("grdn_1"))
    replacement = make_workspace("grdn_1", zones={"z9": []})

    cache.put(replacement)

    assert cache.get("grdn_1") is replacement
    cache.clear()
    assert cache.get("grdn_1") is None


def test_concurrent_misses_share_one_fetch():
    class SlowRemote(FakeRemote):
        async def find_by_id(self, workspace_id):
            await asyncio.sleep(0.01)
            return await super().find_by_id(workspace_id)

    remote = SlowRemote([make_workspace("grdn_1")])
    cache = WorkspaceCache(remote)

    async def scenario():
        return await asyncio.gather(*(cache.get_or_fetch("grdn_1") for _ in range(3)))

    results = asyncio.run(scenario())

    assert remote.find_by_id_calls == ["grdn_1"]
    assert all(result is results[0] for result in results)


def test_fetch_errors_propagate_and_are_not_cached():
    class BrokenRemote(FakeRemote):
        async def find_by_id(self, workspace_id):
            await super().find_by_id(workspace_id)
            raise ConnectionError("server down")

    remote = BrokenRemote([make_workspace("grdn_1")])
    cache = WorkspaceCache(remote)

    with pytest.raises(ConnectionError):
        asyncio.run(cache.get_or_fetch("grdn_1"))
    with pytest.raises(ConnectionError):
        asyncio.run(cache.get_or_fetch("grdn_1"))

    assert remote.find_by_id_calls == ["grdn_1", "grdn_1"]
    assert "grdn_1" not in cache
