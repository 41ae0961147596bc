"""RedisCacheStore with a mocked client: key layout, scripts, and degraded mode."""

import json
from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import redis.asyncio as redis

from app.infrastructure.cache import CacheService, RedisCacheStore

SLIDING = timedelta(minutes=5)
ABSOLUTE = timedelta(minutes=10)


def _store(script: AsyncMock | None = None) -> tuple[RedisCacheStore, MagicMock]:
    client = MagicMock()
    client.register_script.return_value = script or AsyncMock(return_value=None)
    client.delete = AsyncMock(return_value=2)
    return RedisCacheStore(redis_client=client), client


async def test_get_decodes_json_and_uses_prefixed_keys() -> None:
    script = AsyncMock(return_value=json.dumps([{"id": 1}]))
    store, _ = _store(script)

    assert await store.get("Projects") == [{"id": 1}]
    script.assert_awaited_once_with(keys=["skillsnap:Projects", "skillsnap:Projects:meta"])


async def test_get_miss_returns_none() -> None:
    store, _ = _store(AsyncMock(return_value=None))
    assert await store.get("Projects") is None


async def test_scripts_are_registered_once() -> None:
    store, client = _store(AsyncMock(return_value=None))
    await store.get("a")
    await store.get("b")
    client.register_script.assert_called_once()


async def test_set_writes_payload_and_meta_in_one_transaction() -> None:
    store, client = _store()
    pipe = MagicMock()
    pipe.execute = AsyncMock(return_value=[True, True])
    client.pipeline.return_value.__aenter__.return_value = pipe

    assert await store.set("Project_1", {"id": 1}, SLIDING, ABSOLUTE) is True

    client.pipeline.assert_called_once_with(transaction=True)
    pipe.set.assert_any_call("skillsnap:Project_1", json.dumps({"id": 1}), px=300_000)
    pipe.set.assert_any_call("skillsnap:Project_1:meta", 300_000, px=600_000)
    pipe.execute.assert_awaited_once()


async def test_delete_removes_payload_and_meta() -> None:
    store, client = _store()
    assert await store.delete("Project_1") is True
    client.delete.assert_awaited_once_with("skillsnap:Project_1", "skillsnap:Project_1:meta")


async def test_add_to_set_passes_member_and_lifetimes() -> None:
    script = AsyncMock(return_value=1)
    store, _ = _store(script)
    await store.add_to_set("ProjectsPagedCacheKeys", "page", SLIDING, ABSOLUTE)
    script.assert_awaited_once_with(
        keys=["skillsnap:ProjectsPagedCacheKeys", "skillsnap:ProjectsPagedCacheKeys:meta"],
        args=["page", 300_000, 600_000],
    )


async def test_get_set_returns_members_as_set() -> None:
    store, _ = _store(AsyncMock(return_value=["a", "b"]))
    assert await store.get_set("s") == {"a", "b"}


async def test_pop_set_reads_and_removes_in_one_script() -> None:
    script = AsyncMock(return_value=["a", "b"])
    store, client = _store(script)

    assert await store.pop_set("ProjectsPagedCacheKeys") == {"a", "b"}

    script.assert_awaited_once_with(
        keys=["skillsnap:ProjectsPagedCacheKeys", "skillsnap:ProjectsPagedCacheKeys:meta"]
    )
    client.delete.assert_not_awaited()


async def test_pop_set_of_absent_set_returns_none() -> None:
    store, _ = _store(AsyncMock(return_value=None))
    assert await store.pop_set("ProjectsPagedCacheKeys") is None


async def test_connection_error_degrades_to_miss_when_reconnect_fails() -> None:
    store, _ = _store(AsyncMock(side_effect=redis.ConnectionError("down")))
    store._reconnect = AsyncMock(return_value=False)

    assert await store.get("Projects") is None
    assert await store.get_set("s") is None
    assert await store.pop_set("s") is None
    assert await store.add_to_set("s", "m", SLIDING, ABSOLUTE) is False


async def test_connection_error_retries_once_after_reconnect() -> None:
    script = AsyncMock(side_effect=[redis.ConnectionError("blip"), json.dumps(3)])
    store, _ = _store(script)
    store._reconnect = AsyncMock(return_value=True)

    assert await store.get("ProjectsTotalCount") == 3
    assert script.await_count == 2


async def test_other_redis_errors_return_default() -> None:
    store, client = _store()
    client.delete = AsyncMock(side_effect=redis.ResponseError("WRONGTYPE"))
    assert await store.delete("k") is False


async def test_not_connected_store_is_unavailable_and_inert() -> None:
    store = RedisCacheStore()
    assert store.is_available() is False
    assert await store.get("k") is None
    assert await store.set("k", 1, SLIDING, ABSOLUTE) is False


async def test_facade_over_failing_redis_reads_as_miss() -> None:
    store, _ = _store(AsyncMock(side_effect=redis.TimeoutError("slow")))
    store._reconnect = AsyncMock(return_value=False)
    cache = CacheService(store)

    assert await cache.try_get("Projects", list[int], "projects") is None
    assert await cache.get_tracked_keys("ProjectsPagedCacheKeys") == set()
    assert await cache.invalidate_paged_caches("ProjectsPagedCacheKeys", "projects") == 0
