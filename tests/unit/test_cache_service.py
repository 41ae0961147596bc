"""CacheService: typed reads, expiry defaults, counts, and paged-key tracking."""

import asyncio
import typing
from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from app.application.dtos.pagination import PagedResult
from app.application.dtos.project import OwnerRef, ProjectResult
from app.infrastructure.cache import (
    PROJECT_KEYS,
    CacheService,
    CacheStore,
    MemoryCacheStore,
)

SLIDING = timedelta(minutes=5)
ABSOLUTE = timedelta(minutes=10)


def _project(pid: int = 1) -> ProjectResult:
    return ProjectResult(
        id=pid,
        title=f"Project {pid}",
        description="",
        image_url="",
        portfolio_user_id=7,
        portfolio_user=OwnerRef(id=7, name="Jordan"),
    )


async def test_try_get_miss_returns_none(cache: CacheService) -> None:
    assert await cache.try_get("Projects", list[ProjectResult], "projects") is None


async def test_set_then_try_get_rebuilds_typed_value(cache: CacheService) -> None:
    items = [_project(2), _project(1)]
    await cache.set("Projects", items, "projects")
    assert await cache.try_get("Projects", list[ProjectResult], "projects") == items


async def test_try_get_without_type_returns_json_shape(cache: CacheService) -> None:
    await cache.set("Project_1", _project(1))
    raw = await cache.try_get("Project_1")
    assert raw["portfolio_user"] == {"id": 7, "name": "Jordan"}


async def test_zero_is_a_hit(cache: CacheService) -> None:
    await cache.set("ProjectsTotalCount", 0)
    assert await cache.try_get("ProjectsTotalCount", int) == 0


async def test_unreadable_payload_is_discarded(cache: CacheService, store) -> None:
    await cache.set("Projects", [{"unexpected": True}])
    assert await cache.try_get("Projects", list[ProjectResult], "projects") is None
    assert await store.get("Projects") is None


async def test_hit_logs_retrieved_from_cache(cache: CacheService, caplog) -> None:
    await cache.set("Projects", [_project()], "projects")
    with caplog.at_level("INFO", logger="app.infrastructure.cache.cache_service"):
        await cache.try_get("Projects", list[ProjectResult], "projects")
    assert "projects retrieved from cache (key: Projects)" in caplog.text


async def test_default_expiration_is_five_sliding_ten_absolute(cache, clock) -> None:
    await cache.set("k", 1)
    clock.advance(4 * 60 + 59)
    assert await cache.try_get("k") == 1
    clock.advance(4 * 60 + 59)
    assert await cache.try_get("k") == 1
    clock.advance(2)
    assert await cache.try_get("k") is None


async def test_explicit_expiration_is_used(cache, clock) -> None:
    await cache.set("k", 1, sliding=timedelta(seconds=10), absolute=timedelta(seconds=20))
    clock.advance(11)
    assert await cache.try_get("k") is None


async def test_zero_sliding_expiration_is_kept(cache, clock) -> None:
    await cache.set("k", 1, sliding=timedelta(0))
    assert await cache.try_get("k") is None


async def test_remove_twice_leaves_the_same_state(cache: CacheService, store) -> None:
    await cache.set("a", 1)
    await cache.set("b", 2)

    await cache.remove("a")
    assert await cache.try_get("a") is None
    assert len(store) == 1

    await cache.remove("a")
    assert await cache.try_get("a") is None
    assert await cache.try_get("b") == 2
    assert len(store) == 1


async def test_remove_missing_key_is_noop(cache: CacheService) -> None:
    await cache.remove("never-set")


async def test_remove_many(cache: CacheService) -> None:
    await cache.set("a", 1)
    await cache.set("b", 2)
    await cache.remove_many("a", "b", "c")
    assert await cache.try_get("a") is None
    assert await cache.try_get("b") is None


async def test_paged_result_round_trips_with_derived_fields(cache: CacheService) -> None:
    page = PagedResult[ProjectResult](items=[_project()], page=2, page_size=1, total_count=3)
    await cache.set("ProjectsPaged_Page2_Size1", page.to_cache())
    cached = await cache.try_get("ProjectsPaged_Page2_Size1", PagedResult[ProjectResult])
    assert cached.items == [_project()]
    assert cached.total_pages == 3
    assert cached.has_previous_page is True
    assert cached.has_next_page is True


async def test_get_or_cache_count_computes_once(cache: CacheService) -> None:
    compute = AsyncMock(return_value=42)
    assert await cache.get_or_cache_count("ProjectsTotalCount", compute, "projects") == 42
    assert await cache.get_or_cache_count("ProjectsTotalCount", compute, "projects") == 42
    compute.assert_awaited_once()


async def test_get_or_cache_count_uses_count_lifetimes(cache, clock) -> None:
    compute = AsyncMock(side_effect=[5, 6])
    await cache.get_or_cache_count("ProjectsTotalCount", compute)
    clock.advance(9 * 60)
    assert await cache.get_or_cache_count("ProjectsTotalCount", compute) == 5
    clock.advance(10 * 60 + 1)
    assert await cache.get_or_cache_count("ProjectsTotalCount", compute) == 6


async def test_get_or_cache_count_failure_caches_nothing(cache: CacheService) -> None:
    compute = AsyncMock(side_effect=RuntimeError("db down"))
    with pytest.raises(RuntimeError):
        await cache.get_or_cache_count("ProjectsTotalCount", compute)
    assert await cache.try_get("ProjectsTotalCount") is None


async def test_invalidate_paged_caches_removes_tracked_pages_and_set(cache) -> None:
    keys = [PROJECT_KEYS.page(1, 20), PROJECT_KEYS.page(2, 20), PROJECT_KEYS.page(1, 50)]
    for key in keys:
        await cache.set(key, {"items": []})
        await cache.track_paged_key(PROJECT_KEYS.paged_tracking, key)

    removed = await cache.invalidate_paged_caches(PROJECT_KEYS.paged_tracking, "projects")

    assert removed == 3
    for key in keys:
        assert await cache.try_get(key) is None
    assert await cache.get_tracked_keys(PROJECT_KEYS.paged_tracking) == set()


async def test_invalidate_paged_caches_without_set_returns_zero(cache) -> None:
    assert await cache.invalidate_paged_caches(PROJECT_KEYS.paged_tracking, "projects") == 0


async def test_concurrent_track_paged_key_keeps_every_key(cache: CacheService) -> None:
    keys = [PROJECT_KEYS.page(n, 20) for n in range(1, 51)]
    await asyncio.gather(
        *(cache.track_paged_key(PROJECT_KEYS.paged_tracking, k) for k in keys)
    )
    assert await cache.get_tracked_keys(PROJECT_KEYS.paged_tracking) == set(keys)


async def test_tracking_set_outlives_page_entries(cache, clock) -> None:
    key = PROJECT_KEYS.page(1, 20)
    await cache.set(key, {"items": []})
    await cache.track_paged_key(PROJECT_KEYS.paged_tracking, key)
    clock.advance(11 * 60)
    assert await cache.try_get(key) is None
    assert await cache.get_tracked_keys(PROJECT_KEYS.paged_tracking) == {key}


class _LateTrackingStore(MemoryCacheStore):
    """Stores and tracks one more page while a sweep is deleting pages."""

    def __init__(self, clock) -> None:
        super().__init__(clock=clock)
        self.late_page: str | None = None

    async def delete(self, key: str) -> bool:
        deleted = await super().delete(key)
        if self.late_page is not None:
            page, self.late_page = self.late_page, None
            await self.set(page, {"items": []}, SLIDING, ABSOLUTE)
            await self.add_to_set(PROJECT_KEYS.paged_tracking, page, SLIDING, ABSOLUTE)
        return deleted


async def test_page_tracked_during_sweep_is_cleared_by_next_sweep(clock) -> None:
    store = _LateTrackingStore(clock)
    cache = CacheService(store)
    first, late = PROJECT_KEYS.page(1, 20), PROJECT_KEYS.page(2, 20)
    await cache.set(first, {"items": []})
    await cache.track_paged_key(PROJECT_KEYS.paged_tracking, first)

    store.late_page = late
    assert await cache.invalidate_paged_caches(PROJECT_KEYS.paged_tracking, "projects") == 1

    assert await cache.get_tracked_keys(PROJECT_KEYS.paged_tracking) == {late}
    assert await cache.invalidate_paged_caches(PROJECT_KEYS.paged_tracking, "projects") == 1
    assert await cache.try_get(late) is None


def test_set_valued_annotations_resolve_to_the_builtin() -> None:
    assert typing.get_type_hints(CacheStore.pop_set)["return"] == set[str] | None
    assert typing.get_type_hints(CacheService.get_tracked_keys)["return"] == set[str]
