"""MemoryCacheStore: sliding/absolute expiry, capacity, tracking sets, thread safety."""

from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta

from app.domain.enums import CacheMutation
from app.infrastructure.cache import (
    PROJECT_KEYS,
    CacheInvalidator,
    CacheService,
    MemoryCacheStore,
)

SLIDING = timedelta(minutes=5)
ABSOLUTE = timedelta(minutes=10)


async def test_get_returns_stored_value(store: MemoryCacheStore) -> None:
    await store.set("Projects", [1, 2], SLIDING, ABSOLUTE)
    assert await store.get("Projects") == [1, 2]


async def test_missing_key_reads_as_none(store: MemoryCacheStore) -> None:
    assert await store.get("nope") is None


async def test_falsy_values_are_hits(store: MemoryCacheStore) -> None:
    await store.set("ProjectsTotalCount", 0, SLIDING, ABSOLUTE)
    await store.set("Projects", [], SLIDING, ABSOLUTE)
    assert await store.get("ProjectsTotalCount") == 0
    assert await store.get("Projects") == []


async def test_entry_expires_after_sliding_window_without_reads(store, clock) -> None:
    await store.set("k", "v", SLIDING, ABSOLUTE)
    clock.advance(5 * 60)
    assert await store.get("k") is None


async def test_read_extends_sliding_window(store, clock) -> None:
    await store.set("k", "v", SLIDING, ABSOLUTE)
    clock.advance(4 * 60)
    assert await store.get("k") == "v"
    clock.advance(4 * 60)
    assert await store.get("k") == "v"


async def test_absolute_deadline_wins_over_frequent_reads(store, clock) -> None:
    """Reads every 4 minutes keep the sliding window open but not past 10 minutes."""
    await store.set("k", "v", SLIDING, ABSOLUTE)
    for _ in range(2):
        clock.advance(4 * 60)
        assert await store.get("k") == "v"
    clock.advance(2 * 60)
    assert await store.get("k") is None


async def test_set_overwrites_and_restarts_deadlines(store, clock) -> None:
    await store.set("k", "old", SLIDING, ABSOLUTE)
    clock.advance(9 * 60)
    await store.set("k", "new", SLIDING, ABSOLUTE)
    clock.advance(4 * 60)
    assert await store.get("k") == "new"


async def test_delete_reports_whether_key_existed(store) -> None:
    await store.set("k", "v", SLIDING, ABSOLUTE)
    assert await store.delete("k") is True
    assert await store.delete("k") is False
    assert await store.get("k") is None


async def test_add_to_set_creates_then_extends(store) -> None:
    await store.add_to_set("ProjectsPagedCacheKeys", "a", SLIDING, ABSOLUTE)
    await store.add_to_set("ProjectsPagedCacheKeys", "b", SLIDING, ABSOLUTE)
    await store.add_to_set("ProjectsPagedCacheKeys", "a", SLIDING, ABSOLUTE)
    assert await store.get_set("ProjectsPagedCacheKeys") == {"a", "b"}


async def test_get_set_returns_a_copy(store) -> None:
    await store.add_to_set("s", "a", SLIDING, ABSOLUTE)
    members = await store.get_set("s")
    members.add("injected")
    assert await store.get_set("s") == {"a"}


async def test_tracking_set_expires(store, clock) -> None:
    await store.add_to_set("s", "a", SLIDING, ABSOLUTE)
    clock.advance(11 * 60)
    assert await store.get_set("s") is None


async def test_max_entries_evicts_oldest(clock) -> None:
    store = MemoryCacheStore(clock=clock, max_entries=2)
    await store.set("a", 1, SLIDING, ABSOLUTE)
    await store.set("b", 2, SLIDING, ABSOLUTE)
    await store.set("c", 3, SLIDING, ABSOLUTE)
    assert await store.get("a") is None
    assert await store.get("b") == 2
    assert await store.get("c") == 3
    assert len(store) == 2


async def test_max_entries_purges_expired_before_evicting(clock) -> None:
    store = MemoryCacheStore(clock=clock, max_entries=2)
    await store.set("short", 1, timedelta(seconds=1), ABSOLUTE)
    await store.set("long", 2, SLIDING, ABSOLUTE)
    clock.advance(2)
    await store.set("new", 3, SLIDING, ABSOLUTE)
    assert await store.get("long") == 2
    assert await store.get("new") == 3


async def test_max_entries_never_evicts_tracking_sets(clock) -> None:
    store = MemoryCacheStore(clock=clock, max_entries=4)
    cache = CacheService(store)
    pages = [PROJECT_KEYS.page(n, 20) for n in range(1, 6)]
    for key in pages:
        await cache.set(key, {"items": []})
        await cache.track_paged_key(PROJECT_KEYS.paged_tracking, key)

    assert await store.get_set(PROJECT_KEYS.paged_tracking) == set(pages)

    await CacheInvalidator(cache).invalidate(PROJECT_KEYS, CacheMutation.CREATE, 99)

    assert [key for key in pages if await store.get(key) is not None] == []


async def test_store_of_only_tracking_sets_may_exceed_capacity(clock) -> None:
    store = MemoryCacheStore(clock=clock, max_entries=1)
    await store.add_to_set("ProjectsPagedCacheKeys", "a", SLIDING, ABSOLUTE)
    await store.add_to_set("SkillsPagedCacheKeys", "b", SLIDING, ABSOLUTE)
    assert len(store) == 2


async def test_expired_keys_never_read_again_are_swept_on_write(store, clock) -> None:
    for n in range(1, 1001):
        await store.set(PROJECT_KEYS.page(n, 20), {"items": []}, SLIDING, ABSOLUTE)
    clock.advance(60 * 60)
    await store.set("Projects", [], SLIDING, ABSOLUTE)
    assert len(store) == 1


async def test_live_entries_survive_the_sweep(store, clock) -> None:
    await store.set("old", 1, timedelta(seconds=30), ABSOLUTE)
    await store.set("kept", 2, SLIDING, ABSOLUTE)
    clock.advance(61)
    await store.set("new", 3, SLIDING, ABSOLUTE)
    assert len(store) == 2
    assert await store.get("kept") == 2


async def test_pop_set_returns_members_and_removes_the_set(store) -> None:
    await store.add_to_set("s", "a", SLIDING, ABSOLUTE)
    await store.add_to_set("s", "b", SLIDING, ABSOLUTE)
    assert await store.pop_set("s") == {"a", "b"}
    assert await store.get_set("s") is None
    assert await store.pop_set("s") is None


async def test_pop_set_ignores_plain_values(store) -> None:
    await store.set("Projects", [1], SLIDING, ABSOLUTE)
    assert await store.pop_set("Projects") is None
    assert await store.get("Projects") == [1]


def test_concurrent_add_to_set_loses_no_members() -> None:
    """Many threads doing get-or-create-then-add on one key keep every member."""
    store = MemoryCacheStore()
    members = [f"ProjectsPaged_Page{i}_Size20" for i in range(1, 201)]

    def add(member: str) -> None:
        store.add_to_set_sync("ProjectsPagedCacheKeys", member, SLIDING, ABSOLUTE)

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(add, members))

    assert store.get_set_sync("ProjectsPagedCacheKeys") == set(members)


def test_concurrent_set_and_get_do_not_corrupt() -> None:
    store = MemoryCacheStore()

    def work(i: int) -> None:
        key = f"Project_{i % 10}"
        store.set_sync(key, {"id": i % 10}, SLIDING, ABSOLUTE)
        value = store.get_sync(key)
        assert value is None or value == {"id": i % 10}
        store.delete_sync(key)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(work, range(500)))
