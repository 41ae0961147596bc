"""In-process cache store with sliding and absolute expiration.

One instance per process, owned by the application lifespan and shared by
every request. A single lock guards the entry table so concurrent requests
(threadpool or event loop) cannot interleave a read-modify-write, in
particular the get-or-create-then-add on paged-key tracking sets.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
    """Stored value with its two deadlines (monotonic seconds)."""

    value: Any
    sliding_window: float
    sliding_deadline: float
    absolute_deadline: float

    def is_expired(self, now: float) -> bool:
        return now >= self.sliding_deadline or now >= self.absolute_deadline

    def touch(self, now: float) -> None:
        """Reset the sliding deadline; the absolute deadline never moves."""
        self.sliding_deadline = now + self.sliding_window


class MemoryCacheStore:
    """Thread-safe in-memory CacheStore.

    Args:
        clock: Monotonic time source in seconds (injectable for tests).
        max_entries: Optional capacity. When full, expired entries are purged
            first, then the oldest value entries are evicted. Evicted keys
            simply read as misses. Tracking sets are never evicted, since a
            page whose tracking set is gone could no longer be invalidated.
        sweep_interval: Seconds between full purges of expired entries,
            run from the write path so keys that are never read again do
            not accumulate.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        max_entries: int | None = None,
        sweep_interval: float = 60.0,
    ) -> None:
        self._clock = clock
        self._max_entries = max_entries
        self._sweep_interval = sweep_interval
        self._next_sweep = clock() + sweep_interval
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()

    def is_available(self) -> bool:
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _live_entry(self, key: str, now: float) -> _Entry | None:
        """Return the unexpired entry for key, evicting it if expired. Lock held."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(now):
            del self._entries[key]
            return None
        return entry

    def _new_entry(
        self, value: Any, sliding: timedelta, absolute: timedelta, now: float
    ) -> _Entry:
        window = sliding.total_seconds()
        return _Entry(
            value=value,
            sliding_window=window,
            sliding_deadline=now + window,
            absolute_deadline=now + absolute.total_seconds(),
        )

    def _purge_expired(self, now: float) -> None:
        """Drop every expired entry. Lock held."""
        expired = [k for k, e in self._entries.items() if e.is_expired(now)]
        for key in expired:
            del self._entries[key]
        self._next_sweep = now + self._sweep_interval
        if expired:
            logger.debug("Cache SWEEP: %d expired entries removed", len(expired))

    def _sweep_if_due(self, now: float) -> None:
        if now >= self._next_sweep:
            self._purge_expired(now)

    def _make_room(self, now: float) -> None:
        """Enforce max_entries before inserting a new key. Lock held."""
        if self._max_entries is None or len(self._entries) < self._max_entries:
            return
        self._purge_expired(now)
        while len(self._entries) >= self._max_entries:
            oldest = next(
                (k for k, e in self._entries.items() if not isinstance(e.value, set)),
                None,
            )
            if oldest is None:
                break
            del self._entries[oldest]
            logger.debug("Cache EVICT: %s (capacity %d)", oldest, self._max_entries)

    async def get(self, key: str) -> Any | None:
        return self.get_sync(key)

    def get_sync(self, key: str) -> Any | None:
        with self._lock:
            now = self._clock()
            entry = self._live_entry(key, now)
            if entry is None:
                return None
            entry.touch(now)
            return entry.value

    async def set(
        self, key: str, value: Any, sliding: timedelta, absolute: timedelta
    ) -> bool:
        return self.set_sync(key, value, sliding, absolute)

    def set_sync(
        self, key: str, value: Any, sliding: timedelta, absolute: timedelta
    ) -> bool:
        with self._lock:
            now = self._clock()
            self._sweep_if_due(now)
            if key not in self._entries:
                self._make_room(now)
            self._entries[key] = self._new_entry(value, sliding, absolute, now)
            return True

    async def delete(self, key: str) -> bool:
        return self.delete_sync(key)

    def delete_sync(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    async def add_to_set(
        self, key: str, member: str, sliding: timedelta, absolute: timedelta
    ) -> bool:
        return self.add_to_set_sync(key, member, sliding, absolute)

    def add_to_set_sync(
        self, key: str, member: str, sliding: timedelta, absolute: timedelta
    ) -> bool:
        with self._lock:
            now = self._clock()
            self._sweep_if_due(now)
            entry = self._live_entry(key, now)
            if entry is None or not isinstance(entry.value, set):
                if entry is None:
                    self._make_room(now)
                entry = self._new_entry(set(), sliding, absolute, now)
                self._entries[key] = entry
            else:
                entry.touch(now)
            entry.value.add(member)
            return True

    async def get_set(self, key: str) -> set[str] | None:
        return self.get_set_sync(key)

    def get_set_sync(self, key: str) -> set[str] | None:
        with self._lock:
            now = self._clock()
            entry = self._live_entry(key, now)
            if entry is None or not isinstance(entry.value, set):
                return None
            entry.touch(now)
            return set(entry.value)

    async def pop_set(self, key: str) -> set[str] | None:
        return self.pop_set_sync(key)

    def pop_set_sync(self, key: str) -> set[str] | None:
        with self._lock:
            entry = self._live_entry(key, self._clock())
            if entry is None or not isinstance(entry.value, set):
                return None
            del self._entries[key]
            return entry.value
