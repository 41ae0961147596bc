"""Read-through cache facade used by the entity services.

Wraps a CacheStore with the expiration defaults, typed reads, and the
paged-key tracking that lets a write clear every cached page of a type
without enumerating the whole store.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from datetime import timedelta
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import to_jsonable_python

from app.core.constants import (
    COUNT_ABSOLUTE_EXPIRATION,
    COUNT_SLIDING_EXPIRATION,
    DEFAULT_ABSOLUTE_EXPIRATION,
    DEFAULT_SLIDING_EXPIRATION,
    TRACKING_SET_ABSOLUTE_EXPIRATION,
    TRACKING_SET_SLIDING_EXPIRATION,
)
from app.infrastructure.cache.cache_protocol import CacheStore
from app.shared.telemetry.tracing import add_span_attributes

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=128)
def _adapter(type_hint: Any) -> TypeAdapter:
    return TypeAdapter(type_hint)


class CacheService:
    """Cache facade over a CacheStore.

    A missing key, an expired entry, and an unavailable backend all read as
    None, so callers treat None as "absent". Falsy values such as 0 or an
    empty list are legitimate cached values.
    """

    def __init__(self, store: CacheStore) -> None:
        self.store = store

    def is_available(self) -> bool:
        return self.store.is_available()

    async def try_get(
        self,
        key: str,
        type_hint: Any = None,
        entity_label: str = "",
    ) -> Any | None:
        """Return the cached value for key, or None on miss.

        Args:
            key: Cache key (use app.infrastructure.cache.keys builders).
            type_hint: Optional type the stored JSON payload is validated into
                (e.g. list[ProjectResponse]). A payload that no longer fits the
                type is removed and reported as a miss.
            entity_label: Label for the hit log line (e.g. 'projects').

        Returns:
            Cached value or None.
        """
        raw = await self.store.get(key)
        if raw is None:
            logger.debug("Cache MISS: %s", key)
            add_span_attributes(**{"cache.key": key, "cache.hit": False})
            return None
        value = raw
        if type_hint is not None:
            try:
                value = _adapter(type_hint).validate_python(raw)
            except ValidationError:
                logger.warning("Discarding unreadable cache entry: %s", key)
                await self.store.delete(key)
                return None
        logger.info("%s retrieved from cache (key: %s)", entity_label or "Value", key)
        add_span_attributes(**{"cache.key": key, "cache.hit": True})
        return value

    async def set(
        self,
        key: str,
        value: Any,
        entity_label: str = "",
        sliding: timedelta | None = None,
        absolute: timedelta | None = None,
    ) -> bool:
        """Store value with sliding and absolute expiration.

        Defaults are 5 minutes sliding and 10 minutes absolute. Pydantic
        models, dataclasses, and datetimes are converted to JSON-compatible
        data first so every backend stores the same shape.
        """
        if sliding is None:
            sliding = DEFAULT_SLIDING_EXPIRATION
        if absolute is None:
            absolute = DEFAULT_ABSOLUTE_EXPIRATION
        stored = await self.store.set(key, to_jsonable_python(value), sliding, absolute)
        if stored:
            logger.debug(
                "Cached %s (key: %s, sliding: %ss, absolute: %ss)",
                entity_label or "value",
                key,
                int(sliding.total_seconds()),
                int(absolute.total_seconds()),
            )
        return stored

    async def remove(self, key: str) -> None:
        """Remove key. Removing a missing key is a no-op."""
        await self.store.delete(key)
        logger.debug("Cache REMOVE: %s", key)

    async def remove_many(self, *keys: str) -> None:
        for key in keys:
            await self.remove(key)

    async def track_paged_key(self, tracking_key: str, page_key: str) -> None:
        """Record page_key in the tracking set so a later sweep can clear it."""
        await self.store.add_to_set(
            tracking_key,
            page_key,
            TRACKING_SET_SLIDING_EXPIRATION,
            TRACKING_SET_ABSOLUTE_EXPIRATION,
        )
        logger.debug("Tracked paged key %s in %s", page_key, tracking_key)

    async def get_tracked_keys(self, tracking_key: str) -> set[str]:
        return await self.store.get_set(tracking_key) or set()

    async def invalidate_paged_caches(self, tracking_key: str, entity_label: str) -> int:
        """Detach the tracking set, then remove every page key it held.

        The set is popped in one store operation, so a page tracked while the
        sweep runs starts a fresh set that the next sweep will find.

        Returns:
            Number of page keys removed (0 when nothing was tracked).
        """
        tracked = await self.store.pop_set(tracking_key)
        if tracked is None:
            return 0
        for page_key in tracked:
            await self.store.delete(page_key)
        logger.info("Invalidated %d paged cache entries for %s", len(tracked), entity_label)
        return len(tracked)

    async def get_or_cache_count(
        self,
        key: str,
        compute: Callable[[], Awaitable[int]],
        entity_label: str = "",
    ) -> int:
        """Return the cached count, or compute and cache it (10 min / 30 min).

        A failing compute propagates and nothing is cached.
        """
        cached = await self.try_get(key, int, f"{entity_label} count".strip())
        if cached is not None:
            return cached
        count = await compute()
        await self.set(
            key,
            count,
            f"{entity_label} count".strip(),
            sliding=COUNT_SLIDING_EXPIRATION,
            absolute=COUNT_ABSOLUTE_EXPIRATION,
        )
        return count
