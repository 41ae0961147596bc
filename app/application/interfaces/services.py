"""Service interfaces (ports) for the application layer.

Protocols for the cache facade, its key families, and the invalidator
(implemented in app.infrastructure.cache).
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Mapping
from datetime import timedelta
from typing import Any, Protocol

from app.domain.enums import CacheMutation


class IEntityKeys(Protocol):
    """Cache key family of one entity type."""

    entity: str
    label: str

    @property
    def list_key(self) -> str: ...

    def item(self, entity_id: int) -> str: ...

    def page(self, page_number: int, page_size: int) -> str: ...

    @property
    def total_count(self) -> str: ...

    @property
    def paged_tracking(self) -> str: ...

    @property
    def summary(self) -> str: ...


class ICacheService(Protocol):
    """Read-through cache facade."""

    async def try_get(
        self, key: str, type_hint: Any = None, entity_label: str = ""
    ) -> Any | None:
        """Return the cached value (validated into type_hint) or None."""

    async def set(
        self,
        key: str,
        value: Any,
        entity_label: str = "",
        sliding: timedelta | None = None,
        absolute: timedelta | None = None,
    ) -> bool:
        """Store value with sliding and absolute expiration."""

    async def track_paged_key(self, tracking_key: str, page_key: str) -> None:
        """Record a page key for later invalidation."""

    async def get_or_cache_count(
        self,
        key: str,
        compute: Callable[[], Awaitable[int]],
        entity_label: str = "",
    ) -> int:
        """Return the cached count or compute and cache it."""


class ICacheInvalidator(Protocol):
    """Clears cached views after a committed write."""

    async def invalidate(
        self,
        keys: IEntityKeys,
        mutation: CacheMutation,
        entity_id: int | None = None,
        related_ids: Mapping[str, Iterable[int]] | None = None,
    ) -> None:
        """Apply the invalidation policy for one mutation."""

    async def invalidate_all(self) -> None:
        """Clear the aggregate views of every entity type."""
