"""Cache store protocol used by the cache facade (DIP).

Implementations: MemoryCacheStore (per process) and RedisCacheStore (shared).
Every entry carries two deadlines fixed at write time: a sliding window that
is reset on each successful access and an absolute ceiling that never moves.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Protocol


class CacheStore(Protocol):
    """Protocol for key-value stores backing CacheService.

    Stores never raise on backend failure: an unavailable backend reads as a
    miss and writes report False.
    """

    def is_available(self) -> bool:
        """Return True if the store is connected and usable."""
        ...

    async def get(self, key: str) -> Any | None:
        """Return the stored value (refreshing its sliding deadline) or None."""
        ...

    async def set(
        self,
        key: str,
        value: Any,
        sliding: timedelta,
        absolute: timedelta,
    ) -> bool:
        """Store value under key, replacing any prior entry."""
        ...

    async def delete(self, key: str) -> bool:
        """Remove key. Missing keys are not an error."""
        ...

    async def add_to_set(
        self,
        key: str,
        member: str,
        sliding: timedelta,
        absolute: timedelta,
    ) -> bool:
        """Atomically create the set at key if absent, then add member.

        The expiration pair applies only when the set is created.
        """
        ...

    async def get_set(self, key: str) -> set[str] | None:
        """Return a copy of the set stored at key, or None if absent."""
        ...

    async def pop_set(self, key: str) -> set[str] | None:
        """Atomically remove the set at key and return its members, or None.

        A member added concurrently lands either in the returned set or in a
        new set created after the removal, never in neither.
        """
        ...
