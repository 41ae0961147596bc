"""Which cache keys a committed write clears.

Every mutation clears the entity type's list, summary, and total-count keys
and sweeps its tracked paged keys; updates and deletes also clear the item
key. The sweep is what keeps page N from serving pre-write data after a
row shifts between pages.

Portfolio users embed their projects and skills (and the summary counts
them), while projects and skills embed their owner's name, so the
aggregate views of related types are cleared as well, together with the
item views of the specific related rows the caller names. Related total
counts are cleared too, since deleting a portfolio user deletes its
projects and skills.

Callers run the invalidator only after the write has committed.
"""

import logging
from collections.abc import Iterable, Mapping

from app.domain.enums import CacheMutation
from app.infrastructure.cache.cache_service import CacheService
from app.infrastructure.cache.keys import (
    PORTFOLIO_USER_KEYS,
    PROJECT_KEYS,
    SKILL_KEYS,
    EntityCacheKeys,
)
from app.shared.telemetry.tracing import traced

logger = logging.getLogger(__name__)

ENTITY_KEYS: dict[str, EntityCacheKeys] = {
    k.entity: k for k in (PORTFOLIO_USER_KEYS, PROJECT_KEYS, SKILL_KEYS)
}

RELATED_ENTITIES: dict[EntityCacheKeys, tuple[EntityCacheKeys, ...]] = {
    PORTFOLIO_USER_KEYS: (PROJECT_KEYS, SKILL_KEYS),
    PROJECT_KEYS: (PORTFOLIO_USER_KEYS,),
    SKILL_KEYS: (PORTFOLIO_USER_KEYS,),
}


def keys_to_clear(
    keys: EntityCacheKeys,
    mutation: CacheMutation,
    entity_id: int | None = None,
) -> list[str]:
    """Return the direct keys a mutation of this entity type clears.

    Args:
        keys: Key family of the mutated type.
        mutation: CREATE, UPDATE, or DELETE.
        entity_id: Id of the mutated row (required for UPDATE/DELETE).

    Raises:
        ValueError: If UPDATE/DELETE is given without entity_id.
    """
    cleared = [keys.list_key, keys.summary, keys.total_count]
    if mutation in (CacheMutation.UPDATE, CacheMutation.DELETE):
        if entity_id is None:
            raise ValueError(f"{mutation.value} invalidation needs an entity id")
        cleared.append(keys.item(entity_id))
    return cleared


class CacheInvalidator:
    """Applies the invalidation policy through a CacheService."""

    def __init__(self, cache: CacheService) -> None:
        self.cache = cache

    @traced("cache.invalidate")
    async def invalidate(
        self,
        keys: EntityCacheKeys,
        mutation: CacheMutation,
        entity_id: int | None = None,
        related_ids: Mapping[str, Iterable[int]] | None = None,
    ) -> None:
        """Clear every view a committed mutation may have made stale.

        Args:
            keys: Key family of the mutated type.
            mutation: Kind of committed write.
            entity_id: Id of the mutated row.
            related_ids: Item ids of related rows whose cached item view
                embeds the mutated row, keyed by entity name (e.g. the
                owner before and after a project update, or the projects
                and skills of an updated portfolio user).
        """
        await self.cache.remove_many(*keys_to_clear(keys, mutation, entity_id))
        await self.cache.invalidate_paged_caches(keys.paged_tracking, keys.label)

        for related in RELATED_ENTITIES.get(keys, ()):
            await self.cache.remove_many(
                related.list_key, related.summary, related.total_count
            )
            await self.cache.invalidate_paged_caches(related.paged_tracking, related.label)
        for entity, ids in (related_ids or {}).items():
            related = ENTITY_KEYS[entity]
            await self.cache.remove_many(*(related.item(i) for i in set(ids)))

        logger.info(
            "Invalidated %s caches after %s (id: %s)",
            keys.label,
            mutation.value,
            entity_id if entity_id is not None else "-",
        )

    @traced("cache.invalidate_all")
    async def invalidate_all(self) -> None:
        """Clear the aggregate views of every entity type (e.g. after seeding)."""
        for keys in RELATED_ENTITIES:
            await self.cache.remove_many(keys.list_key, keys.summary, keys.total_count)
            await self.cache.invalidate_paged_caches(keys.paged_tracking, keys.label)
        logger.info("Invalidated all entity caches")
