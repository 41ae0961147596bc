"""Read-through reads and commit-then-invalidate writes for one entity type.

Every read consults the cache first and fills it on a miss. Every write goes
to the repository, is committed, and only then invalidates the cached views
of the type (and of related types). A write that raises never reaches the
invalidation step, so cached data is left exactly as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from app.application.dtos.pagination import PagedResult, PaginationParams
from app.application.interfaces.repositories import IEntityRepository
from app.application.interfaces.services import (
    ICacheInvalidator,
    ICacheService,
    IEntityKeys,
)
from app.domain.enums import CacheMutation
from app.domain.exceptions import ResourceNotFoundException

logger = logging.getLogger(__name__)


class CachedEntityService[ResultT, SummaryT, CreateT]:
    """Base service for a cached entity type.

    Subclasses set result_type and summary_type (used to rebuild cached
    payloads) and resource_type (used in not-found errors), and may override
    _validate and _related_ids.
    """

    resource_type: str = "entity"
    result_type: type[Any]
    summary_type: type[Any]

    def __init__(
        self,
        repo: IEntityRepository[ResultT, SummaryT, CreateT],
        cache: ICacheService,
        invalidator: ICacheInvalidator,
        keys: IEntityKeys,
    ) -> None:
        self.repo = repo
        self.cache = cache
        self.invalidator = invalidator
        self.keys = keys

    async def list_all(self) -> list[ResultT]:
        key = self.keys.list_key
        cached = await self.cache.try_get(key, list[self.result_type], self.keys.label)
        if cached is not None:
            return cached
        logger.info("%s retrieved from database", self.keys.label)
        items = await self.repo.list_all()
        await self.cache.set(key, items, self.keys.label)
        return items

    async def list_summaries(self) -> list[SummaryT]:
        key = self.keys.summary
        label = f"{self.keys.label} summaries"
        cached = await self.cache.try_get(key, list[self.summary_type], label)
        if cached is not None:
            return cached
        logger.info("%s retrieved from database", label)
        summaries = await self.repo.list_summaries()
        await self.cache.set(key, summaries, label)
        return summaries

    async def list_paged(self, page: int, page_size: int) -> PagedResult[ResultT]:
        """Return one page, normalising out-of-range parameters first.

        On a miss the page is fetched, cached, and its key tracked before
        returning, so a write that commits after this call completes will
        find and clear it.
        """
        params = PaginationParams.normalize(page, page_size)
        key = self.keys.page(params.page, params.page_size)
        label = f"{self.keys.label} page {params.page}"
        result_model = PagedResult[self.result_type]
        cached = await self.cache.try_get(key, result_model, label)
        if cached is not None:
            return cached

        total_count = await self.cache.get_or_cache_count(
            self.keys.total_count, self.repo.count, self.keys.label
        )
        logger.info("%s retrieved from database", label)
        items = await self.repo.list_page(params.offset, params.page_size)
        result = result_model(
            items=items,
            page=params.page,
            page_size=params.page_size,
            total_count=total_count,
        )
        await self.cache.set(key, result.to_cache(), label)
        await self.cache.track_paged_key(self.keys.paged_tracking, key)
        return result

    async def get(self, entity_id: int) -> ResultT:
        """Return one item.

        Raises:
            ResourceNotFoundException: If no row has this id (nothing is cached).
        """
        key = self.keys.item(entity_id)
        label = f"{self.resource_type} {entity_id}"
        cached = await self.cache.try_get(key, self.result_type, label)
        if cached is not None:
            return cached
        logger.info("%s retrieved from database", label)
        item = await self.repo.get(entity_id)
        if item is None:
            raise ResourceNotFoundException(self.resource_type, entity_id)
        await self.cache.set(key, item, label)
        return item

    async def create(self, data: CreateT) -> ResultT:
        await self._validate(data)
        created = await self.repo.create(data)
        await self.repo.commit()
        entity_id = created.id
        await self.invalidator.invalidate(
            self.keys,
            CacheMutation.CREATE,
            entity_id,
            self._related_ids(None, created),
        )
        logger.info("Created %s %s and invalidated caches", self.resource_type, entity_id)
        return created

    async def update(self, entity_id: int, data: CreateT) -> ResultT:
        """Replace the row's fields.

        Raises:
            ResourceNotFoundException: If no row has this id.
        """
        await self._validate(data)
        before = await self.repo.get(entity_id)
        if before is None:
            raise ResourceNotFoundException(self.resource_type, entity_id)
        updated = await self.repo.update(entity_id, data)
        if updated is None:
            raise ResourceNotFoundException(self.resource_type, entity_id)
        await self.repo.commit()
        await self.invalidator.invalidate(
            self.keys,
            CacheMutation.UPDATE,
            entity_id,
            self._related_ids(before, updated),
        )
        logger.info("Updated %s %s and invalidated caches", self.resource_type, entity_id)
        return updated

    async def delete(self, entity_id: int) -> None:
        """Delete the row.

        Raises:
            ResourceNotFoundException: If no row has this id.
        """
        deleted = await self.repo.delete(entity_id)
        if deleted is None:
            raise ResourceNotFoundException(self.resource_type, entity_id)
        await self.repo.commit()
        await self.invalidator.invalidate(
            self.keys,
            CacheMutation.DELETE,
            entity_id,
            self._related_ids(deleted, None),
        )
        logger.info("Deleted %s %s and invalidated caches", self.resource_type, entity_id)

    async def _validate(self, data: CreateT) -> None:
        """Hook: raise ValidationException when data refers to missing rows."""

    def _related_ids(
        self, before: ResultT | None, after: ResultT | None
    ) -> Mapping[str, Iterable[int]]:
        """Hook: ids of related rows whose cached item views embed this row."""
        return {}
