"""Base repository: generic CRUD over one ORM model plus unit-of-work control."""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base


class BaseRepository[ModelType: Base]:
    """Base repository with get_by_id, exists, count, add, delete, commit.

    Writes flush so generated ids are available, but never commit on their
    own; services call commit() and then invalidate caches.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: Any) -> ModelType | None:
        """Return a single record by primary key, or None."""
        return await self.db.get(self.model, entity_id)

    async def exists(self, entity_id: Any) -> bool:
        model: Any = self.model
        result = await self.db.execute(
            select(model.id).where(model.id == entity_id).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def count(self) -> int:
        """Return the total number of rows."""
        result = await self.db.execute(select(func.count()).select_from(self.model))
        return int(result.scalar_one())

    async def add(self, obj: ModelType) -> ModelType:
        """Persist a new record (flushed, not committed)."""
        self.db.add(obj)
        await self.db.flush()
        return obj

    async def flush(self) -> None:
        await self.db.flush()

    async def remove(self, obj: ModelType) -> None:
        await self.db.delete(obj)
        await self.db.flush()

    async def commit(self) -> None:
        """Commit the current transaction."""
        await self.db.commit()

    async def rollback(self) -> None:
        await self.db.rollback()
