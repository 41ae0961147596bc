"""Skill repository. Interface methods return application DTOs."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.application.dtos.project import OwnerRef
from app.application.dtos.skill import SkillCreate, SkillResult, SkillSummary
from app.infrastructure.persistence.models.portfolio_user import PortfolioUser
from app.infrastructure.persistence.models.skill import Skill
from app.infrastructure.persistence.repositories.base import BaseRepository


def _to_result(s: Skill) -> SkillResult:
    owner = s.portfolio_user
    return SkillResult(
        id=s.id,
        name=s.name,
        level=s.level,
        portfolio_user_id=s.portfolio_user_id,
        portfolio_user=OwnerRef(id=owner.id, name=owner.name) if owner else None,
    )


class SkillRepository(BaseRepository[Skill]):
    """Skills, newest first, each with its owner's id and name."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Skill)

    def _select(self):
        return (
            select(Skill)
            .options(selectinload(Skill.portfolio_user))
            .order_by(Skill.id.desc())
        )

    async def _load(self, entity_id: int) -> Skill | None:
        result = await self.db.execute(
            select(Skill)
            .options(selectinload(Skill.portfolio_user))
            .where(Skill.id == entity_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[SkillResult]:
        result = await self.db.execute(self._select())
        return [_to_result(s) for s in result.scalars().all()]

    async def list_summaries(self) -> list[SkillSummary]:
        result = await self.db.execute(
            select(
                Skill.id,
                Skill.name,
                Skill.level,
                Skill.portfolio_user_id,
                PortfolioUser.name,
            )
            .join(PortfolioUser, Skill.portfolio_user_id == PortfolioUser.id)
            .order_by(Skill.id.desc())
        )
        return [
            SkillSummary(
                id=row[0],
                name=row[1],
                level=row[2],
                portfolio_user_id=row[3],
                portfolio_user_name=row[4] or "",
            )
            for row in result.all()
        ]

    async def list_page(self, offset: int, limit: int) -> list[SkillResult]:
        result = await self.db.execute(self._select().offset(offset).limit(limit))
        return [_to_result(s) for s in result.scalars().all()]

    async def get(self, entity_id: int) -> SkillResult | None:
        skill = await self._load(entity_id)
        return _to_result(skill) if skill else None

    async def create(self, data: SkillCreate) -> SkillResult:
        skill = await self.add(
            Skill(
                name=data.name,
                level=data.level,
                portfolio_user_id=data.portfolio_user_id,
            )
        )
        loaded = await self._load(skill.id)
        return _to_result(loaded or skill)

    async def update(self, entity_id: int, data: SkillCreate) -> SkillResult | None:
        skill = await self._load(entity_id)
        if skill is None:
            return None
        skill.name = data.name
        skill.level = data.level
        skill.portfolio_user_id = data.portfolio_user_id
        await self.flush()
        loaded = await self._load(entity_id)
        return _to_result(loaded or skill)

    async def delete(self, entity_id: int) -> SkillResult | None:
        skill = await self._load(entity_id)
        if skill is None:
            return None
        deleted = _to_result(skill)
        await self.remove(skill)
        return deleted
