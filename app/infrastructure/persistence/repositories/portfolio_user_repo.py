"""Portfolio user repository. Interface methods return application DTOs."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.application.dtos.portfolio_user import (
    PortfolioUserCreate,
    PortfolioUserResult,
    PortfolioUserSummary,
)
from app.application.dtos.project import OwnerRef, ProjectCreate, ProjectResult
from app.application.dtos.skill import SkillCreate, SkillResult
from app.infrastructure.persistence.models.portfolio_user import PortfolioUser
from app.infrastructure.persistence.models.project import Project
from app.infrastructure.persistence.models.skill import Skill
from app.infrastructure.persistence.repositories.base import BaseRepository


def _to_result(u: PortfolioUser) -> PortfolioUserResult:
    """Map ORM PortfolioUser (collections loaded) to PortfolioUserResult."""
    owner = OwnerRef(id=u.id, name=u.name)
    return PortfolioUserResult(
        id=u.id,
        name=u.name,
        bio=u.bio,
        profile_image_url=u.profile_image_url,
        projects=[
            ProjectResult(
                id=p.id,
                title=p.title,
                description=p.description,
                image_url=p.image_url,
                portfolio_user_id=u.id,
                portfolio_user=owner,
            )
            for p in u.projects
        ],
        skills=[
            SkillResult(
                id=s.id,
                name=s.name,
                level=s.level,
                portfolio_user_id=u.id,
                portfolio_user=owner,
            )
            for s in u.skills
        ],
    )


class PortfolioUserRepository(BaseRepository[PortfolioUser]):
    """Portfolio users, newest first, with projects and skills embedded."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, PortfolioUser)

    def _select(self):
        return (
            select(PortfolioUser)
            .options(
                selectinload(PortfolioUser.projects),
                selectinload(PortfolioUser.skills),
            )
            .order_by(PortfolioUser.id.desc())
        )

    async def _load(self, entity_id: int) -> PortfolioUser | None:
        result = await self.db.execute(
            self._select()
            .where(PortfolioUser.id == entity_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[PortfolioUserResult]:
        result = await self.db.execute(self._select())
        return [_to_result(u) for u in result.scalars().all()]

    async def list_summaries(self) -> list[PortfolioUserSummary]:
        project_count = (
            select(func.count(Project.id))
            .where(Project.portfolio_user_id == PortfolioUser.id)
            .correlate(PortfolioUser)
            .scalar_subquery()
        )
        skill_count = (
            select(func.count(Skill.id))
            .where(Skill.portfolio_user_id == PortfolioUser.id)
            .correlate(PortfolioUser)
            .scalar_subquery()
        )
        result = await self.db.execute(
            select(
                PortfolioUser.id,
                PortfolioUser.name,
                PortfolioUser.bio,
                PortfolioUser.profile_image_url,
                project_count,
                skill_count,
            ).order_by(PortfolioUser.id.desc())
        )
        return [
            PortfolioUserSummary(
                id=row[0],
                name=row[1],
                bio=row[2],
                profile_image_url=row[3],
                project_count=int(row[4] or 0),
                skill_count=int(row[5] or 0),
            )
            for row in result.all()
        ]

    async def list_page(self, offset: int, limit: int) -> list[PortfolioUserResult]:
        result = await self.db.execute(self._select().offset(offset).limit(limit))
        return [_to_result(u) for u in result.scalars().all()]

    async def get(self, entity_id: int) -> PortfolioUserResult | None:
        user = await self._load(entity_id)
        return _to_result(user) if user else None

    async def create(self, data: PortfolioUserCreate) -> PortfolioUserResult:
        user = await self.add(
            PortfolioUser(
                name=data.name,
                bio=data.bio,
                profile_image_url=data.profile_image_url,
            )
        )
        loaded = await self._load(user.id)
        return _to_result(loaded)

    async def update(
        self, entity_id: int, data: PortfolioUserCreate
    ) -> PortfolioUserResult | None:
        user = await self._load(entity_id)
        if user is None:
            return None
        user.name = data.name
        user.bio = data.bio
        user.profile_image_url = data.profile_image_url
        await self.flush()
        return _to_result(user)

    async def delete(self, entity_id: int) -> PortfolioUserResult | None:
        user = await self._load(entity_id)
        if user is None:
            return None
        deleted = _to_result(user)
        await self.remove(user)
        return deleted

    async def has_any(self) -> bool:
        result = await self.db.execute(select(PortfolioUser.id).limit(1))
        return result.scalar_one_or_none() is not None

    async def add_portfolio(
        self,
        user: PortfolioUserCreate,
        projects: list[ProjectCreate],
        skills: list[SkillCreate],
    ) -> int:
        """Insert a user with its projects and skills (flushed, not committed)."""
        row = PortfolioUser(
            name=user.name,
            bio=user.bio,
            profile_image_url=user.profile_image_url,
            projects=[
                Project(title=p.title, description=p.description, image_url=p.image_url)
                for p in projects
            ],
            skills=[Skill(name=s.name, level=s.level) for s in skills],
        )
        await self.add(row)
        return row.id
