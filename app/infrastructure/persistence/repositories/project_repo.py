"""Project repository. Interface methods return application DTOs."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.application.dtos.project import (
    OwnerRef,
    ProjectCreate,
    ProjectResult,
    ProjectSummary,
)
from app.infrastructure.persistence.models.portfolio_user import PortfolioUser
from app.infrastructure.persistence.models.project import Project
from app.infrastructure.persistence.repositories.base import BaseRepository


def _to_result(p: Project) -> ProjectResult:
    """Map ORM Project (owner loaded) to ProjectResult."""
    owner = p.portfolio_user
    return ProjectResult(
        id=p.id,
        title=p.title,
        description=p.description,
        image_url=p.image_url,
        portfolio_user_id=p.portfolio_user_id,
        portfolio_user=OwnerRef(id=owner.id, name=owner.name) if owner else None,
    )


class ProjectRepository(BaseRepository[Project]):
    """Projects, newest first, each with its owner's id and name."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Project)

    def _select(self):
        return (
            select(Project)
            .options(selectinload(Project.portfolio_user))
            .order_by(Project.id.desc())
        )

    async def list_all(self) -> list[ProjectResult]:
        result = await self.db.execute(self._select())
        return [_to_result(p) for p in result.scalars().all()]

    async def list_summaries(self) -> list[ProjectSummary]:
        result = await self.db.execute(
            select(
                Project.id,
                Project.title,
                Project.description,
                Project.image_url,
                Project.portfolio_user_id,
                PortfolioUser.name,
            )
            .join(PortfolioUser, Project.portfolio_user_id == PortfolioUser.id)
            .order_by(Project.id.desc())
        )
        return [
            ProjectSummary(
                id=row[0],
                title=row[1],
                description=row[2],
                image_url=row[3],
                portfolio_user_id=row[4],
                portfolio_user_name=row[5] or "",
            )
            for row in result.all()
        ]

    async def list_page(self, offset: int, limit: int) -> list[ProjectResult]:
        result = await self.db.execute(self._select().offset(offset).limit(limit))
        return [_to_result(p) for p in result.scalars().all()]

    async def _load(self, entity_id: int) -> Project | None:
        result = await self.db.execute(
            select(Project)
            .options(selectinload(Project.portfolio_user))
            .where(Project.id == entity_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get(self, entity_id: int) -> ProjectResult | None:
        project = await self._load(entity_id)
        return _to_result(project) if project else None

    async def create(self, data: ProjectCreate) -> ProjectResult:
        project = await self.add(
            Project(
                title=data.title,
                description=data.description,
                image_url=data.image_url,
                portfolio_user_id=data.portfolio_user_id,
            )
        )
        loaded = await self._load(project.id)
        return _to_result(loaded or project)

    async def update(self, entity_id: int, data: ProjectCreate) -> ProjectResult | None:
        project = await self._load(entity_id)
        if project is None:
            return None
        project.title = data.title
        project.description = data.description
        project.image_url = data.image_url
        project.portfolio_user_id = data.portfolio_user_id
        await self.flush()
        loaded = await self._load(entity_id)
        return _to_result(loaded or project)

    async def delete(self, entity_id: int) -> ProjectResult | None:
        project = await self._load(entity_id)
        if project is None:
            return None
        deleted = _to_result(project)
        await self.remove(project)
        return deleted
