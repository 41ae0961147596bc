"""SQLAlchemy repositories against Postgres. Skipped when DATABASE_URL is unreachable."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.portfolio_user import PortfolioUserCreate
from app.application.dtos.project import ProjectCreate
from app.application.dtos.skill import SkillCreate
from app.infrastructure.persistence.repositories import (
    PortfolioUserRepository,
    ProjectRepository,
    SkillRepository,
)

pytestmark = pytest.mark.requires_db


async def _portfolio(db: AsyncSession, name: str = "Jordan") -> int:
    return await PortfolioUserRepository(db).add_portfolio(
        PortfolioUserCreate(name=name, bio="bio"),
        [ProjectCreate(title="Task Tracker", portfolio_user_id=0)],
        [SkillCreate(name="C#", level="Advanced", portfolio_user_id=0)],
    )


async def test_add_portfolio_embeds_children(db_session: AsyncSession) -> None:
    user_id = await _portfolio(db_session)
    user = await PortfolioUserRepository(db_session).get(user_id)
    assert user.name == "Jordan"
    assert [p.title for p in user.projects] == ["Task Tracker"]
    assert [s.name for s in user.skills] == ["C#"]


async def test_summaries_count_children(db_session: AsyncSession) -> None:
    user_id = await _portfolio(db_session)
    summaries = await PortfolioUserRepository(db_session).list_summaries()
    mine = next(s for s in summaries if s.id == user_id)
    assert (mine.project_count, mine.skill_count) == (1, 1)


async def test_project_create_carries_owner_name(db_session: AsyncSession) -> None:
    user_id = await _portfolio(db_session, "Sarah")
    created = await ProjectRepository(db_session).create(
        ProjectCreate(title="Blog", portfolio_user_id=user_id)
    )
    assert created.portfolio_user.name == "Sarah"
    summaries = await ProjectRepository(db_session).list_summaries()
    assert next(s for s in summaries if s.id == created.id).portfolio_user_name == "Sarah"


async def test_listing_is_newest_first_and_paged(db_session: AsyncSession) -> None:
    repo = SkillRepository(db_session)
    user_id = await _portfolio(db_session)
    a = await repo.create(SkillCreate(name="A", portfolio_user_id=user_id))
    b = await repo.create(SkillCreate(name="B", portfolio_user_id=user_id))
    page = await repo.list_page(0, 2)
    assert [s.id for s in page] == [b.id, a.id]
    assert await repo.count() >= 3


async def test_update_and_delete_missing_return_none(db_session: AsyncSession) -> None:
    repo = ProjectRepository(db_session)
    assert await repo.update(-1, ProjectCreate(title="x", portfolio_user_id=1)) is None
    assert await repo.delete(-1) is None


async def test_deleting_user_removes_children(db_session: AsyncSession) -> None:
    user_id = await _portfolio(db_session)
    users = PortfolioUserRepository(db_session)
    deleted = await users.delete(user_id)
    await users.flush()
    assert deleted.id == user_id
    assert await users.get(user_id) is None
    project_id = deleted.projects[0].id
    assert await ProjectRepository(db_session).get(project_id) is None
