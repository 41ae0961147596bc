"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.account import AccountResult
    from app.application.dtos.portfolio_user import PortfolioUserCreate
    from app.application.dtos.project import ProjectCreate
    from app.application.dtos.skill import SkillCreate


class IEntityRepository[ResultT, SummaryT, CreateT](Protocol):
    """Read and write contract shared by the cached entity types.

    Listings are ordered newest first (descending id). Writes are flushed but
    not committed; callers commit explicitly so cache invalidation can run
    strictly after the commit.
    """

    async def list_all(self) -> list[ResultT]:
        """Return every row as a full read-model."""

    async def list_summaries(self) -> list[SummaryT]:
        """Return the lightweight projection of every row."""

    async def list_page(self, offset: int, limit: int) -> list[ResultT]:
        """Return one page of rows."""

    async def count(self) -> int:
        """Return the total number of rows."""

    async def get(self, entity_id: int) -> ResultT | None:
        """Return one row by id, or None."""

    async def create(self, data: CreateT) -> ResultT:
        """Insert a row and return it with its generated id."""

    async def update(self, entity_id: int, data: CreateT) -> ResultT | None:
        """Replace the row's fields. Returns None when the id does not exist."""

    async def delete(self, entity_id: int) -> ResultT | None:
        """Delete the row and return what was deleted, or None when absent."""

    async def commit(self) -> None:
        """Commit the unit of work."""


class IPortfolioUserRepository(Protocol):
    """Extra portfolio user operations used for owner checks and seeding."""

    async def exists(self, entity_id: int) -> bool:
        """Return True if a portfolio user with this id exists."""

    async def has_any(self) -> bool:
        """Return True if at least one portfolio user exists."""

    async def add_portfolio(
        self,
        user: PortfolioUserCreate,
        projects: list[ProjectCreate],
        skills: list[SkillCreate],
    ) -> int:
        """Insert a user with its projects and skills; returns the new user id."""

    async def commit(self) -> None:
        """Commit the unit of work."""


class IAccountRepository(Protocol):
    """Protocol for login accounts (DIP)."""

    async def get_by_email(self, email: str) -> AccountResult | None:
        """Return the account for email (case-insensitive), or None."""

    async def get_password_hash(self, email: str) -> str | None:
        """Return the stored bcrypt hash for email, or None."""

    async def create_account(
        self, email: str, hashed_password: str, role: str
    ) -> AccountResult:
        """Insert and commit a new account."""
