"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.account_repo import AccountRepository
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.portfolio_user_repo import (
    PortfolioUserRepository,
)
from app.infrastructure.persistence.repositories.project_repo import ProjectRepository
from app.infrastructure.persistence.repositories.skill_repo import SkillRepository

__all__ = [
    "AccountRepository",
    "BaseRepository",
    "PortfolioUserRepository",
    "ProjectRepository",
    "SkillRepository",
]
