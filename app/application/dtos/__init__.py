"""Application DTOs (no ORM dependency)."""

from app.application.dtos.account import AccountResult, TokenResult
from app.application.dtos.pagination import PagedResult, PaginationParams
from app.application.dtos.portfolio_user import (
    PortfolioUserCreate,
    PortfolioUserResult,
    PortfolioUserSummary,
)
from app.application.dtos.project import (
    OwnerRef,
    ProjectCreate,
    ProjectResult,
    ProjectSummary,
)
from app.application.dtos.skill import SkillCreate, SkillResult, SkillSummary

__all__ = [
    "AccountResult",
    "OwnerRef",
    "PagedResult",
    "PaginationParams",
    "PortfolioUserCreate",
    "PortfolioUserResult",
    "PortfolioUserSummary",
    "ProjectCreate",
    "ProjectResult",
    "ProjectSummary",
    "SkillCreate",
    "SkillResult",
    "SkillSummary",
    "TokenResult",
]
