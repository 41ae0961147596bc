"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.account import Account
from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    IntIdMixin,
    TimestampMixin,
)
from app.infrastructure.persistence.models.portfolio_user import PortfolioUser
from app.infrastructure.persistence.models.project import Project
from app.infrastructure.persistence.models.skill import Skill

__all__ = [
    "Account",
    "CuidMixin",
    "IntIdMixin",
    "PortfolioUser",
    "Project",
    "Skill",
    "TimestampMixin",
]
