"""Application layer: interfaces, DTOs, and services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, cache).
"""

from app.application.interfaces import (
    IAccountRepository,
    ICacheInvalidator,
    ICacheService,
    IEntityKeys,
    IEntityRepository,
    IPortfolioUserRepository,
)
from app.application.services import (
    AuthService,
    PortfolioUserService,
    ProjectService,
    SeedService,
    SkillService,
)

__all__ = [
    "AuthService",
    "IAccountRepository",
    "ICacheInvalidator",
    "ICacheService",
    "IEntityKeys",
    "IEntityRepository",
    "IPortfolioUserRepository",
    "PortfolioUserService",
    "ProjectService",
    "SeedService",
    "SkillService",
]
