"""Application services: cached entity services, seeding, and authentication."""

from app.application.services.auth_service import AuthService
from app.application.services.cached_entity_service import CachedEntityService
from app.application.services.portfolio_user_service import PortfolioUserService
from app.application.services.project_service import ProjectService
from app.application.services.seed_service import SAMPLE_PORTFOLIOS, SeedService
from app.application.services.skill_service import SkillService

__all__ = [
    "AuthService",
    "CachedEntityService",
    "PortfolioUserService",
    "ProjectService",
    "SAMPLE_PORTFOLIOS",
    "SeedService",
    "SkillService",
]
