"""Pydantic request/response schemas for the API."""

from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from app.schemas.health import HealthResponse
from app.schemas.portfolio_user import PortfolioUserRequest
from app.schemas.project import ProjectRequest
from app.schemas.seed import SeedResponse
from app.schemas.skill import SkillRequest

__all__ = [
    "AuthResponse",
    "HealthResponse",
    "LoginRequest",
    "PortfolioUserRequest",
    "ProjectRequest",
    "RegisterRequest",
    "SeedResponse",
    "SkillRequest",
]
