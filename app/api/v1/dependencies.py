"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, repositories, the cache facade,
and application services. All services are built from infrastructure
implementations here; routes depend only on these dependencies, not on
infra directly.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.account import AccountResult
from app.application.services import (
    AuthService,
    PortfolioUserService,
    ProjectService,
    SeedService,
    SkillService,
)
from app.domain.enums import UserRole
from app.domain.exceptions import AuthenticationException, AuthorizationException
from app.infrastructure.cache import (
    PORTFOLIO_USER_KEYS,
    PROJECT_KEYS,
    SKILL_KEYS,
    CacheInvalidator,
    CacheService,
)
from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.repositories import (
    AccountRepository,
    PortfolioUserRepository,
    ProjectRepository,
    SkillRepository,
)
from app.infrastructure.security.jwt import create_access_token, verify_token
from app.infrastructure.security.password import (
    get_password_hash,
    password_problems,
    verify_password,
)


class AuthSecurity:
    """Token and password hashing provided via DI (no direct infra imports in services)."""

    def create_access_token(
        self, account_id: str, email: str, role: str
    ) -> tuple[str, datetime]:
        return create_access_token(account_id, email, role)

    def hash_password(self, password: str) -> str:
        return get_password_hash(password)

    def verify_password(self, password: str, hashed: str) -> bool:
        return verify_password(password, hashed)

    def password_problems(self, password: str) -> list[str]:
        return password_problems(password)


def get_auth_security() -> AuthSecurity:
    """Auth token creation and password hashing (composition root)."""
    return AuthSecurity()


# ---- Cache ----


def get_cache(request: Request) -> CacheService:
    """Process-wide cache facade created in lifespan."""
    return request.app.state.cache


def get_invalidator(
    cache: Annotated[CacheService, Depends(get_cache)],
) -> CacheInvalidator:
    return CacheInvalidator(cache)


# ---- Repositories ----


async def get_portfolio_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PortfolioUserRepository:
    return PortfolioUserRepository(db)


async def get_project_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProjectRepository:
    return ProjectRepository(db)


async def get_skill_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SkillRepository:
    return SkillRepository(db)


async def get_account_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AccountRepository:
    return AccountRepository(db)


# ---- Services ----


async def get_portfolio_user_service(
    repo: Annotated[PortfolioUserRepository, Depends(get_portfolio_user_repo)],
    cache: Annotated[CacheService, Depends(get_cache)],
    invalidator: Annotated[CacheInvalidator, Depends(get_invalidator)],
) -> PortfolioUserService:
    return PortfolioUserService(repo, cache, invalidator, PORTFOLIO_USER_KEYS)


async def get_project_service(
    repo: Annotated[ProjectRepository, Depends(get_project_repo)],
    owners: Annotated[PortfolioUserRepository, Depends(get_portfolio_user_repo)],
    cache: Annotated[CacheService, Depends(get_cache)],
    invalidator: Annotated[CacheInvalidator, Depends(get_invalidator)],
) -> ProjectService:
    return ProjectService(repo, owners, cache, invalidator, PROJECT_KEYS)


async def get_skill_service(
    repo: Annotated[SkillRepository, Depends(get_skill_repo)],
    owners: Annotated[PortfolioUserRepository, Depends(get_portfolio_user_repo)],
    cache: Annotated[CacheService, Depends(get_cache)],
    invalidator: Annotated[CacheInvalidator, Depends(get_invalidator)],
) -> SkillService:
    return SkillService(repo, owners, cache, invalidator, SKILL_KEYS)


async def get_seed_service(
    repo: Annotated[PortfolioUserRepository, Depends(get_portfolio_user_repo)],
    invalidator: Annotated[CacheInvalidator, Depends(get_invalidator)],
) -> SeedService:
    return SeedService(repo, invalidator)


async def get_auth_service(
    accounts: Annotated[AccountRepository, Depends(get_account_repo)],
    auth_security: Annotated[AuthSecurity, Depends(get_auth_security)],
) -> AuthService:
    return AuthService(accounts, auth_security)


# ---- Auth (current account from JWT) ----

_http_bearer = HTTPBearer(auto_error=False)


async def get_current_account_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> AccountResult | None:
    """Return the account named by a valid bearer token; else None."""
    if not credentials:
        return None
    try:
        payload = verify_token(credentials.credentials)
    except ValueError:
        return None
    return AccountResult(
        id=payload["sub"],
        email=payload.get("email", ""),
        role=payload.get("role", UserRole.USER.value),
    )


async def get_current_account(
    account: Annotated[AccountResult | None, Depends(get_current_account_optional)],
) -> AccountResult:
    """Return current account from JWT; raise 401 if missing or invalid."""
    if account is None:
        raise AuthenticationException("Not authenticated")
    return account


def require_role(role: UserRole) -> Callable:
    """Dependency factory: require JWT auth and the given role (403 otherwise)."""

    async def _require(
        account: Annotated[AccountResult, Depends(get_current_account)],
    ) -> AccountResult:
        if account.role != role.value:
            raise AuthorizationException(required_role=role.value)
        return account

    return _require


require_admin = require_role(UserRole.ADMIN)
