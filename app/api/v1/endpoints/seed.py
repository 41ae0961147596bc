"""Seed API: insert sample portfolios into an empty database (Admin only)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import get_seed_service, require_admin
from app.application.dtos.account import AccountResult
from app.application.services import SeedService
from app.core.limiter import limit_seed
from app.schemas.seed import SeedResponse

router = APIRouter()


@router.post("", response_model=SeedResponse)
@limit_seed
async def seed_sample_data(
    request: Request,
    svc: Annotated[SeedService, Depends(get_seed_service)],
    _: Annotated[AccountResult, Depends(require_admin)],
) -> SeedResponse:
    """Insert the sample portfolios. 400 when any portfolio user already exists."""
    inserted = await svc.seed()
    return SeedResponse(
        message="Sample data seeded successfully.", portfolio_users_created=inserted
    )
