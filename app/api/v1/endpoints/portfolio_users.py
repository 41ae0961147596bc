"""Portfolio user API: thin routes delegating to PortfolioUserService.

A portfolio user is returned with its projects and skills; the summary
view carries only counts.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import (
    get_current_account,
    get_portfolio_user_service,
    require_admin,
)
from app.application.dtos.account import AccountResult
from app.application.dtos.pagination import PagedResult
from app.application.dtos.portfolio_user import PortfolioUserResult, PortfolioUserSummary
from app.application.services import PortfolioUserService
from app.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from app.core.limiter import limit_writes
from app.schemas.portfolio_user import PortfolioUserRequest

router = APIRouter()


@router.get("", response_model=list[PortfolioUserResult])
async def list_portfolio_users(
    svc: Annotated[PortfolioUserService, Depends(get_portfolio_user_service)],
):
    """All portfolio users with their projects and skills."""
    return await svc.list_all()


@router.get("/summary", response_model=list[PortfolioUserSummary])
async def list_portfolio_user_summaries(
    svc: Annotated[PortfolioUserService, Depends(get_portfolio_user_service)],
):
    """Name, bio and project/skill counts per portfolio user."""
    return await svc.list_summaries()


@router.get("/paged", response_model=PagedResult[PortfolioUserResult])
async def list_portfolio_users_paged(
    svc: Annotated[PortfolioUserService, Depends(get_portfolio_user_service)],
    page: Annotated[int, Query()] = DEFAULT_PAGE,
    page_size: Annotated[int, Query()] = DEFAULT_PAGE_SIZE,
):
    return await svc.list_paged(page, page_size)


@router.get("/{portfolio_user_id}", response_model=PortfolioUserResult)
async def get_portfolio_user(
    portfolio_user_id: int,
    svc: Annotated[PortfolioUserService, Depends(get_portfolio_user_service)],
):
    return await svc.get(portfolio_user_id)


@router.post("", response_model=PortfolioUserResult, status_code=201)
@limit_writes
async def create_portfolio_user(
    request: Request,
    body: PortfolioUserRequest,
    svc: Annotated[PortfolioUserService, Depends(get_portfolio_user_service)],
    _: Annotated[AccountResult, Depends(get_current_account)],
):
    return await svc.create(body.to_dto())


@router.put("/{portfolio_user_id}", status_code=204)
@limit_writes
async def update_portfolio_user(
    request: Request,
    portfolio_user_id: int,
    body: PortfolioUserRequest,
    svc: Annotated[PortfolioUserService, Depends(get_portfolio_user_service)],
    _: Annotated[AccountResult, Depends(get_current_account)],
) -> None:
    await svc.update(portfolio_user_id, body.to_dto())


@router.delete("/{portfolio_user_id}", status_code=204)
@limit_writes
async def delete_portfolio_user(
    request: Request,
    portfolio_user_id: int,
    svc: Annotated[PortfolioUserService, Depends(get_portfolio_user_service)],
    _: Annotated[AccountResult, Depends(require_admin)],
) -> None:
    """Delete a portfolio user with its projects and skills (Admin only)."""
    await svc.delete(portfolio_user_id)
