"""Skill API: thin routes delegating to SkillService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import get_current_account, get_skill_service, require_admin
from app.application.dtos.account import AccountResult
from app.application.dtos.pagination import PagedResult
from app.application.dtos.skill import SkillResult, SkillSummary
from app.application.services import SkillService
from app.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from app.core.limiter import limit_writes
from app.schemas.skill import SkillRequest

router = APIRouter()


@router.get("", response_model=list[SkillResult])
async def list_skills(
    svc: Annotated[SkillService, Depends(get_skill_service)],
):
    return await svc.list_all()


@router.get("/summary", response_model=list[SkillSummary])
async def list_skill_summaries(
    svc: Annotated[SkillService, Depends(get_skill_service)],
):
    return await svc.list_summaries()


@router.get("/paged", response_model=PagedResult[SkillResult])
async def list_skills_paged(
    svc: Annotated[SkillService, Depends(get_skill_service)],
    page: Annotated[int, Query()] = DEFAULT_PAGE,
    page_size: Annotated[int, Query()] = DEFAULT_PAGE_SIZE,
):
    return await svc.list_paged(page, page_size)


@router.get("/{skill_id}", response_model=SkillResult)
async def get_skill(
    skill_id: int,
    svc: Annotated[SkillService, Depends(get_skill_service)],
):
    return await svc.get(skill_id)


@router.post("", response_model=SkillResult, status_code=201)
@limit_writes
async def create_skill(
    request: Request,
    body: SkillRequest,
    svc: Annotated[SkillService, Depends(get_skill_service)],
    _: Annotated[AccountResult, Depends(get_current_account)],
):
    """Create a skill for an existing portfolio user."""
    return await svc.create(body.to_dto())


@router.put("/{skill_id}", status_code=204)
@limit_writes
async def update_skill(
    request: Request,
    skill_id: int,
    body: SkillRequest,
    svc: Annotated[SkillService, Depends(get_skill_service)],
    _: Annotated[AccountResult, Depends(get_current_account)],
) -> None:
    await svc.update(skill_id, body.to_dto())


@router.delete("/{skill_id}", status_code=204)
@limit_writes
async def delete_skill(
    request: Request,
    skill_id: int,
    svc: Annotated[SkillService, Depends(get_skill_service)],
    _: Annotated[AccountResult, Depends(require_admin)],
) -> None:
    """Delete a skill (Admin only)."""
    await svc.delete(skill_id)
