"""Project API: thin routes delegating to ProjectService.

Reads are anonymous and served through the cache; writes need a signed-in
account (delete needs Admin) and invalidate the cached views on commit.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import get_current_account, get_project_service, require_admin
from app.application.dtos.account import AccountResult
from app.application.dtos.pagination import PagedResult
from app.application.dtos.project import ProjectResult, ProjectSummary
from app.application.services import ProjectService
from app.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from app.core.limiter import limit_writes
from app.schemas.project import ProjectRequest

router = APIRouter()


@router.get("", response_model=list[ProjectResult])
async def list_projects(
    svc: Annotated[ProjectService, Depends(get_project_service)],
):
    """All projects with their owner, newest first."""
    return await svc.list_all()


@router.get("/summary", response_model=list[ProjectSummary])
async def list_project_summaries(
    svc: Annotated[ProjectService, Depends(get_project_service)],
):
    return await svc.list_summaries()


@router.get("/paged", response_model=PagedResult[ProjectResult])
async def list_projects_paged(
    svc: Annotated[ProjectService, Depends(get_project_service)],
    page: Annotated[int, Query()] = DEFAULT_PAGE,
    page_size: Annotated[int, Query()] = DEFAULT_PAGE_SIZE,
):
    """One page of projects. Out-of-range page/page_size are clamped."""
    return await svc.list_paged(page, page_size)


@router.get("/{project_id}", response_model=ProjectResult)
async def get_project(
    project_id: int,
    svc: Annotated[ProjectService, Depends(get_project_service)],
):
    return await svc.get(project_id)


@router.post("", response_model=ProjectResult, status_code=201)
@limit_writes
async def create_project(
    request: Request,
    body: ProjectRequest,
    svc: Annotated[ProjectService, Depends(get_project_service)],
    _: Annotated[AccountResult, Depends(get_current_account)],
):
    """Create a project for an existing portfolio user."""
    return await svc.create(body.to_dto())


@router.put("/{project_id}", status_code=204)
@limit_writes
async def update_project(
    request: Request,
    project_id: int,
    body: ProjectRequest,
    svc: Annotated[ProjectService, Depends(get_project_service)],
    _: Annotated[AccountResult, Depends(get_current_account)],
) -> None:
    await svc.update(project_id, body.to_dto())


@router.delete("/{project_id}", status_code=204)
@limit_writes
async def delete_project(
    request: Request,
    project_id: int,
    svc: Annotated[ProjectService, Depends(get_project_service)],
    _: Annotated[AccountResult, Depends(require_admin)],
) -> None:
    """Delete a project (Admin only)."""
    await svc.delete(project_id)
