"""Client data services: read-through on the session slots, notify on writes.

get_all() serves from the slot while it is fresh and fills it from the API
otherwise. Paged and single-item reads always go to the API (the server
caches those). A successful create/update/delete calls notify_changed() on
the slot; a failed one raises ApiError and leaves the slot as it was.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter

from app.application.dtos.pagination import PagedResult
from app.application.dtos.portfolio_user import PortfolioUserCreate, PortfolioUserResult
from app.application.dtos.project import ProjectCreate, ProjectResult
from app.application.dtos.skill import SkillCreate, SkillResult
from app.client.app_state import AppStateService, CacheSlot
from app.client.http import ApiClient, ApiError
from app.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE

logger = logging.getLogger(__name__)


@lru_cache(maxsize=32)
def _adapter(type_hint: Any) -> TypeAdapter:
    return TypeAdapter(type_hint)


class EntityClient[ResultT, CreateT]:
    """CRUD calls for one resource path, cached in one slot."""

    path: str
    result_type: type[Any]

    def __init__(self, api: ApiClient, slot: CacheSlot[list[ResultT]]) -> None:
        self.api = api
        self.slot = slot

    async def get_all(self) -> list[ResultT]:
        cached = self.slot.get_cached()
        if cached is not None:
            return cached
        data = await self.api.get_json(self.path)
        items = _adapter(list[self.result_type]).validate_python(data)
        self.slot.set_cached(items)
        return items

    async def get_paged(
        self, page: int = DEFAULT_PAGE, page_size: int = DEFAULT_PAGE_SIZE
    ) -> PagedResult[ResultT]:
        data = await self.api.get_json(
            f"{self.path}/paged", params={"page": page, "page_size": page_size}
        )
        return PagedResult[self.result_type].model_validate(data)

    async def get(self, entity_id: int) -> ResultT | None:
        """Return one item, or None when the API answers 404."""
        try:
            data = await self.api.get_json(f"{self.path}/{entity_id}")
        except ApiError as e:
            if e.status_code == 404:
                return None
            raise
        return _adapter(self.result_type).validate_python(data)

    async def create(self, data: CreateT) -> ResultT:
        response = await self.api.request("POST", self.path, json=asdict(data))
        self.slot.notify_changed()
        return _adapter(self.result_type).validate_python(response.json())

    async def update(self, entity_id: int, data: CreateT) -> None:
        await self.api.request("PUT", f"{self.path}/{entity_id}", json=asdict(data))
        self.slot.notify_changed()

    async def delete(self, entity_id: int) -> None:
        await self.api.request("DELETE", f"{self.path}/{entity_id}")
        self.slot.notify_changed()


class PortfolioUserClient(EntityClient[PortfolioUserResult, PortfolioUserCreate]):
    path = "/portfolio-users"
    result_type = PortfolioUserResult

    def __init__(self, api: ApiClient, state: AppStateService) -> None:
        super().__init__(api, state.portfolio_users)


class ProjectClient(EntityClient[ProjectResult, ProjectCreate]):
    path = "/projects"
    result_type = ProjectResult

    def __init__(self, api: ApiClient, state: AppStateService) -> None:
        super().__init__(api, state.projects)


class SkillClient(EntityClient[SkillResult, SkillCreate]):
    path = "/skills"
    result_type = SkillResult

    def __init__(self, api: ApiClient, state: AppStateService) -> None:
        super().__init__(api, state.skills)
