"""Project service: cached reads and owner-checked writes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from app.application.dtos.project import ProjectCreate, ProjectResult, ProjectSummary
from app.application.interfaces.repositories import (
    IEntityRepository,
    IPortfolioUserRepository,
)
from app.application.interfaces.services import (
    ICacheInvalidator,
    ICacheService,
    IEntityKeys,
)
from app.application.services.cached_entity_service import CachedEntityService
from app.domain.exceptions import ValidationException


def owner_ids(*rows: Any) -> set[int]:
    """Collect portfolio_user_id from the non-None rows."""
    return {r.portfolio_user_id for r in rows if r is not None}


class ProjectService(CachedEntityService[ProjectResult, ProjectSummary, ProjectCreate]):
    """Projects belong to an existing portfolio user."""

    resource_type = "Project"
    result_type = ProjectResult
    summary_type = ProjectSummary

    def __init__(
        self,
        repo: IEntityRepository[ProjectResult, ProjectSummary, ProjectCreate],
        owners: IPortfolioUserRepository,
        cache: ICacheService,
        invalidator: ICacheInvalidator,
        keys: IEntityKeys,
    ) -> None:
        super().__init__(repo, cache, invalidator, keys)
        self.owners = owners

    async def _validate(self, data: ProjectCreate) -> None:
        if not await self.owners.exists(data.portfolio_user_id):
            raise ValidationException(
                f"PortfolioUser with ID {data.portfolio_user_id} does not exist.",
                field="portfolio_user_id",
            )

    def _related_ids(
        self, before: ProjectResult | None, after: ProjectResult | None
    ) -> Mapping[str, Iterable[int]]:
        return {"PortfolioUser": owner_ids(before, after)}
