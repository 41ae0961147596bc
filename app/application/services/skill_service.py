"""Skill service: cached reads and owner-checked writes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from app.application.dtos.skill import SkillCreate, SkillResult, SkillSummary
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
from app.application.services.project_service import owner_ids
from app.domain.exceptions import ValidationException


class SkillService(CachedEntityService[SkillResult, SkillSummary, SkillCreate]):
    """Skills belong to an existing portfolio user."""

    resource_type = "Skill"
    result_type = SkillResult
    summary_type = SkillSummary

    def __init__(
        self,
        repo: IEntityRepository[SkillResult, SkillSummary, SkillCreate],
        owners: IPortfolioUserRepository,
        cache: ICacheService,
        invalidator: ICacheInvalidator,
        keys: IEntityKeys,
    ) -> None:
        super().__init__(repo, cache, invalidator, keys)
        self.owners = owners

    async def _validate(self, data: SkillCreate) -> None:
        if not await self.owners.exists(data.portfolio_user_id):
            raise ValidationException(
                f"PortfolioUser with ID {data.portfolio_user_id} does not exist.",
                field="portfolio_user_id",
            )

    def _related_ids(
        self, before: SkillResult | None, after: SkillResult | None
    ) -> Mapping[str, Iterable[int]]:
        return {"PortfolioUser": owner_ids(before, after)}
