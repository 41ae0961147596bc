"""Portfolio user service: cached reads and writes of portfolio owners."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from app.application.dtos.portfolio_user import (
    PortfolioUserCreate,
    PortfolioUserResult,
    PortfolioUserSummary,
)
from app.application.services.cached_entity_service import CachedEntityService


class PortfolioUserService(
    CachedEntityService[PortfolioUserResult, PortfolioUserSummary, PortfolioUserCreate]
):
    """Portfolio users embed their projects and skills.

    Renaming or deleting a user therefore also clears the cached item views
    of its projects and skills, which carry the owner's name (and vanish
    with it on delete).
    """

    resource_type = "PortfolioUser"
    result_type = PortfolioUserResult
    summary_type = PortfolioUserSummary

    def _related_ids(
        self,
        before: PortfolioUserResult | None,
        after: PortfolioUserResult | None,
    ) -> Mapping[str, Iterable[int]]:
        users = [u for u in (before, after) if u is not None]
        return {
            "Project": {p.id for u in users for p in u.projects},
            "Skill": {s.id for u in users for s in u.skills},
        }
