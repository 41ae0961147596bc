"""Client tier: API client, per-session state cache, and data services."""

from app.client.app_state import AppStateService, CacheSlot
from app.client.auth import AuthClient
from app.client.http import ApiClient, ApiError
from app.client.services import PortfolioUserClient, ProjectClient, SkillClient

__all__ = [
    "ApiClient",
    "ApiError",
    "AppStateService",
    "AuthClient",
    "CacheSlot",
    "PortfolioUserClient",
    "ProjectClient",
    "SkillClient",
]
