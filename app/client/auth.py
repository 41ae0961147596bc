"""Client-side sign in, registration and sign out."""

from __future__ import annotations

import logging

from app.client.app_state import AppStateService
from app.client.http import ApiClient, ApiError
from app.schemas.auth import AuthResponse

logger = logging.getLogger(__name__)


class AuthClient:
    """Keeps the session token on the ApiClient.

    login/register return the server's AuthResponse; on failure it carries
    success=False and the server's message, and the token is left unset.
    """

    def __init__(self, api: ApiClient, state: AppStateService) -> None:
        self.api = api
        self.state = state
        self.email: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.api.token is not None

    async def _authenticate(self, path: str, email: str, password: str) -> AuthResponse:
        try:
            response = await self.api.request(
                "POST", path, json={"email": email, "password": password}
            )
        except ApiError as e:
            return AuthResponse(success=False, message=e.message)
        result = AuthResponse.model_validate(response.json())
        if result.success and result.token:
            self.api.token = result.token
            self.email = result.email
        return result

    async def login(self, email: str, password: str) -> AuthResponse:
        return await self._authenticate("/auth/login", email, password)

    async def register(self, email: str, password: str) -> AuthResponse:
        return await self._authenticate("/auth/register", email, password)

    def logout(self) -> None:
        """Drop the token and every cached collection."""
        self.api.token = None
        self.email = None
        self.state.clear_all()
        logger.info("Signed out")
