"""Thin JSON client for the SkillSnap API over httpx.AsyncClient."""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


class ApiError(Exception):
    """A non-2xx API response (or a transport failure, with status_code 0)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class ApiClient:
    """Sends requests under /api/v1 and attaches the bearer token when one is set.

    Args:
        http: Configured httpx.AsyncClient (base_url, transport, timeouts).
    """

    def __init__(self, http: httpx.AsyncClient) -> None:
        self.http = http
        self.token: str | None = None

    def _headers(self) -> dict[str, str]:
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send a request and return the response.

        Raises:
            ApiError: On a non-2xx status or a transport error.
        """
        try:
            response = await self.http.request(
                method,
                f"{API_PREFIX}{path}",
                json=json,
                params=params,
                headers=self._headers(),
            )
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise ApiError(0, str(e)) from e
        if response.is_error:
            raise ApiError(response.status_code, _error_message(response))
        return response

    async def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return (await self.request("GET", path, params=params)).json()


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason_phrase
