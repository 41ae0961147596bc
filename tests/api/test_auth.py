"""Auth API: register/login bodies on success and failure."""

from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from app.api.v1.dependencies import AuthSecurity, get_auth_service
from app.application.dtos.account import AccountResult
from app.application.services import AuthService
from app.infrastructure.security.password import get_password_hash
from app.main import app


@pytest.fixture
def accounts() -> AsyncMock:
    repo = AsyncMock()
    repo.get_by_email = AsyncMock(return_value=None)
    repo.create_account = AsyncMock(
        side_effect=lambda email, hashed, role: AccountResult("acc1", email, role)
    )
    return repo


@pytest.fixture(autouse=True)
def _service(accounts) -> None:
    app.dependency_overrides[get_auth_service] = lambda: AuthService(accounts, AuthSecurity())


async def test_register_success(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/register", json={"email": "new@skillsnap.io", "password": "Secret123"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["email"] == "new@skillsnap.io"
    assert data["token"]
    assert data["expiration"]


async def test_register_weak_password_is_400(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/register", json={"email": "new@skillsnap.io", "password": "weak"}
    )
    assert response.status_code == 400
    data = response.json()
    assert data["success"] is False
    assert data["message"].startswith("Registration failed:")
    assert data["token"] is None


async def test_register_duplicate_is_409(client: AsyncClient, accounts) -> None:
    accounts.get_by_email = AsyncMock(
        return_value=AccountResult("acc1", "new@skillsnap.io", "User")
    )
    response = await client.post(
        "/api/v1/auth/register", json={"email": "new@skillsnap.io", "password": "Secret123"}
    )
    assert response.status_code == 409
    assert response.json()["success"] is False


async def test_register_invalid_email_is_422(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/register", json={"email": "not-an-email", "password": "Secret123"}
    )
    assert response.status_code == 422


async def test_login_success(client: AsyncClient, accounts) -> None:
    accounts.get_by_email = AsyncMock(return_value=AccountResult("acc1", "a@skillsnap.io", "User"))
    accounts.get_password_hash = AsyncMock(return_value=get_password_hash("Secret123"))
    response = await client.post(
        "/api/v1/auth/login", json={"email": "a@skillsnap.io", "password": "Secret123"}
    )
    assert response.status_code == 200
    assert response.json()["success"] is True


async def test_login_wrong_password_is_401(client: AsyncClient, accounts) -> None:
    accounts.get_by_email = AsyncMock(return_value=AccountResult("acc1", "a@skillsnap.io", "User"))
    accounts.get_password_hash = AsyncMock(return_value=get_password_hash("Secret123"))
    response = await client.post(
        "/api/v1/auth/login", json={"email": "a@skillsnap.io", "password": "Wrong123"}
    )
    assert response.status_code == 401
    assert response.json() == {
        "success": False,
        "message": "Invalid email or password",
        "token": None,
        "email": None,
        "expiration": None,
    }
