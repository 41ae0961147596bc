"""Auth API: register and login.

Both return an AuthResponse body, also on failure (success=False with the
reason in message), so clients can show the message as-is.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.api.v1.dependencies import get_auth_service
from app.application.dtos.account import TokenResult
from app.application.services import AuthService
from app.core.exception_handlers import status_for
from app.core.limiter import limit_auth
from app.domain.exceptions import SkillSnapException
from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest

router = APIRouter()


def _success(result: TokenResult, message: str) -> AuthResponse:
    return AuthResponse(
        success=True,
        message=message,
        token=result.token,
        email=result.email,
        expiration=result.expiration,
    )


def _failure(exc: SkillSnapException) -> JSONResponse:
    body = AuthResponse(success=False, message=exc.message)
    return JSONResponse(status_code=status_for(exc), content=body.model_dump(mode="json"))


@router.post(
    "/register",
    response_model=AuthResponse,
    responses={400: {"model": AuthResponse}, 409: {"model": AuthResponse}},
)
@limit_auth
async def register(
    request: Request,
    body: RegisterRequest,
    auth_svc: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new account with role User and return a token for it."""
    try:
        result = await auth_svc.register(body.email, body.password)
    except SkillSnapException as e:
        return _failure(e)
    return _success(result, "Registration successful")


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={401: {"model": AuthResponse}},
)
@limit_auth
async def login(
    request: Request,
    body: LoginRequest,
    auth_svc: Annotated[AuthService, Depends(get_auth_service)],
):
    """Authenticate with email and password; return a JWT."""
    try:
        result = await auth_svc.login(body.email, body.password)
    except SkillSnapException as e:
        return _failure(e)
    return _success(result, "Login successful")
