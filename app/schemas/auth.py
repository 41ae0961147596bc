"""Auth API schemas."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    """Request body for login."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    """Request body for public registration. New accounts get the User role."""

    email: EmailStr
    password: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="At least 6 characters with a digit, a lowercase and an uppercase letter",
    )


class AuthResponse(BaseModel):
    """Outcome of register/login. token, email and expiration are set on success only."""

    success: bool
    message: str = ""
    token: str | None = None
    email: str | None = None
    expiration: datetime | None = None
