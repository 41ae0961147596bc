"""JWT token creation and verification for authentication.

Tokens are HS256-signed and carry sub (account id), email, role, jti, and the
configured issuer and audience. Uses app.core.config for secret, algorithm,
issuer, audience, and lifetime.
"""

from datetime import datetime, timedelta
from typing import Any, cast
from uuid import uuid4

from jose import JWTError, jwt

from app.core.config import get_settings
from app.shared.utils.datetime import utc_now


def create_access_token(
    account_id: str,
    email: str,
    role: str,
    expires_delta: timedelta | None = None,
) -> tuple[str, datetime]:
    """Create a signed access token for an account.

    Args:
        account_id: Account id (sub claim).
        email: Account email (email claim).
        role: Account role (role claim), e.g. 'Admin' or 'User'.
        expires_delta: Optional TTL; else uses settings.access_token_expire_minutes.

    Returns:
        (encoded JWT, expiration as UTC datetime).
    """
    settings = get_settings()
    expire = utc_now() + (
        expires_delta
        if expires_delta is not None
        else timedelta(minutes=settings.access_token_expire_minutes)
    )
    claims: dict[str, Any] = {
        "sub": account_id,
        "email": email,
        "role": role,
        "jti": str(uuid4()),
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
        "exp": expire,
    }
    encoded = jwt.encode(
        claims,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded), expire


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Enforces signature, expiry, issuer, audience, and presence of sub.

    Raises:
        ValueError: If token is invalid, expired, or missing required claims.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if "sub" not in payload:
        raise ValueError("Token missing required claim: sub")
    return payload
