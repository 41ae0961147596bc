"""DTOs for accounts and issued tokens (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AccountResult:
    """Account read-model. No password hash."""

    id: str
    email: str
    role: str


@dataclass(frozen=True)
class TokenResult:
    token: str
    email: str
    expiration: datetime
