"""Account registration, login, and bootstrap of the admin account."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from app.application.dtos.account import AccountResult, TokenResult
from app.application.interfaces.repositories import IAccountRepository
from app.domain.enums import UserRole
from app.domain.exceptions import (
    AccountAlreadyExistsException,
    AuthenticationException,
    ValidationException,
)

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class AuthService:
    """Issues tokens for registered accounts.

    auth_security provides hash_password, verify_password, password_problems
    and create_access_token (composition root supplies the implementation).
    Bcrypt runs in a worker thread so hashing never blocks the event loop.
    """

    def __init__(self, accounts: IAccountRepository, auth_security: Any) -> None:
        self._accounts = accounts
        self._auth_security = auth_security

    def _issue(self, account: AccountResult) -> TokenResult:
        token, expiration = self._auth_security.create_access_token(
            account.id, account.email, account.role
        )
        return TokenResult(token=token, email=account.email, expiration=expiration)

    async def register(self, email: str, password: str) -> TokenResult:
        """Create a User-role account and return a token for it.

        Raises:
            AccountAlreadyExistsException: If the email is already registered.
            ValidationException: If the password does not meet the strength rules.
        """
        problems = self._auth_security.password_problems(password)
        if problems:
            raise ValidationException(
                f"Registration failed: {' '.join(problems)}", field="password"
            )
        if await self._accounts.get_by_email(email) is not None:
            raise AccountAlreadyExistsException(email)
        hashed = await asyncio.to_thread(self._auth_security.hash_password, password)
        account = await self._accounts.create_account(email, hashed, UserRole.USER.value)
        logger.info("Registered account %s", account.id)
        return self._issue(account)

    async def login(self, email: str, password: str) -> TokenResult:
        """Verify credentials and return a token.

        Raises:
            AuthenticationException: If the email is unknown or the password is wrong.
        """
        account = await self._accounts.get_by_email(email)
        hashed = await self._accounts.get_password_hash(email) if account else None
        if account is None or hashed is None:
            raise AuthenticationException(INVALID_CREDENTIALS)
        ok = await asyncio.to_thread(self._auth_security.verify_password, password, hashed)
        if not ok:
            logger.info("Failed login for account %s", account.id)
            raise AuthenticationException(INVALID_CREDENTIALS)
        return self._issue(account)

    async def ensure_admin(self, email: str, password: str) -> bool:
        """Create the Admin account if it does not exist. Returns True if created."""
        if await self._accounts.get_by_email(email) is not None:
            return False
        hashed = await asyncio.to_thread(self._auth_security.hash_password, password)
        try:
            await self._accounts.create_account(email, hashed, UserRole.ADMIN.value)
        except AccountAlreadyExistsException:
            # Another worker created it first
            return False
        logger.info("Created bootstrap admin account %s", email)
        return True
