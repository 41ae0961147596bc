"""Account repository. Interface methods return application DTOs."""

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.account import AccountResult
from app.domain.exceptions import AccountAlreadyExistsException
from app.infrastructure.persistence.models.account import Account
from app.infrastructure.persistence.repositories.base import BaseRepository


def _to_result(a: Account) -> AccountResult:
    """Map ORM Account to AccountResult (no password)."""
    return AccountResult(id=a.id, email=a.email, role=a.role)


class AccountRepository(BaseRepository[Account]):
    """Login accounts. Emails are stored lower-cased and compared case-insensitively."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Account)

    async def _by_email(self, email: str) -> Account | None:
        result = await self.db.execute(
            select(Account).where(func.lower(Account.email) == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> AccountResult | None:
        account = await self._by_email(email)
        return _to_result(account) if account else None

    async def get_password_hash(self, email: str) -> str | None:
        account = await self._by_email(email)
        return account.hashed_password if account else None

    async def create_account(
        self, email: str, hashed_password: str, role: str
    ) -> AccountResult:
        """Insert and commit an account.

        Raises:
            AccountAlreadyExistsException: If the email is already registered.
        """
        normalized = email.strip().lower()
        account = Account(email=normalized, hashed_password=hashed_password, role=role)
        try:
            await self.add(account)
            await self.commit()
        except IntegrityError as e:
            await self.rollback()
            raise AccountAlreadyExistsException(normalized) from e
        return _to_result(account)
