"""Create an Admin account (Postgres only).

Usage:
    python -m scripts.create_admin <email> [password]
If password is omitted, a random one that meets the strength rules is printed.
All imports use app.*.
"""

import asyncio
import secrets
import sys

from app.api.v1.dependencies import AuthSecurity
from app.application.services import AuthService
from app.infrastructure.persistence import database
from app.infrastructure.persistence.repositories import AccountRepository


async def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python -m scripts.create_admin <email> [password]", file=sys.stderr)
        sys.exit(1)
    email = sys.argv[1]
    # Prefix guarantees a digit, a lowercase and an uppercase letter
    password = sys.argv[2] if len(sys.argv) > 2 else "Aa1" + secrets.token_urlsafe(12)

    database.get_engine()
    if database.AsyncSessionLocal is None:
        print("DATABASE_URL not configured", file=sys.stderr)
        sys.exit(1)
    try:
        async with database.AsyncSessionLocal() as session:
            created = await AuthService(
                AccountRepository(session), AuthSecurity()
            ).ensure_admin(email, password)
    finally:
        await database.dispose_engine()
    if not created:
        print(f"Account already exists: {email}", file=sys.stderr)
        sys.exit(1)
    print(f"Created admin: {email}")
    if len(sys.argv) <= 2:
        print(f"Password: {password}")


if __name__ == "__main__":
    asyncio.run(main())
