"""Insert the sample portfolios into an empty database.

Usage:
    python -m scripts.seed_sample_data
Creates tables first when DATABASE_AUTO_CREATE is set. With CACHE_BACKEND=redis
the shared aggregate caches are cleared afterwards, as the API does.
All imports use app.*.
"""

import asyncio
import sys

from app.application.services import SeedService
from app.core.config import get_settings
from app.core.lifespan import build_cache_store
from app.domain.exceptions import ValidationException
from app.infrastructure.cache import CacheInvalidator, CacheService, RedisCacheStore
from app.infrastructure.persistence import database
from app.infrastructure.persistence.repositories import PortfolioUserRepository


async def main() -> None:
    settings = get_settings()
    if settings.database_auto_create:
        await database.init_db()
    database.get_engine()
    if database.AsyncSessionLocal is None:
        print("DATABASE_URL not configured", file=sys.stderr)
        sys.exit(1)

    store = build_cache_store(settings)
    if isinstance(store, RedisCacheStore):
        await store.connect()
    try:
        async with database.AsyncSessionLocal() as session:
            svc = SeedService(
                PortfolioUserRepository(session), CacheInvalidator(CacheService(store))
            )
            try:
                inserted = await svc.seed()
            except ValidationException as e:
                print(e.message, file=sys.stderr)
                sys.exit(1)
        print(f"Inserted {inserted} portfolio users")
    finally:
        if isinstance(store, RedisCacheStore):
            await store.disconnect()
        await database.dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
