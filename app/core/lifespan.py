"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (cache store,
schema creation, bootstrap admin, telemetry, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import Settings, get_settings
from app.infrastructure.cache import CacheService, MemoryCacheStore, RedisCacheStore

logger = logging.getLogger(__name__)


def build_cache_store(settings: Settings) -> MemoryCacheStore | RedisCacheStore:
    """Return the store selected by CACHE_BACKEND (not yet connected)."""
    if settings.cache_backend == "redis":
        return RedisCacheStore()
    return MemoryCacheStore(max_entries=settings.cache_max_entries)


async def _bootstrap_admin(settings: Settings) -> None:
    """Create the ADMIN_EMAIL account with role Admin when it does not exist."""
    if not settings.admin_email or settings.admin_password is None:
        return

    from app.api.v1.dependencies import AuthSecurity
    from app.application.services.auth_service import AuthService
    from app.infrastructure.persistence import database
    from app.infrastructure.persistence.repositories import AccountRepository

    database.get_engine()
    if database.AsyncSessionLocal is None:
        return
    try:
        async with database.AsyncSessionLocal() as session:
            created = await AuthService(AccountRepository(session), AuthSecurity()).ensure_admin(
                settings.admin_email, settings.admin_password.get_secret_value()
            )
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Admin bootstrap skipped, database unavailable: %s", e)
        return
    if created:
        logger.info("Admin account ready")


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: cache store (memory or Redis), schema creation (if
    DATABASE_AUTO_CREATE), bootstrap admin, telemetry (if enabled).
    Shutdown order: cache disconnect, telemetry shutdown, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    store = build_cache_store(settings)
    if isinstance(store, RedisCacheStore):
        await store.connect()
    app.state.cache_store = store
    app.state.cache = CacheService(store)
    logger.info("Cache backend: %s", settings.cache_backend)

    if settings.database_auto_create:
        from app.infrastructure.persistence.database import init_db

        await init_db()

    await _bootstrap_admin(settings)

    if settings.telemetry_enabled:
        from app.infrastructure.persistence.database import get_engine
        from app.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        engine = get_engine()
        if engine is not None:
            telemetry.instrument_sqlalchemy(engine)
        if isinstance(store, RedisCacheStore):
            telemetry.instrument_redis()
        logger.info("Telemetry initialized")

    yield

    # ---- Shutdown ----
    store = getattr(app.state, "cache_store", None)
    if isinstance(store, RedisCacheStore):
        await store.disconnect()
        logger.info("Cache disconnected")

    from app.shared.telemetry.telemetry import get_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        logger.info("Telemetry shutdown complete")

    from app.infrastructure.persistence.database import dispose_engine

    await dispose_engine()
