"""Health check endpoint. No database access; used for liveness probes."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_cache
from app.core.config import get_settings
from app.infrastructure.cache import CacheService
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(cache: Annotated[CacheService, Depends(get_cache)]) -> HealthResponse:
    """Return ok plus the cache backend in use and whether it is reachable."""
    return HealthResponse(
        cache_backend=get_settings().cache_backend,
        cache_available=cache.is_available(),
    )
