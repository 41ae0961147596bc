"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")
    cache_backend: str = Field(..., description="Configured cache backend (memory or redis)")
    cache_available: bool = Field(..., description="Whether the cache store is reachable")
