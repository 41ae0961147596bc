"""Shared utilities: request context, telemetry, and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.context import get_correlation_id, set_correlation_id
from app.shared.utils import (
    generate_correlation_id,
    generate_cuid,
    utc_now,
)

__all__ = [
    "generate_correlation_id",
    "generate_cuid",
    "get_correlation_id",
    "set_correlation_id",
    "utc_now",
]
