"""Shared utilities: datetime and identifier generators."""

from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_correlation_id, generate_cuid

__all__ = [
    "generate_correlation_id",
    "generate_cuid",
    "utc_now",
]
