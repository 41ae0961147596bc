"""HTTP middleware: correlation ID and request timing.

Applied in main app; order matters (first added = outermost).
Import and use from app.main.
"""

from app.middleware.correlation_id import CorrelationIDMiddleware
from app.middleware.performance import PerformanceMiddleware

__all__ = [
    "CorrelationIDMiddleware",
    "PerformanceMiddleware",
]
