"""Core constants: cache lifetimes and pagination limits.

Single source of truth for the expiration pairs used by the cache facade
and for the page-size bounds used by paged list endpoints.
"""

from datetime import timedelta

# Generic entries (lists, summaries, single items, pages)
DEFAULT_SLIDING_EXPIRATION = timedelta(minutes=5)
DEFAULT_ABSOLUTE_EXPIRATION = timedelta(minutes=10)

# Tracking sets must outlive the pages they track
TRACKING_SET_SLIDING_EXPIRATION = timedelta(minutes=30)
TRACKING_SET_ABSOLUTE_EXPIRATION = timedelta(hours=1)

# Total counts for pagination metadata
COUNT_SLIDING_EXPIRATION = timedelta(minutes=10)
COUNT_ABSOLUTE_EXPIRATION = timedelta(minutes=30)

# Client-side state cache
CLIENT_CACHE_EXPIRATION = timedelta(minutes=5)

# Pagination
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

# Paths left out of request timing logs and traces
HEALTH_PATHS = ("/health", "/api/v1/health")
