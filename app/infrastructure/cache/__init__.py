"""Cache: stores, the read-through facade, key builders, and invalidation.

Services read through CacheService and call CacheInvalidator after each
committed write. Key format lives in keys.py (DRY).
"""

from app.infrastructure.cache.cache_protocol import CacheStore
from app.infrastructure.cache.cache_service import CacheService
from app.infrastructure.cache.invalidation import (
    ENTITY_KEYS,
    RELATED_ENTITIES,
    CacheInvalidator,
    keys_to_clear,
)
from app.infrastructure.cache.keys import (
    PORTFOLIO_USER_KEYS,
    PROJECT_KEYS,
    SKILL_KEYS,
    EntityCacheKeys,
)
from app.infrastructure.cache.memory_store import MemoryCacheStore
from app.infrastructure.cache.redis_store import RedisCacheStore

__all__ = [
    "CacheInvalidator",
    "CacheService",
    "CacheStore",
    "ENTITY_KEYS",
    "EntityCacheKeys",
    "MemoryCacheStore",
    "PORTFOLIO_USER_KEYS",
    "PROJECT_KEYS",
    "RELATED_ENTITIES",
    "RedisCacheStore",
    "SKILL_KEYS",
    "keys_to_clear",
]
