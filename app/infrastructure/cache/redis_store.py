"""Redis-backed cache store shared across application instances.

Each entry is stored as two keys: the JSON payload and a companion meta key
holding the sliding window in milliseconds. The meta key's own TTL is the
absolute lifetime, so the remaining time before the absolute deadline is
always PTTL(meta). Every read re-arms the payload TTL to
min(sliding, remaining absolute) inside a Lua script so the touch is
atomic; tracking-set adds and pops run as Lua scripts as well.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from datetime import timedelta
from typing import Any, TypeVar

import redis.asyncio as redis

from app.core.config import get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

_GET_SCRIPT = """
local value = redis.call('GET', KEYS[1])
if not value then
  return false
end
local sliding = tonumber(redis.call('GET', KEYS[2]) or '0')
local remaining = redis.call('PTTL', KEYS[2])
if sliding > 0 and remaining > 0 then
  redis.call('PEXPIRE', KEYS[1], math.min(sliding, remaining))
end
return value
"""

_ADD_TO_SET_SCRIPT = """
if redis.call('EXISTS', KEYS[1]) == 0 or redis.call('PTTL', KEYS[2]) <= 0 then
  redis.call('SET', KEYS[2], ARGV[2], 'PX', ARGV[3])
end
redis.call('SADD', KEYS[1], ARGV[1])
local sliding = tonumber(redis.call('GET', KEYS[2]))
local remaining = redis.call('PTTL', KEYS[2])
redis.call('PEXPIRE', KEYS[1], math.min(sliding, remaining))
return 1
"""

_GET_SET_SCRIPT = """
if redis.call('EXISTS', KEYS[1]) == 0 then
  return false
end
local members = redis.call('SMEMBERS', KEYS[1])
local sliding = tonumber(redis.call('GET', KEYS[2]) or '0')
local remaining = redis.call('PTTL', KEYS[2])
if sliding > 0 and remaining > 0 then
  redis.call('PEXPIRE', KEYS[1], math.min(sliding, remaining))
end
return members
"""

_POP_SET_SCRIPT = """
if redis.call('EXISTS', KEYS[1]) == 0 then
  redis.call('DEL', KEYS[2])
  return false
end
local members = redis.call('SMEMBERS', KEYS[1])
redis.call('DEL', KEYS[1], KEYS[2])
return members
"""


def _ms(delta: timedelta) -> int:
    return max(1, int(delta.total_seconds() * 1000))


class RedisCacheStore:
    """Async Redis CacheStore with sliding and absolute expiration.

    Uses app.core.config for connection settings. Call connect() at startup
    and disconnect() at shutdown. Backend failures never propagate: reads
    degrade to a miss and writes report False.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize the store.

        Args:
            redis_client: Optional Redis client for testing or DI.
        """
        self.redis = redis_client
        self.settings = get_settings()
        self._prefix = self.settings.redis_key_prefix
        self._connected = redis_client is not None
        self._scripts: dict[str, Any] = {}

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup."""
        if self.redis is not None:
            return
        try:
            self.redis = redis.Redis(
                host=self.settings.redis_host,
                port=self.settings.redis_port,
                db=self.settings.redis_db,
                password=self.settings.redis_password.get_secret_value()
                if self.settings.redis_password
                else None,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_keepalive=True,
            )
            await self.redis.ping()
            self._connected = True
            self._scripts = {}
            logger.info(
                "Redis cache connected: %s:%s",
                self.settings.redis_host,
                self.settings.redis_port,
            )
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis connection failed: %s. Cache disabled.", e)
            self._connected = False
            self.redis = None

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            self._scripts = {}
            logger.info("Redis cache disconnected")

    async def _reconnect(self) -> bool:
        """Attempt to reconnect after a dropped connection. Returns True if reconnected."""
        if self.redis is None:
            return False
        try:
            await self.redis.aclose()
        except redis.RedisError:
            logger.debug("Ignoring error while closing stale Redis connection")
        self.redis = None
        self._connected = False
        self._scripts = {}
        await self.connect()
        return self._connected

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    def _key(self, key: str) -> str:
        return f"{self._prefix}:{key}" if self._prefix else key

    def _meta_key(self, key: str) -> str:
        return f"{self._key(key)}:meta"

    def _script(self, name: str, source: str) -> Any:
        script = self._scripts.get(name)
        if script is None:
            script = self.redis.register_script(source)
            self._scripts[name] = script
        return script

    async def _run(
        self,
        operation: str,
        key: str,
        call: Callable[[], Awaitable[T]],
        default: T,
    ) -> T:
        """Run call against Redis, retrying once after a reconnect.

        Args:
            operation: Operation name for log messages.
            key: Cache key for log messages.
            call: Zero-arg coroutine factory issuing the Redis command(s).
            default: Value returned when Redis is unavailable or errors.
        """
        if not self.is_available() or self.redis is None:
            return default
        try:
            return await call()
        except (redis.ConnectionError, redis.TimeoutError):
            if await self._reconnect():
                try:
                    return await call()
                except redis.RedisError:
                    logger.exception("Cache %s error for key %s after reconnect", operation, key)
                    return default
            logger.warning("Cache %s unavailable for key %s (Redis disconnected)", operation, key)
            return default
        except redis.RedisError:
            logger.exception("Cache %s error for key %s", operation, key)
            return default

    async def get(self, key: str) -> Any | None:
        """Return the JSON-decoded value (re-arming its sliding TTL) or None."""

        async def call() -> Any | None:
            script = self._script("get", _GET_SCRIPT)
            raw = await script(keys=[self._key(key), self._meta_key(key)])
            return None if raw is None else json.loads(raw)

        return await self._run("get", key, call, None)

    async def set(
        self, key: str, value: Any, sliding: timedelta, absolute: timedelta
    ) -> bool:
        """Store value (JSON-serializable) with both deadlines."""
        payload = json.dumps(value)
        sliding_ms = _ms(sliding)
        absolute_ms = _ms(absolute)

        async def call() -> bool:
            async with self.redis.pipeline(transaction=True) as pipe:
                pipe.set(self._key(key), payload, px=min(sliding_ms, absolute_ms))
                pipe.set(self._meta_key(key), sliding_ms, px=absolute_ms)
                await pipe.execute()
            return True

        return await self._run("set", key, call, False)

    async def delete(self, key: str) -> bool:
        """Remove the payload and its meta key."""

        async def call() -> bool:
            await self.redis.delete(self._key(key), self._meta_key(key))
            return True

        return await self._run("delete", key, call, False)

    async def add_to_set(
        self, key: str, member: str, sliding: timedelta, absolute: timedelta
    ) -> bool:
        """Create the set if absent, then add member, in one server-side step."""

        async def call() -> bool:
            script = self._script("add_to_set", _ADD_TO_SET_SCRIPT)
            await script(
                keys=[self._key(key), self._meta_key(key)],
                args=[member, _ms(sliding), _ms(absolute)],
            )
            return True

        return await self._run("add_to_set", key, call, False)

    async def get_set(self, key: str) -> set[str] | None:
        """Return the set members (re-arming its sliding TTL) or None."""

        async def call() -> set[str] | None:
            script = self._script("get_set", _GET_SET_SCRIPT)
            members = await script(keys=[self._key(key), self._meta_key(key)])
            return None if members is None else set(members)

        return await self._run("get_set", key, call, None)

    async def pop_set(self, key: str) -> set[str] | None:
        """Remove the set and its meta key in one server-side step; return its members."""

        async def call() -> set[str] | None:
            script = self._script("pop_set", _POP_SET_SCRIPT)
            members = await script(keys=[self._key(key), self._meta_key(key)])
            return None if members is None else set(members)

        return await self._run("pop_set", key, call, None)
