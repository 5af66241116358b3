"""
Per-user response cache backed by Redis.

GET endpoints store their JSON body under a key that includes the user:

    taskapi:<user_id>:/api/tasks/?page=1&limit=10
    taskapi:<user_id>:/api/tasks/scheduled

Writes (create/update/delete) do not reach into the cache directly. They
build a CacheInvalidation message and hand it to ResponseCache.invalidate(),
which drops every key of that user. Other users' entries are untouched.

The cache is best-effort: a Redis error is logged and the request carries on
uncached. A cache outage must never turn into a failed request.

Known race: a GET reads the database and only then calls set(). If a write
for the same user invalidates in between, the GET's older body is stored
after the invalidation and is served until it expires (CACHE_TTL_SECONDS).
There is no version guard on set().
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from config.settings import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheInvalidation:
    """Tells the cache that a user's data changed."""
    user_id: str
    reason: str


class ResponseCache:

    def __init__(self, redis: Redis, ttl: int = settings.CACHE_TTL_SECONDS,
                 prefix: str = settings.CACHE_KEY_PREFIX):
        self._redis = redis
        self._ttl = ttl
        self._prefix = prefix

    def key_for(self, user_id: str, path: str, query: str = "") -> str:
        suffix = f"{path}?{query}" if query else path
        return f"{self._prefix}:{user_id}:{suffix}"

    async def get(self, key: str) -> Optional[Any]:
        try:
            raw = await self._redis.get(key)
        except RedisError as e:
            logger.warning(f"Cache read failed for {key}: {e}")
            return None
        if raw is None:
            return None
        logger.debug(f"Cache hit for {key}")
        return json.loads(raw)

    async def set(self, key: str, value: Any) -> None:
        try:
            await self._redis.setex(key, self._ttl, json.dumps(value))
        except RedisError as e:
            logger.warning(f"Cache write failed for {key}: {e}")

    async def invalidate(self, message: CacheInvalidation) -> int:
        """Delete all cached responses of one user. Returns how many keys went."""
        pattern = f"{self._prefix}:{message.user_id}:*"
        try:
            keys = [key async for key in self._redis.scan_iter(match=pattern)]
            if keys:
                await self._redis.delete(*keys)
        except RedisError as e:
            logger.warning(f"Cache invalidation failed for user {message.user_id}: {e}")
            return 0

        if keys:
            logger.debug(
                f"Invalidated {len(keys)} cached responses for user "
                f"{message.user_id} ({message.reason})"
            )
        return len(keys)
