"""
FastAPI dependency injection.

How this works:
- An endpoint declares `db: AsyncSession = Depends(get_db)`
- FastAPI calls get_db() before your endpoint runs, creating a DB session
- Your endpoint receives the session and uses it
- After the endpoint returns (or raises), the session is automatically closed

Tests override get_db and get_redis; everything built on top of them
(the response cache, the current user) follows automatically.
"""

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from redis.asyncio import Redis

from api.cache import ResponseCache
from models.base import AsyncSessionLocal


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yields an async database session, auto-closes when the request ends."""
    async with AsyncSessionLocal() as session:
        yield session


async def get_redis(request: Request) -> Redis:
    """Returns the Redis client stored on the app during startup."""
    return request.app.state.redis


async def get_cache(redis: Redis = Depends(get_redis)) -> ResponseCache:
    return ResponseCache(redis)
