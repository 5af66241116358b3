"""
Health check endpoint.

Checks both the database and Redis connectivity. Load balancers and
container orchestrators use this to decide if the service can take traffic.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import text
from redis.asyncio import Redis

from api.dependencies import get_db, get_redis

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    db: AsyncSession = Depends(get_db),
    redis: Redis = Depends(get_redis),
) -> dict:
    """Check that the database and Redis are reachable."""
    await db.execute(text("SELECT 1"))
    await redis.ping()

    return {"status": "ok", "database": "ok", "redis": "ok"}
