"""
FastAPI application factory.

This file:
1. Creates the FastAPI app
2. Runs startup logic (create DB tables, connect to Redis)
3. Registers all routers (health, auth, tasks)
4. Runs shutdown logic (close connections)

To run:  uvicorn api.main:app --host 0.0.0.0 --port 8000 --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from redis.asyncio import Redis as AsyncRedis

from config.settings import Settings, settings
from models.base import async_engine, Base
from api.routers import auth, health, tasks

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def uses_default_jwt_secret(config: Settings = settings) -> bool:
    """True when JWT_SECRET was not overridden by the environment or .env."""
    default = Settings.model_fields["JWT_SECRET"].default
    if config.JWT_SECRET == default:
        logger.warning(
            "JWT_SECRET is still the built-in default; tokens can be forged by anyone "
            "who has read the source. Set JWT_SECRET in the environment or .env."
        )
        return True
    return False


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Runs on startup (before yield) and shutdown (after yield).

    Startup:
    - Warns if JWT_SECRET is still the built-in default
    - Creates all DB tables if they don't exist (safe to run multiple times)
    - Connects to Redis (backs the response cache)

    Shutdown:
    - Closes Redis connection
    - Disposes the DB engine (closes connection pool)
    """
    # ── Startup ─────────────────────────────────────────────────
    uses_default_jwt_secret()

    logger.info("Creating database tables...")
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    app.state.redis = AsyncRedis.from_url(settings.redis_url)
    logger.info("API ready")

    yield

    # ── Shutdown ────────────────────────────────────────────────
    await app.state.redis.aclose()
    await async_engine.dispose()
    logger.info("API shut down")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    app = FastAPI(
        title="Task Tracker",
        description="Multi-user task tracker with a priority/age scheduled view of pending work",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(tasks.router)

    return app


# This is what uvicorn imports: `uvicorn api.main:app`
app = create_app()
