"""
SQLAlchemy engine and session factory.

The whole application is async (FastAPI handlers), so there is a single
asyncpg-backed engine. Tests swap it for SQLite in memory via aiosqlite
by overriding the get_db dependency.
"""

from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker

from config.settings import settings


class Base(DeclarativeBase):
    """Base class for all ORM models. SQLAlchemy uses this to track table metadata."""
    pass


async_engine = create_async_engine(settings.database_url, echo=False)
AsyncSessionLocal = async_sessionmaker(async_engine, expire_on_commit=False)
