"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., JWT_SECRET env var → Settings.JWT_SECRET)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

Every module imports `settings` from here instead of hardcoding values.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── PostgreSQL ──────────────────────────────────────────────
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "tasktracker"
    POSTGRES_PASSWORD: str = "tasktracker"
    POSTGRES_DB: str = "tasktracker"

    # ── Redis ───────────────────────────────────────────────────
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0

    # ── Auth ────────────────────────────────────────────────────
    JWT_SECRET: str = "dev-only-secret-change-me-in-production-0123456789"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 60

    # ── Response cache ──────────────────────────────────────────
    CACHE_TTL_SECONDS: int = 300       # how long a cached GET response lives
    CACHE_KEY_PREFIX: str = "taskapi"

    # ── Pagination ──────────────────────────────────────────────
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    # ── App ─────────────────────────────────────────────────────
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    @property
    def database_url(self) -> str:
        """Async connection string for FastAPI (uses asyncpg driver)."""
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def redis_url(self) -> str:
        return f"redis://{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton: import this everywhere
settings = Settings()
