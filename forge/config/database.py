"""
Async engine and per-request session management.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from forge.config.settings import settings


def get_database_url() -> str:
    """Get database URL from settings."""
    return str(settings.DATABASE_URL)


def _engine_options(url: str) -> Dict[str, Any]:
    options: Dict[str, Any] = {"echo": settings.DATABASE_ECHO}
    if url.startswith("sqlite") or settings.ENVIRONMENT == "test":
        options["poolclass"] = NullPool
        return options

    options.update(
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=settings.DATABASE_MAX_OVERFLOW,
        pool_timeout=settings.DATABASE_POOL_TIMEOUT,
        pool_recycle=settings.DATABASE_POOL_RECYCLE,
        pool_pre_ping=True,
    )
    return options


def create_engine(database_url: str = None) -> AsyncEngine:
    """Create the async engine for PostgreSQL (asyncpg) or SQLite (aiosqlite)."""
    url = database_url or get_database_url()
    return create_async_engine(url, **_engine_options(url))


def get_async_session_factory(
    engine: AsyncEngine = None,
) -> async_sessionmaker[AsyncSession]:
    """
    Build a session factory.

    Loaded objects stay usable after commit; nothing autoflushes.
    """
    return async_sessionmaker(
        engine or create_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


engine = create_engine()
async_session_factory = get_async_session_factory(engine)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield one session per request, rolled back if the request fails."""
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def dispose_engine() -> None:
    """Close pooled connections on shutdown."""
    await engine.dispose()
