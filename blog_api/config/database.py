"""Database configuration: lazily built async engine and session factory."""

import logging

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from .settings import settings

logger = logging.getLogger(__name__)

# Global engine variables (lazy initialization)
async_engine: AsyncEngine | None = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores ON DELETE actions unless the pragma is set per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_async_engine(url: str, **engine_kwargs) -> AsyncEngine:
    """Create an async engine, wiring dialect specific connection hooks."""
    engine = create_async_engine(url, **engine_kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to ``engine``."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


def get_async_engine() -> AsyncEngine:
    """Get or create async engine."""
    global async_engine
    if async_engine is None:
        engine_kwargs = {"echo": settings.DATABASE_ECHO, "pool_pre_ping": True}
        if not settings.DATABASE_URL.startswith("sqlite"):
            engine_kwargs["pool_recycle"] = 3600
        async_engine = build_async_engine(settings.DATABASE_URL, **engine_kwargs)
    return async_engine


def get_async_session_local() -> async_sessionmaker[AsyncSession]:
    """Get or create async session factory."""
    global AsyncSessionLocal
    if AsyncSessionLocal is None:
        AsyncSessionLocal = build_session_factory(get_async_engine())
    return AsyncSessionLocal


async def init_models(engine: AsyncEngine | None = None) -> None:
    """Create all tables that do not exist yet."""
    from blog_api.models import Base

    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured", extra={"tables": sorted(Base.metadata.tables)})


async def dispose_engine() -> None:
    """Close pooled connections on shutdown."""
    if async_engine is not None:
        await async_engine.dispose()
    reset_engines()


def reset_engines():
    """Reset engine and session factory so new settings are picked up."""
    global async_engine, AsyncSessionLocal
    async_engine = None
    AsyncSessionLocal = None
