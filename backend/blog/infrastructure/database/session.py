"""SQLAlchemy engine, connection pool and session factory configuration."""

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from blog.config import Settings
from blog.infrastructure.database.base import Base

logger = logging.getLogger(__name__)


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def _pool_options(settings: Settings) -> dict:
    """Pool limits for server backends.

    ``pool_size`` bounds the idle connections kept open, ``pool_size +
    max_overflow`` bounds all open connections, and ``pool_recycle`` replaces
    connections older than the configured lifetime.
    """
    return {
        "pool_size": settings.db_max_idle_conns,
        "max_overflow": max(settings.db_max_open_conns - settings.db_max_idle_conns, 0),
        "pool_recycle": settings.db_conn_max_lifetime,
        "pool_pre_ping": True,
    }


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Build the async engine; SQLite keeps the dialect's default pool."""
    async_url = _get_async_url(settings.database_url)
    options: dict = {"echo": settings.db_echo}
    if not async_url.startswith("sqlite"):
        options.update(_pool_options(settings))
    return create_async_engine(async_url, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def init_models(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet (idempotent)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ping_database(engine: AsyncEngine) -> bool:
    """Check that the database answers; failures are logged, not raised."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Database ping failed: %s", exc)
        return False
    return True
