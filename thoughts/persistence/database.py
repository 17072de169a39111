"""Async engine, sessions and schema bootstrap for the SQL thought store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from thoughts.config import Settings
from thoughts.persistence.tables import metadata


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the engine for settings.database.

    SQL is echoed when debug is on.
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions flush explicitly and keep loaded rows usable after commit."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


async def create_schema(engine: AsyncEngine) -> None:
    """Create the thoughts table if it is missing.

    Integration tests use this against a scratch database; deployments
    run the Alembic migrations instead.
    """
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
