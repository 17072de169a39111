"""Thought storage providers.

STORAGE__BACKEND picks one of two implementations of the "persistence"
component. Both provide ThoughtRepository; only the SQL one needs an
engine and per-request sessions.
"""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from thoughts.config import Settings
from thoughts.domain.repository import ThoughtRepository
from thoughts.persistence.database import create_engine, create_session_factory
from thoughts.persistence.repository import SqlThoughtRepository
from thoughts.persistence.repository.inmemory import InMemoryThoughtRepository
from thoughts.util.di.base import ProviderBase
from thoughts.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Swappable thought storage."""

    __component__ = "persistence"


class SqlPersistenceProvider(PersistenceProvider):
    """Thoughts in the SQL thoughts table, one transaction per request."""

    __in_memory__ = False

    @provide(scope=Scope.APP)
    async def engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Engine shared by all requests; disposed with the container."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def session(
        self, factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One session per request.

        Committed when the request scope closes cleanly. Any exception
        escaping the request (a NotFoundError included) rolls back.
        """
        async with factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logfire.warn(
                    "Thought storage rolled back",
                    error_type=type(e).__name__,
                    error=str(e),
                )
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def thought_repository(self, session: AsyncSession) -> ThoughtRepository:
        return SqlThoughtRepository(session)


class InMemoryPersistenceProvider(PersistenceProvider):
    """Thoughts in a process-local dict.

    The repository lives at APP scope, so it holds every thought for as long
    as the container is open. A fresh container starts empty.
    """

    __in_memory__ = True

    @provide(scope=Scope.APP)
    def thought_repository(self) -> ThoughtRepository:
        return InMemoryThoughtRepository()
