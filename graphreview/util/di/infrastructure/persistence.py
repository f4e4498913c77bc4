"""Comment store providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from graphreview.config import Settings
from graphreview.domain.repository import (
    CommentRepository,
    ProfileRepository,
    VoteRepository,
)
from graphreview.persistence.database import create_engine, create_session_factory
from graphreview.persistence.repository import (
    PostgresCommentRepository,
    PostgresProfileRepository,
    PostgresVoteRepository,
)
from graphreview.util.di.base import ProviderBase
from graphreview.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Where comments, votes and profiles are stored."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL through SQLAlchemy; one session per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Request session; committed on success, rolled back on error."""
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Rolling back comment store session", error=str(e))
                await session.rollback()
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, session: AsyncSession) -> ProfileRepository:
        return PostgresProfileRepository(session)
