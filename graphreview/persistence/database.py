"""PostgreSQL engine and sessions for the comment store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from graphreview.config import Settings

# Shows up in pg_stat_activity next to the other Graph Review services
APPLICATION_NAME = "graph-review-comments"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg-backed engine.

    SQL is echoed when ``settings.debug`` is on.
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        connect_args={"server_settings": {"application_name": APPLICATION_NAME}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions stay usable after commit and flush only when a repository asks.

    Repositories flush explicitly before reading back generated values; the
    request-scoped provider owns commit and rollback.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
