"""Engine, session factory and per-request transactions for PostgreSQL."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from doccomments.config import DatabaseSettings


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the async engine.

    Votes, tags and readings resolve their races with row locks and
    ON CONFLICT, which only needs READ COMMITTED.

    Args:
        database: Connection and pool settings
        echo: Log every SQL statement

    Returns:
        Configured async engine
    """
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        isolation_level="READ COMMITTED",
        connect_args={"server_settings": {"application_name": "doccomments"}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for Core statements; nothing is loaded as ORM objects."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def transaction(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """One session per request, committed only if the request succeeds.

    A comment move, an edit and its update log entry, or a vote and its
    score read all land together or not at all.

    Yields:
        Database session
    """
    async with session_factory() as session:
        try:
            yield session
        except BaseException as exc:
            await session.rollback()
            logfire.warn("Transaction rolled back", error=repr(exc))
            raise
        else:
            await session.commit()
