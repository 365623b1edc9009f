"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from doccomments.config import Settings
from doccomments.domain.repository import (
    CommentRepository,
    ReadingRepository,
    TagRepository,
    TargetRepository,
    UpdateLogRepository,
    UserRepository,
    VoteRepository,
)
from doccomments.persistence.database import (
    create_engine,
    create_session_factory,
    transaction,
)
from doccomments.persistence.repository import (
    PostgresCommentRepository,
    PostgresReadingRepository,
    PostgresTagRepository,
    PostgresTargetRepository,
    PostgresUpdateLogRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from doccomments.util.di.base import ProviderBase
from doccomments.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Repositories of the comment engine."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL repositories sharing one transaction per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Engine for the container's lifetime, disposed on close."""
        engine = create_engine(settings.database, echo=settings.debug)
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
        """Request session; committed when the request scope closes cleanly."""
        async with transaction(session_factory) as session:
            yield session

    users = provide(PostgresUserRepository, provides=UserRepository, scope=Scope.REQUEST)
    targets = provide(
        PostgresTargetRepository, provides=TargetRepository, scope=Scope.REQUEST
    )
    comments = provide(
        PostgresCommentRepository, provides=CommentRepository, scope=Scope.REQUEST
    )
    votes = provide(PostgresVoteRepository, provides=VoteRepository, scope=Scope.REQUEST)
    readings = provide(
        PostgresReadingRepository, provides=ReadingRepository, scope=Scope.REQUEST
    )
    updates = provide(
        PostgresUpdateLogRepository, provides=UpdateLogRepository, scope=Scope.REQUEST
    )
    tags = provide(PostgresTagRepository, provides=TagRepository, scope=Scope.REQUEST)
