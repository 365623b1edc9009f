"""In-memory persistence for unit tests."""

from dishka import Scope, provide

from doccomments.domain.repository import (
    CommentRepository,
    ReadingRepository,
    TagRepository,
    TargetRepository,
    UpdateLogRepository,
    UserRepository,
    VoteRepository,
)
from doccomments.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryDatabase,
    InMemoryReadingRepository,
    InMemoryTagRepository,
    InMemoryTargetRepository,
    InMemoryUpdateLogRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from doccomments.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """In-memory repositories over one InMemoryDatabase per request.

    Each test opens its own request scope, so each test starts empty while
    the repositories inside it see each other's writes.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_database(self) -> InMemoryDatabase:
        return InMemoryDatabase()

    users = provide(InMemoryUserRepository, provides=UserRepository, scope=Scope.REQUEST)
    targets = provide(
        InMemoryTargetRepository, provides=TargetRepository, scope=Scope.REQUEST
    )
    comments = provide(
        InMemoryCommentRepository, provides=CommentRepository, scope=Scope.REQUEST
    )
    votes = provide(InMemoryVoteRepository, provides=VoteRepository, scope=Scope.REQUEST)
    readings = provide(
        InMemoryReadingRepository, provides=ReadingRepository, scope=Scope.REQUEST
    )
    updates = provide(
        InMemoryUpdateLogRepository, provides=UpdateLogRepository, scope=Scope.REQUEST
    )
    tags = provide(InMemoryTagRepository, provides=TagRepository, scope=Scope.REQUEST)
