"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .database import InMemoryDatabase
from .reading import InMemoryReadingRepository
from .tag import InMemoryTagRepository
from .target import InMemoryTargetRepository
from .update import InMemoryUpdateLogRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryCommentRepository",
    "InMemoryReadingRepository",
    "InMemoryTagRepository",
    "InMemoryTargetRepository",
    "InMemoryUpdateLogRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
