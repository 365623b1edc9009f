"""PostgreSQL repository implementations."""

from doccomments.persistence.repository.comment import PostgresCommentRepository
from doccomments.persistence.repository.reading import PostgresReadingRepository
from doccomments.persistence.repository.tag import PostgresTagRepository
from doccomments.persistence.repository.target import PostgresTargetRepository
from doccomments.persistence.repository.update import PostgresUpdateLogRepository
from doccomments.persistence.repository.user import PostgresUserRepository
from doccomments.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresReadingRepository",
    "PostgresTagRepository",
    "PostgresTargetRepository",
    "PostgresUpdateLogRepository",
    "PostgresUserRepository",
    "PostgresVoteRepository",
]
