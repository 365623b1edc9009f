"""Repository interfaces for the comment system.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from doccomments.domain.repository.comment import CommentRepository
from doccomments.domain.repository.reading import ReadingRepository
from doccomments.domain.repository.tag import TagRepository
from doccomments.domain.repository.target import TargetRepository
from doccomments.domain.repository.update import UpdateLogRepository
from doccomments.domain.repository.user import UserRepository
from doccomments.domain.repository.vote import VoteRepository

__all__ = [
    "CommentRepository",
    "ReadingRepository",
    "TagRepository",
    "TargetRepository",
    "UpdateLogRepository",
    "UserRepository",
    "VoteRepository",
]
