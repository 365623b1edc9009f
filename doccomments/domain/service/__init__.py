"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .formatter import Formatter
from .mailer import Mailer
from .reading_service import ReadingService
from .tag_service import TagService
from .target_service import TargetService
from .vote_service import VoteService

__all__ = [
    "CommentService",
    "Formatter",
    "Mailer",
    "ReadingService",
    "Service",
    "TagService",
    "TargetService",
    "VoteService",
]
