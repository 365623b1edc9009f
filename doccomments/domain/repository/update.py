"""Update log repository interface."""

from abc import ABC, abstractmethod

from doccomments.domain.model import UpdateLogEntry
from doccomments.domain.value import CommentId


class UpdateLogRepository(ABC):
    """Append-only log of comment edits and moderation actions."""

    @abstractmethod
    async def append(self, entry: UpdateLogEntry) -> None:
        """Append an entry to the log."""
        pass

    @abstractmethod
    async def find_by_comment(self, comment_id: CommentId) -> list[UpdateLogEntry]:
        """History of a comment, oldest first."""
        pass
