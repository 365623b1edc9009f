"""Reading repository interface."""

from abc import ABC, abstractmethod

from doccomments.domain.value import CommentId, UserId


class ReadingRepository(ABC):
    """Repository for read markers, one per (user_id, comment_id)."""

    @abstractmethod
    async def insert_if_absent(self, user_id: UserId, comment_id: CommentId) -> bool:
        """Mark a comment read.

        Returns:
            True if a marker was created, False if it already existed
        """
        pass
