"""Reading domain service."""

import logfire

from doccomments.domain.repository import ReadingRepository
from doccomments.domain.value import CommentId, UserId

from .base import Service


class ReadingService(Service):
    """Tracks which comments a user has read."""

    def __init__(self, reading_repository: ReadingRepository) -> None:
        """Initialize reading service.

        Args:
            reading_repository: Reading repository
        """
        self.reading_repository = reading_repository

    async def mark_read(self, user_id: UserId, comment_id: CommentId) -> None:
        """Mark a comment read. Marking it again is a no-op."""
        with logfire.span(
            "reading_service.mark_read", user_id=user_id, comment_id=comment_id
        ):
            created = await self.reading_repository.insert_if_absent(user_id, comment_id)
            logfire.info(
                "Comment marked read" if created else "Comment already read",
                user_id=user_id,
                comment_id=comment_id,
            )
