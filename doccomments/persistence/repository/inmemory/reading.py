"""In-memory reading repository for testing."""

from doccomments.domain.repository import ReadingRepository
from doccomments.domain.value import CommentId, UserId

from .database import InMemoryDatabase


class InMemoryReadingRepository(ReadingRepository):
    """In-memory implementation of ReadingRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    async def insert_if_absent(self, user_id: UserId, comment_id: CommentId) -> bool:
        """Mark a comment read, ignoring an existing marker."""
        key = (user_id, comment_id)
        if key in self._db.readings:
            return False
        self._db.readings.add(key)
        return True
