"""In-memory update log repository for testing."""

from doccomments.domain.model import UpdateLogEntry
from doccomments.domain.repository import UpdateLogRepository
from doccomments.domain.value import CommentId

from .database import InMemoryDatabase


class InMemoryUpdateLogRepository(UpdateLogRepository):
    """In-memory implementation of UpdateLogRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    async def append(self, entry: UpdateLogEntry) -> None:
        """Append an entry to the log."""
        self._db.updates.append(entry)

    async def find_by_comment(self, comment_id: CommentId) -> list[UpdateLogEntry]:
        """History of a comment, oldest first."""
        return [e for e in self._db.updates if e.comment_id == comment_id]
