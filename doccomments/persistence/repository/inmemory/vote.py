"""In-memory vote repository for testing."""

from typing import Optional

from doccomments.domain.model import Vote
from doccomments.domain.repository import VoteRepository
from doccomments.domain.value import CommentId, UserId

from .database import InMemoryDatabase


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    There is no concurrency to guard against, so find_for_update is a plain
    lookup.
    """

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    async def find_for_update(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[Vote]:
        """Find a user's vote on a comment."""
        return self._db.votes.get((user_id, comment_id))

    async def insert_if_absent(self, vote: Vote) -> bool:
        """Insert a vote unless the user already has one on the comment."""
        key = (vote.user_id, vote.comment_id)
        if key in self._db.votes:
            return False
        self._db.votes[key] = vote
        return True

    async def delete(self, user_id: UserId, comment_id: CommentId) -> bool:
        """Delete a user's vote on a comment."""
        return self._db.votes.pop((user_id, comment_id), None) is not None
