"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from doccomments.domain.model import Vote
from doccomments.domain.value import CommentId, UserId


class VoteRepository(ABC):
    """Repository for the votes relation.

    The relation holds at most one row per (user_id, comment_id), enforced
    by a unique constraint.
    """

    @abstractmethod
    async def find_for_update(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[Vote]:
        """Find a user's vote on a comment and lock it until the transaction ends.

        Args:
            user_id: The voter
            comment_id: The comment

        Returns:
            The vote if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def insert_if_absent(self, vote: Vote) -> bool:
        """Insert a vote unless the user already has one on the comment.

        A concurrent insert for the same pair makes this call wait for the
        other transaction and then report False.

        Returns:
            True if the vote was inserted, False if a row already existed
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId, comment_id: CommentId) -> bool:
        """Delete a user's vote on a comment.

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass
