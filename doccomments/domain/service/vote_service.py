"""Vote domain service."""

from datetime import datetime

import logfire

from doccomments.domain.error import NotFoundError
from doccomments.domain.model import Vote, VoteState, VoteTransition, transition
from doccomments.domain.repository import CommentRepository, VoteRepository
from doccomments.domain.value import CommentId, CommentView, Domain, UserId, VoteValue

from .base import Service


class VoteService(Service):
    """Domain service for voting on comments.

    Each (user, comment) pair moves through the transition table in
    doccomments.domain.model.vote. The existing vote is read with a row lock
    and a missing one is inserted with a conflict-tolerant insert, so two
    concurrent votes by the same user never produce two rows: the loser
    re-reads the winner's vote and applies its own transition to it.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            comment_repository: Comment repository
        """
        self.vote_repository = vote_repository
        self.comment_repository = comment_repository

    async def cast(
        self,
        domain: Domain,
        user_id: UserId,
        comment_id: CommentId,
        value: VoteValue,
    ) -> VoteTransition:
        """Cast a vote and apply the resulting transition.

        Args:
            domain: Domain of the comment
            user_id: Voter
            comment_id: Comment voted on
            value: Up or down

        Returns:
            The transition that was applied

        Raises:
            NotFoundError: If the comment does not exist or is deleted
        """
        with logfire.span(
            "vote_service.cast",
            user_id=user_id,
            comment_id=comment_id,
            value=int(value),
        ):
            comment = await self.comment_repository.find_by_id(
                domain, comment_id, CommentView()
            )
            if not comment:
                logfire.warn("Vote on non-existent comment", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))

            while True:
                existing = await self.vote_repository.find_for_update(
                    user_id, comment_id
                )
                if existing is not None:
                    break

                vote = Vote(
                    user_id=user_id,
                    comment_id=comment_id,
                    value=value,
                    created_at=datetime.now(),
                )
                if await self.vote_repository.insert_if_absent(vote):
                    result = transition(VoteState.NO_VOTE, value)
                    logfire.info(
                        "Vote cast",
                        user_id=user_id,
                        comment_id=comment_id,
                        resulting_vote=result.resulting_vote,
                    )
                    return result

                logfire.info(
                    "Concurrent vote detected, re-reading",
                    user_id=user_id,
                    comment_id=comment_id,
                )

            result = transition(VoteState.of(existing), value)
            if result.retracts:
                await self.vote_repository.delete(user_id, comment_id)
                logfire.info(
                    "Vote retracted", user_id=user_id, comment_id=comment_id
                )
            else:
                logfire.info(
                    "Repeated vote ignored", user_id=user_id, comment_id=comment_id
                )
            return result

    async def get_score(self, comment_id: CommentId) -> int:
        """Current total score of a comment."""
        return await self.comment_repository.get_score(comment_id)
