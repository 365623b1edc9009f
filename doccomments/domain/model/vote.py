"""Vote entity and the single-vote state machine.

A user holds at most one vote per comment. The ledger stores current state,
not history: retracting a vote removes the row.

Transitions for an incoming vote v:

    NoVote    +1 -> Upvoted    delta +1  result +1
    NoVote    -1 -> Downvoted  delta -1  result -1
    Upvoted   +1 -> Upvoted    delta  0  result  0
    Upvoted   -1 -> NoVote     delta -1  result  0
    Downvoted -1 -> Downvoted  delta  0  result  0
    Downvoted +1 -> NoVote     delta +1  result  0

An opposite vote retracts rather than flips, so one click never moves
from +1 straight to -1.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from doccomments.domain.model.common import DomainModel
from doccomments.domain.value import CommentId, UserId, VoteValue


class Vote(DomainModel):
    """Current vote of a user on a comment."""

    user_id: UserId
    comment_id: CommentId
    value: VoteValue
    created_at: datetime = Field(default_factory=datetime.now)


class VoteState(str, Enum):
    """State of the (user, comment) pair."""

    NO_VOTE = "no_vote"
    UPVOTED = "upvoted"
    DOWNVOTED = "downvoted"

    @classmethod
    def of(cls, vote: Optional[Vote]) -> "VoteState":
        """State corresponding to an existing vote row (or its absence)."""
        if vote is None:
            return cls.NO_VOTE
        return cls.UPVOTED if vote.value == VoteValue.UP else cls.DOWNVOTED


class VoteTransition(DomainModel):
    """Outcome of applying one vote to a state."""

    state: VoteState
    delta: int
    resulting_vote: int

    @property
    def retracts(self) -> bool:
        return self.resulting_vote == 0 and self.delta != 0


def transition(current: VoteState, incoming: VoteValue) -> VoteTransition:
    """Apply an incoming vote to the current state."""
    if current == VoteState.NO_VOTE:
        state = VoteState.UPVOTED if incoming == VoteValue.UP else VoteState.DOWNVOTED
        return VoteTransition(
            state=state, delta=int(incoming), resulting_vote=int(incoming)
        )

    held = VoteValue.UP if current == VoteState.UPVOTED else VoteValue.DOWN
    if held == incoming:
        # Can't vote twice in the same direction
        return VoteTransition(state=current, delta=0, resulting_vote=0)

    return VoteTransition(state=VoteState.NO_VOTE, delta=int(incoming), resulting_vote=0)
