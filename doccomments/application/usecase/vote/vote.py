"""Vote use case."""

from typing import Literal, Optional

from pydantic import BaseModel

from doccomments.application.usecase.base import BaseUseCase
from doccomments.application.usecase.common import DomainRequest, require_login
from doccomments.domain.error import NotAuthorizedError
from doccomments.domain.service import CommentService
from doccomments.domain.value import CommentId, CommentView, VoteValue


class VoteRequest(DomainRequest):
    """Vote request."""

    comment_id: int
    vote: Literal["up", "down"]


class VoteResponse(BaseModel):
    """Vote response.

    direction is the viewer's vote after this one: a repeated vote and a
    retraction both leave no direction.
    """

    success: bool = True
    direction: Optional[Literal["up", "down"]]
    total: int


class VoteUseCase(BaseUseCase):
    """Use case for voting a comment up or down."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize vote use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: VoteRequest) -> VoteResponse:
        """Execute vote flow.

        Raises:
            AuthenticationRequiredError: If the request is anonymous
            NotFoundError: If the comment does not exist or is deleted
            NotAuthorizedError: If the viewer wrote the comment
        """
        viewer = require_login(request.viewer, "vote")
        domain = request.domain
        comment_id = CommentId(request.comment_id)

        comment = await self.comment_service.get_by_id(domain, comment_id, CommentView())
        if comment.user_id == viewer.user_id:
            raise NotAuthorizedError("vote on", str(comment_id), str(viewer.user_id))

        resulting_vote, total = await self.comment_service.vote(
            domain, viewer.user_id, comment_id, VoteValue.parse(request.vote)
        )

        if resulting_vote == VoteValue.UP:
            direction = "up"
        elif resulting_vote == VoteValue.DOWN:
            direction = "down"
        else:
            direction = None
        return VoteResponse(direction=direction, total=total)
