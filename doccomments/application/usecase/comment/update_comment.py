"""Update comment use case."""

from pydantic import BaseModel, Field

from doccomments.application.usecase.common import (
    CommentItem,
    DomainRequest,
    require_can_modify,
    view_for,
)
from doccomments.domain.service import CommentService
from doccomments.domain.value import CommentId


class UpdateCommentRequest(DomainRequest):
    """Update comment request."""

    comment_id: int
    content: str = Field(min_length=1, max_length=50000)


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentItem


class UpdateCommentUseCase:
    """Use case for editing the content of a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request with comment ID and new content

        Returns:
            The updated comment, with the re-rendered HTML

        Raises:
            AuthenticationRequiredError: If the request is anonymous
            NotAuthorizedError: If the viewer is neither the author nor a moderator
            NotFoundError: If the comment does not exist
        """
        domain = request.domain
        comment_id = CommentId(request.comment_id)
        viewer = await require_can_modify(
            self.comment_service, domain, request.viewer, comment_id, "update"
        )

        await self.comment_service.update(
            domain, comment_id, viewer.user_id, request.content
        )

        # Moderators may edit deleted comments
        comment = await self.comment_service.get_by_id(
            domain, comment_id, view_for(viewer).elevated()
        )
        return UpdateCommentResponse(comment=CommentItem.from_comment(comment))
