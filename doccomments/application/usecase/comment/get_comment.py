"""Get comment use case."""

from pydantic import BaseModel

from doccomments.application.usecase.common import CommentItem, DomainRequest, view_for
from doccomments.domain.service import CommentService
from doccomments.domain.value import CommentId


class GetCommentRequest(DomainRequest):
    """Get comment request."""

    comment_id: int


class GetCommentResponse(BaseModel):
    """Get comment response."""

    comment: CommentItem


class GetCommentUseCase:
    """Use case for fetching one comment, e.g. to edit its raw content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the comment does not exist or is deleted
        """
        comment = await self.comment_service.get_by_id(
            request.domain, CommentId(request.comment_id), view_for(request.viewer)
        )
        return GetCommentResponse(comment=CommentItem.from_comment(comment))
