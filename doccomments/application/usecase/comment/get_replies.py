"""Get replies use case."""

from pydantic import BaseModel

from doccomments.application.usecase.common import CommentItem, DomainRequest, view_for
from doccomments.domain.service import CommentService
from doccomments.domain.value import CommentId


class GetRepliesRequest(DomainRequest):
    """Get replies request."""

    parent_id: int


class GetRepliesResponse(BaseModel):
    """Get replies response."""

    comments: list[CommentItem]


class GetRepliesUseCase:
    """Use case for listing the replies of a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get replies use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetRepliesRequest) -> GetRepliesResponse:
        """Execute get replies flow."""
        comments = await self.comment_service.find_children(
            request.domain, CommentId(request.parent_id), view_for(request.viewer)
        )
        return GetRepliesResponse(comments=[CommentItem.from_comment(c) for c in comments])
