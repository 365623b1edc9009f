"""Get comments use case."""

from pydantic import BaseModel

from doccomments.application.usecase.common import CommentItem, DomainRequest, view_for
from doccomments.domain.service import CommentService
from doccomments.domain.value import Target


class GetCommentsRequest(DomainRequest):
    """Get comments request."""

    target: str  # JSON array, e.g. '["class", "Ext.Panel", "cfg-title"]'


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentItem]


class GetCommentsUseCase:
    """Use case for listing the top-level comments of a target."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Get comments request with the target descriptor

        Returns:
            Top-level comments, oldest first, each with its reply count

        Raises:
            ValidationError: If the target descriptor is malformed
        """
        target = Target.from_json(request.target)
        comments = await self.comment_service.find(
            request.domain, target, view_for(request.viewer)
        )
        return GetCommentsResponse(
            comments=[CommentItem.from_comment(c) for c in comments]
        )
