"""Comment counts use case."""

from pydantic import BaseModel

from doccomments.application.usecase.common import DomainRequest
from doccomments.domain.service import CommentService
from doccomments.domain.value import CommentView


class GetCommentCountsRequest(DomainRequest):
    """Comment counts request."""


class GetCommentCountsResponse(BaseModel):
    """Comment counts response, keyed by "{type}__{name}__{member}"."""

    comments: dict[str, int]


class GetCommentCountsUseCase:
    """Use case for the comment count badges of every page in a domain."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize comment counts use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, request: GetCommentCountsRequest
    ) -> GetCommentCountsResponse:
        """Execute comment counts flow."""
        counts = await self.comment_service.counts_per_target(
            request.domain, CommentView()
        )
        return GetCommentCountsResponse(comments=counts)
