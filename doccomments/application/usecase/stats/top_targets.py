"""Top targets use case."""

from pydantic import BaseModel

from doccomments.application.usecase.common import DomainRequest
from doccomments.domain.model import TopTarget
from doccomments.domain.service import CommentService
from doccomments.domain.value import CommentView


class GetTopTargetsRequest(DomainRequest):
    """Top targets request."""


class GetTopTargetsResponse(BaseModel):
    """Top targets response."""

    success: bool = True
    data: list[TopTarget]


class GetTopTargetsUseCase:
    """Use case for ranking targets by number of comments."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize top targets use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetTopTargetsRequest) -> GetTopTargetsResponse:
        """Execute top targets flow."""
        targets = await self.comment_service.get_top_targets(
            request.domain, CommentView()
        )
        return GetTopTargetsResponse(data=targets)
