"""List top tags use case."""

from pydantic import BaseModel

from doccomments.application.usecase.common import DomainRequest
from doccomments.domain.model import TagCount
from doccomments.domain.service import CommentService
from doccomments.domain.value import CommentView


class ListTopTagsRequest(DomainRequest):
    """List top tags request."""


class ListTopTagsResponse(BaseModel):
    """List top tags response."""

    success: bool = True
    data: list[TagCount]


class ListTopTagsUseCase:
    """Use case for listing the most used tags of a domain."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize list top tags use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: ListTopTagsRequest) -> ListTopTagsResponse:
        """Execute list top tags flow."""
        tags = await self.comment_service.get_top_tags(request.domain, CommentView())
        return ListTopTagsResponse(data=tags)
