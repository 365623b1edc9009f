"""Remove tag use case."""

from pydantic import BaseModel

from doccomments.application.usecase.common import DomainRequest, require_moderator
from doccomments.domain.service import CommentService
from doccomments.domain.value import CommentId, TagName


class RemoveTagRequest(DomainRequest):
    """Remove tag request."""

    comment_id: int
    tagname: str


class RemoveTagResponse(BaseModel):
    """Remove tag response."""

    success: bool = True


class RemoveTagUseCase:
    """Use case for removing a tag from a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize remove tag use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: RemoveTagRequest) -> RemoveTagResponse:
        """Execute remove tag flow. Removing an absent tag is a no-op."""
        comment_id = CommentId(request.comment_id)
        require_moderator(request.viewer, "untag", comment_id)

        await self.comment_service.remove_tag(
            request.domain, comment_id, TagName(request.tagname)
        )
        return RemoveTagResponse()
