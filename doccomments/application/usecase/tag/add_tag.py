"""Add tag use case."""

from pydantic import BaseModel

from doccomments.application.usecase.common import DomainRequest, require_moderator
from doccomments.domain.service import CommentService
from doccomments.domain.value import CommentId, TagName


class AddTagRequest(DomainRequest):
    """Add tag request."""

    comment_id: int
    tagname: str


class AddTagResponse(BaseModel):
    """Add tag response."""

    success: bool = True


class AddTagUseCase:
    """Use case for tagging a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize add tag use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: AddTagRequest) -> AddTagResponse:
        """Execute add tag flow. Adding a tag the comment already has is a no-op.

        Raises:
            AuthenticationRequiredError: If the request is anonymous
            NotAuthorizedError: If the viewer is not a moderator
            NotFoundError: If the comment does not exist
        """
        comment_id = CommentId(request.comment_id)
        viewer = require_moderator(request.viewer, "tag", comment_id)

        await self.comment_service.add_tag(
            request.domain, comment_id, TagName(request.tagname), viewer.user_id
        )
        return AddTagResponse()
