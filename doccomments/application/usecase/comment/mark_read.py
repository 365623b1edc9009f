"""Mark read use case."""

from pydantic import BaseModel

from doccomments.application.usecase.common import DomainRequest, require_login
from doccomments.domain.service import CommentService
from doccomments.domain.value import CommentId, CommentView


class MarkReadRequest(DomainRequest):
    """Mark read request."""

    comment_id: int


class MarkReadResponse(BaseModel):
    """Mark read response."""

    success: bool = True


class MarkReadUseCase:
    """Use case for marking a comment read by the viewer."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize mark read use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: MarkReadRequest) -> MarkReadResponse:
        """Execute mark read flow. Marking a comment twice is not an error.

        Raises:
            AuthenticationRequiredError: If the request is anonymous
            NotFoundError: If the comment does not exist in the domain
        """
        viewer = require_login(request.viewer, "mark read")
        comment_id = CommentId(request.comment_id)

        # Read markers are only kept for comments of this domain
        await self.comment_service.get_by_id(
            request.domain, comment_id, CommentView().elevated()
        )
        await self.comment_service.mark_read(viewer.user_id, comment_id)
        return MarkReadResponse()
