"""Set parent use case."""

from typing import Optional

from pydantic import BaseModel

from doccomments.application.usecase.common import DomainRequest, require_moderator
from doccomments.domain.service import CommentService
from doccomments.domain.value import CommentId


class SetParentRequest(DomainRequest):
    """Set parent request. A missing parent_id moves the comment to top level."""

    comment_id: int
    parent_id: Optional[int] = None


class SetParentResponse(BaseModel):
    """Set parent response."""

    success: bool = True
    parent_id: Optional[int]  # The parent actually used after flattening


class SetParentUseCase:
    """Use case for moving a comment and its replies under another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize set parent use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: SetParentRequest) -> SetParentResponse:
        """Execute set parent flow.

        Raises:
            AuthenticationRequiredError: If the request is anonymous
            NotAuthorizedError: If the viewer is not a moderator
            NotFoundError: If the comment or the requested parent does not exist
            ValidationError: If the comment would become its own parent
        """
        comment_id = CommentId(request.comment_id)
        require_moderator(request.viewer, "set parent of", comment_id)

        parent_id = await self.comment_service.set_parent(
            request.domain,
            comment_id,
            CommentId(request.parent_id) if request.parent_id is not None else None,
        )
        return SetParentResponse(parent_id=parent_id)
