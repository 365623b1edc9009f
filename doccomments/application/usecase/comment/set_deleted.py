"""Delete and undo-delete use case."""

from typing import Optional

from pydantic import BaseModel

from doccomments.application.usecase.common import (
    CommentItem,
    DomainRequest,
    require_can_modify,
    view_for,
)
from doccomments.domain.service import CommentService
from doccomments.domain.value import CommentId


class SetDeletedRequest(DomainRequest):
    """Delete or restore request."""

    comment_id: int
    deleted: bool


class SetDeletedResponse(BaseModel):
    """Delete or restore response.

    comment is the restored comment after an undo, None after a delete.
    """

    success: bool = True
    comment: Optional[CommentItem] = None


class SetDeletedUseCase:
    """Use case for soft-deleting a comment and undoing the deletion."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize set deleted use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: SetDeletedRequest) -> SetDeletedResponse:
        """Execute delete or undo-delete flow.

        Raises:
            AuthenticationRequiredError: If the request is anonymous
            NotAuthorizedError: If the viewer is neither the author nor a moderator
            NotFoundError: If the comment does not exist
        """
        domain = request.domain
        comment_id = CommentId(request.comment_id)
        action = "delete" if request.deleted else "undo delete"
        viewer = await require_can_modify(
            self.comment_service, domain, request.viewer, comment_id, action
        )

        await self.comment_service.set_deleted(
            domain, comment_id, viewer.user_id, request.deleted
        )
        if request.deleted:
            return SetDeletedResponse()

        comment = await self.comment_service.get_by_id(
            domain, comment_id, view_for(viewer)
        )
        return SetDeletedResponse(comment=CommentItem.from_comment(comment))
