"""Add comment use case."""

import asyncio
from typing import Optional

import logfire
from pydantic import BaseModel

from doccomments.application.usecase.base import BaseUseCase
from doccomments.application.usecase.common import (
    CommentItem,
    DomainRequest,
    require_login,
    view_for,
)
from doccomments.domain.model import Comment, NewComment
from doccomments.domain.service import CommentService, Mailer
from doccomments.domain.value import CommentId, Target


class AddCommentRequest(DomainRequest):
    """Add comment request."""

    target: str  # JSON array, e.g. '["class", "Ext.Panel", "cfg-title"]'
    content: str
    parent_id: Optional[int] = None
    url: Optional[str] = None  # Page of the thread, linked from the notification


class AddCommentResponse(BaseModel):
    """Add comment response."""

    id: int
    comment: CommentItem


class AddCommentUseCase(BaseUseCase):
    """Use case for posting a comment or a reply."""

    def __init__(self, comment_service: CommentService, mailer: Mailer) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
            mailer: Notification mailer
        """
        self.comment_service = comment_service
        self.mailer = mailer
        self.notifications: set[asyncio.Task] = set()

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Steps:
        1. Create the comment (the target is created on first use)
        2. Mark it read when a moderator wrote it
        3. Fetch it as the author sees it
        4. Start the mail notification without waiting for it

        The parent_id is stored as given. Replies to replies are only
        flattened when a moderator re-parents them.

        Raises:
            AuthenticationRequiredError: If the request is anonymous
            ValidationError: If the target descriptor is malformed
        """
        viewer = require_login(request.viewer, "add comment")
        domain = request.domain

        comment_id = await self.comment_service.add(
            domain,
            NewComment(
                user_id=viewer.user_id,
                target=Target.from_json(request.target),
                content=request.content,
                parent_id=CommentId(request.parent_id)
                if request.parent_id is not None
                else None,
            ),
        )

        if viewer.moderator:
            await self.comment_service.mark_read(viewer.user_id, comment_id)

        comment = await self.comment_service.get_by_id(
            domain, comment_id, view_for(viewer)
        )

        task = asyncio.create_task(self._notify(comment, request.url))
        self.notifications.add(task)
        task.add_done_callback(self.notifications.discard)

        return AddCommentResponse(id=comment.id, comment=CommentItem.from_comment(comment))

    async def _notify(self, comment: Comment, thread_url: Optional[str]) -> None:
        try:
            await self.mailer.notify(comment, thread_url)
        except Exception as e:
            logfire.error(
                "Comment notification failed", comment_id=comment.id, error=str(e)
            )
