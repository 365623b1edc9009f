"""Request and response pieces shared by the comment use cases."""

import hashlib
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from doccomments.domain.error import (
    AuthenticationRequiredError,
    NotAuthorizedError,
)
from doccomments.domain.model import Comment, TopUser, Viewer
from doccomments.domain.service import CommentService
from doccomments.domain.value import CommentId, CommentView, Domain


class DomainRequest(BaseModel):
    """Request addressed to one documentation version.

    viewer is the authenticated user, None for anonymous requests.
    """

    sdk: str
    version: str
    viewer: Optional[Viewer] = None

    @property
    def domain(self) -> Domain:
        return Domain.from_parts(self.sdk, self.version)


def email_hash(email: str) -> str:
    """MD5 of an e-mail address, as used for avatar lookups."""
    return hashlib.md5(email.encode("utf-8")).hexdigest()


class CommentItem(BaseModel):
    """Comment as returned to clients.

    total_rows, offset and limit are only set on the last item of a recent
    comments page.
    """

    id: int
    user_id: int
    author: str
    target: list[str]
    content: str
    content_html: str
    created_at: datetime
    score: int
    up_vote: bool
    down_vote: bool
    read: Optional[bool] = None
    tags: list[str]
    moderator: bool
    email_hash: str
    parent_id: Optional[int] = None
    reply_count: Optional[int] = None
    deleted: bool = False

    total_rows: Optional[int] = None
    offset: Optional[int] = None
    limit: Optional[int] = None

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        page = comment.page
        return cls(
            id=comment.id,
            user_id=comment.user_id,
            author=comment.username,
            target=comment.target.to_list(),
            content=comment.content,
            content_html=comment.content_html,
            created_at=comment.created_at,
            score=comment.score,
            up_vote=comment.vote_dir == 1,
            down_vote=comment.vote_dir == -1,
            read=comment.read,
            tags=list(comment.tags),
            moderator=comment.moderator,
            email_hash=email_hash(comment.email),
            parent_id=comment.parent_id,
            reply_count=comment.reply_count,
            deleted=comment.deleted,
            total_rows=page.total_rows if page else None,
            offset=page.offset if page else None,
            limit=page.limit if page else None,
        )


class UserItem(BaseModel):
    """Ranked user as returned to clients."""

    id: int
    username: str
    score: int
    moderator: bool
    email_hash: str

    @classmethod
    def from_top_user(cls, user: TopUser) -> "UserItem":
        return cls(
            id=user.id,
            username=user.username,
            score=user.score,
            moderator=user.moderator,
            email_hash=email_hash(user.email),
        )


def view_for(viewer: Optional[Viewer]) -> CommentView:
    """Projection for listings: own votes for anyone logged in, read flags for moderators."""
    if viewer is None:
        return CommentView()
    return CommentView(
        vote_dir_by=viewer.user_id,
        read_by=viewer.user_id if viewer.moderator else None,
    )


def require_login(viewer: Optional[Viewer], action: str) -> Viewer:
    """Return the viewer, or raise if the request is anonymous."""
    if viewer is None:
        raise AuthenticationRequiredError(action)
    return viewer


def require_moderator(
    viewer: Optional[Viewer], action: str, comment_id: CommentId
) -> Viewer:
    """Return the viewer if they are a moderator."""
    viewer = require_login(viewer, action)
    if not viewer.moderator:
        raise NotAuthorizedError(action, str(comment_id), str(viewer.user_id))
    return viewer


async def require_can_modify(
    comment_service: CommentService,
    domain: Domain,
    viewer: Optional[Viewer],
    comment_id: CommentId,
    action: str,
) -> Viewer:
    """Return the viewer if they wrote the comment or are a moderator.

    Deleted comments are checked too, so a deletion can be undone.

    Raises:
        AuthenticationRequiredError: If the request is anonymous
        NotFoundError: If the comment does not exist
        NotAuthorizedError: If the viewer may not modify the comment
    """
    viewer = require_login(viewer, action)
    comment = await comment_service.get_by_id(
        domain, comment_id, CommentView().elevated()
    )
    if not viewer.moderator and comment.user_id != viewer.user_id:
        raise NotAuthorizedError(action, str(comment_id), str(viewer.user_id))
    return viewer
