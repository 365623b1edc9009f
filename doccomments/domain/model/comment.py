"""Comment entity.

Comments are attached to documentation targets within a domain. Threading
is capped at one level: a reply belongs to a top-level comment.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from doccomments.domain.model.common import DomainModel
from doccomments.domain.value import CommentId, Domain, Target, TargetId, UserId


class NewComment(DomainModel):
    """Input for creating a comment."""

    user_id: UserId
    target: Target
    content: str = Field(min_length=1, max_length=50000)
    parent_id: Optional[CommentId] = None


class PageInfo(DomainModel):
    """Pagination metadata carried by the last comment of a page."""

    total_rows: int = Field(ge=0)
    offset: int = Field(ge=0)
    limit: int = Field(ge=1)


class Comment(DomainModel):
    """Comment as seen through a CommentView.

    The author and target fields are joined in from the users and targets
    relations. Score is the sum of all votes. vote_dir, read, reply_count,
    tags and page are computed per query and never persisted.
    """

    id: CommentId
    domain: Domain
    target_id: TargetId
    target: Target
    parent_id: Optional[CommentId] = None
    user_id: UserId
    username: str
    email: str = ""
    moderator: bool = False
    content: str
    content_html: str
    created_at: datetime
    deleted: bool = False
    score: int = 0

    vote_dir: Optional[int] = None  # 1, -1 or None when the viewer has not voted
    read: Optional[bool] = None  # Only computed when CommentView.read_by is set
    reply_count: Optional[int] = None  # Only computed for top-level listings
    tags: list[str] = Field(default_factory=list)
    page: Optional[PageInfo] = None

    @property
    def is_reply(self) -> bool:
        """True when the comment has a parent."""
        return self.parent_id is not None
