"""Query options for reading comments.

CommentView decides what a read can see and which viewer-specific fields
it computes. RecentQuery holds the filters of the recent comments feed.
Both are immutable and passed into every call.
"""

from typing import Optional

from pydantic import Field

from doccomments.domain.value.common import ValueObject
from doccomments.domain.value.identifiers import TargetId, UserId
from doccomments.domain.value.types import RecentOrder

DEFAULT_LIMIT = 100


class CommentView(ValueObject):
    """Visibility and projection of a comment read.

    Attributes:
        include_deleted: Include soft-deleted comments
        vote_dir_by: Attach this user's own vote to each comment
        read_by: Attach whether this user has read each comment
    """

    include_deleted: bool = False
    vote_dir_by: Optional[UserId] = None
    read_by: Optional[UserId] = None

    def elevated(self) -> "CommentView":
        """Same projection, deleted comments included."""
        return self.model_copy(update={"include_deleted": True})


class RecentQuery(ValueObject):
    """Filters and paging of the recent comments feed.

    All filters are combined with AND. Only top-level comments are listed.
    """

    limit: int = Field(default=DEFAULT_LIMIT, ge=1)
    offset: int = Field(default=0, ge=0)
    order_by: RecentOrder = RecentOrder.CREATED_AT
    hide_user: Optional[UserId] = None
    hide_read_by: Optional[UserId] = None
    username: Optional[str] = None
    target_id: Optional[TargetId] = None
    tagname: Optional[str] = None
