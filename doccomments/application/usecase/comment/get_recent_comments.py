"""Get recent comments use case."""

from typing import Optional

from pydantic import BaseModel, Field

from doccomments.application.usecase.common import CommentItem, DomainRequest, view_for
from doccomments.config import CommentSettings
from doccomments.domain.error import ValidationError
from doccomments.domain.service import CommentService
from doccomments.domain.value import RecentOrder, RecentQuery, TagName, TargetId


class GetRecentCommentsRequest(DomainRequest):
    """Get recent comments request.

    hide_current_user and hide_read only apply to logged-in viewers.
    """

    offset: int = Field(default=0, ge=0)
    limit: Optional[int] = Field(default=None, ge=1)
    sort_by_score: bool = False
    hide_current_user: bool = False
    hide_read: bool = False
    username: Optional[str] = None
    target_id: Optional[int] = None
    tagname: Optional[str] = None


def _tag_filter(tagname: Optional[str]) -> Optional[str]:
    """Normalize the tag filter the way stored tag names are normalized."""
    if not tagname or not tagname.strip():
        return None
    try:
        return TagName(tagname).root
    except ValueError as e:
        raise ValidationError(f"Invalid tag filter {tagname!r}: {e}")


class GetRecentCommentsResponse(BaseModel):
    """Get recent comments response.

    The last comment carries total_rows, offset and limit.
    """

    comments: list[CommentItem]


class GetRecentCommentsUseCase:
    """Use case for the recent comments feed of a domain."""

    def __init__(
        self, comment_service: CommentService, comment_settings: CommentSettings
    ) -> None:
        """Initialize get recent comments use case.

        Args:
            comment_service: Comment domain service
            comment_settings: Page size limits
        """
        self.comment_service = comment_service
        self.comment_settings = comment_settings

    def _build_query(self, request: GetRecentCommentsRequest) -> RecentQuery:
        viewer = request.viewer
        limit = min(
            request.limit or self.comment_settings.default_page_size,
            self.comment_settings.max_page_size,
        )
        return RecentQuery(
            limit=limit,
            offset=request.offset,
            order_by=RecentOrder.SCORE if request.sort_by_score else RecentOrder.CREATED_AT,
            hide_user=viewer.user_id if viewer and request.hide_current_user else None,
            hide_read_by=viewer.user_id if viewer and request.hide_read else None,
            username=request.username or None,
            target_id=TargetId(request.target_id) if request.target_id else None,
            tagname=_tag_filter(request.tagname),
        )

    async def execute(
        self, request: GetRecentCommentsRequest
    ) -> GetRecentCommentsResponse:
        """Execute get recent comments flow.

        Args:
            request: Filters and paging

        Returns:
            One page of top-level comments, newest or highest scored first
        """
        comments = await self.comment_service.find_recent(
            request.domain, self._build_query(request), view_for(request.viewer)
        )
        return GetRecentCommentsResponse(
            comments=[CommentItem.from_comment(c) for c in comments]
        )
