"""Top users use case."""

from pydantic import BaseModel

from doccomments.application.usecase.common import DomainRequest, UserItem
from doccomments.domain.service import CommentService
from doccomments.domain.value import CommentView, TopUsersSort


class GetTopUsersRequest(DomainRequest):
    """Top users request."""

    sort_by: TopUsersSort = TopUsersSort.VOTES


class GetTopUsersResponse(BaseModel):
    """Top users response."""

    success: bool = True
    data: list[UserItem]


class GetTopUsersUseCase:
    """Use case for ranking users by score or number of comments."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize top users use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetTopUsersRequest) -> GetTopUsersResponse:
        """Execute top users flow."""
        users = await self.comment_service.get_top_users(
            request.domain, request.sort_by, CommentView()
        )
        return GetTopUsersResponse(data=[UserItem.from_top_user(u) for u in users])
