"""Ranking and count use cases."""

from .comment_counts import (
    GetCommentCountsRequest,
    GetCommentCountsResponse,
    GetCommentCountsUseCase,
)
from .top_targets import GetTopTargetsRequest, GetTopTargetsResponse, GetTopTargetsUseCase
from .top_users import GetTopUsersRequest, GetTopUsersResponse, GetTopUsersUseCase

__all__ = [
    "GetCommentCountsRequest",
    "GetCommentCountsResponse",
    "GetCommentCountsUseCase",
    "GetTopTargetsRequest",
    "GetTopTargetsResponse",
    "GetTopTargetsUseCase",
    "GetTopUsersRequest",
    "GetTopUsersResponse",
    "GetTopUsersUseCase",
]
