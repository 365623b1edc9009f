"""Domain value objects for the comment system."""

from doccomments.domain.value.identifiers import CommentId, TagId, TargetId, UserId
from doccomments.domain.value.query import DEFAULT_LIMIT, CommentView, RecentQuery
from doccomments.domain.value.types import (
    Domain,
    RecentOrder,
    TagName,
    Target,
    TargetType,
    TopUsersSort,
    UpdateAction,
    VoteValue,
)

__all__ = [
    # Identifiers
    "CommentId",
    "UserId",
    "TargetId",
    "TagId",
    # Query options
    "CommentView",
    "RecentQuery",
    "DEFAULT_LIMIT",
    # Types
    "Domain",
    "Target",
    "TargetType",
    "TagName",
    "VoteValue",
    "UpdateAction",
    "RecentOrder",
    "TopUsersSort",
]
