"""Comment use cases."""

from .add_comment import AddCommentRequest, AddCommentResponse, AddCommentUseCase
from .get_comment import GetCommentRequest, GetCommentResponse, GetCommentUseCase
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .get_recent_comments import (
    GetRecentCommentsRequest,
    GetRecentCommentsResponse,
    GetRecentCommentsUseCase,
)
from .get_replies import GetRepliesRequest, GetRepliesResponse, GetRepliesUseCase
from .mark_read import MarkReadRequest, MarkReadResponse, MarkReadUseCase
from .set_deleted import SetDeletedRequest, SetDeletedResponse, SetDeletedUseCase
from .set_parent import SetParentRequest, SetParentResponse, SetParentUseCase
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

__all__ = [
    "AddCommentRequest",
    "AddCommentResponse",
    "AddCommentUseCase",
    "GetCommentRequest",
    "GetCommentResponse",
    "GetCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "GetRecentCommentsRequest",
    "GetRecentCommentsResponse",
    "GetRecentCommentsUseCase",
    "GetRepliesRequest",
    "GetRepliesResponse",
    "GetRepliesUseCase",
    "MarkReadRequest",
    "MarkReadResponse",
    "MarkReadUseCase",
    "SetDeletedRequest",
    "SetDeletedResponse",
    "SetDeletedUseCase",
    "SetParentRequest",
    "SetParentResponse",
    "SetParentUseCase",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
]
