"""Domain model entities for the comment system."""

from doccomments.domain.model.comment import Comment, NewComment, PageInfo
from doccomments.domain.model.stats import TagCount, TargetCount, TopTarget, TopUser
from doccomments.domain.model.update import UpdateLogEntry
from doccomments.domain.model.user import User, Viewer
from doccomments.domain.model.vote import Vote, VoteState, VoteTransition, transition

__all__ = [
    "Comment",
    "NewComment",
    "PageInfo",
    "Vote",
    "VoteState",
    "VoteTransition",
    "transition",
    "User",
    "Viewer",
    "UpdateLogEntry",
    "TargetCount",
    "TopUser",
    "TopTarget",
    "TagCount",
]
