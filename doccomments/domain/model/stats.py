"""Aggregate rows returned by the ranking queries."""

from doccomments.domain.model.common import DomainModel
from doccomments.domain.value import TargetId, TargetType, UserId


class TargetCount(DomainModel):
    """Number of top-level comments for one target."""

    key: str  # "{type}__{name}__{member}"
    value: int


class TopUser(DomainModel):
    """User ranked by total score or number of comments."""

    id: UserId
    username: str
    email: str = ""
    moderator: bool = False
    score: int


class TopTarget(DomainModel):
    """Target ranked by number of comments."""

    id: TargetId
    type: TargetType
    name: str
    member: str
    score: int


class TagCount(DomainModel):
    """Tag ranked by number of comments carrying it."""

    tagname: str
    score: int
