"""Shared in-memory storage for the in-memory repositories.

The comment listing joins users, targets, votes, readings and tags, so all
in-memory repositories of one test share a single InMemoryDatabase.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from doccomments.domain.model import UpdateLogEntry, User, Vote
from doccomments.domain.value import CommentId, TagId, Target, TargetId, UserId


@dataclass
class StoredTarget:
    """Row of the targets relation."""

    id: TargetId
    domain: str
    target: Target


@dataclass
class StoredComment:
    """Row of the comments relation."""

    id: CommentId
    target_id: TargetId
    parent_id: Optional[CommentId]
    user_id: UserId
    content: str
    content_html: str
    created_at: datetime
    deleted: bool = False


@dataclass
class StoredTag:
    """Row of the tags relation."""

    id: TagId
    domain: str
    tagname: str


@dataclass
class InMemoryDatabase:
    """All relations of the comment system, keyed like their unique constraints."""

    users: dict[UserId, User] = field(default_factory=dict)
    targets: dict[TargetId, StoredTarget] = field(default_factory=dict)
    comments: dict[CommentId, StoredComment] = field(default_factory=dict)
    votes: dict[tuple[UserId, CommentId], Vote] = field(default_factory=dict)
    readings: set[tuple[UserId, CommentId]] = field(default_factory=set)
    updates: list[UpdateLogEntry] = field(default_factory=list)
    tags: dict[TagId, StoredTag] = field(default_factory=dict)
    comment_tags: dict[tuple[CommentId, TagId], Optional[UserId]] = field(
        default_factory=dict
    )
    _sequences: dict[str, int] = field(default_factory=dict)

    def next_id(self, relation: str) -> int:
        """Next value of a relation's id sequence, starting at 1."""
        self._sequences[relation] = self._sequences.get(relation, 0) + 1
        return self._sequences[relation]

    def score(self, comment_id: CommentId) -> int:
        """Sum of all votes on a comment."""
        return sum(
            int(vote.value)
            for (_, voted_id), vote in self.votes.items()
            if voted_id == comment_id
        )

    def in_domain(self, comment: StoredComment, domain: str) -> bool:
        """Whether a comment belongs to a target of the domain."""
        target = self.targets.get(comment.target_id)
        return target is not None and target.domain == domain
