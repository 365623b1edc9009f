"""In-memory comment repository for testing."""

from collections import Counter
from datetime import datetime
from typing import Iterable, Optional

from sqlalchemy.exc import IntegrityError

from doccomments.domain.model import Comment, NewComment, TargetCount, TopTarget, TopUser
from doccomments.domain.repository import CommentRepository
from doccomments.domain.value import (
    CommentId,
    CommentView,
    Domain,
    RecentOrder,
    RecentQuery,
    Target,
    TargetId,
    TopUsersSort,
)

from .database import InMemoryDatabase, StoredComment


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Mirrors the joins and computed columns of the PostgreSQL repository.
    """

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    def _visible(self, domain: Domain, view: CommentView) -> Iterable[StoredComment]:
        """Comments of the domain whose author exists, filtered by the view."""
        for row in self._db.comments.values():
            if not self._db.in_domain(row, domain.root):
                continue
            if row.user_id not in self._db.users:
                continue
            if row.deleted and not view.include_deleted:
                continue
            yield row

    def _to_comment(
        self, row: StoredComment, view: CommentView, with_replies: bool = False
    ) -> Comment:
        target = self._db.targets[row.target_id]
        author = self._db.users[row.user_id]

        vote_dir = None
        if view.vote_dir_by is not None:
            vote = self._db.votes.get((view.vote_dir_by, row.id))
            vote_dir = int(vote.value) if vote else None

        read = None
        if view.read_by is not None:
            read = (view.read_by, row.id) in self._db.readings

        reply_count = None
        if with_replies:
            reply_count = sum(
                1
                for child in self._db.comments.values()
                if child.parent_id == row.id
                and (view.include_deleted or not child.deleted)
            )

        return Comment(
            id=row.id,
            domain=Domain(target.domain),
            target_id=row.target_id,
            target=target.target,
            parent_id=row.parent_id,
            user_id=row.user_id,
            username=author.username,
            email=author.email,
            moderator=author.moderator,
            content=row.content,
            content_html=row.content_html,
            created_at=row.created_at,
            deleted=row.deleted,
            score=self._db.score(row.id),
            vote_dir=vote_dir,
            read=read,
            reply_count=reply_count,
        )

    def _has_tag(self, comment_id: CommentId, domain: Domain, tagname: str) -> bool:
        for tagged_id, tag_id in self._db.comment_tags:
            tag = self._db.tags[tag_id]
            if (
                tagged_id == comment_id
                and tag.domain == domain.root
                and tag.tagname == tagname
            ):
                return True
        return False

    def _matching(
        self, domain: Domain, query: RecentQuery, view: CommentView
    ) -> list[StoredComment]:
        """Rows matching the filters of a recent query."""
        rows = []
        for row in self._visible(domain, view):
            if row.parent_id is not None:
                continue
            if query.hide_user is not None and row.user_id == query.hide_user:
                continue
            if (
                query.hide_read_by is not None
                and (query.hide_read_by, row.id) in self._db.readings
            ):
                continue
            if query.username and self._db.users[row.user_id].username != query.username:
                continue
            if query.target_id is not None and row.target_id != query.target_id:
                continue
            if query.tagname and not self._has_tag(row.id, domain, query.tagname):
                continue
            rows.append(row)
        return rows

    async def find_by_id(
        self, domain: Domain, comment_id: CommentId, view: CommentView
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        for row in self._visible(domain, view):
            if row.id == comment_id:
                return self._to_comment(row, view)
        return None

    async def find_by_target(
        self, domain: Domain, target: Target, view: CommentView
    ) -> list[Comment]:
        """Find top-level comments of a target, oldest first."""
        rows = [
            row
            for row in self._visible(domain, view)
            if row.parent_id is None and self._db.targets[row.target_id].target == target
        ]
        rows.sort(key=lambda r: (r.created_at, r.id))
        return [self._to_comment(row, view, with_replies=True) for row in rows]

    async def find_children(
        self, domain: Domain, parent_id: CommentId, view: CommentView
    ) -> list[Comment]:
        """Find direct replies of a comment, oldest first."""
        rows = [row for row in self._visible(domain, view) if row.parent_id == parent_id]
        rows.sort(key=lambda r: (r.created_at, r.id))
        return [self._to_comment(row, view) for row in rows]

    async def find_recent(
        self, domain: Domain, query: RecentQuery, view: CommentView
    ) -> list[Comment]:
        """Find top-level comments across the domain."""
        rows = self._matching(domain, query, view)
        if query.order_by == RecentOrder.SCORE:
            rows.sort(key=lambda r: (self._db.score(r.id), r.id), reverse=True)
        else:
            rows.sort(key=lambda r: (r.created_at, r.id), reverse=True)

        page = rows[query.offset : query.offset + query.limit]
        return [self._to_comment(row, view, with_replies=True) for row in page]

    async def count(self, domain: Domain, query: RecentQuery, view: CommentView) -> int:
        """Count comments matching the filters of a recent query."""
        return len(self._matching(domain, query, view))

    async def counts_per_target(
        self, domain: Domain, view: CommentView
    ) -> list[TargetCount]:
        """Count top-level comments of every commented target in the domain."""
        counts = Counter(
            row.target_id
            for row in self._visible(domain, view)
            if row.parent_id is None
        )
        return [
            TargetCount(key=self._db.targets[target_id].target.key, value=value)
            for target_id, value in counts.items()
        ]

    async def insert(
        self, target_id: TargetId, comment: NewComment, content_html: str
    ) -> CommentId:
        """Insert a new comment.

        Raises:
            IntegrityError: If the target or the author does not exist
        """
        if target_id not in self._db.targets or comment.user_id not in self._db.users:
            raise IntegrityError("Foreign key violation", None, Exception())

        comment_id = CommentId(self._db.next_id("comments"))
        self._db.comments[comment_id] = StoredComment(
            id=comment_id,
            target_id=target_id,
            parent_id=comment.parent_id,
            user_id=comment.user_id,
            content=comment.content,
            content_html=content_html,
            created_at=datetime.now(),
        )
        return comment_id

    def _find_row(self, domain: Domain, comment_id: CommentId) -> Optional[StoredComment]:
        row = self._db.comments.get(comment_id)
        if row is None or not self._db.in_domain(row, domain.root):
            return None
        return row

    async def update_content(
        self, domain: Domain, comment_id: CommentId, content: str, content_html: str
    ) -> bool:
        """Replace the text of a comment."""
        row = self._find_row(domain, comment_id)
        if row is None:
            return False
        row.content = content
        row.content_html = content_html
        return True

    async def set_deleted(
        self, domain: Domain, comment_id: CommentId, deleted: bool
    ) -> bool:
        """Set the soft-delete flag."""
        row = self._find_row(domain, comment_id)
        if row is None:
            return False
        row.deleted = deleted
        return True

    async def reparent(
        self, domain: Domain, comment_id: CommentId, parent_id: Optional[CommentId]
    ) -> int:
        """Move a comment together with its direct replies under a new parent."""
        moved = [
            row
            for row in self._db.comments.values()
            if (row.id == comment_id or row.parent_id == comment_id)
            and self._db.in_domain(row, domain.root)
        ]
        for row in moved:
            row.parent_id = parent_id
        return len(moved)

    async def get_score(self, comment_id: CommentId) -> int:
        """Sum of all votes on a comment."""
        return self._db.score(comment_id)

    async def top_users(
        self, domain: Domain, sort_by: TopUsersSort, view: CommentView
    ) -> list[TopUser]:
        """Rank comment authors by total score or number of comments."""
        scores: Counter = Counter()
        for row in self._visible(domain, view):
            if sort_by == TopUsersSort.VOTES:
                scores[row.user_id] += self._db.score(row.id)
            else:
                scores[row.user_id] += 1

        ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
        return [
            TopUser(
                id=user_id,
                username=self._db.users[user_id].username,
                email=self._db.users[user_id].email,
                moderator=self._db.users[user_id].moderator,
                score=score,
            )
            for user_id, score in ranked
        ]

    async def top_targets(self, domain: Domain, view: CommentView) -> list[TopTarget]:
        """Rank targets by number of comments."""
        counts = Counter(row.target_id for row in self._visible(domain, view))
        return [
            TopTarget(
                id=target_id,
                type=self._db.targets[target_id].target.type,
                name=self._db.targets[target_id].target.name,
                member=self._db.targets[target_id].target.member,
                score=score,
            )
            for target_id, score in counts.most_common()
        ]
