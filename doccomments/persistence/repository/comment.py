"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy import desc, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

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
from doccomments.persistence.mappers import (
    row_to_comment,
    row_to_target_count,
    row_to_top_target,
    row_to_top_user,
)
from doccomments.persistence.tables import (
    comment_tags_table,
    comments_table,
    readings_table,
    tags_table,
    targets_table,
    users_table,
    votes_table,
)

children_table = comments_table.alias("children")


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Comments are always read joined with their target and author. The score,
    the viewer's vote, the read flag and the reply count are correlated
    subqueries, so they are computed fresh on every read.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _score(self) -> Any:
        return (
            select(func.coalesce(func.sum(votes_table.c.value), 0))
            .where(votes_table.c.comment_id == comments_table.c.id)
            .correlate(comments_table)
            .scalar_subquery()
        )

    def _read(self, user_id: int) -> Any:
        return (
            select(readings_table.c.comment_id)
            .where(readings_table.c.comment_id == comments_table.c.id)
            .where(readings_table.c.user_id == user_id)
            .correlate(comments_table)
            .exists()
        )

    def _visible(self, view: CommentView) -> list[Any]:
        if view.include_deleted:
            return []
        return [comments_table.c.deleted.is_(False)]

    def _select(self, domain: Domain, view: CommentView, with_replies: bool = False):
        """Build the base comment query for a domain and view."""
        columns: list[Any] = [
            comments_table.c.id,
            targets_table.c.domain,
            comments_table.c.target_id,
            targets_table.c.type,
            targets_table.c.cls,
            targets_table.c.member,
            comments_table.c.parent_id,
            comments_table.c.user_id,
            users_table.c.username,
            users_table.c.email,
            users_table.c.moderator,
            comments_table.c.content,
            comments_table.c.content_html,
            comments_table.c.created_at,
            comments_table.c.deleted,
            self._score().label("score"),
        ]

        if view.vote_dir_by is not None:
            columns.append(
                select(votes_table.c.value)
                .where(votes_table.c.comment_id == comments_table.c.id)
                .where(votes_table.c.user_id == view.vote_dir_by)
                .correlate(comments_table)
                .scalar_subquery()
                .label("vote_dir")
            )

        if view.read_by is not None:
            columns.append(self._read(view.read_by).label("read"))

        if with_replies:
            replies = (
                select(func.count())
                .select_from(children_table)
                .where(children_table.c.parent_id == comments_table.c.id)
            )
            if not view.include_deleted:
                replies = replies.where(children_table.c.deleted.is_(False))
            columns.append(
                replies.correlate(comments_table).scalar_subquery().label("reply_count")
            )

        return (
            select(*columns)
            .select_from(
                comments_table.join(
                    targets_table, targets_table.c.id == comments_table.c.target_id
                ).join(users_table, users_table.c.id == comments_table.c.user_id)
            )
            .where(targets_table.c.domain == domain.root)
            .where(*self._visible(view))
        )

    def _in_domain(self, domain: Domain) -> Any:
        """Condition restricting comments to targets of a domain."""
        return comments_table.c.target_id.in_(
            select(targets_table.c.id).where(targets_table.c.domain == domain.root)
        )

    def _recent_filters(self, domain: Domain, query: RecentQuery) -> list[Any]:
        """WHERE conditions shared by find_recent and count."""
        conditions: list[Any] = [comments_table.c.parent_id.is_(None)]

        if query.hide_user is not None:
            conditions.append(comments_table.c.user_id != query.hide_user)
        if query.hide_read_by is not None:
            conditions.append(~self._read(query.hide_read_by))
        if query.username:
            conditions.append(users_table.c.username == query.username)
        if query.target_id is not None:
            conditions.append(comments_table.c.target_id == query.target_id)
        if query.tagname:
            conditions.append(
                select(comment_tags_table.c.comment_id)
                .select_from(
                    comment_tags_table.join(
                        tags_table, tags_table.c.id == comment_tags_table.c.tag_id
                    )
                )
                .where(comment_tags_table.c.comment_id == comments_table.c.id)
                .where(tags_table.c.domain == domain.root)
                .where(tags_table.c.tagname == query.tagname)
                .correlate(comments_table)
                .exists()
            )

        return conditions

    async def find_by_id(
        self, domain: Domain, comment_id: CommentId, view: CommentView
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = self._select(domain, view).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_target(
        self, domain: Domain, target: Target, view: CommentView
    ) -> List[Comment]:
        """Find top-level comments of a target, oldest first."""
        stmt = (
            self._select(domain, view, with_replies=True)
            .where(targets_table.c.type == target.type.value)
            .where(targets_table.c.cls == target.name)
            .where(targets_table.c.member == target.member)
            .where(comments_table.c.parent_id.is_(None))
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def find_children(
        self, domain: Domain, parent_id: CommentId, view: CommentView
    ) -> List[Comment]:
        """Find direct replies of a comment, oldest first."""
        stmt = (
            self._select(domain, view)
            .where(comments_table.c.parent_id == parent_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def find_recent(
        self, domain: Domain, query: RecentQuery, view: CommentView
    ) -> List[Comment]:
        """Find top-level comments across the domain."""
        order_column = (
            self._score()
            if query.order_by == RecentOrder.SCORE
            else comments_table.c.created_at
        )
        stmt = (
            self._select(domain, view, with_replies=True)
            .where(*self._recent_filters(domain, query))
            .order_by(desc(order_column), desc(comments_table.c.id))
            .limit(query.limit)
            .offset(query.offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def count(self, domain: Domain, query: RecentQuery, view: CommentView) -> int:
        """Count comments matching the filters of a recent query."""
        stmt = (
            select(func.count())
            .select_from(
                comments_table.join(
                    targets_table, targets_table.c.id == comments_table.c.target_id
                ).join(users_table, users_table.c.id == comments_table.c.user_id)
            )
            .where(targets_table.c.domain == domain.root)
            .where(*self._visible(view))
            .where(*self._recent_filters(domain, query))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def counts_per_target(
        self, domain: Domain, view: CommentView
    ) -> List[TargetCount]:
        """Count top-level comments of every commented target in the domain."""
        stmt = (
            select(
                targets_table.c.type,
                targets_table.c.cls,
                targets_table.c.member,
                func.count(comments_table.c.id).label("value"),
            )
            .select_from(
                comments_table.join(
                    targets_table, targets_table.c.id == comments_table.c.target_id
                )
            )
            .where(targets_table.c.domain == domain.root)
            .where(comments_table.c.parent_id.is_(None))
            .where(*self._visible(view))
            .group_by(
                targets_table.c.id,
                targets_table.c.type,
                targets_table.c.cls,
                targets_table.c.member,
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_target_count(dict(row)) for row in result.mappings().all()]

    async def insert(
        self, target_id: TargetId, comment: NewComment, content_html: str
    ) -> CommentId:
        """Insert a new comment."""
        stmt = (
            comments_table.insert()
            .values(
                target_id=target_id,
                parent_id=comment.parent_id,
                user_id=comment.user_id,
                content=comment.content,
                content_html=content_html,
                created_at=datetime.now(),
                deleted=False,
            )
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        comment_id = CommentId(result.scalar_one())
        await self.session.flush()
        return comment_id

    async def update_content(
        self, domain: Domain, comment_id: CommentId, content: str, content_html: str
    ) -> bool:
        """Replace the text of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(self._in_domain(domain))
            .values(content=content, content_html=content_html)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def set_deleted(
        self, domain: Domain, comment_id: CommentId, deleted: bool
    ) -> bool:
        """Set the soft-delete flag."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(self._in_domain(domain))
            .values(deleted=deleted)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def reparent(
        self, domain: Domain, comment_id: CommentId, parent_id: Optional[CommentId]
    ) -> int:
        """Move a comment together with its direct replies under a new parent."""
        stmt = (
            update(comments_table)
            .where(
                or_(
                    comments_table.c.id == comment_id,
                    comments_table.c.parent_id == comment_id,
                )
            )
            .where(self._in_domain(domain))
            .values(parent_id=parent_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def get_score(self, comment_id: CommentId) -> int:
        """Sum of all votes on a comment."""
        stmt = select(func.coalesce(func.sum(votes_table.c.value), 0)).where(
            votes_table.c.comment_id == comment_id
        )
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)

    async def top_users(
        self, domain: Domain, sort_by: TopUsersSort, view: CommentView
    ) -> List[TopUser]:
        """Rank comment authors by total score or number of comments."""
        source = comments_table.join(
            targets_table, targets_table.c.id == comments_table.c.target_id
        ).join(users_table, users_table.c.id == comments_table.c.user_id)

        if sort_by == TopUsersSort.VOTES:
            source = source.outerjoin(
                votes_table, votes_table.c.comment_id == comments_table.c.id
            )
            score = func.coalesce(func.sum(votes_table.c.value), 0)
        else:
            score = func.count(comments_table.c.id)

        stmt = (
            select(
                users_table.c.id,
                users_table.c.username,
                users_table.c.email,
                users_table.c.moderator,
                score.label("score"),
            )
            .select_from(source)
            .where(targets_table.c.domain == domain.root)
            .where(*self._visible(view))
            .group_by(
                users_table.c.id,
                users_table.c.username,
                users_table.c.email,
                users_table.c.moderator,
            )
            .order_by(desc("score"))
        )
        result = await self.session.execute(stmt)
        return [row_to_top_user(dict(row)) for row in result.mappings().all()]

    async def top_targets(self, domain: Domain, view: CommentView) -> List[TopTarget]:
        """Rank targets by number of comments."""
        stmt = (
            select(
                targets_table.c.id,
                targets_table.c.type,
                targets_table.c.cls,
                targets_table.c.member,
                func.count(comments_table.c.id).label("score"),
            )
            .select_from(
                comments_table.join(
                    targets_table, targets_table.c.id == comments_table.c.target_id
                )
            )
            .where(targets_table.c.domain == domain.root)
            .where(*self._visible(view))
            .group_by(
                targets_table.c.id,
                targets_table.c.type,
                targets_table.c.cls,
                targets_table.c.member,
            )
            .order_by(desc("score"))
        )
        result = await self.session.execute(stmt)
        return [row_to_top_target(dict(row)) for row in result.mappings().all()]
