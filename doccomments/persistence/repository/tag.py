"""PostgreSQL implementation of Tag repository."""

from collections import defaultdict
from datetime import datetime
from typing import Optional

from sqlalchemy import and_, delete, desc, func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from doccomments.domain.model import TagCount
from doccomments.domain.repository import TagRepository
from doccomments.domain.value import CommentId, CommentView, Domain, TagId, TagName, UserId
from doccomments.persistence.mappers import row_to_tag_count
from doccomments.persistence.tables import (
    comment_tags_table,
    comments_table,
    tags_table,
)


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def ensure(self, domain: Domain, name: TagName) -> TagId:
        """Find a tag by name, creating it on first use."""
        tag_id = await self.find_id(domain, name)
        if tag_id is not None:
            return tag_id

        stmt = (
            pg_insert(tags_table)
            .values(domain=domain.root, tagname=name.root)
            .on_conflict_do_nothing(constraint="uq_domain_tagname")
            .returning(tags_table.c.id)
        )
        result = await self.session.execute(stmt)
        inserted = result.scalar()
        await self.session.flush()
        if inserted is not None:
            return TagId(inserted)

        # Inserted by a concurrent transaction
        tag_id = await self.find_id(domain, name)
        if tag_id is None:
            raise RuntimeError(f"Tag vanished after insert: {name.root}")
        return tag_id

    async def find_id(self, domain: Domain, name: TagName) -> Optional[TagId]:
        """Find a tag ID by name."""
        stmt = select(tags_table.c.id).where(
            and_(tags_table.c.domain == domain.root, tags_table.c.tagname == name.root)
        )
        result = await self.session.execute(stmt)
        tag_id = result.scalar()
        return TagId(tag_id) if tag_id is not None else None

    async def attach(self, comment_id: CommentId, tag_id: TagId, user_id: UserId) -> bool:
        """Attach a tag to a comment, ignoring an existing attachment."""
        stmt = (
            pg_insert(comment_tags_table)
            .values(
                comment_id=comment_id,
                tag_id=tag_id,
                user_id=user_id,
                created_at=datetime.now(),
            )
            .on_conflict_do_nothing(constraint="uq_comment_tag")
            .returning(comment_tags_table.c.tag_id)
        )
        result = await self.session.execute(stmt)
        attached = result.fetchone() is not None
        await self.session.flush()
        return attached

    async def detach(self, comment_id: CommentId, tag_id: TagId) -> bool:
        """Detach a tag from a comment."""
        stmt = delete(comment_tags_table).where(
            and_(
                comment_tags_table.c.comment_id == comment_id,
                comment_tags_table.c.tag_id == tag_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_by_comments(
        self, comment_ids: list[CommentId]
    ) -> dict[CommentId, list[str]]:
        """Tag names of several comments (batch query)."""
        if not comment_ids:
            return {}

        stmt = (
            select(comment_tags_table.c.comment_id, tags_table.c.tagname)
            .select_from(
                comment_tags_table.join(
                    tags_table, tags_table.c.id == comment_tags_table.c.tag_id
                )
            )
            .where(comment_tags_table.c.comment_id.in_(comment_ids))
            .order_by(comment_tags_table.c.comment_id, tags_table.c.tagname)
        )
        result = await self.session.execute(stmt)

        tags: dict[CommentId, list[str]] = defaultdict(list)
        for row in result.fetchall():
            tags[CommentId(row.comment_id)].append(row.tagname)
        return dict(tags)

    async def top(self, domain: Domain, view: CommentView) -> list[TagCount]:
        """Rank tags by the number of visible comments carrying them."""
        stmt = (
            select(
                tags_table.c.tagname,
                func.count(comment_tags_table.c.comment_id).label("score"),
            )
            .select_from(
                tags_table.join(
                    comment_tags_table, comment_tags_table.c.tag_id == tags_table.c.id
                ).join(
                    comments_table, comments_table.c.id == comment_tags_table.c.comment_id
                )
            )
            .where(tags_table.c.domain == domain.root)
            .group_by(tags_table.c.id, tags_table.c.tagname)
            .order_by(desc("score"), tags_table.c.tagname)
        )
        if not view.include_deleted:
            stmt = stmt.where(comments_table.c.deleted.is_(False))

        result = await self.session.execute(stmt)
        return [row_to_tag_count(dict(row)) for row in result.mappings().all()]
