"""PostgreSQL implementation of Vote repository."""

from typing import Optional

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from doccomments.domain.model import Vote
from doccomments.domain.repository import VoteRepository
from doccomments.domain.value import CommentId, UserId
from doccomments.persistence.mappers import row_to_vote, vote_to_dict
from doccomments.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_for_update(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[Vote]:
        """Find a user's vote on a comment and lock the row."""
        stmt = (
            select(votes_table)
            .where(
                and_(
                    votes_table.c.user_id == user_id,
                    votes_table.c.comment_id == comment_id,
                )
            )
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def insert_if_absent(self, vote: Vote) -> bool:
        """Insert a vote unless the user already has one on the comment."""
        stmt = (
            pg_insert(votes_table)
            .values(**vote_to_dict(vote))
            .on_conflict_do_nothing(index_elements=["user_id", "comment_id"])
            .returning(votes_table.c.user_id)
        )
        result = await self.session.execute(stmt)
        inserted = result.fetchone() is not None
        await self.session.flush()
        return inserted

    async def delete(self, user_id: UserId, comment_id: CommentId) -> bool:
        """Delete a user's vote on a comment."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
