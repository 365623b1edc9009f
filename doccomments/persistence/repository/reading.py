"""PostgreSQL implementation of Reading repository."""

from datetime import datetime

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from doccomments.domain.repository import ReadingRepository
from doccomments.domain.value import CommentId, UserId
from doccomments.persistence.tables import readings_table


class PostgresReadingRepository(ReadingRepository):
    """PostgreSQL implementation of ReadingRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def insert_if_absent(self, user_id: UserId, comment_id: CommentId) -> bool:
        """Mark a comment read, ignoring an existing marker."""
        stmt = (
            pg_insert(readings_table)
            .values(user_id=user_id, comment_id=comment_id, created_at=datetime.now())
            .on_conflict_do_nothing(index_elements=["user_id", "comment_id"])
            .returning(readings_table.c.comment_id)
        )
        result = await self.session.execute(stmt)
        inserted = result.fetchone() is not None
        await self.session.flush()
        return inserted
