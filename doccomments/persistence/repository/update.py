"""PostgreSQL implementation of the update log repository."""

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from doccomments.domain.model import UpdateLogEntry
from doccomments.domain.repository import UpdateLogRepository
from doccomments.domain.value import CommentId
from doccomments.persistence.mappers import (
    row_to_update_log_entry,
    update_log_entry_to_dict,
)
from doccomments.persistence.tables import updates_table


class PostgresUpdateLogRepository(UpdateLogRepository):
    """PostgreSQL implementation of UpdateLogRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def append(self, entry: UpdateLogEntry) -> None:
        """Append an entry to the log."""
        stmt = insert(updates_table).values(**update_log_entry_to_dict(entry))
        await self.session.execute(stmt)
        await self.session.flush()

    async def find_by_comment(self, comment_id: CommentId) -> list[UpdateLogEntry]:
        """History of a comment, oldest first."""
        stmt = (
            select(updates_table)
            .where(updates_table.c.comment_id == comment_id)
            .order_by(updates_table.c.created_at, updates_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_update_log_entry(row._asdict()) for row in result.fetchall()]
