"""PostgreSQL implementation of Target repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from doccomments.domain.repository import TargetRepository
from doccomments.domain.value import Domain, Target, TargetId
from doccomments.persistence.mappers import target_to_dict
from doccomments.persistence.tables import targets_table


class PostgresTargetRepository(TargetRepository):
    """PostgreSQL implementation of TargetRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_id(self, domain: Domain, target: Target) -> Optional[TargetId]:
        """Find the ID of a target."""
        stmt = (
            select(targets_table.c.id)
            .where(targets_table.c.domain == domain.root)
            .where(targets_table.c.type == target.type.value)
            .where(targets_table.c.cls == target.name)
            .where(targets_table.c.member == target.member)
        )
        result = await self.session.execute(stmt)
        target_id = result.scalar()
        return TargetId(target_id) if target_id is not None else None

    async def insert_if_absent(self, domain: Domain, target: Target) -> Optional[TargetId]:
        """Insert a target unless it already exists."""
        stmt = (
            pg_insert(targets_table)
            .values(domain=domain.root, **target_to_dict(target))
            .on_conflict_do_nothing(constraint="uq_target")
            .returning(targets_table.c.id)
        )
        result = await self.session.execute(stmt)
        target_id = result.scalar()
        await self.session.flush()
        return TargetId(target_id) if target_id is not None else None
