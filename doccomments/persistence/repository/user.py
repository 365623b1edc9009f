"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from doccomments.domain.model import User
from doccomments.domain.repository import UserRepository
from doccomments.domain.value import UserId
from doccomments.persistence.mappers import row_to_user, user_to_dict
from doccomments.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """Users table access."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        result = await self.session.execute(
            select(users_table).where(users_table.c.id == user_id)
        )
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def upsert(self, user: User) -> None:
        values = user_to_dict(user)
        stmt = pg_insert(users_table).values(**values)
        await self.session.execute(
            stmt.on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={
                    "username": stmt.excluded.username,
                    "email": stmt.excluded.email,
                    "moderator": stmt.excluded.moderator,
                },
            )
        )
