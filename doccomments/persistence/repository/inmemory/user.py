"""In-memory user repository for testing."""

from typing import Optional

from doccomments.domain.model import User
from doccomments.domain.repository import UserRepository
from doccomments.domain.value import UserId

from .database import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._db.users.get(user_id)

    async def upsert(self, user: User) -> None:
        self._db.users[user.id] = user
