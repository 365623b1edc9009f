"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from doccomments.domain.model import User
from doccomments.domain.value import UserId


class UserRepository(ABC):
    """Authors as known to the comment system.

    Accounts belong to the site's login system; comments only join against
    them. upsert mirrors an account into the users table.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def upsert(self, user: User) -> None:
        """Insert the user, or refresh username, email and moderator flag."""
        pass
