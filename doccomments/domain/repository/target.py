"""Target repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from doccomments.domain.value import Domain, Target, TargetId


class TargetRepository(ABC):
    """Repository for documentation targets, unique per (domain, type, name, member)."""

    @abstractmethod
    async def find_id(self, domain: Domain, target: Target) -> Optional[TargetId]:
        """Find the ID of a target.

        Returns:
            The target ID if it exists, None otherwise
        """
        pass

    @abstractmethod
    async def insert_if_absent(self, domain: Domain, target: Target) -> Optional[TargetId]:
        """Insert a target unless it already exists.

        Returns:
            ID of the inserted target, None if it already existed
        """
        pass
