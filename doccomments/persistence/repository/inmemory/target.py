"""In-memory target repository for testing."""

from typing import Optional

from doccomments.domain.repository import TargetRepository
from doccomments.domain.value import Domain, Target, TargetId

from .database import InMemoryDatabase, StoredTarget


class InMemoryTargetRepository(TargetRepository):
    """In-memory implementation of TargetRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    async def find_id(self, domain: Domain, target: Target) -> Optional[TargetId]:
        """Find the ID of a target."""
        for stored in self._db.targets.values():
            if stored.domain == domain.root and stored.target == target:
                return stored.id
        return None

    async def insert_if_absent(self, domain: Domain, target: Target) -> Optional[TargetId]:
        """Insert a target unless it already exists."""
        if await self.find_id(domain, target) is not None:
            return None

        target_id = TargetId(self._db.next_id("targets"))
        self._db.targets[target_id] = StoredTarget(
            id=target_id, domain=domain.root, target=target
        )
        return target_id
