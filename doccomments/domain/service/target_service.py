"""Target domain service."""

import logfire

from doccomments.domain.repository import TargetRepository
from doccomments.domain.value import Domain, Target, TargetId

from .base import Service


class TargetService(Service):
    """Resolves target descriptors to stable IDs."""

    def __init__(self, target_repository: TargetRepository) -> None:
        """Initialize target service.

        Args:
            target_repository: Target repository
        """
        self.target_repository = target_repository

    async def ensure(self, domain: Domain, target: Target) -> TargetId:
        """Return the ID of a target, creating the target on first use.

        Args:
            domain: Domain of the target
            target: Target descriptor

        Returns:
            Target ID
        """
        with logfire.span(
            "target_service.ensure", domain=domain.root, target=target.key
        ):
            target_id = await self.target_repository.find_id(domain, target)
            if target_id is not None:
                return target_id

            target_id = await self.target_repository.insert_if_absent(domain, target)
            if target_id is not None:
                logfire.info(
                    "Target created",
                    domain=domain.root,
                    target=target.key,
                    target_id=target_id,
                )
                return target_id

            # Created by a concurrent request between our read and insert
            target_id = await self.target_repository.find_id(domain, target)
            if target_id is None:
                raise RuntimeError(f"Target vanished after insert: {target.key}")
            return target_id
