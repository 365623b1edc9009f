"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from doccomments.domain.model import TagCount
from doccomments.domain.value import CommentId, CommentView, Domain, TagId, TagName, UserId


class TagRepository(ABC):
    """Repository for tags and their attachment to comments."""

    @abstractmethod
    async def ensure(self, domain: Domain, name: TagName) -> TagId:
        """Find a tag by name, creating it on first use.

        Args:
            domain: Domain the tag belongs to
            name: Tag name

        Returns:
            ID of the tag
        """
        pass

    @abstractmethod
    async def find_id(self, domain: Domain, name: TagName) -> Optional[TagId]:
        """Find a tag ID by name."""
        pass

    @abstractmethod
    async def attach(self, comment_id: CommentId, tag_id: TagId, user_id: UserId) -> bool:
        """Attach a tag to a comment.

        Returns:
            True if attached, False if the comment already had the tag
        """
        pass

    @abstractmethod
    async def detach(self, comment_id: CommentId, tag_id: TagId) -> bool:
        """Detach a tag from a comment.

        Returns:
            True if detached, False if the comment did not have the tag
        """
        pass

    @abstractmethod
    async def find_by_comments(
        self, comment_ids: list[CommentId]
    ) -> dict[CommentId, list[str]]:
        """Tag names of several comments, each list sorted alphabetically.

        Comments without tags are absent from the result.
        """
        pass

    @abstractmethod
    async def top(self, domain: Domain, view: CommentView) -> list[TagCount]:
        """Rank tags by the number of visible comments carrying them."""
        pass
