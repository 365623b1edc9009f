"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from doccomments.domain.model import Comment, NewComment, TargetCount, TopTarget, TopUser
from doccomments.domain.value import (
    CommentId,
    CommentView,
    Domain,
    RecentQuery,
    Target,
    TargetId,
    TopUsersSort,
)


class CommentRepository(ABC):
    """Repository for the comments relation.

    Every read is scoped to one domain and filtered through a CommentView:
    deleted comments are hidden unless the view includes them, and the
    viewer-specific fields (vote_dir, read) are only filled when requested.
    """

    @abstractmethod
    async def find_by_id(
        self, domain: Domain, comment_id: CommentId, view: CommentView
    ) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            domain: Domain to search in
            comment_id: The comment's unique identifier
            view: Visibility and projection

        Returns:
            The comment if found and visible, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_target(
        self, domain: Domain, target: Target, view: CommentView
    ) -> List[Comment]:
        """Find top-level comments of a target, oldest first.

        Each comment carries its reply_count, counted under the same view.

        Args:
            domain: Domain to search in
            target: Target descriptor
            view: Visibility and projection

        Returns:
            Top-level comments ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def find_children(
        self, domain: Domain, parent_id: CommentId, view: CommentView
    ) -> List[Comment]:
        """Find direct replies of a comment, oldest first."""
        pass

    @abstractmethod
    async def find_recent(
        self, domain: Domain, query: RecentQuery, view: CommentView
    ) -> List[Comment]:
        """Find top-level comments across the domain.

        Args:
            domain: Domain to search in
            query: Filters, order and paging
            view: Visibility and projection

        Returns:
            One page of comments, newest (or highest scored) first
        """
        pass

    @abstractmethod
    async def count(self, domain: Domain, query: RecentQuery, view: CommentView) -> int:
        """Count comments matching the filters of a recent query.

        Paging and ordering of the query are ignored.
        """
        pass

    @abstractmethod
    async def counts_per_target(
        self, domain: Domain, view: CommentView
    ) -> List[TargetCount]:
        """Count top-level comments of every commented target in the domain."""
        pass

    @abstractmethod
    async def insert(
        self, target_id: TargetId, comment: NewComment, content_html: str
    ) -> CommentId:
        """Insert a new comment.

        The parent_id is stored as given.

        Returns:
            ID assigned to the new comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, domain: Domain, comment_id: CommentId, content: str, content_html: str
    ) -> bool:
        """Replace the text of a comment.

        Returns:
            True if a comment was updated, False if it does not exist
        """
        pass

    @abstractmethod
    async def set_deleted(
        self, domain: Domain, comment_id: CommentId, deleted: bool
    ) -> bool:
        """Set the soft-delete flag.

        Returns:
            True if a comment was updated, False if it does not exist
        """
        pass

    @abstractmethod
    async def reparent(
        self, domain: Domain, comment_id: CommentId, parent_id: Optional[CommentId]
    ) -> int:
        """Move a comment together with its direct replies under a new parent.

        The comment and all of its children (deleted ones included) are
        updated in a single statement.

        Args:
            domain: Domain of the comment
            comment_id: Comment to move
            parent_id: New parent, or None to promote to top level

        Returns:
            Number of comments updated
        """
        pass

    @abstractmethod
    async def get_score(self, comment_id: CommentId) -> int:
        """Sum of all votes on a comment (0 when there are none)."""
        pass

    @abstractmethod
    async def top_users(
        self, domain: Domain, sort_by: TopUsersSort, view: CommentView
    ) -> List[TopUser]:
        """Rank comment authors by total score or number of comments."""
        pass

    @abstractmethod
    async def top_targets(self, domain: Domain, view: CommentView) -> List[TopTarget]:
        """Rank targets by number of comments."""
        pass
