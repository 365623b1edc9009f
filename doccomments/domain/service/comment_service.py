"""Comment domain service."""

from typing import Optional

import logfire

from doccomments.domain.error import NotFoundError, ValidationError
from doccomments.domain.model import (
    Comment,
    NewComment,
    PageInfo,
    TagCount,
    TopTarget,
    TopUser,
    UpdateLogEntry,
)
from doccomments.domain.repository import CommentRepository, UpdateLogRepository
from doccomments.domain.value import (
    CommentId,
    CommentView,
    Domain,
    RecentQuery,
    TagName,
    Target,
    TopUsersSort,
    UpdateAction,
    UserId,
    VoteValue,
)

from .base import Service
from .formatter import Formatter
from .reading_service import ReadingService
from .tag_service import TagService
from .target_service import TargetService
from .vote_service import VoteService


class CommentService(Service):
    """Domain service for comment operations.

    Owns visibility, querying, threading and the top-level mutations. All
    reads take an explicit CommentView; nothing about the viewer is kept
    between calls.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        update_log_repository: UpdateLogRepository,
        target_service: TargetService,
        tag_service: TagService,
        vote_service: VoteService,
        reading_service: ReadingService,
        formatter: Formatter,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            update_log_repository: Update log repository
            target_service: Target resolution service
            tag_service: Tag service
            vote_service: Vote service
            reading_service: Reading service
            formatter: Renders comment content to HTML
        """
        self.comment_repository = comment_repository
        self.update_log_repository = update_log_repository
        self.target_service = target_service
        self.tag_service = tag_service
        self.vote_service = vote_service
        self.reading_service = reading_service
        self.formatter = formatter

    async def _with_tags(self, comments: list[Comment]) -> list[Comment]:
        tags = await self.tag_service.get_tags_for([c.id for c in comments])
        return [
            c.model_copy(update={"tags": tags[c.id]}) if c.id in tags else c
            for c in comments
        ]

    async def get_by_id(
        self, domain: Domain, comment_id: CommentId, view: CommentView
    ) -> Comment:
        """Get a comment by ID.

        Args:
            domain: Domain of the comment
            comment_id: Comment ID
            view: Visibility and projection

        Returns:
            The comment

        Raises:
            NotFoundError: If the comment is absent or hidden by the view
        """
        with logfire.span(
            "comment_service.get_by_id",
            comment_id=comment_id,
            include_deleted=view.include_deleted,
        ):
            comment = await self.comment_repository.find_by_id(domain, comment_id, view)
            if not comment:
                logfire.warn("Comment not found", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))
            return (await self._with_tags([comment]))[0]

    async def find(
        self, domain: Domain, target: Target, view: CommentView
    ) -> list[Comment]:
        """Top-level comments of a target, oldest first, with reply counts."""
        with logfire.span(
            "comment_service.find", domain=domain.root, target=target.key
        ):
            comments = await self.comment_repository.find_by_target(domain, target, view)
            logfire.info("Comments retrieved for target", count=len(comments))
            return await self._with_tags(comments)

    async def find_children(
        self, domain: Domain, parent_id: CommentId, view: CommentView
    ) -> list[Comment]:
        """Replies of a comment, oldest first.

        Threading is one level deep, so the direct children are all replies.
        """
        with logfire.span("comment_service.find_children", parent_id=parent_id):
            comments = await self.comment_repository.find_children(
                domain, parent_id, view
            )
            return await self._with_tags(comments)

    async def find_recent(
        self, domain: Domain, query: RecentQuery, view: CommentView
    ) -> list[Comment]:
        """One page of the recent comments feed.

        The last comment of the page carries the total number of matching
        comments and the echoed offset and limit. An empty page carries
        nothing.
        """
        with logfire.span(
            "comment_service.find_recent",
            domain=domain.root,
            order_by=query.order_by.value,
            limit=query.limit,
            offset=query.offset,
        ):
            comments = await self.comment_repository.find_recent(domain, query, view)
            if not comments:
                return []

            total = await self.comment_repository.count(domain, query, view)
            comments = await self._with_tags(comments)
            page = PageInfo(total_rows=total, offset=query.offset, limit=query.limit)
            comments[-1] = comments[-1].model_copy(update={"page": page})

            logfire.info("Recent comments retrieved", count=len(comments), total=total)
            return comments

    async def count(self, domain: Domain, query: RecentQuery, view: CommentView) -> int:
        """Number of comments matching the filters of a recent query."""
        with logfire.span("comment_service.count", domain=domain.root):
            return await self.comment_repository.count(domain, query, view)

    async def counts_per_target(
        self, domain: Domain, view: CommentView
    ) -> dict[str, int]:
        """Top-level comment count of every commented target, keyed by target key."""
        with logfire.span("comment_service.counts_per_target", domain=domain.root):
            counts = await self.comment_repository.counts_per_target(domain, view)
            return {c.key: c.value for c in counts}

    async def add(self, domain: Domain, comment: NewComment) -> CommentId:
        """Create a comment, creating its target on first use.

        The parent_id is stored as given, even when it points at a reply.
        Use fix_parent_id first to keep threads one level deep.

        Args:
            domain: Domain to add the comment to
            comment: The new comment

        Returns:
            ID of the new comment
        """
        with logfire.span(
            "comment_service.add",
            domain=domain.root,
            target=comment.target.key,
            user_id=comment.user_id,
            parent_id=comment.parent_id,
        ):
            target_id = await self.target_service.ensure(domain, comment.target)
            comment_id = await self.comment_repository.insert(
                target_id, comment, self.formatter.render(comment.content)
            )
            logfire.info(
                "Comment created",
                comment_id=comment_id,
                target_id=target_id,
                parent_id=comment.parent_id,
            )
            return comment_id

    async def update(
        self, domain: Domain, comment_id: CommentId, user_id: UserId, content: str
    ) -> None:
        """Replace the content of a comment and log the edit.

        Raises:
            NotFoundError: If the comment does not exist in the domain
        """
        with logfire.span(
            "comment_service.update",
            comment_id=comment_id,
            user_id=user_id,
            content_length=len(content),
        ):
            updated = await self.comment_repository.update_content(
                domain, comment_id, content, self.formatter.render(content)
            )
            if not updated:
                logfire.warn("Update of non-existent comment", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))

            await self.update_log_repository.append(
                UpdateLogEntry(
                    comment_id=comment_id, user_id=user_id, action=UpdateAction.UPDATE
                )
            )
            logfire.info("Comment updated", comment_id=comment_id)

    async def set_deleted(
        self, domain: Domain, comment_id: CommentId, user_id: UserId, deleted: bool
    ) -> None:
        """Soft-delete or restore a comment and log the action.

        Raises:
            NotFoundError: If the comment does not exist in the domain
        """
        action = UpdateAction.DELETE if deleted else UpdateAction.UNDO_DELETE
        with logfire.span(
            "comment_service.set_deleted",
            comment_id=comment_id,
            user_id=user_id,
            action=action.value,
        ):
            updated = await self.comment_repository.set_deleted(
                domain, comment_id, deleted
            )
            if not updated:
                logfire.warn("Deletion of non-existent comment", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))

            await self.update_log_repository.append(
                UpdateLogEntry(comment_id=comment_id, user_id=user_id, action=action)
            )
            logfire.info("Comment deletion flag set", comment_id=comment_id, deleted=deleted)

    async def fix_parent_id(
        self, domain: Domain, parent_id: Optional[CommentId]
    ) -> Optional[CommentId]:
        """Resolve the parent a reply should really get.

        Replying to a reply means replying to its parent, so threads never
        get deeper than one level.

        Raises:
            NotFoundError: If the requested parent does not exist
        """
        if parent_id is None:
            return None

        parent = await self.comment_repository.find_by_id(
            domain, parent_id, CommentView()
        )
        if not parent:
            raise NotFoundError("Comment", str(parent_id))
        return parent.parent_id if parent.is_reply else parent_id

    async def set_parent(
        self,
        domain: Domain,
        comment_id: CommentId,
        parent_id: Optional[CommentId],
    ) -> Optional[CommentId]:
        """Move a comment, with its replies, under a new parent.

        The parent is flattened first (a reply's parent is used instead of
        the reply), then the comment and its direct children are moved in
        one statement. A None parent promotes them all to top level.

        Args:
            domain: Domain of the comment
            comment_id: Comment to move
            parent_id: Requested new parent

        Returns:
            The parent actually used

        Raises:
            NotFoundError: If the comment or the requested parent does not exist
            ValidationError: If the move would make the comment its own parent
        """
        with logfire.span(
            "comment_service.set_parent",
            comment_id=comment_id,
            requested_parent_id=parent_id,
        ):
            resolved = await self.fix_parent_id(domain, parent_id)
            if resolved == comment_id:
                logfire.warn(
                    "Refusing to make comment its own parent",
                    comment_id=comment_id,
                    requested_parent_id=parent_id,
                )
                raise ValidationError(f"Comment {comment_id} cannot be its own parent")

            moved = await self.comment_repository.reparent(domain, comment_id, resolved)
            if moved == 0:
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment re-parented",
                comment_id=comment_id,
                parent_id=resolved,
                moved=moved,
            )
            return resolved

    async def vote(
        self,
        domain: Domain,
        user_id: UserId,
        comment_id: CommentId,
        value: VoteValue,
    ) -> tuple[int, int]:
        """Vote on a comment.

        Returns:
            Tuple of the resulting vote (1, -1 or 0) and the new total score
        """
        result = await self.vote_service.cast(domain, user_id, comment_id, value)
        total = await self.vote_service.get_score(comment_id)
        return result.resulting_vote, total

    async def mark_read(self, user_id: UserId, comment_id: CommentId) -> None:
        """Mark a comment read by a user."""
        await self.reading_service.mark_read(user_id, comment_id)

    async def add_tag(
        self, domain: Domain, comment_id: CommentId, tagname: TagName, user_id: UserId
    ) -> None:
        """Attach a tag to a comment."""
        await self.tag_service.add(domain, comment_id, tagname, user_id)

    async def remove_tag(
        self, domain: Domain, comment_id: CommentId, tagname: TagName
    ) -> None:
        """Detach a tag from a comment."""
        await self.tag_service.remove(domain, comment_id, tagname)

    async def get_top_tags(self, domain: Domain, view: CommentView) -> list[TagCount]:
        """Most used tags of the domain."""
        return await self.tag_service.get_top(domain, view)

    async def get_top_users(
        self, domain: Domain, sort_by: TopUsersSort, view: CommentView
    ) -> list[TopUser]:
        """Users with the highest total score or the most comments."""
        with logfire.span(
            "comment_service.get_top_users", domain=domain.root, sort_by=sort_by.value
        ):
            return await self.comment_repository.top_users(domain, sort_by, view)

    async def get_top_targets(self, domain: Domain, view: CommentView) -> list[TopTarget]:
        """Most commented targets of the domain."""
        with logfire.span("comment_service.get_top_targets", domain=domain.root):
            return await self.comment_repository.top_targets(domain, view)
