"""Tag domain service."""

import logfire

from doccomments.domain.error import NotFoundError
from doccomments.domain.model import TagCount
from doccomments.domain.repository import CommentRepository, TagRepository
from doccomments.domain.value import (
    CommentId,
    CommentView,
    Domain,
    TagName,
    UserId,
)

from .base import Service


class TagService(Service):
    """Domain service for tagging comments.

    Tags form a set per comment: adding a present tag and removing an
    absent one are both no-ops.
    """

    def __init__(
        self,
        tag_repository: TagRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
            comment_repository: Comment repository
        """
        self.tag_repository = tag_repository
        self.comment_repository = comment_repository

    async def add(
        self, domain: Domain, comment_id: CommentId, name: TagName, user_id: UserId
    ) -> None:
        """Attach a tag to a comment.

        Args:
            domain: Domain of the comment
            comment_id: Comment to tag
            name: Tag name
            user_id: Moderator adding the tag

        Raises:
            NotFoundError: If the comment does not exist in the domain
        """
        with logfire.span(
            "tag_service.add", comment_id=comment_id, tagname=name.root
        ):
            comment = await self.comment_repository.find_by_id(
                domain, comment_id, CommentView(include_deleted=True)
            )
            if not comment:
                logfire.warn("Tagging non-existent comment", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))

            tag_id = await self.tag_repository.ensure(domain, name)
            attached = await self.tag_repository.attach(comment_id, tag_id, user_id)
            logfire.info(
                "Tag added" if attached else "Tag already present",
                comment_id=comment_id,
                tagname=name.root,
            )

    async def remove(self, domain: Domain, comment_id: CommentId, name: TagName) -> None:
        """Detach a tag from a comment."""
        with logfire.span(
            "tag_service.remove", comment_id=comment_id, tagname=name.root
        ):
            tag_id = await self.tag_repository.find_id(domain, name)
            if tag_id is None:
                logfire.info("Tag does not exist", tagname=name.root)
                return

            detached = await self.tag_repository.detach(comment_id, tag_id)
            logfire.info(
                "Tag removed" if detached else "Tag was not present",
                comment_id=comment_id,
                tagname=name.root,
            )

    async def get_top(self, domain: Domain, view: CommentView) -> list[TagCount]:
        """Rank tags of the domain by number of comments."""
        with logfire.span("tag_service.get_top", domain=domain.root):
            tags = await self.tag_repository.top(domain, view)
            logfire.info("Top tags retrieved", count=len(tags))
            return tags

    async def get_tags_for(
        self, comment_ids: list[CommentId]
    ) -> dict[CommentId, list[str]]:
        """Tag names of several comments in one query."""
        if not comment_ids:
            return {}
        return await self.tag_repository.find_by_comments(comment_ids)
