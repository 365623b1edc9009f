"""In-memory implementation of Tag repository for testing."""

from collections import defaultdict
from typing import Optional

from doccomments.domain.model import TagCount
from doccomments.domain.repository import TagRepository
from doccomments.domain.value import CommentId, CommentView, Domain, TagId, TagName, UserId

from .database import InMemoryDatabase, StoredTag


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    async def ensure(self, domain: Domain, name: TagName) -> TagId:
        """Find a tag by name, creating it on first use."""
        tag_id = await self.find_id(domain, name)
        if tag_id is not None:
            return tag_id

        tag_id = TagId(self._db.next_id("tags"))
        self._db.tags[tag_id] = StoredTag(id=tag_id, domain=domain.root, tagname=name.root)
        return tag_id

    async def find_id(self, domain: Domain, name: TagName) -> Optional[TagId]:
        """Find a tag ID by name."""
        for tag in self._db.tags.values():
            if tag.domain == domain.root and tag.tagname == name.root:
                return tag.id
        return None

    async def attach(self, comment_id: CommentId, tag_id: TagId, user_id: UserId) -> bool:
        """Attach a tag to a comment, ignoring an existing attachment."""
        key = (comment_id, tag_id)
        if key in self._db.comment_tags:
            return False
        self._db.comment_tags[key] = user_id
        return True

    async def detach(self, comment_id: CommentId, tag_id: TagId) -> bool:
        """Detach a tag from a comment."""
        key = (comment_id, tag_id)
        if key not in self._db.comment_tags:
            return False
        del self._db.comment_tags[key]
        return True

    async def find_by_comments(
        self, comment_ids: list[CommentId]
    ) -> dict[CommentId, list[str]]:
        """Tag names of several comments."""
        wanted = set(comment_ids)
        tags: dict[CommentId, list[str]] = defaultdict(list)
        for comment_id, tag_id in self._db.comment_tags:
            if comment_id in wanted:
                tags[comment_id].append(self._db.tags[tag_id].tagname)
        return {comment_id: sorted(names) for comment_id, names in tags.items()}

    async def top(self, domain: Domain, view: CommentView) -> list[TagCount]:
        """Rank tags by the number of visible comments carrying them."""
        counts: dict[str, int] = defaultdict(int)
        for comment_id, tag_id in self._db.comment_tags:
            tag = self._db.tags[tag_id]
            comment = self._db.comments.get(comment_id)
            if tag.domain != domain.root or comment is None:
                continue
            if comment.deleted and not view.include_deleted:
                continue
            counts[tag.tagname] += 1

        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        return [TagCount(tagname=name, score=score) for name, score in ranked]
