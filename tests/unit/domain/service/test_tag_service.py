"""Unit tests for TagService."""

import pytest

from doccomments.domain.error import NotFoundError
from doccomments.domain.model import NewComment
from doccomments.domain.service import CommentService, TagService
from doccomments.domain.value import CommentId, CommentView, Domain, TagName, UserId
from tests.conftest import DOMAIN, PANEL, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

MODERATOR = UserId(1)


async def create_comment(env) -> CommentId:
    comment_service = await env.get(CommentService)
    await seed_user(env, 1, moderator=True)
    return await comment_service.add(
        DOMAIN, NewComment(user_id=MODERATOR, target=PANEL, content="Tag me")
    )


class TestAddRemove:
    """Tests for add and remove."""

    @pytest.mark.asyncio
    async def test_adding_twice_keeps_one_tag(self, unit_env):
        """Tags form a set per comment."""
        # Arrange
        tag_service = await unit_env.get(TagService)
        comment_id = await create_comment(unit_env)

        # Act
        await tag_service.add(DOMAIN, comment_id, TagName("bug"), MODERATOR)
        await tag_service.add(DOMAIN, comment_id, TagName("bug"), MODERATOR)

        # Assert
        tags = await tag_service.get_tags_for([comment_id])
        assert tags == {comment_id: ["bug"]}

    @pytest.mark.asyncio
    async def test_remove_detaches_tag(self, unit_env):
        tag_service = await unit_env.get(TagService)
        comment_id = await create_comment(unit_env)
        await tag_service.add(DOMAIN, comment_id, TagName("bug"), MODERATOR)
        await tag_service.add(DOMAIN, comment_id, TagName("docs"), MODERATOR)

        await tag_service.remove(DOMAIN, comment_id, TagName("bug"))

        assert await tag_service.get_tags_for([comment_id]) == {comment_id: ["docs"]}

    @pytest.mark.asyncio
    async def test_removing_absent_tag_is_a_no_op(self, unit_env):
        tag_service = await unit_env.get(TagService)
        comment_id = await create_comment(unit_env)

        await tag_service.remove(DOMAIN, comment_id, TagName("never-added"))

        assert await tag_service.get_tags_for([comment_id]) == {}

    @pytest.mark.asyncio
    async def test_deleted_comment_can_be_tagged(self, unit_env):
        """Moderators tag deleted comments too."""
        tag_service = await unit_env.get(TagService)
        comment_service = await unit_env.get(CommentService)
        comment_id = await create_comment(unit_env)
        await comment_service.set_deleted(DOMAIN, comment_id, MODERATOR, True)

        await tag_service.add(DOMAIN, comment_id, TagName("spam"), MODERATOR)

        assert await tag_service.get_tags_for([comment_id]) == {comment_id: ["spam"]}

    @pytest.mark.asyncio
    async def test_tagging_comment_of_other_domain_raises(self, unit_env):
        tag_service = await unit_env.get(TagService)
        comment_id = await create_comment(unit_env)

        with pytest.raises(NotFoundError):
            await tag_service.add(Domain("extjs-4"), comment_id, TagName("bug"), MODERATOR)


class TestTop:
    """Tests for get_top."""

    @pytest.mark.asyncio
    async def test_ranks_by_count_then_name(self, unit_env):
        tag_service = await unit_env.get(TagService)
        first = await create_comment(unit_env)
        second = await create_comment(unit_env)
        for comment_id in (first, second):
            await tag_service.add(DOMAIN, comment_id, TagName("bug"), MODERATOR)
        await tag_service.add(DOMAIN, first, TagName("docs"), MODERATOR)
        await tag_service.add(DOMAIN, first, TagName("api"), MODERATOR)

        top = await tag_service.get_top(DOMAIN, CommentView())

        assert [(t.tagname, t.score) for t in top] == [
            ("bug", 2),
            ("api", 1),
            ("docs", 1),
        ]

    @pytest.mark.asyncio
    async def test_deleted_comments_do_not_count(self, unit_env):
        tag_service = await unit_env.get(TagService)
        comment_service = await unit_env.get(CommentService)
        comment_id = await create_comment(unit_env)
        await tag_service.add(DOMAIN, comment_id, TagName("bug"), MODERATOR)
        await comment_service.set_deleted(DOMAIN, comment_id, MODERATOR, True)

        assert await tag_service.get_top(DOMAIN, CommentView()) == []
